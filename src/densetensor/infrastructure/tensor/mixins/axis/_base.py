"""
Axis-wise enumeration, transform and reduction mixin.

This module defines `TensorMixinAxis`, the machinery every axis-wise tensor
operation is built on:

- `plane` picks one entry point per line running along an axis,
- `transform_dim` / `transform` rewrite lines in place with a binary op and a
  weights vector,
- `accumulate_dim` / `accumulate` fold lines to scalars, producing a tensor
  with the axis removed.

Axis convention
---------------
Axis arguments are counted *from the right*: axis 0 is the innermost
(contiguous) axis, axis ``rank - 1`` the outermost. Internally an axis is
translated to its absolute position ``a = rank - 1 - axis`` in `dim`.

Ordering
--------
Lines are always visited strictly in increasing step order. Binary ops may
be non-commutative or stateful (for example sequential smoothing), so the
fold/transform is never reordered or vectorized.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Optional, Sequence

import numpy as np

from .....domain._errors import InvalidAxisError, WeightSizeError
from .....domain._tensor import ITensor


BinaryOp = Callable[[Any, Any], Any]


class TensorMixinAxis(ABC):
    """
    Axis-relative operations for the concrete Tensor implementation.

    Notes
    -----
    - Methods assume the host class provides `dim`, `offsets`, `nelem`,
      `rank`, the flat buffer `_vec`, and `_like(shape)` to allocate a new
      tensor with the same dtype and access mode.
    - Shape-changing results are always new tensors; the receiver is never
      reshaped in place.
    """

    def _axis_position(self: ITensor, axis: int) -> int:
        """
        Translate an axis counted from the right into its position in `dim`.

        Raises
        ------
        InvalidAxisError
            If `axis` is outside ``[0, rank)``.
        """
        rank = len(self.dim)
        if not 0 <= axis < rank:
            raise InvalidAxisError(axis, rank)
        return rank - 1 - axis

    @staticmethod
    def _check_weights(
        weights: Optional[Sequence[Any]], extent: int, axis: int, *, required: bool
    ) -> Optional[Sequence[Any]]:
        """
        Validate a weights vector against an axis extent.

        An empty (or None) weights vector is accepted only when the weights
        are optional, in which case None is returned.
        """
        n = 0 if weights is None else len(weights)
        if n == 0 and not required:
            return None
        if n != extent:
            raise WeightSizeError(expected=extent, got=n, axis=axis)
        return weights

    def plane(self: ITensor, axis: int, k: int = 0) -> list[int]:
        """
        Enumerate the lines parallel to an axis.

        Parameters
        ----------
        axis : int
            Axis counted from the right (0 = innermost).
        k : int, optional
            Position along the axis to shift every entry point to. Defaults
            to 0, i.e. the first element of each line.

        Returns
        -------
        list[int]
            Ascending flat offsets of the elements whose coordinate on the
            axis is 0, each shifted by ``k * offsets[a]``. The list holds
            ``nelem // dim[a]`` entries, one per line.

        Examples
        --------
        For a tensor of shape ``(2, 3, 5)``, ``plane(0)`` yields the six
        offsets ``[0, 5, 10, 15, 20, 25]`` and ``plane(2)`` the fifteen
        offsets ``0..14``.
        """
        a = self._axis_position(axis)
        off = self.offsets[a]
        flat = np.arange(self.nelem, dtype=np.int64)
        starts = flat[(flat // off) % self.dim[a] == 0]
        return (starts + k * off).tolist()

    def transform_dim(
        self: ITensor,
        start_offset: int,
        axis: int,
        binary_op: BinaryOp,
        weights: Sequence[Any],
    ) -> None:
        """
        Rewrite one line in place.

        Walks the ``dim[a]`` elements of the line starting at `start_offset`
        (stepping by ``offsets[a]``) and replaces the element at step
        ``count`` with ``binary_op(element, weights[count])``.

        Parameters
        ----------
        start_offset : int
            Flat offset of the first element of the line (usually an entry
            of `plane(axis)`).
        axis : int
            Axis counted from the right.
        binary_op : Callable[[Any, Any], Any]
            Called as ``binary_op(current_value, weight)``. The argument order
            is fixed because the op need not be commutative.
        weights : Sequence[Any]
            Exactly ``dim[a]`` weights.

        Raises
        ------
        WeightSizeError
            If ``len(weights) != dim[a]``. Nothing is mutated in that case.
        """
        a = self._axis_position(axis)
        extent = self.dim[a]
        w = self._check_weights(weights, extent, axis, required=True)

        off = self.offsets[a]
        vec = self._vec
        i = int(start_offset)
        for count in range(extent):
            vec[i] = binary_op(vec[i], w[count])
            i += off

    def transform(
        self: ITensor, axis: int, binary_op: BinaryOp, weights: Sequence[Any]
    ) -> None:
        """
        Rewrite every line parallel to `axis` in place.

        Equivalent to calling `transform_dim` on each entry of `plane(axis)`,
        in plane order.

        Raises
        ------
        WeightSizeError
            If ``len(weights)`` does not match the axis extent.
        """
        a = self._axis_position(axis)
        self._check_weights(weights, self.dim[a], axis, required=True)
        for loc in self.plane(axis):
            self.transform_dim(loc, axis, binary_op, weights)

    def accumulate_dim(
        self: ITensor,
        initial: Any,
        start_offset: int,
        axis: int,
        binary_op: BinaryOp,
        weights: Optional[Sequence[Any]] = (),
    ) -> Any:
        """
        Fold one line to a single value.

        Starting from ``v = initial``, computes
        ``v = binary_op(v, w * element)`` for every element of the line in
        increasing step order, where ``w`` is ``weights[count]`` when weights
        are given and 1 otherwise.

        Parameters
        ----------
        initial : Any
            Seed of the fold.
        start_offset : int
            Flat offset of the first element of the line.
        axis : int
            Axis counted from the right.
        binary_op : Callable[[Any, Any], Any]
            Called as ``binary_op(accumulator, weighted_element)``.
        weights : Sequence[Any], optional
            Either empty or exactly ``dim[a]`` weights.

        Returns
        -------
        Any
            The folded value.

        Raises
        ------
        WeightSizeError
            If non-empty weights do not match the axis extent.
        """
        a = self._axis_position(axis)
        extent = self.dim[a]
        w = self._check_weights(weights, extent, axis, required=False)

        off = self.offsets[a]
        vec = self._vec
        v = initial
        i = int(start_offset)
        for count in range(extent):
            x = vec[i] if w is None else w[count] * vec[i]
            v = binary_op(v, x)
            i += off
        return v

    def accumulate(
        self: ITensor,
        initial: Any,
        axis: int,
        binary_op: BinaryOp,
        weights: Optional[Sequence[Any]] = (),
    ) -> ITensor:
        """
        Fold every line parallel to `axis`, removing that axis.

        Parameters
        ----------
        initial : Any
            Seed of every fold.
        axis : int
            Axis counted from the right.
        binary_op : Callable[[Any, Any], Any]
            Fold operator, see `accumulate_dim`.
        weights : Sequence[Any], optional
            Either empty or exactly ``dim[a]`` weights.

        Returns
        -------
        ITensor
            A new tensor whose shape is `dim` with axis ``a`` removed (rank
            decreases by one; a rank-1 input yields a rank-0 tensor holding a
            single element). Output element ``i`` is the fold of the line
            starting at ``plane(axis)[i]``.
        """
        a = self._axis_position(axis)
        self._check_weights(weights, self.dim[a], axis, required=False)

        dim_new = self.dim[:a] + self.dim[a + 1 :]
        out = self._like(dim_new)

        for i, loc in enumerate(self.plane(axis)):
            out._vec[i] = self.accumulate_dim(initial, loc, axis, binary_op, weights)
        return out
