"""
Concrete Tensor implementation (NumPy flat-buffer backend).

This module provides the concrete `Tensor`, a fixed-shape dense
N-dimensional array that satisfies the domain-level `ITensor` protocol.

Storage layout
--------------
Elements live in a single contiguous 1-D NumPy array (`vec`) of length
`nelem`. The last entry of `dim` is the innermost, fastest-varying axis. For
a tensor of shape ``(2, 3, 5)`` the strides (`offsets`) are ``(15, 5, 1)``
and element ``[1, 2, 3]`` lives at flat offset ``15 + 10 + 3 = 28``.

Design notes
------------
- Behavior is assembled from focused mixins (indexing, axis machinery,
  reductions, memory helpers, arithmetic); this class only owns the layout
  state and the constructor.
- The element type is a NumPy dtype. ``object`` dtype stores arbitrary
  Python numbers (e.g. `fractions.Fraction`) and uses their own arithmetic.
- `location` / `index` are dispatched on `access_mode` through the tensor
  control-path manager; see `AccessMode`.
"""

from __future__ import annotations

from operator import index as _as_int
from typing import Any, Iterator, Optional, Sequence, TextIO, Union

import numpy as np

from ...domain._access_mode import AccessMode
from ...domain._errors import InvalidShapeError
from ...domain._tensor import ITensor

from .mixins.indexing import TensorMixinIndexing
from .mixins.axis import TensorMixinAxis
from .mixins.reduction import TensorMixinReduction
from .mixins.memory import TensorMixinMemory
from .mixins.arithmetic import TensorMixinArithmetic
from ._tensor_print import format_tensor

ShapeLike = Union[Sequence[int], int]


class Tensor(
    TensorMixinIndexing,
    TensorMixinAxis,
    TensorMixinReduction,
    TensorMixinMemory,
    TensorMixinArithmetic,
    ITensor,
):
    """
    Dense N-dimensional array backed by a zero-initialized flat buffer.

    Parameters
    ----------
    shape : Sequence[int] | int
        Extent of every axis, outermost first. An int is shorthand for a
        rank-1 shape. An empty sequence creates a rank-0 tensor holding a
        single element.
    dtype : Any, optional
        Element dtype (anything accepted by `numpy.dtype`). Defaults to
        ``float64``.
    access_mode : AccessMode | str, optional
        Selects unchecked (default) or checked coordinate mapping.

    Raises
    ------
    InvalidShapeError
        If any dimension is not a positive integer.

    Notes
    -----
    - The shape never changes after construction. Operations that add or
      remove an axis return a new tensor.
    - Each tensor exclusively owns its buffer.
    """

    def __init__(
        self,
        shape: ShapeLike,
        *,
        dtype: Any = np.float64,
        access_mode: "AccessMode | str" = AccessMode.UNCHECKED,
    ) -> None:
        dim = self._validate_shape(shape)

        offsets = [0] * len(dim)
        p = 1
        for i in range(len(dim) - 1, -1, -1):
            offsets[i] = p
            p *= dim[i]

        self._dim: tuple[int, ...] = dim
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._nelem: int = p
        self._dtype: np.dtype = np.dtype(dtype)
        self._access_mode: AccessMode = AccessMode.parse(access_mode)
        self._vec: np.ndarray = np.zeros(self._nelem, dtype=self._dtype)

    @staticmethod
    def _validate_shape(shape: ShapeLike) -> tuple[int, ...]:
        """
        Normalize a shape to a tuple of positive ints.

        Raises
        ------
        InvalidShapeError
            If any entry is not an integer or is not positive.
        """
        if isinstance(shape, (int, np.integer)):
            shape = (shape,)
        raw = tuple(shape)
        try:
            dim = tuple(_as_int(d) for d in raw)
        except TypeError:
            raise InvalidShapeError(raw) from None
        if any(d <= 0 for d in dim):
            raise InvalidShapeError(raw)
        return dim

    def _like(self, shape: ShapeLike) -> "Tensor":
        """
        Allocate a zeroed tensor of another shape with this tensor's dtype
        and access mode.
        """
        return self.__class__(shape, dtype=self._dtype, access_mode=self._access_mode)

    # ----------------------------
    # Layout
    # ----------------------------
    @property
    def dim(self) -> tuple[int, ...]:
        """
        Return the shape, outermost axis first.
        """
        return self._dim

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Alias of `dim`.
        """
        return self._dim

    @property
    def offsets(self) -> tuple[int, ...]:
        """
        Return the per-axis strides of the flat buffer.

        Returns
        -------
        tuple[int, ...]
            ``offsets[-1] == 1`` and ``offsets[i] == offsets[i + 1] * dim[i + 1]``.
        """
        return self._offsets

    @property
    def nelem(self) -> int:
        return self._nelem

    @property
    def rank(self) -> int:
        return len(self._dim)

    @property
    def vec(self) -> np.ndarray:
        """
        Return the flat element buffer.

        The returned array is the tensor's own storage, not a copy: writing
        through it mutates the tensor.
        """
        return self._vec

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def access_mode(self) -> AccessMode:
        """
        Return the access mode used to dispatch `location` and `index`.
        """
        return self._access_mode

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.
        """
        return self._nelem

    def __iter__(self) -> Iterator[Any]:
        """
        Iterate over the elements in storage order.
        """
        return iter(self._vec)

    def __repr__(self) -> str:
        return (
            f"Tensor(dim={self._dim}, dtype={self._dtype}, "
            f"access_mode={self._access_mode})"
        )

    def print(self, vals: bool = True, file: Optional[TextIO] = None) -> None:
        """
        Write a textual dump of the tensor (see `format_tensor`).

        Parameters
        ----------
        vals : bool, optional
            Whether to include the element values. Defaults to True.
        file : TextIO, optional
            Destination stream. Defaults to `sys.stdout`.
        """
        print(format_tensor(self, vals=vals), end="", file=file)
