"""
Reduction mixin providing `max_dim` and `avg_dim`.

Both reductions are thin wrappers over `TensorMixinAxis.accumulate` and
therefore remove the reduced axis from the result. Axis arguments are counted
from the right (axis 0 is the innermost axis).

Behavioral notes
----------------
- `max_dim` seeds the fold with ``vec[1]`` rather than a true identity. For
  lines whose elements are all smaller than ``vec[1]`` the result is
  ``vec[1]``. This mirrors the established behavior of the container and is
  covered by the test suite.
- `avg_dim` divides the (optionally weighted) sum by the raw axis extent, not
  by the sum of the weights. With weights that do not sum to the extent the
  result is a weighted sum over count rather than a weighted mean.
"""

from __future__ import annotations

import operator
import warnings
from abc import ABC
from typing import Any, Optional, Sequence

from .....domain._tensor import ITensor


class TensorMixinReduction(ABC):
    """
    Derived axis reductions built on `accumulate`.

    Notes
    -----
    The host class must also inherit `TensorMixinAxis` (for `accumulate` and
    `_axis_position`) and `TensorMixinArithmetic` (for in-place scalar
    division).
    """

    def max_dim(self: ITensor, axis: int) -> ITensor:
        """
        Compute the maximum along an axis.

        Parameters
        ----------
        axis : int
            Axis counted from the right.

        Returns
        -------
        ITensor
            Tensor with the axis removed, holding ``max(seed, line...)`` for
            every line, where ``seed`` is ``vec[1]``.

        Warns
        -----
        RuntimeWarning
            On single-element tensors, which have no ``vec[1]``; the fold is
            seeded with ``vec[0]`` instead.
        """
        self._axis_position(axis)
        if self.nelem > 1:
            seed = self._vec[1]
        else:
            warnings.warn(
                "max_dim on a single-element tensor: seeding with vec[0] "
                "since vec[1] does not exist.",
                RuntimeWarning,
                stacklevel=2,
            )
            seed = self._vec[0]
        return self.accumulate(seed, axis, max)

    def avg_dim(
        self: ITensor, axis: int, weights: Optional[Sequence[Any]] = ()
    ) -> ITensor:
        """
        Compute the (optionally weighted) sum along an axis divided by the
        axis extent.

        Parameters
        ----------
        axis : int
            Axis counted from the right.
        weights : Sequence[Any], optional
            Either empty or exactly one weight per element of the axis.

        Returns
        -------
        ITensor
            Tensor with the axis removed. Results are stored in the
            receiver's dtype, so integer tensors truncate.

        Raises
        ------
        WeightSizeError
            If non-empty weights do not match the axis extent.
        """
        extent = self.dim[self._axis_position(axis)]
        out = self.accumulate(0, axis, operator.add, weights)
        out /= extent
        return out
