"""
Tensor memory / construction mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides the
factory constructors and buffer-level utilities of the concrete `Tensor`:

- replication along a new axis: `repeat_inner`, `repeat_outer`
- copies: `clone`, `with_access_mode`
- NumPy interop: `from_numpy`, `copy_from_numpy`, `to_numpy`
- bulk writes: `fill`, `fill_sequence`

Design intent
-------------
- Every tensor exclusively owns its flat buffer. All constructors here
  allocate fresh storage and copy into it; no two tensors ever alias.
- Shape-changing helpers (`repeat_*`) return new tensors and leave the
  receiver untouched.
"""

from __future__ import annotations

from abc import ABC
from operator import index as _as_int
from typing import Any, Optional, Type

import numpy as np

from .....domain._access_mode import AccessMode
from .....domain._errors import ShapeMismatchError
from .....domain._tensor import ITensor


class TensorMixinMemory(ABC):
    """
    Mixin that implements tensor construction and memory-management helpers.

    The host class must provide `dim`, `dtype`, `access_mode`, the flat
    buffer `_vec` and `_like(shape)`.
    """

    @classmethod
    def from_numpy(
        cls: Type[ITensor],
        arr: Any,
        *,
        dtype: Optional[Any] = None,
        access_mode: "AccessMode | str" = AccessMode.UNCHECKED,
    ) -> "ITensor":
        """
        Create a tensor holding a copy of an array-like.

        Parameters
        ----------
        arr : Any
            Anything accepted by `numpy.asarray`. Its shape becomes `dim`.
        dtype : Any, optional
            Element dtype. Defaults to the dtype of `arr`.
        access_mode : AccessMode | str, optional
            Access mode of the new tensor.

        Returns
        -------
        ITensor
            A tensor that does not share memory with `arr`.

        Raises
        ------
        InvalidShapeError
            If `arr` has a zero-length axis.
        """
        arr_nd = np.asarray(arr)
        out = cls(
            arr_nd.shape,
            dtype=arr_nd.dtype if dtype is None else dtype,
            access_mode=access_mode,
        )
        out.copy_from_numpy(arr_nd)
        return out

    def copy_from_numpy(self: ITensor, arr: Any) -> None:
        """
        Copy data from a NumPy array (or array-like / scalar) into this tensor.

        Values are cast to this tensor's dtype.

        Raises
        ------
        ShapeMismatchError
            If the array shape differs from `dim`.
        """
        arr_nd = np.asarray(arr, dtype=self.dtype)
        if arr_nd.shape != self.dim:
            raise ShapeMismatchError(self.dim, arr_nd.shape)
        self._vec[...] = arr_nd.reshape(-1)

    def to_numpy(self: ITensor) -> np.ndarray:
        """
        Return a copy of the data as an ndarray shaped like `dim`.
        """
        return self._vec.reshape(self.dim).copy()

    def clone(self: ITensor) -> "ITensor":
        """
        Return a deep copy with the same shape, dtype and access mode.
        """
        out = self._like(self.dim)
        out._vec[...] = self._vec
        return out

    def with_access_mode(self: ITensor, mode: "AccessMode | str") -> "ITensor":
        """
        Return a deep copy that uses another access mode.
        """
        out = self.__class__(self.dim, dtype=self.dtype, access_mode=mode)
        out._vec[...] = self._vec
        return out

    def fill(self: ITensor, value: Any) -> None:
        """
        Set every element to `value` (in place).
        """
        self._vec.fill(value)

    def fill_sequence(self: ITensor) -> None:
        """
        Set ``vec[i] = i`` for every flat offset (in place).

        Mostly useful when debugging layouts: the stored value of each
        element equals its own flat offset.
        """
        self._vec[...] = np.arange(self.nelem).astype(self.dtype)

    def repeat_inner(self: ITensor, n: int) -> "ITensor":
        """
        Replicate every element along a new innermost axis.

        Parameters
        ----------
        n : int
            Extent of the new axis.

        Returns
        -------
        ITensor
            Tensor of shape ``dim + (n,)``. The element at original flat
            offset ``i`` occupies output offsets ``[i * n, i * n + n)``.

        Raises
        ------
        InvalidShapeError
            If `n` is not positive.
        """
        n = _as_int(n)
        out = self._like(self.dim + (n,))
        out._vec[...] = np.repeat(self._vec, n)
        return out

    def repeat_outer(self: ITensor, n: int) -> "ITensor":
        """
        Replicate the whole buffer along a new outermost axis.

        Parameters
        ----------
        n : int
            Extent of the new axis.

        Returns
        -------
        ITensor
            Tensor of shape ``(n,) + dim`` whose buffer is `n` back-to-back
            copies of this tensor's buffer.

        Raises
        ------
        InvalidShapeError
            If `n` is not positive.
        """
        n = _as_int(n)
        out = self._like((n,) + self.dim)
        out._vec[...] = np.tile(self._vec, n)
        return out
