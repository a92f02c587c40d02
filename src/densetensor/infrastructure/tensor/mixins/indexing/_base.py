"""
Indexing mixin defining coordinate mapping and element access.

This module declares :class:`TensorMixinIndexing`, the mixin that maps
between per-axis coordinates and flat offsets into a tensor's buffer.

`location` and `index` are declared here as interface methods; their concrete
implementations are registered per `AccessMode` via the tensor control-path
manager (see `_tensor_location` and `_tensor_index`). Element access
(`__getitem__` / `__setitem__`) is implemented directly on top of `location`,
so it inherits whichever mode the tensor was created with.
"""

from __future__ import annotations

from abc import ABC
from operator import index as _as_int
from typing import Any

from .....domain._tensor import ITensor


class TensorMixinIndexing(ABC):
    """
    Mixin mapping coordinates to flat offsets and back.

    Notes
    -----
    - Coordinates are always given outermost axis first, in the same order
      as `dim`.
    - Methods assume the host class provides `dim`, `offsets`, `nelem` and
      the flat buffer `_vec`.
    """

    @staticmethod
    def _normalize_coordinates(coordinates: tuple[Any, ...]) -> tuple[int, ...]:
        """
        Flatten variadic or sequence coordinate arguments into a tuple of ints.

        ``f(1, 2, 3)``, ``f([1, 2, 3])`` and ``f((1, 2, 3))`` all normalize
        to ``(1, 2, 3)``.
        """
        if len(coordinates) == 1 and not isinstance(coordinates[0], int):
            try:
                coordinates = tuple(coordinates[0])
            except TypeError:
                pass
        return tuple(_as_int(c) for c in coordinates)

    def location(self: ITensor, *coordinates: Any) -> int:
        """
        Map per-axis coordinates to a flat offset.

        Parameters
        ----------
        *coordinates : Any
            Either a single sequence of coordinates (``t.location([1, 2, 3])``)
            or one integer per axis (``t.location(1, 2, 3)``), outermost
            axis first.

        Returns
        -------
        int
            ``sum(offsets[i] * coordinates[i])``.

        Notes
        -----
        On `AccessMode.UNCHECKED` tensors each coordinate must lie in
        ``[0, dim[i])``; this precondition is not validated and violating it
        yields an unspecified offset. `AccessMode.CHECKED` tensors raise
        `OutOfRangeAccessError` instead.
        """
        ...

    def index(self: ITensor, flat_offset: int) -> tuple[int, ...]:
        """
        Decompose a flat offset into per-axis coordinates.

        Parameters
        ----------
        flat_offset : int
            Offset in ``[0, nelem)``.

        Returns
        -------
        tuple[int, ...]
            Coordinates, outermost axis first, such that
            ``location(index(x)) == x``.
        """
        ...

    def _key_to_coordinates(self, key: Any) -> tuple[int, ...]:
        if isinstance(key, tuple):
            return self._normalize_coordinates(key)
        return self._normalize_coordinates((key,))

    def __getitem__(self, key: Any) -> Any:
        """
        Read the element at the given coordinates.

        ``t[1, 2, 3]``, ``t[[1, 2, 3]]`` and ``t[(1, 2, 3)]`` are equivalent.
        """
        return self._vec[self.location(self._key_to_coordinates(key))]

    def __setitem__(self, key: Any, value: Any) -> None:
        """
        Overwrite the element at the given coordinates.
        """
        self._vec[self.location(self._key_to_coordinates(key))] = value
