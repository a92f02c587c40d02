"""
Tensor interface definitions.

This module defines the domain-level interface for dense, strided tensors
using structural typing. The protocol captures the read-only layout surface
(`dim`, `offsets`, `nelem`, `vec`) together with the coordinate mapping
routines that every other tensor operation is built on.

Layout conventions
------------------
- `dim[-1]` is the innermost (fastest varying, contiguously stored) axis and
  `dim[0]` the outermost.
- Axis arguments of axis-wise operations are counted *from the right*:
  axis 0 is the innermost axis.
- `offsets[i]` is the distance in the flat buffer between two elements whose
  coordinates differ by one on axis `i`.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Union, runtime_checkable

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Dense tensor interface.

    An `ITensor` is a fixed-shape N-dimensional array stored in a single flat
    buffer. Collaborators that only inspect a tensor (for example the debug
    printer) should type against this protocol rather than the concrete
    implementation.
    """

    @property
    def dim(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor, outermost axis first.

        Returns
        -------
        tuple[int, ...]
            One positive extent per axis.
        """
        ...

    @property
    def offsets(self) -> tuple[int, ...]:
        """
        Return the stride of every axis in the flat buffer.

        Returns
        -------
        tuple[int, ...]
            Suffix products of `dim`; the last entry is always 1.
        """
        ...

    @property
    def nelem(self) -> int:
        """
        Return the number of stored elements (the product of `dim`).
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of axes.
        """
        ...

    @property
    def vec(self) -> Any:
        """
        Return the flat element buffer of length `nelem`.
        """
        ...

    def location(self, *coordinates: Any) -> int:
        """
        Map per-axis coordinates (outermost first) to a flat offset.

        Parameters
        ----------
        *coordinates : Any
            Either a single sequence of coordinates or one integer per axis.

        Returns
        -------
        int
            ``sum(offsets[i] * coordinates[i])``.
        """
        ...

    def index(self, flat_offset: int) -> tuple[int, ...]:
        """
        Decompose a flat offset into per-axis coordinates (outermost first).

        Parameters
        ----------
        flat_offset : int
            Offset in ``[0, nelem)``.

        Returns
        -------
        tuple[int, ...]
            Coordinates `c` such that ``location(c) == flat_offset``.
        """
        ...

    def plane(self, axis: int, k: int = 0) -> list[int]:
        """
        Enumerate one starting offset per line parallel to `axis`.
        """
        ...

    def numel(self) -> int:
        """
        Return the total number of elements in the tensor.
        """
        ...


