"""
Access-mode specific implementations of `Tensor.location`.

Two control paths are registered with the tensor control-path manager:

- `AccessMode.UNCHECKED`: a plain dot product of coordinates and strides.
  Coordinates are trusted; this is the production path.
- `AccessMode.CHECKED`: validates the number of coordinates and every
  coordinate against its axis extent before mapping.
"""

from typing import Any

from ..._tensor_builder import tensor_control_path_manager

from .....domain._access_mode import AccessMode
from .....domain._errors import OutOfRangeAccessError
from .....domain._tensor import ITensor

from ._base import TensorMixinIndexing as TMI


@tensor_control_path_manager(TMI, TMI.location, AccessMode.UNCHECKED)
def tensor_location_unchecked(self: ITensor, *coordinates: Any) -> int:
    """
    Map coordinates to a flat offset without bounds checking.
    """
    ix = TMI._normalize_coordinates(coordinates)
    loc = 0
    for off, c in zip(self.offsets, ix):
        loc += off * c
    return loc


@tensor_control_path_manager(TMI, TMI.location, AccessMode.CHECKED)
def tensor_location_checked(self: ITensor, *coordinates: Any) -> int:
    """
    Map coordinates to a flat offset, validating them first.

    Raises
    ------
    OutOfRangeAccessError
        If the number of coordinates differs from the tensor rank, or if any
        coordinate lies outside ``[0, dim[i])``.
    """
    ix = TMI._normalize_coordinates(coordinates)
    if len(ix) != len(self.dim) or any(
        not 0 <= c < d for c, d in zip(ix, self.dim)
    ):
        raise OutOfRangeAccessError(ix, self.dim)

    loc = 0
    for off, c in zip(self.offsets, ix):
        loc += off * c
    return loc
