"""
Access-mode specific implementations of `Tensor.index`.

`index` is the inverse of `location`: it peels coordinates off a flat offset
by repeated mod/div against `dim`, innermost axis first.
"""

from operator import index as _as_int

from ..._tensor_builder import tensor_control_path_manager

from .....domain._access_mode import AccessMode
from .....domain._errors import OutOfRangeAccessError
from .....domain._tensor import ITensor

from ._base import TensorMixinIndexing as TMI


def _decompose(dim: tuple[int, ...], loc: int) -> tuple[int, ...]:
    ids = [0] * len(dim)
    for i in range(len(dim) - 1, -1, -1):
        loc, ids[i] = divmod(loc, dim[i])
    return tuple(ids)


@tensor_control_path_manager(TMI, TMI.index, AccessMode.UNCHECKED)
def tensor_index_unchecked(self: ITensor, flat_offset: int) -> tuple[int, ...]:
    return _decompose(self.dim, _as_int(flat_offset))


@tensor_control_path_manager(TMI, TMI.index, AccessMode.CHECKED)
def tensor_index_checked(self: ITensor, flat_offset: int) -> tuple[int, ...]:
    """
    Decompose a flat offset, rejecting offsets outside ``[0, nelem)``.

    Raises
    ------
    OutOfRangeAccessError
        If `flat_offset` does not address an element of the tensor.
    """
    loc = _as_int(flat_offset)
    if not 0 <= loc < self.nelem:
        raise OutOfRangeAccessError((loc,), self.dim)
    return _decompose(self.dim, loc)
