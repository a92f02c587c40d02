"""
densetensor: a lightweight dense N-dimensional array container.

Tensors store their elements in a single strided flat buffer and expose
coordinate/offset conversion, axis-wise transforms and reductions, and
elementwise arithmetic. Axis arguments are counted from the right (axis 0
is the innermost, contiguously stored axis).

    >>> from densetensor import Tensor
    >>> t = Tensor([2, 3, 5])
    >>> t.fill_sequence()
    >>> t.location([1, 2, 3])
    28
    >>> t.index(28)
    (1, 2, 3)
"""

from .domain._access_mode import AccessMode
from .domain._errors import (
    TensorError,
    InvalidShapeError,
    ShapeMismatchError,
    WeightSizeError,
    InvalidAxisError,
    OutOfRangeAccessError,
)
from .domain._tensor import ITensor
from .infrastructure.tensor import Tensor, format_tensor

__version__ = "1.0.0"

__all__ = [
    "AccessMode",
    "TensorError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "WeightSizeError",
    "InvalidAxisError",
    "OutOfRangeAccessError",
    "ITensor",
    "Tensor",
    "format_tensor",
]
