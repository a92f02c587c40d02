from ._tensor import Tensor
from ._tensor_print import format_tensor

__all__ = [
    Tensor.__name__,
    format_tensor.__name__,
]
