from ._base import TensorMixinMemory

__all__ = [
    TensorMixinMemory.__name__,
]
