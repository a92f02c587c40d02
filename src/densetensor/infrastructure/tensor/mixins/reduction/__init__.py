from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]
