from ._base import TensorMixinAxis

__all__ = [
    TensorMixinAxis.__name__,
]
