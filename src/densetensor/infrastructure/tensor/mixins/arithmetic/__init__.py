"""
Arithmetic mixin for Tensor operations.

Public API
----------
Only the mixin class is exported as part of the public interface:

- ``TensorMixinArithmetic``
"""

from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
