"""
Indexing mixin and access-mode specific coordinate mapping.

The implementation modules are imported for their side effects: registering
the unchecked and checked control paths of `location` and `index` with the
tensor control-path manager.

Public API
----------
- ``TensorMixinIndexing``
"""

from ._tensor_location import *
from ._tensor_index import *
from ._base import TensorMixinIndexing

__all__ = [
    TensorMixinIndexing.__name__,
]
