"""
Tensor control-path manager for access-mode dispatch.

This module defines a shared control-path manager used to register and resolve
mode-specific implementations of Tensor methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"access_mode"``. As a result, method
dispatch is performed based on the runtime value of ``self.access_mode`` on
Tensor objects.

Typical usage
-------------
Mode-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, AccessMode.UNCHECKED)
    def op_unchecked(self, ...): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, AccessMode.CHECKED)
    def op_checked(self, ...): ...

At runtime, calling ``Tensor.op(...)`` dispatches to the implementation whose
registered mode matches ``self.access_mode``.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Tensor methods based on `self.access_mode`
tensor_control_path_manager = create_path_builder("access_mode")
