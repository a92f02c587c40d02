"""
Arithmetic mixin defining elementwise Tensor operators.

This module implements :class:`TensorMixinArithmetic`, which provides the
elementwise operators of the concrete `Tensor`:

==================  =====================  ==========================
operand             compound (in place)    pure (copy, then mutate)
==================  =====================  ==========================
Tensor              ``+= -= *=``           ``+ - *``
scalar              ``+= -= *= /=``        ``+ - * /``
scalar on the left  n/a                    ``s + t``, ``s - t``, ``s * t``
==================  =====================  ==========================

Semantics
---------
- Tensor-tensor operators require identical `dim`; there is no broadcasting.
  A mismatch raises `ShapeMismatchError` before either operand is touched.
- Results are written back into the receiver's dtype using the dtype's
  native conversion (for example integer storage truncates ``t * 0.5``).
- ``s - t`` computes ``s - t[i]`` for every element; the operand order is
  never swapped.
- Division by a tensor is not supported. The operators return
  ``NotImplemented`` so Python raises `TypeError`.
"""

from __future__ import annotations

import numbers
from abc import ABC
from typing import Any, Callable, Union

import numpy as np

from .....domain._errors import ShapeMismatchError
from .....domain._tensor import ITensor, Number


def _is_scalar(x: Any) -> bool:
    return isinstance(x, (numbers.Number, np.generic))


class TensorMixinArithmetic(ABC):
    """
    Elementwise arithmetic for the concrete Tensor implementation.

    Notes
    -----
    - Pure operators clone the receiver (same dtype, same access mode) and
      apply the compound operator to the clone.
    - The host class must provide `dim`, the flat buffer `_vec` and `clone()`.
    """

    # NumPy must defer to the reflected operators below instead of treating a
    # Tensor as an object scalar.
    __array_ufunc__ = None

    def _apply_inplace(
        self: ITensor,
        other: Any,
        ufunc: Callable[..., Any],
        *,
        allow_tensor: bool = True,
    ) -> Any:
        """
        Apply ``vec = ufunc(vec, other)`` in place.

        Returns `self`, or ``NotImplemented`` for unsupported operands.
        """
        if isinstance(other, TensorMixinArithmetic):
            if not allow_tensor:
                return NotImplemented
            if other.dim != self.dim:
                raise ShapeMismatchError(self.dim, other.dim)
            rhs = other._vec
        elif _is_scalar(other):
            rhs = other
        else:
            return NotImplemented

        ufunc(self._vec, rhs, out=self._vec, casting="unsafe")
        return self

    def _apply_pure(
        self: ITensor,
        other: Any,
        ufunc: Callable[..., Any],
        *,
        allow_tensor: bool = True,
    ) -> Any:
        if isinstance(other, TensorMixinArithmetic):
            if not allow_tensor:
                return NotImplemented
            if other.dim != self.dim:
                raise ShapeMismatchError(self.dim, other.dim)
        elif not _is_scalar(other):
            return NotImplemented
        return self.clone()._apply_inplace(other, ufunc, allow_tensor=allow_tensor)

    # ----------------------------
    # Compound (in-place) operators
    # ----------------------------
    def __iadd__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise in-place addition of a tensor or a scalar.

        Raises
        ------
        ShapeMismatchError
            If `other` is a tensor with a different `dim`.
        """
        return self._apply_inplace(other, np.add)

    def __isub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise in-place subtraction of a tensor or a scalar.

        Raises
        ------
        ShapeMismatchError
            If `other` is a tensor with a different `dim`.
        """
        return self._apply_inplace(other, np.subtract)

    def __imul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise in-place multiplication by a tensor or a scalar.

        Raises
        ------
        ShapeMismatchError
            If `other` is a tensor with a different `dim`.
        """
        return self._apply_inplace(other, np.multiply)

    def __itruediv__(self: ITensor, other: Number) -> "ITensor":
        """
        In-place division by a scalar. Tensor divisors are rejected.
        """
        return self._apply_inplace(other, np.true_divide, allow_tensor=False)

    # ----------------------------
    # Pure operators
    # ----------------------------
    def __add__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition, returning a new tensor.
        """
        return self._apply_pure(other, np.add)

    def __sub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise subtraction, returning a new tensor.
        """
        return self._apply_pure(other, np.subtract)

    def __mul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise multiplication, returning a new tensor.
        """
        return self._apply_pure(other, np.multiply)

    def __truediv__(self: ITensor, other: Number) -> "ITensor":
        """
        Division by a scalar, returning a new tensor.
        """
        return self._apply_pure(other, np.true_divide, allow_tensor=False)

    # ----------------------------
    # Scalar on the left
    # ----------------------------
    def __radd__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand addition to support ``scalar + Tensor``.

        Addition is commutative, so this delegates to :meth:`__add__`.
        """
        return self.__add__(other)

    def __rmul__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand multiplication to support ``scalar * Tensor``.

        Multiplication is commutative, so this delegates to :meth:`__mul__`.
        """
        return self.__mul__(other)

    def __rsub__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand subtraction to support ``scalar - Tensor``.

        Computes ``other - t[i]`` for every element.
        """
        if not _is_scalar(other):
            return NotImplemented
        out = self.clone()
        np.subtract(other, out._vec, out=out._vec, casting="unsafe")
        return out

    def __neg__(self: ITensor) -> "ITensor":
        """
        Elementwise negation, computed as ``0 - t``.
        """
        return self.__rsub__(0)
