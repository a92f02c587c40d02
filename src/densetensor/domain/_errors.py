"""
Precondition-violation exceptions for densetensor.

This module defines the error taxonomy raised by tensor operations. Every
error signals a programmer error detected at the point of the call (a bad
shape, mismatched operands, a weights vector of the wrong length, an axis or
coordinate out of range). Operations raise these errors *before* mutating any
storage, so a failed call never leaves a tensor partially updated.

Each error also derives from the closest builtin exception (`ValueError` or
`IndexError`) so that callers catching builtins keep working.
"""

from __future__ import annotations

from typing import Sequence


class TensorError(Exception):
    """
    Base class for all densetensor precondition violations.

    Notes
    -----
    This class is never raised directly. It exists so callers can catch every
    tensor-specific failure with a single ``except`` clause.
    """


class InvalidShapeError(TensorError, ValueError):
    """
    Raised when a requested shape contains a non-positive (or non-integer)
    dimension.

    Attributes
    ----------
    shape : tuple
        The rejected shape, as supplied by the caller.
    """

    def __init__(self, shape: Sequence[object]) -> None:
        """
        Initialize the InvalidShapeError.

        Parameters
        ----------
        shape : Sequence[object]
            The shape that failed validation.
        """
        super().__init__(
            f"Invalid shape {tuple(shape)}: every dimension must be a positive integer."
        )
        self.shape = tuple(shape)


class ShapeMismatchError(TensorError, ValueError):
    """
    Raised when an elementwise operation combines tensors whose `dim`
    sequences differ.

    Broadcasting is not supported; operands must match exactly.

    Attributes
    ----------
    dim_a : tuple[int, ...]
        Shape of the left operand.
    dim_b : tuple[int, ...]
        Shape of the right operand.
    """

    def __init__(self, dim_a: Sequence[int], dim_b: Sequence[int]) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        dim_a : Sequence[int]
            Shape of the first operand.
        dim_b : Sequence[int]
            Shape of the second operand.
        """
        super().__init__(f"Shape mismatch: {tuple(dim_a)} vs {tuple(dim_b)}")
        self.dim_a = tuple(dim_a)
        self.dim_b = tuple(dim_b)


class WeightSizeError(TensorError, ValueError):
    """
    Raised when a weights sequence does not have exactly one entry per
    element of the target axis.

    Attributes
    ----------
    expected : int
        Extent of the target axis.
    got : int
        Length of the supplied weights.
    axis : int
        The axis (counted from the right) the weights were meant for.
    """

    def __init__(self, expected: int, got: int, axis: int) -> None:
        super().__init__(
            f"Weights length {got} does not match extent {expected} of axis {axis}."
        )
        self.expected = expected
        self.got = got
        self.axis = axis


class InvalidAxisError(TensorError, ValueError):
    """
    Raised when an axis (counted from the right) is outside ``[0, rank)``.

    Attributes
    ----------
    axis : int
        The rejected axis.
    rank : int
        Rank of the tensor the axis was applied to.
    """

    def __init__(self, axis: int, rank: int) -> None:
        super().__init__(f"Axis {axis} is out of range for a tensor of rank {rank}.")
        self.axis = axis
        self.rank = rank


class OutOfRangeAccessError(TensorError, IndexError):
    """
    Raised by checked access paths when coordinates (or a flat offset) fall
    outside the tensor.

    Unchecked tensors never raise this error; out-of-range input there is a
    precondition violation with undefined results.

    Attributes
    ----------
    coordinates : tuple
        The offending coordinates (a 1-tuple holding the flat offset when a
        flat offset was rejected).
    dim : tuple[int, ...]
        Shape of the tensor that was accessed.
    """

    def __init__(self, coordinates: Sequence[int], dim: Sequence[int]) -> None:
        super().__init__(
            f"Coordinates {tuple(coordinates)} are out of range for shape {tuple(dim)}."
        )
        self.coordinates = tuple(coordinates)
        self.dim = tuple(dim)
