"""Structured errors raised by tensor operations."""


class TensorError(Exception):
    """Base class for every tensor validation failure."""


class ShapeMismatchError(TensorError, ValueError):
    """
    Data length does not match the element count of the requested shape.

    Attributes
    ----------
    expected : int
        Element count implied by `shape`.
    actual : int
        Length of the supplied data.
    shape : tuple[int, ...]
        The requested shape.
    """

    def __init__(self, expected: int, actual: int, shape: tuple[int, ...]):
        super().__init__(expected, actual, shape)
        self.expected = expected
        self.actual = actual
        self.shape = shape

    def __str__(self) -> str:
        return (
            f"data length {self.actual} does not match shape {list(self.shape)} "
            f"(expected {self.expected} elements)"
        )


class RankMismatchError(TensorError, IndexError):
    """Number of indices differs from the tensor rank."""

    def __init__(self, given: int, expected: int):
        super().__init__(given, expected)
        self.given = given
        self.expected = expected

    def __str__(self) -> str:
        return f"got {self.given} indices for a tensor of rank {self.expected}"


class IndexOutOfBoundsError(TensorError, IndexError):
    """An index falls outside its dimension."""

    def __init__(self, dim: int, index: int, bound: int):
        super().__init__(dim, index, bound)
        self.dim = dim
        self.index = index
        self.bound = bound

    def __str__(self) -> str:
        return (
            f"index {self.index} is out of bounds for dimension {self.dim} "
            f"with size {self.bound}"
        )


class ElementCountMismatchError(TensorError, ValueError):
    """
    Reshape target holds a different number of elements.

    Attributes
    ----------
    new_shape : tuple[int, ...]
        The rejected target shape.
    new_count : int
        Element count of `new_shape`.
    current_count : int
        Element count of the tensor being reshaped.
    """

    def __init__(self, new_shape: tuple[int, ...], new_count: int, current_count: int):
        super().__init__(new_shape, new_count, current_count)
        self.new_shape = new_shape
        self.new_count = new_count
        self.current_count = current_count

    def __str__(self) -> str:
        return (
            f"cannot reshape to {list(self.new_shape)}: it holds {self.new_count} "
            f"elements but the tensor has {self.current_count}"
        )
