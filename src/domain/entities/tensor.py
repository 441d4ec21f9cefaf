"""Tensor entity - dense row-major N-dimensional float32 array."""
import logging
import math
import operator
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from src.domain.errors import (
    ElementCountMismatchError,
    IndexOutOfBoundsError,
    RankMismatchError,
    ShapeMismatchError,
)

logger = logging.getLogger(__name__)

DTYPE = np.float32


def normalize_shape(shape: Iterable[int]) -> tuple[int, ...]:
    """
    Convert a shape-like iterable into a tuple of non-negative ints.

    Raises
    ------
    TypeError
        If an entry is not an integer.
    ValueError
        If an entry is negative.
    """
    dims = tuple(operator.index(size) for size in shape)
    for dim, size in enumerate(dims):
        if size < 0:
            raise ValueError(f"dimension {dim} has negative size {size}")
    return dims


def element_count(shape: Sequence[int]) -> int:
    """Number of elements held by `shape` (1 for the empty shape)."""
    return math.prod(shape)


def row_major_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Derive C-order strides for `shape`.

    The last dimension has stride 1 and every preceding stride is the next
    stride times the next dimension's size.

    Parameters
    ----------
    shape : Sequence[int]
        Size of each dimension.

    Returns
    -------
    tuple[int, ...]
        One stride per dimension; empty for a rank-0 shape.
    """
    strides = [1] * len(shape)
    for d in range(len(shape) - 2, -1, -1):
        strides[d] = strides[d + 1] * shape[d + 1]
    return tuple(strides)


def _format_scalar(value: np.float32, precision: int | None) -> str:
    if precision is None:
        return str(value)
    return f"{float(value):.{precision}f}"


def _walk(
    data: np.ndarray,
    shape: tuple[int, ...],
    strides: tuple[int, ...],
    offset: int,
    leaf: Callable[[np.float32], Any],
    node: Callable[[list], Any],
) -> Any:
    # Recursive walk of shape; strides locate each element's flat offset.
    if not shape:
        return leaf(data[offset])
    children = [
        _walk(data, shape[1:], strides[1:], offset + i * strides[0], leaf, node)
        for i in range(shape[0])
    ]
    return node(children)


class Tensor:
    """
    Dense, row-major N-dimensional array of 32-bit floats.

    The tensor owns a flat contiguous buffer plus a shape and the strides
    derived from it. Every multi-index is turned into a flat offset as the
    dot product of the index and the strides. Strides are never set on their
    own: they are recomputed whenever the shape changes.

    Parameters
    ----------
    data : Iterable[float] | np.ndarray
        Elements in row-major order. The values are copied.
    shape : Iterable[int]
        Size of each dimension. An empty shape denotes a scalar.

    Raises
    ------
    ShapeMismatchError
        If the number of elements does not equal the product of `shape`.
    """

    def __init__(self, data: Iterable[float] | np.ndarray, shape: Iterable[int]):
        shape = normalize_shape(shape)
        if not isinstance(data, np.ndarray):
            data = list(data)
        buffer = np.array(data, dtype=DTYPE).reshape(-1)

        expected = element_count(shape)
        if buffer.size != expected:
            raise ShapeMismatchError(expected, buffer.size, shape)

        self._data = buffer
        self._shape = shape
        self._strides = row_major_strides(shape)

    @classmethod
    def _wrap(cls, buffer: np.ndarray, shape: tuple[int, ...]) -> "Tensor":
        # Takes ownership of `buffer`, which must already match `shape`.
        tensor = cls.__new__(cls)
        tensor._data = buffer
        tensor._shape = shape
        tensor._strides = row_major_strides(shape)
        return tensor

    @classmethod
    def full(cls, shape: Iterable[int], value: float) -> "Tensor":
        """Create a tensor of `shape` with every element set to `value`."""
        shape = normalize_shape(shape)
        return cls._wrap(np.full(element_count(shape), value, dtype=DTYPE), shape)

    @classmethod
    def zeros(cls, shape: Iterable[int]) -> "Tensor":
        """Create a tensor of `shape` filled with 0."""
        return cls.full(shape, 0.0)

    @classmethod
    def ones(cls, shape: Iterable[int]) -> "Tensor":
        """Create a tensor of `shape` filled with 1."""
        return cls.full(shape, 1.0)

    def rank(self) -> int:
        """Number of dimensions."""
        return len(self._shape)

    def numel(self) -> int:
        """Total number of elements."""
        return self._data.size

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._strides

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the flat row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def data_mut(self) -> np.ndarray:
        """
        Writable view of the flat row-major buffer.

        The view has a fixed length, so writing through it cannot break the
        agreement between the buffer and the shape.
        """
        return self._data.view()

    def _offset(self, indices: Sequence[int] | int) -> int:
        """
        Validate `indices` and turn them into a flat buffer offset.

        Raises
        ------
        RankMismatchError
            If the number of indices differs from the rank.
        IndexOutOfBoundsError
            If an index is negative or not below its dimension's size.
        TypeError
            If an index is not an integer.
        """
        if isinstance(indices, (int, np.integer)):
            indices = (indices,)
        else:
            indices = tuple(indices)
        if len(indices) != len(self._shape):
            raise RankMismatchError(len(indices), len(self._shape))

        offset = 0
        for dim, (index, bound, stride) in enumerate(
            zip(indices, self._shape, self._strides)
        ):
            index = operator.index(index)
            if index < 0 or index >= bound:
                raise IndexOutOfBoundsError(dim, index, bound)
            offset += index * stride
        return offset

    def get(self, indices: Sequence[int]) -> float:
        """Return the element at the multi-index `indices`."""
        return float(self._data[self._offset(indices)])

    def get_mut(self, indices: Sequence[int]) -> np.ndarray:
        """
        Return a writable 0-d view of the element at `indices`.

        Assigning through the view (``slot[...] = value``) writes into this
        tensor's buffer.
        """
        offset = self._offset(indices)
        return self._data[offset:offset + 1].reshape(())

    def set(self, indices: Sequence[int], value: float) -> None:
        """Write `value` at the multi-index `indices`."""
        self._data[self._offset(indices)] = value

    def __getitem__(self, indices: Sequence[int] | int) -> float:
        return self.get(indices)

    def __setitem__(self, indices: Sequence[int] | int, value: float) -> None:
        self.set(indices, value)

    def _check_reshape(self, new_shape: Iterable[int]) -> tuple[int, ...]:
        new_shape = normalize_shape(new_shape)
        new_count = element_count(new_shape)
        if new_count != self.numel():
            raise ElementCountMismatchError(new_shape, new_count, self.numel())
        return new_shape

    def reshape(self, new_shape: Iterable[int]) -> None:
        """
        Reinterpret the buffer under `new_shape` in place.

        Only the shape and strides change; elements keep their flat order.

        Raises
        ------
        ElementCountMismatchError
            If `new_shape` holds a different number of elements.
        """
        new_shape = self._check_reshape(new_shape)
        logger.debug("Reshaping tensor %s -> %s", list(self._shape), list(new_shape))
        self._shape = new_shape
        self._strides = row_major_strides(new_shape)

    def reshaped(self, new_shape: Iterable[int]) -> "Tensor":
        """
        Return a copy of this tensor viewed under `new_shape`.

        The buffer is duplicated, so the result and the receiver never share
        storage.

        Raises
        ------
        ElementCountMismatchError
            If `new_shape` holds a different number of elements.
        """
        new_shape = self._check_reshape(new_shape)
        return Tensor._wrap(self._data.copy(), new_shape)

    def copy(self) -> "Tensor":
        """Return an independent copy with its own buffer."""
        return Tensor._wrap(self._data.copy(), self._shape)

    def __copy__(self) -> "Tensor":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Tensor":
        return self.copy()

    def tolist(self) -> Any:
        """Nested Python lists following the shape (a float for rank 0)."""
        return _walk(self._data, self._shape, self._strides, 0, float, list)

    def format(self, precision: int | None = None) -> str:
        """
        Render the tensor as nested brackets.

        Parameters
        ----------
        precision : int | None, optional
            Fixed number of decimals per element. None uses the shortest
            representation of each float32 value.

        Returns
        -------
        str
            Text like ``Tensor(shape: [2, 2], data: [[1.0, 2.0], [3.0, 4.0]])``.
        """
        body = _walk(
            self._data,
            self._shape,
            self._strides,
            0,
            lambda value: _format_scalar(value, precision),
            lambda children: "[" + ", ".join(children) + "]",
        )
        return f"Tensor(shape: {list(self._shape)}, data: {body})"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"Tensor(data={self._data.tolist()}, shape={self._shape}, "
            f"strides={self._strides})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return (
            self._shape == other._shape
            and self._strides == other._strides
            and np.array_equal(self._data, other._data)
        )

    __hash__ = None


def format_tensor(tensor: Tensor, precision: int | None = None) -> str:
    """Render `tensor` as nested brackets; see `Tensor.format`."""
    return tensor.format(precision)
