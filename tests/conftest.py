"""Pytest configuration and shared fixtures."""
import pytest

from src.domain.entities.tensor import Tensor


@pytest.fixture
def matrix():
    """
    Provide a 2x3 tensor holding 1..6 in row-major order.

    Returns:
        Tensor: Tensor of shape (2, 3) with data [1, 2, 3, 4, 5, 6].
    """
    return Tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [2, 3])


@pytest.fixture
def cube():
    """
    Provide a 2x3x4 tensor whose elements equal their flat offsets.

    Returns:
        Tensor: Tensor of shape (2, 3, 4) with data [0, 1, ..., 23].
    """
    return Tensor([float(i) for i in range(24)], [2, 3, 4])
