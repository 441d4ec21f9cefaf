"""Tests for rendering tensors as text and nested lists."""
from src.domain.entities.tensor import Tensor, format_tensor


class TestFormat:
    """Tests for str() and format_tensor."""

    def test_matrix(self, matrix):
        """Rows render as nested brackets."""
        assert str(matrix) == (
            "Tensor(shape: [2, 3], data: [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])"
        )

    def test_vector(self):
        """The innermost dimension renders raw scalars."""
        assert str(Tensor([1.5, 2.0], [2])) == "Tensor(shape: [2], data: [1.5, 2.0])"

    def test_scalar(self):
        """Rank 0 renders the lone value without brackets."""
        assert str(Tensor([7.0], [])) == "Tensor(shape: [], data: 7.0)"

    def test_zero_sized_dimensions(self):
        """Empty dimensions render as empty brackets."""
        assert str(Tensor.zeros([0, 3])) == "Tensor(shape: [0, 3], data: [])"
        assert str(Tensor.zeros([2, 0])) == "Tensor(shape: [2, 0], data: [[], []])"

    def test_follows_reshape(self, matrix):
        """Rendering walks the current shape."""
        matrix.reshape([3, 2])
        assert str(matrix) == (
            "Tensor(shape: [3, 2], data: [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])"
        )

    def test_float32_values_render_short(self):
        """Values print at float32 precision."""
        assert str(Tensor([0.1], [1])) == "Tensor(shape: [1], data: [0.1])"

    def test_precision(self, matrix):
        """format_tensor can fix the number of decimals."""
        assert format_tensor(matrix, precision=2) == (
            "Tensor(shape: [2, 3], data: [[1.00, 2.00, 3.00], [4.00, 5.00, 6.00]])"
        )

    def test_repr(self, matrix):
        """repr exposes buffer, shape and strides."""
        assert repr(matrix) == (
            "Tensor(data=[1.0, 2.0, 3.0, 4.0, 5.0, 6.0], shape=(2, 3), strides=(3, 1))"
        )


class TestToList:
    """Tests for Tensor.tolist."""

    def test_nested(self, cube):
        """Nesting depth equals rank."""
        nested = cube.tolist()
        assert len(nested) == 2
        assert len(nested[0]) == 3
        assert nested[1][2] == [20.0, 21.0, 22.0, 23.0]

    def test_scalar(self):
        """Rank 0 yields a plain float."""
        assert Tensor([2.0], []).tolist() == 2.0
