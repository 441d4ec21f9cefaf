"""Tests for the BuildTensor use-case."""
import logging

import pytest

from src.domain.errors import ElementCountMismatchError, ShapeMismatchError
from src.domain.use_cases.build_tensor import BuildTensor


class TestBuildTensor:
    """Tests for BuildTensor.run."""

    def test_renders_tensor(self):
        """The use-case returns the rendered tensor and keeps it."""
        use_case = BuildTensor(data=[1.0, 2.0, 3.0, 4.0], shape=[2, 2])
        rendered = use_case.run()
        assert rendered == "Tensor(shape: [2, 2], data: [[1.0, 2.0], [3.0, 4.0]])"
        assert use_case.tensor.shape == (2, 2)

    def test_applies_reshape(self):
        """An optional reshape is applied before rendering."""
        use_case = BuildTensor(data=[1.0, 2.0, 3.0, 4.0], shape=[2, 2], reshape=[4])
        assert use_case.run() == "Tensor(shape: [4], data: [1.0, 2.0, 3.0, 4.0])"

    def test_applies_precision(self):
        """Precision controls decimals."""
        use_case = BuildTensor(data=[0.5], shape=[], precision=3)
        assert use_case.run() == "Tensor(shape: [], data: 0.500)"

    def test_shape_mismatch_propagates(self):
        """Construction errors reach the caller unchanged."""
        use_case = BuildTensor(data=[1.0, 2.0, 3.0, 4.0], shape=[2, 447])
        with pytest.raises(ShapeMismatchError):
            use_case.run()
        assert use_case.tensor is None

    def test_reshape_mismatch_propagates(self):
        """Reshape errors reach the caller unchanged."""
        use_case = BuildTensor(data=[1.0, 2.0], shape=[2], reshape=[3])
        with pytest.raises(ElementCountMismatchError):
            use_case.run()

    def test_logs_progress(self, caplog):
        """The use-case reports what it built."""
        with caplog.at_level(logging.INFO, logger="src.domain.use_cases.build_tensor"):
            BuildTensor(data=[1.0, 2.0], shape=[2]).run()
        assert "rank 1, 2 elements" in caplog.text
