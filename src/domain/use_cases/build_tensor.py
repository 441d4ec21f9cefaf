"""
Build Tensor Use-Case.

This module provides a use-case for building a tensor from a flat buffer and
a shape, optionally reshaping it, and rendering it as text.
"""
import logging
from typing import Optional, Sequence

from src.domain.entities.tensor import Tensor

logger = logging.getLogger(__name__)


class BuildTensor:
    """
    Use-case for building and rendering a tensor.

    This use-case orchestrates the workflow of:
    1. Constructing a tensor from data and shape (shape-checked)
    2. Optionally reshaping it in place
    3. Rendering it as nested brackets

    Attributes
    ----------
    data : Sequence[float]
        Elements in row-major order.
    shape : Sequence[int]
        Shape used at construction.
    reshape : Sequence[int] | None
        Optional shape to reinterpret the tensor under.
    precision : int | None
        Optional number of decimals in the rendered text.
    """

    def __init__(
        self,
        data: Sequence[float],
        shape: Sequence[int],
        reshape: Optional[Sequence[int]] = None,
        precision: Optional[int] = None,
    ) -> None:
        self.data = data
        self.shape = shape
        self.reshape = reshape
        self.precision = precision
        self.tensor: Tensor | None = None

    def run(self) -> str:
        """
        Execute the build workflow.

        Returns
        -------
        str
            Rendered tensor.

        Raises
        ------
        ShapeMismatchError
            If the data length does not match `shape`.
        ElementCountMismatchError
            If `reshape` holds a different number of elements.
        """
        logger.info(f"Building tensor of shape {list(self.shape)} from {len(self.data)} values...")
        tensor = Tensor(self.data, self.shape)

        if self.reshape is not None:
            logger.info(f"Reshaping tensor to {list(self.reshape)}...")
            tensor.reshape(self.reshape)

        self.tensor = tensor
        logger.info(
            f"Tensor ready: rank {tensor.rank()}, {tensor.numel()} elements, "
            f"strides {list(tensor.strides)}."
        )
        return tensor.format(self.precision)
