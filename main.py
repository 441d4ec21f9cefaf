import argparse
import logging
import os
import sys

from src.domain.errors import TensorError
from src.domain.use_cases.build_tensor import BuildTensor
from src.infrastructure.configuration import TensorConfiguration
from src.infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "configuration.toml"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Build a tensor from a configuration file and print it."
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        default=None,
        help=f"Path to tensor configuration TOML file (default: {DEFAULT_CONFIG})",
    )
    return parser.parse_args(argv)


def load_configuration(config_path: str | None) -> TensorConfiguration:
    """
    Load the tensor configuration, falling back to the built-in example.

    Parameters
    ----------
    config_path : str | None
        Explicit configuration path. When None, the default file is used if
        present, otherwise the built-in example.

    Returns
    -------
    TensorConfiguration
        The configuration to run with.
    """
    if config_path is not None:
        return TensorConfiguration.load(config_path)
    if os.path.exists(DEFAULT_CONFIG):
        return TensorConfiguration.load(DEFAULT_CONFIG)
    return TensorConfiguration()


def main(config_path: str = None) -> int:
    # 1. Load Configuration
    config = load_configuration(config_path)

    # 2. Setup Logging
    setup_logging(config.log_level)
    logger.info(f"Loaded configuration from {config_path or 'defaults'}")

    # 3. Build and print the tensor
    use_case = BuildTensor(
        data=config.data,
        shape=config.shape,
        reshape=config.reshape,
        precision=config.precision,
    )
    try:
        rendered = use_case.run()
    except TensorError as e:
        logger.error(f"Could not build tensor: {e}")
        return 1

    print(rendered)
    return 0


if __name__ == "__main__":
    args = parse_args()
    sys.exit(main(config_path=args.config))
