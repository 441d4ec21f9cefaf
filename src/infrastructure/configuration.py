import os
import tomllib
from dataclasses import dataclass, field


@dataclass
class TensorConfiguration:
    """Configuration for building and printing a tensor."""

    data: list[float] = field(default_factory=lambda: [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    shape: tuple[int, ...] = (2, 3)
    reshape: tuple[int, ...] | None = None
    precision: int | None = None
    log_level: str = "INFO"

    def __post_init__(self):
        """Normalise shapes read from TOML arrays into tuples."""
        self.data = [float(value) for value in self.data]
        self.shape = tuple(self.shape)
        if self.reshape is not None:
            self.reshape = tuple(self.reshape)

    @classmethod
    def load(cls, config_path: str) -> "TensorConfiguration":
        """
        Load tensor configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "tensor" table.

        Returns
        -------
        TensorConfiguration
            Instance populated from the "tensor" table; fields not present use their dataclass defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        tensor_data = data.get("tensor", {})
        return cls(**tensor_data)
