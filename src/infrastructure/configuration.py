import os
import tomllib
from dataclasses import dataclass, field, fields
from typing import Any


def _read_table(config_path: str, table: str) -> dict[str, Any]:
    """
    Read one table from a TOML file.

    Parameters
    ----------
    config_path : str
        Filesystem path to the TOML file.
    table : str
        Name of the top-level table to return.

    Returns
    -------
    dict[str, Any]
        The table contents, or an empty dict if the table is absent.

    Raises
    ------
    FileNotFoundError
        If no file exists at `config_path`.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return data.get(table, {})


def _check_known_keys(cls, data: dict[str, Any], table: str) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(
            f"Unknown option(s) in [{table}]: {', '.join(unknown)}. "
            f"Valid options: {', '.join(sorted(known))}"
        )


@dataclass
class TrainingConfiguration:
    """Configuration for the linear regression lesson."""

    num_samples: int = 200
    true_weights: list[float] = field(default_factory=lambda: [0.8, -0.2, 1.5])
    offset: float = 0.1
    learning_rate: float = 0.005
    steps: int = 200
    log_every: int = 50
    input_scale: float = 50.0
    standardize: bool = False
    fit_bias: bool = False
    jit_compile: bool = False
    show_progress: bool = True

    def __post_init__(self):
        """Validate numeric options.

        Raises ValueError on non-positive sizes, rates or intervals, and on an
        empty weight list.
        """
        if self.num_samples < 1:
            raise ValueError(f"num_samples must be at least 1, got {self.num_samples}")
        if not self.true_weights:
            raise ValueError("true_weights must contain at least one value")
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.steps < 1:
            raise ValueError(f"steps must be at least 1, got {self.steps}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be at least 1, got {self.log_every}")
        if self.input_scale <= 0:
            raise ValueError(f"input_scale must be positive, got {self.input_scale}")
        self.true_weights = [float(w) for w in self.true_weights]

    @property
    def num_features(self) -> int:
        return len(self.true_weights)

    @classmethod
    def load(cls, config_path: str) -> "TrainingConfiguration":
        """
        Load training configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "training" table.

        Returns
        -------
        TrainingConfiguration
            Instance populated from the "training" table; missing fields use
            their dataclass defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        ValueError
            If the table contains keys that are not configuration fields.
        """
        training_data = _read_table(config_path, "training")
        _check_known_keys(cls, training_data, "training")
        return cls(**training_data)


@dataclass
class ExplorationConfiguration:
    """Configuration for the tensor playground lesson."""

    num_samples: int = 200
    num_features: int = 3
    broadcast_rows: int = 6
    input_scale: float = 50.0
    eps: float = 1e-6
    preview_rows: int = 5
    preview_cols: int = 5

    def __post_init__(self):
        for name in ("num_samples", "num_features", "broadcast_rows", "preview_rows", "preview_cols"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        if self.input_scale <= 0:
            raise ValueError(f"input_scale must be positive, got {self.input_scale}")
        if self.eps < 0:
            raise ValueError(f"eps must be non-negative, got {self.eps}")

    @classmethod
    def load(cls, config_path: str) -> "ExplorationConfiguration":
        """
        Load exploration configuration from a TOML file.

        Parameters:
            config_path (str): Filesystem path to a TOML file containing an "exploration" table.

        Returns:
            ExplorationConfiguration: Instance populated from the "exploration" table.

        Raises:
            FileNotFoundError: If no file exists at `config_path`.
            ValueError: If the table contains unknown keys.
        """
        exploration_data = _read_table(config_path, "exploration")
        _check_known_keys(cls, exploration_data, "exploration")
        return cls(**exploration_data)
