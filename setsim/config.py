"""
Configuration for similarity computations.

Holds the algorithm parameters shared by the factories and the CLI, with YAML
persistence and an environment variable override.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .core.hashing import HASH_METHODS
from .engine.errors import PreconditionError

CONFIG_ENV_VAR = "SETSIM_CONFIG"
DEFAULT_CONFIG_NAME = ".setsim.yml"

# Accepted types per field; None is also accepted where the default is None
FIELD_TYPES = {
    "shingle_length": int,
    "signature_size": int,
    "bands": int,
    "rows": int,
    "threshold": (int, float),
    "hash_method": str,
    "domain_size": int,
    "max_workers": int,
}
OPTIONAL_FIELDS = ("domain_size", "max_workers")


@dataclass
class SimilarityConfig:
    """
    Parameters for Jaccard, MinHash and LSH comparisons.

    Defaults suit short strings (smaller than an email) and small
    collections (10 to 40 elements).
    """

    # Length of character n-gram shingles (text inputs only)
    shingle_length: int = 2

    # MinHash signature length
    signature_size: int = 100

    # LSH banding
    bands: int = 20
    rows: int = 5
    threshold: float = 0.5

    # Token hashing for text inputs
    hash_method: str = "blake2b"

    # Distinct elements across both inputs; derived per call when None
    domain_size: Optional[int] = None

    # Worker count for internally created pools; None lets the pool decide
    max_workers: Optional[int] = None

    def __post_init__(self):
        """Validate configuration parameters."""
        self._check_types()

        if self.shingle_length < 1:
            raise PreconditionError(
                f"shingle_length must be >= 1, got {self.shingle_length}",
                parameter="shingle_length", value=self.shingle_length)

        if self.signature_size <= 0:
            raise PreconditionError(
                f"signature_size must be positive, got {self.signature_size}",
                parameter="signature_size", value=self.signature_size)

        if self.bands <= 0:
            raise PreconditionError(
                f"bands must be positive, got {self.bands}",
                parameter="bands", value=self.bands)

        if not (0.0 < self.threshold < 1.0):
            raise PreconditionError(
                f"threshold must be between 0 and 1 (exclusive), got {self.threshold}",
                parameter="threshold", value=self.threshold)

        if self.hash_method not in HASH_METHODS:
            raise PreconditionError(
                f"hash_method must be one of {', '.join(HASH_METHODS)}, got {self.hash_method}",
                parameter="hash_method", value=self.hash_method)

        if self.domain_size is not None and self.domain_size < 2:
            raise PreconditionError(
                f"domain_size must be >= 2, got {self.domain_size}",
                parameter="domain_size", value=self.domain_size)

        if self.max_workers is not None and self.max_workers <= 0:
            raise PreconditionError(
                f"max_workers must be positive, got {self.max_workers}",
                parameter="max_workers", value=self.max_workers)

    def _check_types(self):
        for name, expected in FIELD_TYPES.items():
            value = getattr(self, name)
            if value is None and name in OPTIONAL_FIELDS:
                continue
            # bool is an int subclass but never a valid parameter
            if isinstance(value, bool) or not isinstance(value, expected):
                raise PreconditionError(
                    f"{name} has the wrong type: {value!r}",
                    parameter=name, value=value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimilarityConfig":
        """Create from dictionary representation; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "SimilarityConfig":
        """Load configuration from YAML file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Look for config in the current directory, then the home directory."""
        current_dir_config = Path(DEFAULT_CONFIG_NAME)
        if current_dir_config.exists():
            return current_dir_config

        return Path.home() / DEFAULT_CONFIG_NAME

    @classmethod
    def load_or_default(
        cls, config_path: Optional[Union[str, Path]] = None
    ) -> "SimilarityConfig":
        """
        Load configuration from file or return default if not found.

        Args:
            config_path: Optional path to configuration file

        Returns:
            SimilarityConfig instance
        """
        if config_path:
            config_path = Path(config_path)
            if config_path.exists():
                return cls.load_from_file(config_path)
        else:
            default_path = cls.get_default_config_path()
            if default_path.exists():
                return cls.load_from_file(default_path)

        return cls()


class ConfigManager:
    """
    Loads and saves SimilarityConfig.

    The ``SETSIM_CONFIG`` environment variable, when it points at an existing
    file, takes precedence over the path given to the manager.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[SimilarityConfig] = None

    @property
    def config(self) -> SimilarityConfig:
        """Get the current configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> SimilarityConfig:
        """Load configuration from environment, file or defaults."""
        env_config_path = os.getenv(CONFIG_ENV_VAR)
        if env_config_path:
            config_path = Path(env_config_path)
            if config_path.exists():
                return SimilarityConfig.load_from_file(config_path)

        if self.config_path and self.config_path.exists():
            return SimilarityConfig.load_from_file(self.config_path)

        return SimilarityConfig.load_or_default()

    def save_config(
        self, config: SimilarityConfig, path: Optional[Union[str, Path]] = None
    ) -> Path:
        """Save configuration to file and return the path written."""
        save_path = (
            Path(path)
            if path
            else self.config_path or Path(DEFAULT_CONFIG_NAME)
        )
        config.save_to_file(save_path)
        self._config = config
        return save_path
