"""Configuration for locating the advisory database."""

import os
from dataclasses import dataclass
from pathlib import Path

DATABASE_ENV_VAR = "ADVISORY_SHIELD_DB"
DEFAULT_DATABASE_PATH = Path.home() / ".local" / "share" / "ruby-advisory-db"


@dataclass
class DatabaseConfig:
    """Configuration for an on-disk advisory database.

    The database is a directory holding ``gems/<gem>/<advisory id>.yml`` files.
    """

    database_path: Path

    def __post_init__(self) -> None:
        """Validate configuration."""
        self.database_path = Path(self.database_path).expanduser()
        if not self.database_path.exists():
            raise ValueError(f"Database path does not exist: {self.database_path}")
        if not self.database_path.is_dir():
            raise ValueError(f"Database path is not a directory: {self.database_path}")

    @property
    def gems_path(self) -> Path:
        return self.database_path / "gems"

    @staticmethod
    def default_path() -> Path:
        """Return ``$ADVISORY_SHIELD_DB`` if set, else the conventional location."""
        override = os.environ.get(DATABASE_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return DEFAULT_DATABASE_PATH

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        return cls(cls.default_path())
