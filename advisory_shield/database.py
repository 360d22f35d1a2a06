"""Loading advisories from an on-disk advisory database."""

from pathlib import Path
from typing import Iterator, List, Union

import yaml

from .config import DatabaseConfig
from .core.advisory import Advisory
from .core.errors import LoadError
from .core.version import Version
from .utils.logging import get_logger

ADVISORY_SUFFIX = ".yml"


def load_advisory(path: Union[Path, str]) -> Advisory:
    """Load a single advisory file.

    The advisory id is the file's basename without extension. When the
    document has no ``gem`` key, the name of the enclosing directory is used.

    Args:
        path: Path to a YAML advisory file

    Returns:
        Parsed advisory

    Raises:
        LoadError: If the file cannot be read or parsed
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise LoadError(f"Could not read advisory {path}", cause=e) from e
    except yaml.YAMLError as e:
        raise LoadError(f"Could not parse advisory {path}", cause=e) from e

    if isinstance(document, dict) and document.get("gem") is None:
        document = {**document, "gem": path.parent.name}

    return Advisory.from_document(path.stem, document, path=path)


class AdvisoryDatabase:
    """Read-only view over a directory of advisory files."""

    def __init__(self, config: DatabaseConfig) -> None:
        """Initialize the database.

        Args:
            config: Database configuration
        """
        self.config = config
        self.logger = get_logger("AdvisoryDatabase")

    @classmethod
    def from_path(cls, path: Union[Path, str]) -> "AdvisoryDatabase":
        return cls(DatabaseConfig(Path(path)))

    def gems(self) -> List[str]:
        """Names of all gems with an advisory directory, sorted."""
        if not self.config.gems_path.is_dir():
            return []
        return sorted(p.name for p in self.config.gems_path.iterdir() if p.is_dir())

    def advisories(self) -> Iterator[Advisory]:
        """Iterate over every advisory in the database."""
        for gem in self.gems():
            yield from self.advisories_for(gem)

    def advisories_for(self, gem: str) -> Iterator[Advisory]:
        """Iterate over the advisories of one gem, ordered by advisory id.

        Args:
            gem: Gem name

        Yields:
            Advisory objects

        Raises:
            LoadError: If any advisory file of the gem is malformed
        """
        for path in self._advisory_paths(gem):
            self.logger.debug(f"Loading advisory {path}")
            yield load_advisory(path)

    def check_gem(self, gem: str, version: Union[Version, str]) -> List[Advisory]:
        """Find the advisories a gem version is vulnerable to.

        Args:
            gem: Gem name
            version: Installed version of the gem

        Returns:
            Advisories for which the version is neither patched nor unaffected

        Raises:
            InvalidVersionError: If ``version`` is not a valid version string
            LoadError: If any advisory file of the gem is malformed
        """
        candidate = Version.parse(version)
        vulnerable = [
            advisory for advisory in self.advisories_for(gem)
            if advisory.vulnerable(candidate)
        ]

        if vulnerable:
            self.logger.debug(f"{gem} {candidate} is vulnerable to {len(vulnerable)} advisories")
        else:
            self.logger.debug(f"{gem} {candidate} has no known vulnerabilities")
        return vulnerable

    def size(self) -> int:
        """Number of advisory files in the database."""
        total = sum(len(self._advisory_paths(gem)) for gem in self.gems())
        self.logger.info(f"Advisory database at {self.config.database_path} holds {total} advisories")
        return total

    def _advisory_paths(self, gem: str) -> List[Path]:
        gem_path = self.config.gems_path / gem
        if not gem_path.is_dir():
            return []
        return sorted(gem_path.glob(f"*{ADVISORY_SUFFIX}"))
