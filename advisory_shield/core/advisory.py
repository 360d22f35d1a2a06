"""Advisory records and severity banding."""

import datetime
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from .classifier import is_patched, is_unaffected, is_vulnerable
from .errors import LoadError
from .requirement import Requirement
from .version import Version

TEXT_FIELDS = ("gem", "url", "title", "description")
SCORE_FIELDS = ("cvss_v2", "cvss_v3")
REQUIREMENT_FIELDS = ("patched_versions", "unaffected_versions")


class Criticality(str, Enum):
    """Coarse severity tiers derived from a CVSS score."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


def criticality_for(score: Optional[float]) -> Optional[Criticality]:
    """Map a CVSS v2 score onto a criticality band.

    Bands are half open except the last: [0.0, 3.3) is low, [3.3, 6.6) is
    medium and [6.6, 10.0] is high.

    Args:
        score: CVSS score, or None when the advisory has no score

    Returns:
        The criticality band, or None for a missing score

    Raises:
        ValueError: If the score is outside 0.0-10.0
    """
    if score is None:
        return None
    if not 0.0 <= score <= 10.0:
        raise ValueError(f"CVSS score must be between 0.0 and 10.0, got {score}")
    if score < 3.3:
        return Criticality.LOW
    if score < 6.6:
        return Criticality.MEDIUM
    return Criticality.HIGH


@dataclass(frozen=True)
class Advisory:
    """A known vulnerability and the version ranges it does not apply to."""

    id: str
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    cvss_v2: Optional[float] = None
    cvss_v3: Optional[float] = None
    patched_versions: Tuple[Requirement, ...] = ()
    unaffected_versions: Tuple[Requirement, ...] = ()
    gem: Optional[str] = None
    cve: Optional[str] = None
    osvdb: Optional[str] = None
    ghsa: Optional[str] = None
    date: Optional[datetime.date] = None
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise LoadError("Advisory ID cannot be empty", field="id")

    @classmethod
    def from_document(
        cls,
        advisory_id: str,
        document: Mapping[str, Any],
        path: Optional[Path] = None,
    ) -> "Advisory":
        """Build an advisory from a parsed advisory document.

        The identifier comes from the document's storage key (the advisory
        file's basename), not from a field inside the document.

        Args:
            advisory_id: Advisory identifier, e.g. ``OSVDB-84243``
            document: Mapping parsed from the advisory file
            path: Optional source file, kept for reference

        Returns:
            The constructed advisory

        Raises:
            LoadError: If the document or any requirement expression is malformed
        """
        if not isinstance(document, Mapping):
            raise LoadError(
                f"Advisory {advisory_id} must be a mapping, got {type(document).__name__}"
            )

        fields = {name: _text(document, name) for name in TEXT_FIELDS}
        fields.update({name: _score(document, name) for name in SCORE_FIELDS})
        fields.update({name: _requirements(document, name) for name in REQUIREMENT_FIELDS})

        return cls(
            id=advisory_id,
            cve=_identifier(document, "cve"),
            osvdb=_identifier(document, "osvdb"),
            ghsa=_identifier(document, "ghsa"),
            date=_date(document),
            path=path,
            **fields,
        )

    @property
    def cve_id(self) -> Optional[str]:
        return f"CVE-{self.cve}" if self.cve else None

    @property
    def osvdb_id(self) -> Optional[str]:
        return f"OSVDB-{self.osvdb}" if self.osvdb else None

    @property
    def ghsa_id(self) -> Optional[str]:
        return f"GHSA-{self.ghsa}" if self.ghsa else None

    @property
    def identifiers(self) -> List[str]:
        """CVE, OSVDB and GHSA identifiers that are present, in that order."""
        return [i for i in (self.cve_id, self.osvdb_id, self.ghsa_id) if i]

    def criticality(self) -> Optional[Criticality]:
        return criticality_for(self.cvss_v2)

    def unaffected(self, version: Union[Version, str]) -> bool:
        return is_unaffected(self, version)

    def patched(self, version: Union[Version, str]) -> bool:
        return is_patched(self, version)

    def vulnerable(self, version: Union[Version, str]) -> bool:
        return is_vulnerable(self, version)

    def __str__(self) -> str:
        return self.id


def _text(document: Mapping[str, Any], name: str) -> Optional[str]:
    value = document.get(name)
    if value is not None and not isinstance(value, str):
        raise LoadError(f"{name} must be a string, got {type(value).__name__}", field=name)
    return value


def _identifier(document: Mapping[str, Any], name: str) -> Optional[str]:
    value = document.get(name)
    if value is None:
        return None
    # osvdb ids are plain integers in the advisory files
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise LoadError(f"{name} must be a string or integer, got {type(value).__name__}", field=name)
    return str(value)


def _score(document: Mapping[str, Any], name: str) -> Optional[float]:
    value = document.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LoadError(f"{name} must be a number, got {value!r}", field=name)
    if not 0.0 <= value <= 10.0:
        raise LoadError(f"{name} must be between 0.0 and 10.0, got {value}", field=name)
    return value


def _date(document: Mapping[str, Any]) -> Optional[datetime.date]:
    value = document.get("date")
    # YAML reads a full timestamp as a datetime, which is also a date
    if isinstance(value, datetime.datetime):
        return value.date()
    if value is None or isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value))
    except ValueError as e:
        raise LoadError(f"date is not an ISO date: {value!r}", field="date", cause=e) from e


def _requirements(document: Mapping[str, Any], name: str) -> Tuple[Requirement, ...]:
    expressions = document.get(name)
    if expressions is None:
        return ()
    if not isinstance(expressions, list):
        raise LoadError(f"{name} must be a list, got {type(expressions).__name__}", field=name)

    requirements = []
    for expression in expressions:
        try:
            requirements.append(Requirement.parse(expression))
        except ValueError as e:
            raise LoadError(
                f"Invalid requirement in {name}: {expression!r}",
                field=name,
                expression=expression,
                cause=e,
            ) from e
    return tuple(requirements)
