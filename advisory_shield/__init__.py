"""advisory-shield - Decide whether a package version is exposed to a security advisory."""

__version__ = "0.1.0"

from .core import (
    Advisory,
    AdvisoryShieldError,
    Criticality,
    InvalidVersionError,
    LoadError,
    Requirement,
    Version,
    criticality_for,
    is_patched,
    is_unaffected,
    is_vulnerable,
)
from .database import AdvisoryDatabase, load_advisory

__all__ = [
    "Advisory",
    "AdvisoryDatabase",
    "AdvisoryShieldError",
    "Criticality",
    "InvalidVersionError",
    "LoadError",
    "Requirement",
    "Version",
    "criticality_for",
    "is_patched",
    "is_unaffected",
    "is_vulnerable",
    "load_advisory",
]
