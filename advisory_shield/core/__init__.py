"""Advisory model and version classification logic for advisory-shield."""

from .advisory import Advisory, Criticality, criticality_for
from .classifier import is_patched, is_unaffected, is_vulnerable
from .errors import AdvisoryShieldError, InvalidVersionError, LoadError
from .requirement import Requirement, any_satisfies, satisfies
from .version import Version

__all__ = [
    "Advisory",
    "Criticality",
    "criticality_for",
    "is_patched",
    "is_unaffected",
    "is_vulnerable",
    "AdvisoryShieldError",
    "InvalidVersionError",
    "LoadError",
    "Requirement",
    "any_satisfies",
    "satisfies",
    "Version",
]
