"""Classify a version against an advisory's patched and unaffected rules."""

from typing import TYPE_CHECKING, Union

from .requirement import any_satisfies
from .version import Version

if TYPE_CHECKING:
    from .advisory import Advisory


def is_unaffected(advisory: "Advisory", version: Union[Version, str]) -> bool:
    """Check whether the version matches any of the unaffected requirements.

    Args:
        advisory: Advisory to classify against
        version: Candidate version

    Returns:
        True if the version is explicitly known not to be affected

    Raises:
        InvalidVersionError: If ``version`` is not a valid version string
    """
    return any_satisfies(advisory.unaffected_versions, version)


def is_patched(advisory: "Advisory", version: Union[Version, str]) -> bool:
    """Check whether the version matches any of the patched requirements.

    Args:
        advisory: Advisory to classify against
        version: Candidate version

    Returns:
        True if the version contains the fix

    Raises:
        InvalidVersionError: If ``version`` is not a valid version string
    """
    return any_satisfies(advisory.patched_versions, version)


def is_vulnerable(advisory: "Advisory", version: Union[Version, str]) -> bool:
    """Check whether the version is exposed to the advisory.

    A version is vulnerable unless it is known to be patched or unaffected,
    so an advisory without any rules marks every version as vulnerable.

    Raises:
        InvalidVersionError: If ``version`` is not a valid version string
    """
    candidate = Version.parse(version)
    return not is_patched(advisory, candidate) and not is_unaffected(advisory, candidate)
