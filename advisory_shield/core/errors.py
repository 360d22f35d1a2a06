"""Exceptions raised by the advisory model and version classifier."""

from typing import Optional


class AdvisoryShieldError(Exception):
    """Base exception for all advisory-shield errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            cause: The original exception that caused this error (if any)
        """
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {type(self.cause).__name__}: {self.cause})"
        return self.message


class LoadError(AdvisoryShieldError):
    """Raised when an advisory document cannot be turned into an Advisory.

    Covers unreadable or unparsable files, documents of the wrong shape and
    malformed requirement expressions. Always raised at construction time.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expression: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.field = field
        self.expression = expression


class InvalidVersionError(AdvisoryShieldError, ValueError):
    """Raised when a version string is not a valid dotted version."""

    def __init__(self, version: object) -> None:
        super().__init__(f"Malformed version number string: {version!r}")
        self.version = version
