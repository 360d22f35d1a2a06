"""Dotted-segment version numbers as used by advisory requirement rules."""

import re
from typing import Any, List, Tuple, Union

from .errors import InvalidVersionError

Segment = Union[int, str]

VERSION_PATTERN = r"[0-9]+(?:\.[0-9a-zA-Z]+)*(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
_ANCHORED_VERSION = re.compile(rf"\A\s*({VERSION_PATTERN})\s*\Z")
_SEGMENT = re.compile(r"[0-9]+|[a-z]+", re.IGNORECASE)


class Version:
    """An immutable, comparable version number.

    A version is split into numeric and alphabetic segments (``1.0.rc1`` gives
    ``1, 0, "rc", 1``). Segments compare numerically when both are numbers and
    lexically when both are strings; a string segment sorts before any number,
    so ``1.0.rc1 < 1.0``. Missing trailing segments count as zero, which makes
    ``3.1`` and ``3.1.0`` equal.
    """

    __slots__ = ("_string", "_segments")

    def __init__(self, version: str) -> None:
        if not isinstance(version, str):
            raise InvalidVersionError(version)

        match = _ANCHORED_VERSION.match(version)
        if match is None:
            raise InvalidVersionError(version)

        self._string = match.group(1)
        # A dash introduces a prerelease tag: 1.2.3-java sorts like 1.2.3.pre.java
        normalized = self._string.replace("-", ".pre.")
        self._segments: Tuple[Segment, ...] = tuple(
            int(part) if part.isdigit() else part
            for part in _SEGMENT.findall(normalized)
        )

    @classmethod
    def parse(cls, value: Union["Version", str]) -> "Version":
        """Coerce a string or Version into a Version.

        Raises:
            InvalidVersionError: If the value is not a valid version
        """
        if isinstance(value, Version):
            return value
        return cls(value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Check whether a value is a well-formed version string."""
        return isinstance(value, str) and _ANCHORED_VERSION.match(value) is not None

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments

    @property
    def prerelease(self) -> bool:
        """True when any segment is alphabetic."""
        return any(isinstance(segment, str) for segment in self._segments)

    def release(self) -> "Version":
        """Return the release this version is a prerelease of (or itself)."""
        if not self.prerelease:
            return self

        release: List[Segment] = []
        for segment in self._segments:
            if isinstance(segment, str):
                break
            release.append(segment)
        return Version(".".join(str(segment) for segment in release))

    def bump(self) -> "Version":
        """Return the exclusive upper bound of a pessimistic ``~>`` match.

        The bound depends on the precision of this version: ``3`` bumps to
        ``4``, ``3.1`` to ``3.2`` and ``3.1.2`` to ``3.2``. Longer versions drop
        their last segment and increment the new last one.
        """
        segments = list(self._segments)
        while any(isinstance(segment, str) for segment in segments):
            segments.pop()
        if not segments:
            segments = [0]
        if len(segments) > 2:
            segments.pop()
        segments[-1] += 1
        return Version(".".join(str(segment) for segment in segments))

    def _compare(self, other: "Version") -> int:
        left, right = self._segments, other._segments
        for index in range(max(len(left), len(right))):
            a = left[index] if index < len(left) else 0
            b = right[index] if index < len(right) else 0
            if a == b:
                continue
            if isinstance(a, str) and isinstance(b, int):
                return -1
            if isinstance(a, int) and isinstance(b, str):
                return 1
            return -1 if a < b else 1
        return 0

    def _canonical(self) -> Tuple[Segment, ...]:
        segments = list(self._segments)
        while len(segments) > 1 and segments[-1] == 0:
            segments.pop()
        return tuple(segments)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self._canonical())

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"Version({self._string!r})"
