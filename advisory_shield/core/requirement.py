"""Version requirements: conjunctions of operator/version constraints."""

import operator
import re
from typing import Callable, Dict, Iterable, Tuple, Union

from .version import VERSION_PATTERN, Version

Constraint = Tuple[str, Version]

_CONSTRAINT = re.compile(rf"\A\s*(=|!=|>=|<=|>|<|~>)?\s*({VERSION_PATTERN})\s*\Z")


def _pessimistic(candidate: Version, bound: Version) -> bool:
    return candidate >= bound and candidate.release() < bound.bump()


OPERATORS: Dict[str, Callable[[Version, Version], bool]] = {
    "=": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
    "~>": _pessimistic,
}


class Requirement:
    """An immutable, ordered set of (operator, version) constraints.

    A version satisfies the requirement when it satisfies every constraint.
    """

    __slots__ = ("_constraints",)

    def __init__(self, constraints: Iterable[Constraint]) -> None:
        self._constraints: Tuple[Constraint, ...] = tuple(constraints)
        if not self._constraints:
            raise ValueError("A requirement needs at least one constraint")
        for op, _ in self._constraints:
            if op not in OPERATORS:
                raise ValueError(f"Unknown requirement operator: {op!r}")

    @classmethod
    def parse(cls, expression: str) -> "Requirement":
        """Parse a requirement expression such as ``"~> 2.3.0, >= 2.3.14"``.

        Comma separated constraints are combined into one requirement. A
        constraint without an operator means ``=``.

        Args:
            expression: Requirement expression string

        Returns:
            Parsed requirement

        Raises:
            ValueError: If the expression or any of its constraints is malformed
        """
        if not isinstance(expression, str):
            raise ValueError(f"Requirement expression must be a string, got {type(expression).__name__}")

        constraints = []
        for part in expression.split(","):
            match = _CONSTRAINT.match(part)
            if match is None:
                raise ValueError(f"Illformed requirement {part.strip()!r}")
            constraints.append((match.group(1) or "=", Version(match.group(2))))
        return cls(constraints)

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return self._constraints

    def is_satisfied_by(self, version: Union[Version, str]) -> bool:
        candidate = Version.parse(version)
        return all(OPERATORS[op](candidate, bound) for op, bound in self._constraints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Requirement):
            return NotImplemented
        return self._constraints == other._constraints

    def __hash__(self) -> int:
        return hash(self._constraints)

    def __str__(self) -> str:
        return ", ".join(f"{op} {version}" for op, version in self._constraints)

    def __repr__(self) -> str:
        return f"Requirement({str(self)!r})"


def satisfies(requirement: Requirement, version: Union[Version, str]) -> bool:
    """Check a version against every constraint of one requirement.

    Raises:
        InvalidVersionError: If ``version`` is not a valid version string
    """
    return requirement.is_satisfied_by(version)


def any_satisfies(requirements: Iterable[Requirement], version: Union[Version, str]) -> bool:
    """Check whether at least one requirement in the list admits the version.

    The version is parsed even when the list is empty so that a malformed
    version is always reported.

    Raises:
        InvalidVersionError: If ``version`` is not a valid version string
    """
    candidate = Version.parse(version)
    return any(satisfies(requirement, candidate) for requirement in requirements)
