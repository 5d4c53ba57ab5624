"""Request validation performed before the search engine runs.

Checks return an InvalidArgument describing the rejection, or None when
the value is acceptable. The alternatives list lets the caller correct the
request (for example, the loaded translation keys).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from qurantree.engine.search import MatchMode


@dataclass(frozen=True)
class InvalidArgument:
    """A rejected caller-supplied value."""

    parameter: str
    message: str
    alternatives: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        detail: dict = {"error": self.message, "parameter": self.parameter}
        if self.alternatives:
            detail["available"] = list(self.alternatives)
        return detail


def check_query(terms: Sequence[str] | None, param: str = "q") -> InvalidArgument | None:
    """Reject a missing query or one made only of blank terms."""
    if not terms or not any(term.strip() for term in terms):
        return InvalidArgument(
            parameter=param,
            message=f'Query parameter "{param}" is required',
        )
    return None


def check_match_mode(value: str, param: str = "type") -> InvalidArgument | None:
    """Reject match modes other than exact/substring."""
    valid = tuple(mode.value for mode in MatchMode)
    if value not in valid:
        return InvalidArgument(
            parameter=param,
            message=f"Unknown search type: {value!r}",
            alternatives=valid,
        )
    return None


def check_translation_key(
    key: str | None, available: Iterable[str], param: str = "translation"
) -> InvalidArgument | None:
    """Reject a missing or unloaded translation key."""
    valid = tuple(sorted(available))
    if not key:
        return InvalidArgument(
            parameter=param,
            message=f'Query parameter "{param}" is required',
            alternatives=valid,
        )
    if key not in valid:
        return InvalidArgument(
            parameter=param,
            message=f"Unknown translation: {key!r}",
            alternatives=valid,
        )
    return None


def first_invalid(*checks: InvalidArgument | None) -> InvalidArgument | None:
    """Return the first rejection among several checks."""
    for check in checks:
        if check is not None:
            return check
    return None
