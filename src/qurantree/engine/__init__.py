"""Search engine over the primary text."""

from qurantree.engine.search import (
    PRIMARY,
    MatchMode,
    MatchRecord,
    ResultPage,
    SearchEngine,
    SearchOptions,
    SearchTerm,
    TermMatcher,
)

__all__ = [
    "PRIMARY",
    "MatchMode",
    "MatchRecord",
    "ResultPage",
    "SearchEngine",
    "SearchOptions",
    "SearchTerm",
    "TermMatcher",
]
