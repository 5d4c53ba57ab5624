"""Text search over the primary corpus.

Search is a full, ordered scan: chapters ascending, verses ascending.
There is no relevance ranking and no early exit; the corpus is small and
fixed, so callers always get the complete match count.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Sequence

from qurantree.corpus.models import Location, Token, Verse
from qurantree.text import normalize, strip_punctuation, tokenize

if TYPE_CHECKING:
    from qurantree.corpus.document import DocumentModel
    from qurantree.translations.store import TranslationStore

# Target value for the primary (Arabic) text
PRIMARY = "primary"


class MatchMode(str, Enum):
    """How a query is compared against candidate text."""

    EXACT = "exact"
    SUBSTRING = "substring"


@dataclass(frozen=True)
class SearchOptions:
    """Search configuration. Every option and its default is listed here."""

    match_mode: MatchMode = MatchMode.SUBSTRING
    normalize: bool = False
    case_sensitive: bool = False
    target: str = PRIMARY
    # Translation searches only: attach the primary verse text to each match
    include_primary: bool = True


@dataclass(frozen=True)
class SearchTerm:
    """One query term in a batch. match_mode=None uses the options' mode."""

    text: str
    match_mode: MatchMode | None = None


@dataclass(frozen=True)
class MatchRecord:
    """A verse that matched a search.

    For primary-text searches matching_tokens lists the tokens that satisfy
    the match predicate. For translation searches text is the translated
    text, translation_key is set and primary_text optionally carries the
    Arabic verse at the same coordinate.
    """

    chapter_number: int
    chapter_name: str
    verse_number: int
    text: str
    matching_tokens: tuple[Token, ...] = ()
    translation_key: str | None = None
    primary_text: str | None = None

    @property
    def location(self) -> Location:
        return Location(self.chapter_number, self.verse_number)


class TermMatcher:
    """Match predicate for one query term under a set of options.

    The same predicate decides whether a verse matches and which of its
    tokens are highlighted:

    - SUBSTRING: the haystack (prepared words that are not empty, joined
      by single spaces) contains the query, with its whitespace runs
      collapsed; highlighted tokens are those overlapping an occurrence.
    - EXACT: some token equals the query once both have leading and
      trailing punctuation stripped.

    A text matches exactly when at least one of its words is highlighted.
    """

    def __init__(self, query: str, match_mode: MatchMode, options: SearchOptions):
        self.match_mode = MatchMode(match_mode)
        self.normalize = options.normalize
        self.case_sensitive = options.case_sensitive

        prepared = self.prepare(query)
        if self.match_mode is MatchMode.EXACT:
            prepared = strip_punctuation(prepared)
        else:
            prepared = " ".join(tokenize(prepared))
        self.query = prepared

    def prepare(self, text: str) -> str:
        if self.normalize:
            return normalize(text)
        if not self.case_sensitive:
            return text.lower()
        return text

    def matches(self, text: str) -> bool:
        """Check whether a whole text satisfies the predicate."""
        return bool(self.matching_positions(tokenize(text)))

    def matching_positions(self, words: Sequence[str]) -> set[int]:
        """1-based positions of the words that satisfy the predicate."""
        if not self.query:
            return set()
        if self.match_mode is MatchMode.EXACT:
            return {
                number
                for number, word in enumerate(words, start=1)
                if self._word_equals(word)
            }
        return self._substring_positions(words)

    def _word_equals(self, word: str) -> bool:
        return strip_punctuation(self.prepare(word)) == self.query

    def _substring_positions(self, words: Sequence[str]) -> set[int]:
        # Character span of each kept word inside the haystack
        spans = []
        kept = []
        offset = 0
        for number, word in enumerate(words, start=1):
            prepared = self.prepare(word)
            if not prepared:
                continue
            spans.append((number, offset, offset + len(prepared)))
            kept.append(prepared)
            offset += len(prepared) + 1
        haystack = " ".join(kept)

        positions: set[int] = set()
        start = haystack.find(self.query)
        while start != -1:
            end = start + len(self.query)
            for number, lo, hi in spans:
                if lo < end and start < hi:
                    positions.add(number)
            start = haystack.find(self.query, start + 1)
        return positions


def build_matchers(
    terms: Iterable[SearchTerm], options: SearchOptions
) -> list[TermMatcher]:
    return [
        TermMatcher(term.text, term.match_mode or options.match_mode, options)
        for term in terms
    ]


@dataclass(frozen=True)
class ResultPage:
    """A window over a complete result list.

    total is always the full match count, so has_more tells the caller
    whether results beyond this window exist.
    """

    total: int
    offset: int
    limit: int
    results: tuple[MatchRecord, ...]

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.results) < self.total

    @classmethod
    def from_records(
        cls, records: Sequence[MatchRecord], limit: int, offset: int = 0
    ) -> ResultPage:
        offset = max(offset, 0)
        limit = max(limit, 0)
        return cls(
            total=len(records),
            offset=offset,
            limit=limit,
            results=tuple(records[offset : offset + limit]),
        )


class SearchEngine:
    """Searches the primary text, delegating translation targets.

    Args:
        document: Primary text to scan
        translations: Store used when options.target names a translation
    """

    def __init__(
        self,
        document: DocumentModel,
        translations: TranslationStore | None = None,
    ):
        self.document = document
        self.translations = translations

    def search(
        self, query: str, options: SearchOptions | None = None
    ) -> list[MatchRecord]:
        """Search for a single query term."""
        return self.search_many([SearchTerm(query)], options)

    def search_many(
        self, terms: Sequence[SearchTerm | str], options: SearchOptions | None = None
    ) -> list[MatchRecord]:
        """Search for several terms in one scan.

        Each (chapter, verse) is reported at most once. Its matching tokens
        are the union over every term that matched it, in token order.

        Raises:
            ValueError: If options.target names a translation that is not loaded
        """
        options = options or SearchOptions()
        terms = [SearchTerm(t) if isinstance(t, str) else t for t in terms]

        if options.target != PRIMARY:
            return self._search_translation(terms, options)

        matchers = build_matchers(terms, options)
        if not any(m.query for m in matchers):
            return []

        results = []
        for chapter in self.document.all_chapters():
            for verse in chapter.verses:
                record = self._match_verse(verse, chapter.name, matchers)
                if record is not None:
                    results.append(record)
        return results

    def _match_verse(
        self, verse: Verse, chapter_name: str, matchers: list[TermMatcher]
    ) -> MatchRecord | None:
        matched = [m for m in matchers if m.matches(verse.text)]
        if not matched:
            return None

        tokens = verse.tokens()
        words = [token.text for token in tokens]
        positions: set[int] = set()
        for matcher in matched:
            positions |= matcher.matching_positions(words)

        return MatchRecord(
            chapter_number=verse.chapter_number,
            chapter_name=chapter_name,
            verse_number=verse.number,
            text=verse.text,
            matching_tokens=tuple(t for t in tokens if t.number in positions),
        )

    def _search_translation(
        self, terms: list[SearchTerm], options: SearchOptions
    ) -> list[MatchRecord]:
        results = None
        if self.translations is not None:
            results = self.translations.search_terms(
                options.target, terms, options, document=self.document
            )
        if results is None:
            available = sorted(self.translations.list_keys()) if self.translations else []
            raise ValueError(
                f"Unknown translation: {options.target!r} (available: {available})"
            )
        return results
