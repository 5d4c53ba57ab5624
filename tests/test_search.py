"""Tests for the search engine.

Verifies:
- Substring and exact matching over the primary text
- Case folding and Arabic normalization
- Token highlighting for each match mode
- Batch search deduplication
- Result paging
"""

import pytest

from qurantree.corpus.demo_data import DEMO_VERSES
from qurantree.corpus.loader import build_document
from qurantree.corpus.models import Location
from qurantree.engine.search import (
    MatchMode,
    ResultPage,
    SearchEngine,
    SearchOptions,
    SearchTerm,
    TermMatcher,
)

EXACT = SearchOptions(match_mode=MatchMode.EXACT)
NORMALIZED = SearchOptions(normalize=True)
NORMALIZED_EXACT = SearchOptions(match_mode=MatchMode.EXACT, normalize=True)


@pytest.fixture
def engine(document):
    return SearchEngine(document)


def _locations(records):
    return [str(r.location) for r in records]


def _token_texts(record):
    return [t.text for t in record.matching_tokens]


def _single_verse_engine(text):
    document = build_document(
        {
            "name": "tiny",
            "chapters": [
                {"number": 1, "name": "one", "verses": [{"number": 1, "text": text}]}
            ],
        }
    )
    return SearchEngine(document)


class TestSubstringSearch:
    """Tests for the default substring mode."""

    def test_single_match_with_token(self):
        """One verse containing the query yields one match and one token."""
        document = build_document(
            {
                "name": "tiny",
                "chapters": [
                    {
                        "number": 1,
                        "name": "one",
                        "verses": [
                            {"number": 1, "text": "other words"},
                            {"number": 2, "text": "test word"},
                        ],
                    }
                ],
            }
        )
        results = SearchEngine(document).search("test")
        assert len(results) == 1
        assert results[0].location == Location(1, 2)
        assert _token_texts(results[0]) == ["test"]

    def test_diacritic_only_token_highlights_neighbours(self):
        """A token that normalizes away does not hide the words around it."""
        engine = _single_verse_engine("كتب َ رب")
        results = engine.search("كتب رب", NORMALIZED)
        assert len(results) == 1
        assert _token_texts(results[0]) == ["كتب", "رب"]

    @pytest.mark.parametrize("text", ["test  word", "test\tword"])
    def test_irregular_whitespace_highlights_tokens(self, text):
        """Whitespace runs in the verse or the query match as one space."""
        engine = _single_verse_engine(text)
        for query in ("test word", "test  word"):
            results = engine.search(query)
            assert len(results) == 1
            assert _token_texts(results[0]) == ["test", "word"]

    def test_every_match_has_tokens(self, engine):
        """Any verse reported by substring search carries matching tokens."""
        for query in ("t", "e w", "ine 1", "ه"):
            for options in (SearchOptions(), NORMALIZED):
                for record in engine.search(query, options):
                    assert record.matching_tokens, (query, record.location)

    def test_case_insensitive_by_default(self, engine):
        """Query case is ignored unless case_sensitive is set."""
        assert _locations(engine.search("test")) == ["2:2", "2:3", "2:4"]

    def test_case_sensitive(self, engine):
        """case_sensitive keeps case."""
        results = engine.search("TEST", SearchOptions(case_sensitive=True))
        assert _locations(results) == ["2:4"]

    def test_highlights_partial_tokens(self, engine):
        """Tokens containing the query are highlighted."""
        results = engine.search("test")
        assert _token_texts(results[1]) == ["testing"]
        assert [t.number for t in results[2].matching_tokens] == [2]

    def test_multi_word_query(self, engine):
        """A query spanning tokens highlights each spanned token."""
        results = engine.search("test word")
        assert _locations(results) == ["2:2"]
        assert _token_texts(results[0]) == ["test", "word"]

    def test_results_ordered(self, engine):
        """Results come in chapter then verse order."""
        results = engine.search("line")
        locations = [(r.chapter_number, r.verse_number) for r in results]
        assert locations == sorted(locations)
        assert len(results) == 248

    def test_match_record_fields(self, engine):
        """Records carry chapter name and verse text."""
        record = engine.search("test word")[0]
        assert record.chapter_name == "البقرة"
        assert record.text == "test word"
        assert record.translation_key is None

    def test_no_matches_is_empty(self, engine):
        """Zero matches is an empty list."""
        assert engine.search("nonexistent-word-xyz") == []

    def test_empty_query(self, engine):
        """An empty query matches nothing."""
        assert engine.search("") == []
        assert engine.search("   ", NORMALIZED) == []


class TestExactSearch:
    """Tests for exact token matching."""

    def test_standalone_token_only(self, engine):
        """Exact TEST matches "test" and "TEST," but not "testing"."""
        results = engine.search("TEST", EXACT)
        assert _locations(results) == ["2:2", "2:4"]
        assert "2:3" not in _locations(results)

    def test_punctuation_stripped_from_tokens(self, engine):
        """Edge punctuation on a token does not block a match."""
        results = engine.search("again", EXACT)
        assert _locations(results) == ["2:4"]
        assert _token_texts(results[0]) == ["again."]

    def test_punctuation_stripped_from_query(self, engine):
        """Edge punctuation on the query is ignored too."""
        assert _locations(engine.search("word,", EXACT)) == ["2:2", "2:3"]

    def test_raw_arabic_needs_diacritics(self, engine):
        """Without normalization the diacritized form is required."""
        assert engine.search("الرحيم", EXACT) == []
        diacritized = DEMO_VERSES[0].split()[3]
        assert _locations(engine.search(diacritized, EXACT)) == ["1:1", "1:3"]

    def test_normalized(self, engine):
        """Normalized exact search ignores diacritics and alif forms."""
        results = engine.search("الرحيم", NORMALIZED_EXACT)
        assert _locations(results) == ["1:1", "1:3"]
        assert [t.number for t in results[0].matching_tokens] == [4]
        assert [t.number for t in results[1].matching_tokens] == [2]


class TestNormalizedSearch:
    """Tests for normalize=True."""

    def test_improves_recall(self, engine):
        """Bare-letter queries find diacritized text."""
        assert engine.search("الله") == []
        results = engine.search("الله", NORMALIZED)
        assert _locations(results) == ["1:1", "2:255"]
        assert [t.number for t in results[1].matching_tokens] == [1]

    def test_folds_teh_marbuta(self, engine):
        """A query with ة finds text normalized to ه."""
        assert _locations(engine.search("رحمة", NORMALIZED)) == ["2:5"]

    def test_folds_alif_in_query(self, engine):
        """Alif variants in the query are folded as well."""
        assert _locations(engine.search("ٱلكتب", NORMALIZED)) == ["2:6"]

    @pytest.mark.parametrize("query", ["الرحيم", "الله", "test", "word", "الحمد"])
    def test_substring_superset_of_exact(self, engine, query):
        """Normalized substring results include the exact results."""
        exact = set(_locations(engine.search(query, NORMALIZED_EXACT)))
        substring = set(_locations(engine.search(query, NORMALIZED)))
        assert exact <= substring


class TestBatchSearch:
    """Tests for search_many()."""

    def test_dedup(self, engine):
        """Overlapping terms report each verse once."""
        results = engine.search_many(["test", "word"])
        locations = _locations(results)
        assert locations == ["2:2", "2:3", "2:4"]
        assert len(locations) == len(set(locations))

    def test_union_of_tokens(self, engine):
        """Matching tokens are the union over terms, in token order."""
        results = engine.search_many(["word", "test"])
        assert _token_texts(results[0]) == ["test", "word"]
        assert _token_texts(results[1]) == ["testing", "word"]

    def test_same_term_twice(self, engine):
        """Repeating a term does not duplicate results."""
        single = engine.search("test")
        double = engine.search_many(["test", "test"])
        assert double == single

    def test_per_term_mode(self, engine):
        """Each term may carry its own match mode."""
        results = engine.search_many(
            [SearchTerm("test", MatchMode.EXACT), SearchTerm("word")]
        )
        assert _locations(results) == ["2:2", "2:3", "2:4"]
        assert _token_texts(results[1]) == ["word"]

    def test_blank_terms_ignored(self, engine):
        """Blank terms do not match anything."""
        assert engine.search_many(["", "test word"]) == engine.search("test word")


class TestTranslationTarget:
    """Tests for searches delegated to a translation."""

    def test_delegates(self, library):
        """A translation target searches that translation."""
        options = SearchOptions(target="en")
        results = library.engine.search("merciful", options)
        assert _locations(results) == ["1:1", "1:3"]
        assert all(r.translation_key == "en" for r in results)

    def test_unknown_target(self, library):
        """An unloaded translation target raises ValueError."""
        with pytest.raises(ValueError, match="Unknown translation"):
            library.engine.search("x", SearchOptions(target="fr"))

    def test_no_store(self, document):
        """Without a translation store any translation target is unknown."""
        with pytest.raises(ValueError, match="Unknown translation"):
            SearchEngine(document).search("x", SearchOptions(target="en"))


class TestTermMatcher:
    """Tests for TermMatcher."""

    def test_prepare_modes(self):
        """prepare() applies the options' folding."""
        assert TermMatcher("x", MatchMode.SUBSTRING, SearchOptions()).prepare("AbC") == "abc"
        assert (
            TermMatcher("x", MatchMode.SUBSTRING, SearchOptions(case_sensitive=True)).prepare("AbC")
            == "AbC"
        )
        assert TermMatcher("x", MatchMode.SUBSTRING, NORMALIZED).prepare("ٱلْحَمْدُ") == "الحمد"

    def test_normalize_ignores_case_sensitive(self):
        """Normalized matching is always case-insensitive."""
        options = SearchOptions(normalize=True, case_sensitive=True)
        assert TermMatcher("TEST", MatchMode.SUBSTRING, options).matches("a test")


class TestResultPage:
    """Tests for ResultPage."""

    def test_total_before_slicing(self, engine):
        """total counts every match; results hold one page."""
        records = engine.search("line")
        page = ResultPage.from_records(records, limit=50)
        assert page.total == 248
        assert len(page.results) == 50
        assert page.has_more

    def test_last_page(self, engine):
        """The final page reports no more results."""
        records = engine.search("line")
        page = ResultPage.from_records(records, limit=50, offset=200)
        assert len(page.results) == 48
        assert not page.has_more

    def test_offset_past_end(self):
        """An offset beyond the results yields an empty page."""
        page = ResultPage.from_records([], limit=10, offset=5)
        assert page.total == 0
        assert page.results == ()
        assert not page.has_more
