"""The loaded corpus: primary text, translations and search engine.

A Library is built once per process and shared read-only by every
request. Tests build their own from in-memory fixtures.
"""

from __future__ import annotations

import logging
from typing import Sequence

from qurantree.config import Settings
from qurantree.corpus.document import DocumentModel
from qurantree.corpus.loader import load_document, load_translations
from qurantree.engine.search import MatchRecord, SearchEngine, SearchOptions, SearchTerm
from qurantree.translations.models import Translation, TranslationVerse
from qurantree.translations.store import Comparison, TranslationStore

logger = logging.getLogger(__name__)


class Library:
    """Bundle of the read-only corpus components."""

    def __init__(
        self,
        document: DocumentModel,
        translations: TranslationStore | Sequence[Translation] = (),
    ):
        if not isinstance(translations, TranslationStore):
            translations = TranslationStore(translations)
        self.document = document
        self.translations = translations
        self.engine = SearchEngine(document, translations)

    @classmethod
    def load(cls, settings: Settings) -> Library:
        """Load everything named by the settings.

        Raises:
            LoadFailure: If the corpus or any translation file is missing
                or malformed
        """
        logger.info(f"Loading corpus from {settings.corpus_file}")
        document = load_document(settings.corpus_file)
        translations = load_translations(settings.translations_dir)
        library = cls(document, translations)
        logger.info(
            f"Library ready: {document.verse_count} verses, "
            f"{len(library.translations)} translations "
            f"({', '.join(sorted(library.translations.list_keys())) or 'none'})"
        )
        return library

    def search(
        self,
        terms: str | Sequence[str | SearchTerm],
        options: SearchOptions | None = None,
    ) -> list[MatchRecord]:
        if isinstance(terms, str):
            return self.engine.search(terms, options)
        return self.engine.search_many(terms, options)

    def search_in_translation(
        self, key: str, query: str, options: SearchOptions | None = None
    ) -> list[MatchRecord] | None:
        return self.translations.search_in_translation(
            key, query, options, document=self.document
        )

    def get_translation_verse(
        self, key: str, chapter_number: int, verse_number: int
    ) -> TranslationVerse | None:
        return self.translations.get_verse(key, chapter_number, verse_number)

    def compare(self, chapter_number: int, verse_number: int) -> Comparison | None:
        return self.translations.compare(chapter_number, verse_number, self.document)
