"""Read-only store of loaded translations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence

from qurantree.engine.search import (
    MatchRecord,
    SearchOptions,
    SearchTerm,
    build_matchers,
)
from qurantree.translations.models import Translation, TranslationVerse

if TYPE_CHECKING:
    from qurantree.corpus.document import DocumentModel


@dataclass(frozen=True)
class ComparedText:
    """One translation's text at a compared coordinate."""

    text: str
    translator: str
    language: str
    language_name: str


@dataclass(frozen=True)
class Comparison:
    """Primary verse text alongside every translation that has the verse."""

    chapter_number: int
    verse_number: int
    primary: str
    translations: dict[str, ComparedText] = field(default_factory=dict)


class TranslationStore:
    """Mapping of translation key to Translation, plus search and compare.

    Lookups fail soft: unknown keys and coordinates return None.
    """

    def __init__(self, translations: Iterable[Translation] = ()):
        self._translations: dict[str, Translation] = {}
        for translation in translations:
            if translation.key in self._translations:
                raise ValueError(f"Duplicate translation key: {translation.key}")
            self._translations[translation.key] = translation

    def get(self, key: str) -> Translation | None:
        return self._translations.get(key)

    def list_keys(self) -> frozenset[str]:
        return frozenset(self._translations)

    def __contains__(self, key: object) -> bool:
        return key in self._translations

    def __len__(self) -> int:
        return len(self._translations)

    def __iter__(self) -> Iterator[Translation]:
        """Iterate translations in key order."""
        for key in sorted(self._translations):
            yield self._translations[key]

    def get_verse(
        self, key: str, chapter_number: int, verse_number: int
    ) -> TranslationVerse | None:
        translation = self.get(key)
        if translation is None:
            return None
        return translation.get_verse(chapter_number, verse_number)

    def search_in_translation(
        self,
        key: str,
        query: str,
        options: SearchOptions | None = None,
        document: DocumentModel | None = None,
    ) -> list[MatchRecord] | None:
        """Search one translation's text.

        Args:
            key: Translation key
            query: Query text
            options: Match options; target is ignored here
            document: Primary text, used to attach the Arabic verse when
                options.include_primary is set

        Returns:
            Matches in chapter/verse order (possibly empty), or None if the
            translation is not loaded
        """
        return self.search_terms(key, [SearchTerm(query)], options, document=document)

    def search_terms(
        self,
        key: str,
        terms: Sequence[SearchTerm],
        options: SearchOptions | None = None,
        document: DocumentModel | None = None,
    ) -> list[MatchRecord] | None:
        """Batch form of search_in_translation; one record per verse."""
        translation = self.get(key)
        if translation is None:
            return None

        options = options or SearchOptions()
        matchers = build_matchers(terms, options)
        if not any(m.query for m in matchers):
            return []

        attach_primary = options.include_primary and document is not None
        results = []
        for chapter in translation.chapters:
            for verse in chapter.verses:
                if not any(m.matches(verse.text) for m in matchers):
                    continue

                primary_text = None
                if attach_primary:
                    primary = document.get_verse(chapter.number, verse.number)
                    primary_text = primary.text if primary else None

                results.append(
                    MatchRecord(
                        chapter_number=chapter.number,
                        chapter_name=chapter.name,
                        verse_number=verse.number,
                        text=verse.text,
                        translation_key=key,
                        primary_text=primary_text,
                    )
                )
        return results

    def compare(
        self, chapter_number: int, verse_number: int, document: DocumentModel
    ) -> Comparison | None:
        """Fan one coordinate out across the primary text and all translations.

        Returns None if the primary verse does not exist. Translations that
        lack the verse are left out of the result.
        """
        primary = document.get_verse(chapter_number, verse_number)
        if primary is None:
            return None

        compared = {}
        for translation in self:
            verse = translation.get_verse(chapter_number, verse_number)
            if verse is None:
                continue
            compared[translation.key] = ComparedText(
                text=verse.text,
                translator=translation.translator,
                language=translation.language,
                language_name=translation.language_name,
            )

        return Comparison(
            chapter_number=chapter_number,
            verse_number=verse_number,
            primary=primary.text,
            translations=compared,
        )
