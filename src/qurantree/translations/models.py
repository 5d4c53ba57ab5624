"""Translation entities, parallel to the primary Chapter/Verse tree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TranslationVerse:
    """Translated text at a verse coordinate."""

    number: int
    text: str


@dataclass(frozen=True)
class TranslationChapter:
    """Translated chapter with its display names."""

    number: int
    name: str
    name_arabic: str = ""
    name_translation: str = ""
    verses: tuple[TranslationVerse, ...] = field(default_factory=tuple)

    @property
    def verse_count(self) -> int:
        return len(self.verses)

    def get_verse(self, number: int) -> TranslationVerse | None:
        if 1 <= number <= len(self.verses):
            return self.verses[number - 1]
        return None


@dataclass(frozen=True)
class Translation:
    """One loaded translation, addressed by the primary text's coordinates."""

    key: str
    name: str
    translator: str
    language: str
    language_name: str
    source: str = ""
    chapters: tuple[TranslationChapter, ...] = field(default_factory=tuple)

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    @property
    def verse_count(self) -> int:
        return sum(chapter.verse_count for chapter in self.chapters)

    def get_chapter(self, number: int) -> TranslationChapter | None:
        if 1 <= number <= len(self.chapters):
            return self.chapters[number - 1]
        return None

    def get_verse(self, chapter_number: int, verse_number: int) -> TranslationVerse | None:
        chapter = self.get_chapter(chapter_number)
        if chapter is None:
            return None
        return chapter.get_verse(verse_number)
