"""Read-only document model over the primary text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from qurantree.corpus.models import Book, Chapter, Verse


@dataclass(frozen=True)
class ChapterSummary:
    """Chapter identity plus its verse count, used in statistics."""

    number: int
    name: str
    verse_count: int


@dataclass(frozen=True)
class CorpusStats:
    """Aggregate statistics computed once when the model is built."""

    chapter_count: int
    verse_count: int
    token_count: int
    longest_chapter: ChapterSummary | None
    shortest_chapter: ChapterSummary | None
    average_verses_per_chapter: int
    average_tokens_per_verse: int


def check_numbering(numbers: list[int], what: str) -> None:
    """Verify numbers run 1, 2, 3, ... without gaps or duplicates.

    Raises:
        ValueError: On the first number out of sequence
    """
    for expected, actual in enumerate(numbers, start=1):
        if actual != expected:
            raise ValueError(
                f"{what} numbers must be contiguous from 1: "
                f"expected {expected}, found {actual}"
            )


def compute_stats(chapters: tuple[Chapter, ...]) -> CorpusStats:
    """Traverse all chapters and aggregate counts."""
    chapter_count = len(chapters)
    verse_count = sum(chapter.verse_count for chapter in chapters)
    token_count = sum(chapter.token_count for chapter in chapters)

    longest = shortest = None
    if chapters:
        # First chapter wins ties, matching a left-to-right scan
        longest_ch = max(chapters, key=lambda ch: ch.verse_count)
        shortest_ch = min(chapters, key=lambda ch: ch.verse_count)
        longest = ChapterSummary(
            longest_ch.number, longest_ch.name, longest_ch.verse_count
        )
        shortest = ChapterSummary(
            shortest_ch.number, shortest_ch.name, shortest_ch.verse_count
        )

    return CorpusStats(
        chapter_count=chapter_count,
        verse_count=verse_count,
        token_count=token_count,
        longest_chapter=longest,
        shortest_chapter=shortest,
        average_verses_per_chapter=(
            round(verse_count / chapter_count) if chapter_count else 0
        ),
        average_tokens_per_verse=round(token_count / verse_count) if verse_count else 0,
    )


class DocumentModel:
    """Book -> Chapter -> Verse tree with indexed lookup.

    Built once from a Book and never mutated, so a single instance can be
    shared by every request and thread.
    """

    def __init__(self, book: Book):
        check_numbering([chapter.number for chapter in book.chapters], "Chapter")
        for chapter in book.chapters:
            check_numbering(
                [verse.number for verse in chapter.verses],
                f"Verse (chapter {chapter.number})",
            )
            for verse in chapter.verses:
                if verse.chapter_number != chapter.number:
                    raise ValueError(
                        f"Verse {verse.location} stored under chapter {chapter.number}"
                    )

        self._book = book
        self._stats = compute_stats(book.chapters)

    @property
    def name(self) -> str:
        return self._book.name

    @property
    def book(self) -> Book:
        return self._book

    @property
    def stats(self) -> CorpusStats:
        return self._stats

    @property
    def chapter_count(self) -> int:
        return self._stats.chapter_count

    @property
    def verse_count(self) -> int:
        return self._stats.verse_count

    @property
    def token_count(self) -> int:
        return self._stats.token_count

    def get_chapter(self, number: int) -> Chapter | None:
        """Look up a chapter; out-of-range numbers return None."""
        chapters = self._book.chapters
        if 1 <= number <= len(chapters):
            return chapters[number - 1]
        return None

    def get_verse(self, chapter_number: int, verse_number: int) -> Verse | None:
        """Look up a verse; any invalid coordinate returns None."""
        chapter = self.get_chapter(chapter_number)
        if chapter is None:
            return None
        return chapter.get_verse(verse_number)

    def all_chapters(self) -> tuple[Chapter, ...]:
        return self._book.chapters

    def iter_verses(self) -> Iterator[Verse]:
        """Yield every verse in chapter order, then verse order."""
        for chapter in self._book.chapters:
            yield from chapter.verses

    def __repr__(self) -> str:
        return (
            f"DocumentModel(name={self.name!r}, chapters={self.chapter_count}, "
            f"verses={self.verse_count})"
        )
