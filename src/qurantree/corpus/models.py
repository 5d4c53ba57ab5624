"""Immutable corpus entities: Book, Chapter, Verse, Token and Location."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from qurantree.text import tokenize


@dataclass(frozen=True)
class Location:
    """Coordinate in the corpus.

    Formatted as "chapter:verse" or "chapter:verse:token".
    """

    chapter: int
    verse: int
    token: int | None = None

    def __str__(self) -> str:
        if self.token is not None:
            return f"{self.chapter}:{self.verse}:{self.token}"
        return f"{self.chapter}:{self.verse}"

    @property
    def verse_location(self) -> Location:
        """The (chapter, verse) part of this location."""
        return Location(self.chapter, self.verse)


LOCATION_PATTERN = re.compile(r"^(\d+)\s*:\s*(\d+)(?:\s*:\s*(\d+))?$")


def parse_location(value: str) -> Location:
    """
    Parse a location string.

    Supported formats:
    - "2:255"
    - "2:255:3"

    Args:
        value: Location string to parse

    Returns:
        Location object

    Raises:
        ValueError: If the location cannot be parsed
    """
    match = LOCATION_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Cannot parse location: {value!r} (expected chapter:verse)")

    chapter_str, verse_str, token_str = match.groups()
    return Location(
        chapter=int(chapter_str),
        verse=int(verse_str),
        token=int(token_str) if token_str else None,
    )


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited word of a verse, derived on demand."""

    text: str
    number: int
    chapter_number: int
    verse_number: int

    @property
    def location(self) -> Location:
        return Location(self.chapter_number, self.verse_number, self.number)


@dataclass(frozen=True)
class Verse:
    """A verse of the primary text."""

    chapter_number: int
    number: int
    text: str
    bismillah: str | None = None

    @property
    def location(self) -> Location:
        return Location(self.chapter_number, self.number)

    @property
    def token_count(self) -> int:
        return len(tokenize(self.text))

    def tokens(self) -> list[Token]:
        """Split the verse into tokens, numbered from 1."""
        return [
            Token(
                text=word,
                number=index,
                chapter_number=self.chapter_number,
                verse_number=self.number,
            )
            for index, word in enumerate(tokenize(self.text), start=1)
        ]


@dataclass(frozen=True)
class Chapter:
    """A chapter (surah) holding its verses in order."""

    number: int
    name: str
    verses: tuple[Verse, ...] = field(default_factory=tuple)

    @property
    def verse_count(self) -> int:
        return len(self.verses)

    @property
    def token_count(self) -> int:
        return sum(verse.token_count for verse in self.verses)

    @property
    def bismillah(self) -> str | None:
        """Leading formula carried by the first verse, if any."""
        if not self.verses:
            return None
        return self.verses[0].bismillah

    def get_verse(self, number: int) -> Verse | None:
        # Verse numbers are contiguous from 1, so position is number - 1
        if 1 <= number <= len(self.verses):
            return self.verses[number - 1]
        return None


@dataclass(frozen=True)
class Book:
    """The whole primary text."""

    name: str
    chapters: tuple[Chapter, ...] = field(default_factory=tuple)
