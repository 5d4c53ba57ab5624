"""Load the primary text and translations from JSON data files.

The loader is the only place data enters the process. It validates the
structure it reads and refuses to build a partial model:

1. Data file must exist and parse as JSON
2. Required fields must be present with the right types
3. Chapter and verse numbers must be contiguous from 1

Any violation raises a LoadFailure, which is fatal at startup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from qurantree.corpus.document import DocumentModel, check_numbering
from qurantree.corpus.models import Book, Chapter, Verse
from qurantree.translations.models import (
    Translation,
    TranslationChapter,
    TranslationVerse,
)

logger = logging.getLogger(__name__)

TRANSLATION_SUFFIX = ".json"


class LoadFailure(Exception):
    """Raised when corpus or translation data cannot be loaded."""

    pass


class MissingDataError(LoadFailure):
    """Raised when a data file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Data file not found: {path}")


class MalformedDataError(LoadFailure):
    """Raised when a data file is not valid JSON or breaks the data contract."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Malformed data in {source}: {reason}")


def read_json(path: Path) -> dict[str, Any]:
    """Read a JSON object from disk.

    Raises:
        MissingDataError: If the file does not exist
        MalformedDataError: If the file is not a JSON object
    """
    path = Path(path)
    if not path.is_file():
        raise MissingDataError(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedDataError(str(path), f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise MalformedDataError(str(path), "top-level value must be an object")
    return data


def _require(record: dict[str, Any], key: str, kind: type, where: str) -> Any:
    if not isinstance(record, dict):
        raise MalformedDataError(where, f"expected an object, got {type(record).__name__}")
    if key not in record:
        raise MalformedDataError(where, f"missing field '{key}'")
    value = record[key]
    # bool is an int subclass; numbers must be real ints
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise MalformedDataError(
            where, f"field '{key}' must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _check_numbering(numbers: list[int], what: str, where: str) -> None:
    try:
        check_numbering(numbers, what)
    except ValueError as e:
        raise MalformedDataError(where, str(e)) from e


def build_document(data: dict[str, Any], source: str = "<corpus>") -> DocumentModel:
    """Build a DocumentModel from the parsed primary corpus JSON.

    Expected shape::

        {"name": ..., "chapters": [
            {"number": 1, "name": ..., "verses": [
                {"number": 1, "text": ..., "bismillah": ...?}]}]}
    """
    name = _require(data, "name", str, source)
    raw_chapters = _require(data, "chapters", list, source)

    chapters = []
    for raw_chapter in raw_chapters:
        number = _require(raw_chapter, "number", int, source)
        where = f"{source} chapter {number}"
        chapter_name = _require(raw_chapter, "name", str, where)
        raw_verses = _require(raw_chapter, "verses", list, where)

        verses = []
        for raw_verse in raw_verses:
            verse_number = _require(raw_verse, "number", int, where)
            verse_where = f"{source} verse {number}:{verse_number}"
            text = _require(raw_verse, "text", str, verse_where)
            bismillah = raw_verse.get("bismillah")
            if bismillah is not None and not isinstance(bismillah, str):
                raise MalformedDataError(verse_where, "field 'bismillah' must be str")
            verses.append(
                Verse(
                    chapter_number=number,
                    number=verse_number,
                    text=text,
                    bismillah=bismillah or None,
                )
            )

        _check_numbering([v.number for v in verses], "Verse", where)
        chapters.append(Chapter(number=number, name=chapter_name, verses=tuple(verses)))

    _check_numbering([c.number for c in chapters], "Chapter", source)

    try:
        return DocumentModel(Book(name=name, chapters=tuple(chapters)))
    except ValueError as e:
        raise MalformedDataError(source, str(e)) from e


def load_document(path: Path) -> DocumentModel:
    """Load the primary corpus from a JSON file."""
    path = Path(path)
    document = build_document(read_json(path), source=str(path))
    logger.info(
        f"Loaded {document.name!r}: {document.chapter_count} chapters, "
        f"{document.verse_count} verses, {document.token_count} tokens"
    )
    return document


def build_translation(
    key: str, data: dict[str, Any], source: str = "<translation>"
) -> Translation:
    """Build a Translation from parsed translation JSON.

    Chapter and verse numbering follow the primary text's contract, but a
    translation may cover fewer chapters or verses than the primary text.
    """
    raw_chapters = _require(data, "chapters", list, source)

    chapters = []
    for raw_chapter in raw_chapters:
        number = _require(raw_chapter, "number", int, source)
        where = f"{source} chapter {number}"
        raw_verses = _require(raw_chapter, "verses", list, where)

        verses = []
        for raw_verse in raw_verses:
            verse_number = _require(raw_verse, "number", int, where)
            text = _require(raw_verse, "text", str, f"{source} verse {number}:{verse_number}")
            verses.append(TranslationVerse(number=verse_number, text=text))

        _check_numbering([v.number for v in verses], "Verse", where)
        chapters.append(
            TranslationChapter(
                number=number,
                name=raw_chapter.get("name") or f"Chapter {number}",
                name_arabic=raw_chapter.get("name_arabic") or "",
                name_translation=raw_chapter.get("name_translation") or "",
                verses=tuple(verses),
            )
        )

    _check_numbering([c.number for c in chapters], "Chapter", source)

    return Translation(
        key=key,
        name=data.get("name") or key,
        translator=data.get("translator") or "",
        language=data.get("language") or key.split(".")[0],
        language_name=data.get("language_name") or "",
        source=data.get("source") or "",
        chapters=tuple(chapters),
    )


def translation_key_for(path: Path) -> str:
    """Derive the translation key from a file name (en.hilali.json -> en.hilali)."""
    name = Path(path).name
    if name.endswith(TRANSLATION_SUFFIX):
        return name[: -len(TRANSLATION_SUFFIX)]
    return name


def load_translation(path: Path, key: str | None = None) -> Translation:
    """Load one translation file; the key defaults to the file stem."""
    path = Path(path)
    key = key or translation_key_for(path)
    translation = build_translation(key, read_json(path), source=str(path))
    logger.info(
        f"Loaded translation {key}: {translation.chapter_count} chapters, "
        f"{translation.verse_count} verses"
    )
    return translation


def load_translations(directory: Path) -> list[Translation]:
    """Load every *.json translation in a directory, ordered by key.

    A missing directory means no translations are installed; it is not an
    error. A malformed file inside it is.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning(f"Translations directory not found: {directory}")
        return []

    return [
        load_translation(path)
        for path in sorted(directory.glob(f"*{TRANSLATION_SUFFIX}"))
    ]
