"""Primary text model.

Public API:
    Entities:
        Book, Chapter, Verse, Token, Location, parse_location(value)

    Document:
        DocumentModel(book) -> lookup, traversal, stats

Loading lives in qurantree.corpus.loader (load_document, load_translation,
load_translations) and is imported from there directly.
"""

from qurantree.corpus.models import (
    Book,
    Chapter,
    Location,
    Token,
    Verse,
    parse_location,
)
from qurantree.corpus.document import ChapterSummary, CorpusStats, DocumentModel

__all__ = [
    # Entities
    "Book",
    "Chapter",
    "Location",
    "Token",
    "Verse",
    "parse_location",
    # Document
    "ChapterSummary",
    "CorpusStats",
    "DocumentModel",
]
