"""Parallel translations of the primary text.

Public API:
    Translation, TranslationChapter, TranslationVerse
    TranslationStore -> get, list_keys, get_verse, search_in_translation, compare
"""

from qurantree.translations.models import (
    Translation,
    TranslationChapter,
    TranslationVerse,
)
from qurantree.translations.store import ComparedText, Comparison, TranslationStore

__all__ = [
    "Translation",
    "TranslationChapter",
    "TranslationVerse",
    "ComparedText",
    "Comparison",
    "TranslationStore",
]
