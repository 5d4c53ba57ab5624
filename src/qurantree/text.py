"""Arabic text normalization and tokenization.

Provides:
- Search normalization (letter-variant folding, diacritic stripping)
- Whitespace tokenization used for verse tokens
- The punctuation rule used for exact-word matching
"""

from __future__ import annotations

import re
import unicodedata

# Alif with madda, hamza above, hamza below and alif wasla
ALIF_VARIANTS = re.compile("[آأإٱ]")
ALIF = "ا"

TEH_MARBUTA = "ة"
HEH = "ه"

# Tashkeel (fathatan..sukun, maddah, hamza marks), superscript alif, alif wasla
DIACRITICS = re.compile("[\u064B-\u065F\u0670\u0671]")

WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Normalize Arabic text to its search comparison form.

    Normalization steps:
    1. Fold alif variants (آ أ إ ٱ) to plain alif
    2. Fold teh marbuta (ة) to heh
    3. Remove combining diacritical marks
    4. Collapse whitespace runs and trim
    5. Lowercase (for Latin script in translations and queries)

    Characters outside these sets pass through unchanged, so the
    function is total and idempotent.

    Args:
        text: Raw text

    Returns:
        Normalized text

    Examples:
        >>> normalize("ٱلْحَمْدُ لِلَّهِ")
        'الحمد لله'
        >>> normalize("  رَحْمَة  ")
        'رحمه'
    """
    text = ALIF_VARIANTS.sub(ALIF, text)
    text = text.replace(TEH_MARBUTA, HEH)
    text = DIACRITICS.sub("", text)
    text = WHITESPACE.sub(" ", text).strip()
    return text.lower()


def remove_diacritics(text: str) -> str:
    """Remove diacritical marks only, keeping letter forms and spacing."""
    return DIACRITICS.sub("", text)


def tokenize(text: str) -> list[str]:
    """Split text on whitespace, dropping empty segments."""
    return text.split()


def strip_punctuation(token: str) -> str:
    """Remove leading and trailing punctuation from a token.

    Applies to any Unicode punctuation category (P*), so it covers
    ASCII marks in translations as well as Arabic comma and question mark.
    Used for exact-word matching in both primary and translation search.
    """
    start = 0
    end = len(token)
    while start < end and unicodedata.category(token[start]).startswith("P"):
        start += 1
    while end > start and unicodedata.category(token[end - 1]).startswith("P"):
        end -= 1
    return token[start:end]


def texts_match(left: str, right: str) -> bool:
    """Check if two strings are equal after normalization."""
    return normalize(left) == normalize(right)
