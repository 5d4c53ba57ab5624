"""Shared fixtures: a small two-chapter corpus and three translations.

Chapter 1 is Al-Fatihah. Chapter 2 has 255 verses; a few carry text
used by the search tests and the rest are "line N" fillers:

    2:1   الٓمٓ (with bismillah)
    2:2   test word
    2:3   testing the word
    2:4   a TEST, again.
    2:5   رَحْمَةٌ وَهُدًى
    2:6   ٱلْكِتَٰبُ لَا رَيْبَ فِيهِ
    2:255 Ayat al-Kursi

Translations "en" and "ms" cover both chapters; "ur" covers chapter 1 only.
"""

from __future__ import annotations

import json

import pytest

from qurantree.config import Settings
from qurantree.corpus.demo_data import DEMO_TRANSLATIONS, DEMO_VERSES
from qurantree.corpus.loader import build_document, build_translation
from qurantree.library import Library

BISMILLAH = "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"
AYAT_AL_KURSI = "ٱللَّهُ لَآ إِلَٰهَ إِلَّا هُوَ ٱلْحَىُّ ٱلْقَيُّومُ"

CHAPTER_2_TEXT = {
    1: "الٓمٓ",
    2: "test word",
    3: "testing the word",
    4: "a TEST, again.",
    5: "رَحْمَةٌ وَهُدًى",
    6: "ٱلْكِتَٰبُ لَا رَيْبَ فِيهِ",
    255: AYAT_AL_KURSI,
}

EN_AYAT_AL_KURSI = (
    "Allah! La ilaha illa Huwa (none has the right to be worshipped but He), "
    "the Ever Living, the One Who sustains and protects all that exists."
)
MS_AYAT_AL_KURSI = (
    "Allah, tiada Tuhan melainkan Dia, Yang Tetap hidup, "
    "Yang Kekal selama-lamanya mentadbirkan (sekalian makhlukNya)."
)


def _chapter_2_verses() -> list[dict]:
    verses = []
    for number in range(1, 256):
        verse = {"number": number, "text": CHAPTER_2_TEXT.get(number, f"line {number}")}
        if number == 1:
            verse["bismillah"] = BISMILLAH
        verses.append(verse)
    return verses


def _translated(name: str, name_translation: str, number: int, texts: list[str]) -> dict:
    return {
        "number": number,
        "name": name,
        "name_translation": name_translation,
        "verses": [{"number": n, "text": text} for n, text in enumerate(texts, start=1)],
    }


@pytest.fixture
def corpus_data():
    """Primary corpus JSON."""
    return {
        "name": "القرآن الكريم",
        "chapters": [
            {
                "number": 1,
                "name": "الفاتحة",
                "verses": [
                    {"number": n, "text": text}
                    for n, text in enumerate(DEMO_VERSES, start=1)
                ],
            },
            {"number": 2, "name": "البقرة", "verses": _chapter_2_verses()},
        ],
    }


@pytest.fixture
def translation_data():
    """Translation JSON keyed by translation key."""
    en_cow = [f"Verse {n} of The Cow." for n in range(1, 255)] + [EN_AYAT_AL_KURSI]
    ms_cow = [f"Ayat {n} surah Al-Baqarah." for n in range(1, 255)] + [MS_AYAT_AL_KURSI]
    return {
        "en": {
            "name": "English Test Translation",
            "translator": "Hilali & Khan",
            "language": "en",
            "language_name": "English",
            "source": "test",
            "chapters": [
                _translated(
                    "Al-Fatihah", "The Opening", 1, DEMO_TRANSLATIONS["en.hilali"]["verses"]
                ),
                _translated("Al-Baqarah", "The Cow", 2, en_cow),
            ],
        },
        "ms": {
            "name": "Malay Test Translation",
            "translator": "Basmeih",
            "language": "ms",
            "language_name": "Melayu",
            "source": "test",
            "chapters": [
                _translated(
                    "Al-Fatihah", "Pembukaan", 1, DEMO_TRANSLATIONS["ms.basmeih"]["verses"]
                ),
                _translated("Al-Baqarah", "Sapi Betina", 2, ms_cow),
            ],
        },
        "ur": {
            "name": "Partial Translation",
            "translator": "Partial",
            "language": "ur",
            "language_name": "Urdu",
            "chapters": [
                _translated(
                    "Al-Fatihah", "The Opening", 1, [f"ur {n}" for n in range(1, 8)]
                ),
            ],
        },
    }


@pytest.fixture
def document(corpus_data):
    """DocumentModel built from corpus_data."""
    return build_document(corpus_data)


@pytest.fixture
def translations(translation_data):
    """Translations built from translation_data, in key order."""
    return [build_translation(key, data) for key, data in sorted(translation_data.items())]


@pytest.fixture
def library(document, translations):
    """Library over the fixture corpus."""
    return Library(document, translations)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove qurantree environment overrides."""
    for name in (
        "QURANTREE_DATA_DIR",
        "QURANTREE_CORPUS",
        "QURANTREE_TRANSLATIONS_DIR",
        "QURANTREE_LOG_LEVEL",
        "QURANTREE_CATALOG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def data_dir(tmp_path, corpus_data, translation_data):
    """Data directory holding the fixture corpus and translations as JSON."""
    root = tmp_path / "data"
    translations_dir = root / "translations"
    translations_dir.mkdir(parents=True)

    (root / "quran-data.json").write_text(
        json.dumps(corpus_data, ensure_ascii=False), encoding="utf-8"
    )
    for key, data in translation_data.items():
        (translations_dir / f"{key}.json").write_text(
            json.dumps(data, ensure_ascii=False), encoding="utf-8"
        )
    return root


@pytest.fixture
def settings(data_dir, clean_env):
    """Settings pointing at data_dir."""
    return Settings(data_dir=data_dir)
