"""Demo corpus: Al-Fatihah with two translations.

Written to the data directory by `qurantree init` so the service can run
before the full Tanzil text is installed.
"""

from __future__ import annotations

import json
from pathlib import Path

DEMO_NAME = "القرآن الكريم"

DEMO_VERSES = [
    "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "ٱلْحَمْدُ لِلَّهِ رَبِّ ٱلْعَٰلَمِينَ",
    "ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "مَٰلِكِ يَوْمِ ٱلدِّينِ",
    "إِيَّاكَ نَعْبُدُ وَإِيَّاكَ نَسْتَعِينُ",
    "ٱهْدِنَا ٱلصِّرَٰطَ ٱلْمُسْتَقِيمَ",
    "صِرَٰطَ ٱلَّذِينَ أَنْعَمْتَ عَلَيْهِمْ غَيْرِ ٱلْمَغْضُوبِ عَلَيْهِمْ وَلَا ٱلضَّآلِّينَ",
]

DEMO_TRANSLATIONS = {
    "en.hilali": {
        "name": "The Noble Quran - English Translation",
        "translator": "Dr. Muhammad Taqi-ud-Din Al-Hilali and Dr. Muhammad Muhsin Khan",
        "language": "en",
        "language_name": "English",
        "source": "Tanzil.net",
        "verses": [
            "In the Name of Allah, the Most Beneficent, the Most Merciful.",
            "All the praises and thanks be to Allah, the Lord of the 'Alamin "
            "(mankind, jinns and all that exists).",
            "The Most Beneficent, the Most Merciful.",
            "The Only Owner (and the Only Ruling Judge) of the Day of Recompense "
            "(i.e. the Day of Resurrection)",
            "You (Alone) we worship, and You (Alone) we ask for help "
            "(for each and everything).",
            "Guide us to the Straight Way",
            "The Way of those on whom You have bestowed Your Grace, not (the way) "
            "of those who earned Your Anger (such as the Jews), nor of those who "
            "went astray (such as the Christians).",
        ],
    },
    "ms.basmeih": {
        "name": "Tafsir Pimpinan Ar-Rahman",
        "translator": "Abdullah Muhammad Basmeih",
        "language": "ms",
        "language_name": "Melayu",
        "source": "Tanzil.net",
        "verses": [
            "Dengan nama Allah, Yang Maha Pemurah, lagi Maha Mengasihani.",
            "Segala puji tertentu bagi Allah, Tuhan yang memelihara dan "
            "mentadbirkan sekalian alam.",
            "Yang Maha Pemurah, lagi Maha Mengasihani.",
            "Yang Menguasai pemerintahan hari Pembalasan (hari Akhirat).",
            "Engkaulah sahaja (Ya Allah) Yang Kami sembah, dan kepada Engkaulah "
            "sahaja kami memohon pertolongan.",
            "Tunjukilah kami jalan yang lurus.",
            "Iaitu jalan orang-orang yang Engkau telah kurniakan nikmat kepada "
            "mereka, bukan (jalan) orang-orang yang Engkau telah murkai, dan "
            "bukan pula (jalan) orang-orang yang sesat.",
        ],
    },
}


def demo_corpus() -> dict:
    """Primary corpus JSON for the demo."""
    return {
        "name": DEMO_NAME,
        "chapters": [
            {
                "number": 1,
                "name": "الفاتحة",
                "verses": [
                    {"number": number, "text": text}
                    for number, text in enumerate(DEMO_VERSES, start=1)
                ],
            }
        ],
    }


def demo_translation(key: str) -> dict:
    """Translation JSON for one demo translation key."""
    entry = DEMO_TRANSLATIONS[key]
    return {
        "name": entry["name"],
        "translator": entry["translator"],
        "language": entry["language"],
        "language_name": entry["language_name"],
        "source": entry["source"],
        "chapters": [
            {
                "number": 1,
                "name": "Al-Fatihah",
                "name_arabic": "الفاتحة",
                "name_translation": "The Opening",
                "verses": [
                    {"number": number, "text": text}
                    for number, text in enumerate(entry["verses"], start=1)
                ],
            }
        ],
    }


def write_demo_data(corpus_file: Path, translations_dir: Path) -> list[Path]:
    """Write the demo corpus and translations; returns the files written."""
    corpus_file = Path(corpus_file)
    translations_dir = Path(translations_dir)
    corpus_file.parent.mkdir(parents=True, exist_ok=True)
    translations_dir.mkdir(parents=True, exist_ok=True)

    written = [corpus_file]
    corpus_file.write_text(
        json.dumps(demo_corpus(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    for key in DEMO_TRANSLATIONS:
        path = translations_dir / f"{key}.json"
        path.write_text(
            json.dumps(demo_translation(key), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        written.append(path)
    return written
