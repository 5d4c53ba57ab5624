"""Configuration settings for qurantree."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_DIR = Path.home() / ".qurantree" / "data"

# Environment overrides
ENV_DATA_DIR = "QURANTREE_DATA_DIR"
ENV_CORPUS = "QURANTREE_CORPUS"
ENV_TRANSLATIONS_DIR = "QURANTREE_TRANSLATIONS_DIR"
ENV_LOG_LEVEL = "QURANTREE_LOG_LEVEL"


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value).expanduser() if value else None


@dataclass
class Settings:
    """Application settings.

    Paths left unset are derived from data_dir:
    data_dir/quran-data.json and data_dir/translations/.
    QURANTREE_CORPUS and QURANTREE_TRANSLATIONS_DIR only apply when
    data_dir is not given explicitly.
    """

    # Data
    data_dir: Path | None = None
    corpus_file: Path | None = None
    translations_dir: Path | None = None

    # Search
    default_limit: int = 50
    max_limit: int = 1000

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = field(
        default_factory=lambda: os.environ.get(ENV_LOG_LEVEL, "info").lower()
    )

    def __post_init__(self):
        from_env = self.data_dir is None
        if from_env:
            self.data_dir = _env_path(ENV_DATA_DIR) or DEFAULT_DATA_DIR
        self.data_dir = Path(self.data_dir).expanduser()

        if self.corpus_file is None:
            env_corpus = _env_path(ENV_CORPUS) if from_env else None
            self.corpus_file = env_corpus or self.data_dir / "quran-data.json"
        if self.translations_dir is None:
            env_translations = _env_path(ENV_TRANSLATIONS_DIR) if from_env else None
            self.translations_dir = env_translations or self.data_dir / "translations"

        self.corpus_file = Path(self.corpus_file)
        self.translations_dir = Path(self.translations_dir)


# Attribution for the Tanzil Uthmani text, reported by /api/info
SOURCE_INFO = {
    "source": "Tanzil.info Uthmani text",
    "sourceUrl": "http://tanzil.net/",
    "license": "Creative Commons Attribution-NoDerivs 3.0 Unported (CC BY-ND 3.0)",
    "licenseUrl": "https://creativecommons.org/licenses/by-nd/3.0/",
    "attribution": "Quran text courtesy of Tanzil.net",
}

FEATURES = ["search", "unicode", "arabic-normalization", "translations"]
