"""qurantree - read-only Quran text and translation service."""

__version__ = "1.0.0"
