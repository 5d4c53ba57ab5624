"""Catalog of downloadable Tanzil translations.

The catalog ships with the package (catalog.yaml next to this module).
QURANTREE_CATALOG_PATH overrides it with another YAML file of the same shape.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

ENV_CATALOG_PATH = "QURANTREE_CATALOG_PATH"
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "catalog.yaml"
DEFAULT_URL_TEMPLATE = "https://tanzil.net/trans/{key}"


class CatalogValidationError(Exception):
    """Raised when the catalog file is invalid."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        full_message = f"[{key}] {message}" if key else message
        super().__init__(full_message)


@dataclass
class CatalogEntry:
    """Metadata for one translation in the catalog.

    Required fields:
        key: Tanzil translation identifier (e.g., "en.hilali")
        name: Human-readable name
        translator: Translator credit
        language: Language code

    Optional fields:
        language_name: Language display name
        source: Provider credit (default: "Tanzil.net")
    """

    key: str
    name: str
    translator: str
    language: str
    language_name: str = ""
    source: str = "Tanzil.net"

    @classmethod
    def from_dict(cls, key: str, data: dict) -> CatalogEntry:
        for required in ("name", "translator", "language"):
            if not data.get(required):
                raise CatalogValidationError(f"Missing required field: {required}", key)
        return cls(
            key=key,
            name=str(data["name"]),
            translator=str(data["translator"]),
            language=str(data["language"]),
            language_name=str(data.get("language_name", "")),
            source=str(data.get("source", "Tanzil.net")),
        )

    def info(self) -> dict[str, str]:
        """Header fields written into a translation data file."""
        return {
            "name": self.name,
            "translator": self.translator,
            "language": self.language,
            "language_name": self.language_name,
            "source": self.source,
        }


@dataclass
class TranslationCatalog:
    """All catalog entries plus the download URL pattern."""

    entries: dict[str, CatalogEntry] = field(default_factory=dict)
    url_template: str = DEFAULT_URL_TEMPLATE
    path: Path | None = None

    def get(self, key: str) -> CatalogEntry | None:
        return self.entries.get(key)

    def keys(self) -> list[str]:
        return sorted(self.entries)

    def url_for(self, key: str) -> str:
        return self.url_template.format(key=key)

    @classmethod
    def load(cls, path: Path | str | None = None) -> TranslationCatalog:
        """Load catalog from YAML file.

        Args:
            path: Catalog path. If None, uses QURANTREE_CATALOG_PATH or the
                packaged catalog.yaml

        Raises:
            CatalogValidationError: If catalog is invalid
            FileNotFoundError: If catalog file not found
        """
        if path is None:
            path = os.environ.get(ENV_CATALOG_PATH) or DEFAULT_CATALOG_PATH
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Catalog not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)

        if not isinstance(raw_data, dict):
            raise CatalogValidationError("Catalog must be a YAML mapping")

        raw_entries = raw_data.get("translations") or {}
        if not isinstance(raw_entries, dict):
            raise CatalogValidationError("'translations' must be a mapping")

        entries = {}
        for key, value in raw_entries.items():
            if not isinstance(value, dict):
                raise CatalogValidationError("Entry must be a mapping", key)
            entries[key] = CatalogEntry.from_dict(key, value)

        return cls(
            entries=entries,
            url_template=raw_data.get("url_template") or DEFAULT_URL_TEMPLATE,
            path=path,
        )
