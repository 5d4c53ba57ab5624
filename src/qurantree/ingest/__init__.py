"""Translation ingestion.

Public API:
    Catalog:
        TranslationCatalog.load(path) -> TranslationCatalog

    Tanzil conversion:
        parse_pipe_text(content, key) -> dict
        parse_xml(content, key) -> dict
        parse_translation_file(path, key) -> dict
        fetch_translation(key) -> dict
        save_translation(data, key, directory) -> Path
"""

from qurantree.ingest.catalog import (
    CatalogEntry,
    CatalogValidationError,
    TranslationCatalog,
)
from qurantree.ingest.tanzil import (
    FetchError,
    fetch_translation,
    parse_pipe_text,
    parse_translation_file,
    parse_xml,
    save_translation,
)

__all__ = [
    # Catalog
    "CatalogEntry",
    "CatalogValidationError",
    "TranslationCatalog",
    # Tanzil conversion
    "FetchError",
    "fetch_translation",
    "parse_pipe_text",
    "parse_translation_file",
    "parse_xml",
    "save_translation",
]
