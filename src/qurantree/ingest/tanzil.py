"""Convert Tanzil translation downloads into translation data files.

Two input formats are accepted:

1. Pipe-delimited text: one "chapter|verse|text" line per verse;
   lines starting with "#" are comments
2. XML: Tanzil <sura index=".."><aya index=".." text=".."/></sura>
   elements, or <verse chapter=".." verse="..">text</verse> elements

Output is the translation JSON shape read by qurantree.corpus.loader.
"""

from __future__ import annotations

import json
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Iterable

import httpx

from qurantree.corpus.loader import MalformedDataError, build_translation
from qurantree.ingest.catalog import CatalogEntry, TranslationCatalog
from qurantree.ingest.chapter_names import chapter_names

logger = logging.getLogger(__name__)

# Header lines inside Tanzil XML comments
HEADER_PATTERN = re.compile(r"^\s*(Name|Translator|Language):\s*(.+?)\s*$", re.MULTILINE)

FETCH_TIMEOUT = 60.0


class FetchError(Exception):
    """Raised when a translation cannot be downloaded."""

    pass


def parse_header(content: str) -> dict[str, str]:
    """Read Name/Translator/Language header lines from Tanzil XML."""
    header = {}
    for label, value in HEADER_PATTERN.findall(content):
        header.setdefault(label.lower(), value)
    return header


def assemble_translation(
    key: str, rows: Iterable[tuple[int, int, str]], info: dict[str, str]
) -> dict[str, Any]:
    """Group (chapter, verse, text) rows into translation JSON.

    Chapters and verses are sorted by number; a repeated coordinate keeps
    the last text seen.
    """
    chapters: dict[int, dict[int, str]] = {}
    for chapter_number, verse_number, text in rows:
        chapters.setdefault(chapter_number, {})[verse_number] = text.strip()

    data: dict[str, Any] = {
        "name": info.get("name") or key,
        "translator": info.get("translator", ""),
        "language": info.get("language") or key.split(".")[0],
        "language_name": info.get("language_name", ""),
        "source": info.get("source", "Tanzil.net"),
        "chapters": [],
    }
    for number in sorted(chapters):
        verses = chapters[number]
        data["chapters"].append(
            {
                "number": number,
                **chapter_names(number),
                "verses": [
                    {"number": verse, "text": verses[verse]} for verse in sorted(verses)
                ],
            }
        )
    return data


def parse_pipe_text(
    content: str, key: str, info: dict[str, str] | None = None
) -> dict[str, Any]:
    """Parse the pipe-delimited Tanzil text format.

    Raises:
        MalformedDataError: If a non-comment line is not chapter|verse|text
    """
    rows = []
    for line_number, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split("|", 2)
        if len(parts) < 3 or not parts[0].isdigit() or not parts[1].isdigit():
            raise MalformedDataError(key, f"line {line_number} is not chapter|verse|text")
        rows.append((int(parts[0]), int(parts[1]), parts[2]))

    return assemble_translation(key, rows, info or {})


def _int_attr(element: ET.Element, name: str, key: str) -> int:
    value = element.get(name, "")
    if not value.isdigit():
        raise MalformedDataError(key, f"<{element.tag}> has invalid {name}={value!r}")
    return int(value)


def parse_xml(content: str, key: str, info: dict[str, str] | None = None) -> dict[str, Any]:
    """Parse a Tanzil XML translation.

    Header metadata in comments (Name:, Translator:, Language:) fills in
    whatever info does not provide.

    Raises:
        MalformedDataError: If the XML is invalid
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise MalformedDataError(key, f"invalid XML ({e})") from e

    rows = []
    for sura in root.iter("sura"):
        chapter_number = _int_attr(sura, "index", key)
        for aya in sura.iter("aya"):
            rows.append((chapter_number, _int_attr(aya, "index", key), aya.get("text", "")))
    for verse in root.iter("verse"):
        rows.append(
            (_int_attr(verse, "chapter", key), _int_attr(verse, "verse", key), verse.text or "")
        )

    header = parse_header(content)
    merged = {
        "name": header.get("name", ""),
        "translator": header.get("translator", ""),
        "language": key.split(".")[0],
        "language_name": header.get("language", "").capitalize(),
    }
    merged.update({k: v for k, v in (info or {}).items() if v})
    return assemble_translation(key, rows, merged)


def parse_translation_file(
    path: Path, key: str, fmt: str | None = None, info: dict[str, str] | None = None
) -> dict[str, Any]:
    """Parse a downloaded translation file; format defaults from the suffix."""
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    fmt = fmt or ("xml" if path.suffix.lower() == ".xml" else "txt")
    if fmt == "xml":
        return parse_xml(content, key, info)
    return parse_pipe_text(content, key, info)


def save_translation(data: dict[str, Any], key: str, directory: Path) -> Path:
    """Validate translation JSON and write it as directory/<key>.json.

    Raises:
        MalformedDataError: If the data breaks the translation data contract
    """
    # Same checks the loader applies at startup
    build_translation(key, data, source=key)

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    output_path = directory / f"{key}.json"
    output_path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    logger.info(f"Saved {key} translation to {output_path}")
    return output_path


def fetch_translation(
    key: str,
    catalog: TranslationCatalog | None = None,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Download a translation in pipe-delimited format and parse it.

    Args:
        key: Catalog key (e.g., "en.hilali")
        catalog: Translation catalog (default: packaged catalog)
        client: HTTP client to use (default: a new httpx.Client)

    Raises:
        FetchError: If the key is not in the catalog or the download fails
    """
    catalog = catalog or TranslationCatalog.load()
    entry: CatalogEntry | None = catalog.get(key)
    if entry is None:
        raise FetchError(
            f"Unknown translation: {key} (available: {', '.join(catalog.keys())})"
        )

    url = catalog.url_for(key)
    logger.info(f"Downloading {key} from {url}")

    owns_client = client is None
    client = client or httpx.Client(timeout=FETCH_TIMEOUT, follow_redirects=True)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise FetchError(f"Download failed for {key}: {e}") from e
    finally:
        if owns_client:
            client.close()

    logger.info(f"Downloaded {len(response.content)} bytes for {key}")
    return parse_pipe_text(response.text, key, entry.info())
