"""Tests for loading corpus and translation JSON files."""

import json

import pytest

from qurantree.corpus.loader import (
    LoadFailure,
    MalformedDataError,
    MissingDataError,
    build_document,
    build_translation,
    load_document,
    load_translation,
    load_translations,
    translation_key_for,
)


def _write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestLoadDocument:
    """Tests for load_document()."""

    def test_loads_file(self, data_dir):
        """A valid corpus file loads with all chapters."""
        document = load_document(data_dir / "quran-data.json")
        assert document.name == "القرآن الكريم"
        assert document.chapter_count == 2
        assert document.verse_count == 262

    def test_missing_file(self, tmp_path):
        """A missing file raises MissingDataError."""
        with pytest.raises(MissingDataError) as exc_info:
            load_document(tmp_path / "absent.json")
        assert isinstance(exc_info.value, LoadFailure)

    def test_invalid_json(self, tmp_path):
        """Unparseable JSON raises MalformedDataError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MalformedDataError, match="invalid JSON"):
            load_document(path)

    def test_top_level_not_object(self, tmp_path):
        """A JSON array is not a corpus."""
        path = _write(tmp_path / "list.json", [])
        with pytest.raises(MalformedDataError, match="must be an object"):
            load_document(path)


class TestBuildDocument:
    """Tests for build_document() validation."""

    def test_missing_field(self, corpus_data):
        """A verse without text is rejected."""
        del corpus_data["chapters"][0]["verses"][2]["text"]
        with pytest.raises(MalformedDataError, match="missing field 'text'"):
            build_document(corpus_data)

    def test_wrong_type(self, corpus_data):
        """Numbers must be integers, not strings."""
        corpus_data["chapters"][1]["number"] = "2"
        with pytest.raises(MalformedDataError, match="must be int"):
            build_document(corpus_data)

    def test_bool_is_not_a_number(self, corpus_data):
        """true is rejected as a verse number."""
        corpus_data["chapters"][0]["verses"][0]["number"] = True
        with pytest.raises(MalformedDataError, match="must be int"):
            build_document(corpus_data)

    def test_verse_gap(self, corpus_data):
        """Verse numbers must be contiguous."""
        del corpus_data["chapters"][0]["verses"][3]
        with pytest.raises(MalformedDataError, match="contiguous"):
            build_document(corpus_data)

    def test_chapter_gap(self, corpus_data):
        """Chapter numbers must start at 1."""
        del corpus_data["chapters"][0]
        with pytest.raises(MalformedDataError, match="contiguous"):
            build_document(corpus_data)

    def test_bismillah_preserved(self, corpus_data):
        """The bismillah marker is kept on its verse."""
        document = build_document(corpus_data)
        assert document.get_verse(2, 1).bismillah.startswith("بِسْمِ")
        assert document.get_verse(2, 2).bismillah is None

    def test_text_not_altered(self, corpus_data):
        """Raw Uthmani text is stored as given."""
        document = build_document(corpus_data)
        assert document.get_verse(1, 2).text == corpus_data["chapters"][0]["verses"][1]["text"]


class TestTranslations:
    """Tests for translation loading."""

    def test_key_from_file_name(self, tmp_path):
        """The key is the file name without .json."""
        assert translation_key_for(tmp_path / "en.hilali.json") == "en.hilali"

    def test_load_translation(self, data_dir):
        """A translation file loads with its metadata."""
        translation = load_translation(data_dir / "translations" / "en.json")
        assert translation.key == "en"
        assert translation.translator == "Hilali & Khan"
        assert translation.get_verse(1, 1).text.startswith("In the Name of Allah")

    def test_partial_translation(self, data_dir):
        """A translation may cover fewer chapters than the primary text."""
        translation = load_translation(data_dir / "translations" / "ur.json")
        assert translation.chapter_count == 1
        assert translation.get_verse(2, 255) is None

    def test_defaults(self):
        """Missing display fields fall back to key-derived values."""
        translation = build_translation(
            "fr.test", {"chapters": [{"number": 1, "verses": [{"number": 1, "text": "x"}]}]}
        )
        assert translation.name == "fr.test"
        assert translation.language == "fr"
        assert translation.get_chapter(1).name == "Chapter 1"
        assert translation.get_chapter(1).name_arabic == ""

    def test_load_directory_sorted(self, data_dir):
        """Every *.json file loads, ordered by key."""
        keys = [t.key for t in load_translations(data_dir / "translations")]
        assert keys == ["en", "ms", "ur"]

    def test_missing_directory(self, tmp_path):
        """A missing directory means no translations."""
        assert load_translations(tmp_path / "absent") == []

    def test_malformed_translation_fails(self, data_dir):
        """One bad file fails the whole load."""
        _write(data_dir / "translations" / "xx.json", {"chapters": [{"number": 2, "verses": []}]})
        with pytest.raises(MalformedDataError, match="xx.json"):
            load_translations(data_dir / "translations")
