"""Tests for Settings and environment overrides."""

from pathlib import Path

from qurantree.config import DEFAULT_DATA_DIR, Settings


class TestSettings:
    """Tests for Settings path derivation."""

    def test_defaults(self, clean_env):
        """Paths default under ~/.qurantree/data."""
        settings = Settings()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.corpus_file == DEFAULT_DATA_DIR / "quran-data.json"
        assert settings.translations_dir == DEFAULT_DATA_DIR / "translations"
        assert settings.default_limit == 50
        assert settings.max_limit == 1000
        assert settings.log_level == "info"

    def test_paths_follow_data_dir(self, clean_env, tmp_path):
        """corpus_file and translations_dir derive from data_dir."""
        settings = Settings(data_dir=tmp_path)
        assert settings.corpus_file == tmp_path / "quran-data.json"
        assert settings.translations_dir == tmp_path / "translations"

    def test_explicit_paths(self, clean_env, tmp_path):
        """Explicit paths are kept."""
        settings = Settings(data_dir=tmp_path, corpus_file=tmp_path / "other.json")
        assert settings.corpus_file == tmp_path / "other.json"

    def test_string_paths(self, clean_env, tmp_path):
        """String paths become Path objects."""
        settings = Settings(data_dir=str(tmp_path))
        assert isinstance(settings.data_dir, Path)
        assert isinstance(settings.corpus_file, Path)


class TestEnvironmentOverrides:
    """Tests for QURANTREE_* environment variables."""

    def test_data_dir(self, clean_env, monkeypatch, tmp_path):
        """QURANTREE_DATA_DIR moves the whole data directory."""
        monkeypatch.setenv("QURANTREE_DATA_DIR", str(tmp_path))
        settings = Settings()
        assert settings.data_dir == tmp_path
        assert settings.corpus_file == tmp_path / "quran-data.json"

    def test_corpus_and_translations(self, clean_env, monkeypatch, tmp_path):
        """Individual file locations can be overridden."""
        monkeypatch.setenv("QURANTREE_CORPUS", str(tmp_path / "corpus.json"))
        monkeypatch.setenv("QURANTREE_TRANSLATIONS_DIR", str(tmp_path / "tr"))
        settings = Settings()
        assert settings.corpus_file == tmp_path / "corpus.json"
        assert settings.translations_dir == tmp_path / "tr"

    def test_explicit_data_dir_wins(self, clean_env, monkeypatch, tmp_path):
        """File overrides do not replace an explicitly given data_dir."""
        monkeypatch.setenv("QURANTREE_CORPUS", str(tmp_path / "corpus.json"))
        monkeypatch.setenv("QURANTREE_TRANSLATIONS_DIR", str(tmp_path / "tr"))
        settings = Settings(data_dir=tmp_path / "data")
        assert settings.corpus_file == tmp_path / "data" / "quran-data.json"
        assert settings.translations_dir == tmp_path / "data" / "translations"

    def test_log_level(self, clean_env, monkeypatch):
        """QURANTREE_LOG_LEVEL is lowercased."""
        monkeypatch.setenv("QURANTREE_LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "debug"
