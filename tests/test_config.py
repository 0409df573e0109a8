"""Tests for configuration loading."""

from pathlib import Path

import pytest

from podtranscript.config import (
    ConfigError,
    ExtractionConfig,
    PodtranscriptConfig,
    SearchConfig,
    find_config_path,
    load_config,
    load_config_or_default,
)


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "podtranscript.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_full_file(self, tmp_path):
        path = write(
            tmp_path,
            "extraction:\n"
            "  seconds_per_segment: 2.5\n"
            "  trailing_segment_seconds: 10\n"
            "  imported_podcast_title: My Imports\n"
            "  min_keyword_hits: 3\n"
            "search:\n"
            "  highlight_open: '<em>'\n"
            "  highlight_close: '</em>'\n",
        )
        cfg = load_config(path)
        assert cfg.config_path == path.resolve()
        assert cfg.extraction.seconds_per_segment == 2.5
        assert cfg.extraction.trailing_segment_seconds == 10
        assert cfg.extraction.imported_podcast_title == "My Imports"
        assert cfg.extraction.min_keyword_hits == 3
        assert cfg.extraction.min_line_length == 10
        assert cfg.search == SearchConfig(highlight_open="<em>", highlight_close="</em>")

    def test_empty_file_means_defaults(self, tmp_path):
        cfg = load_config(write(tmp_path, ""))
        assert cfg.extraction == ExtractionConfig()
        assert cfg.search == SearchConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")
        assert load_config_or_default(tmp_path / "nope.yaml") == PodtranscriptConfig()

    @pytest.mark.parametrize(
        "content",
        [
            "- a list\n",
            "unknown: 1\n",
            "extraction: 5\n",
            "extraction:\n  seconds_per_segment: 0\n",
            "extraction:\n  seconds_per_segment: fast\n",
            "extraction:\n  min_line_length: 2.5\n",
            "extraction:\n  min_keyword_hits: 0\n",
            "extraction:\n  unknown_podcast_title: ''\n",
            "search:\n  highlight_open: ''\n",
            "extraction: [unclosed\n",
        ],
    )
    def test_invalid(self, tmp_path, content):
        with pytest.raises(ConfigError):
            load_config(write(tmp_path, content))


class TestFindConfigPath:
    def test_explicit_path_wins(self, monkeypatch):
        monkeypatch.setenv("PODTRANSCRIPT_CONFIG", "/env/config.yaml")
        assert find_config_path("given.yaml") == Path("given.yaml")

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PODTRANSCRIPT_CONFIG", "/env/config.yaml")
        assert find_config_path(None) == Path("/env/config.yaml")

    def test_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("PODTRANSCRIPT_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        assert find_config_path(None).resolve() == (tmp_path / "podtranscript.yaml").resolve()
