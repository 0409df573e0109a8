# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `podtranscript.yaml`, validating its keys, and
turning it into typed settings objects. Every section is optional: the
defaults reproduce the heuristics of the transcript importer, so library code
can run without any configuration file at all.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


CONFIG_ENV_VAR = "PODTRANSCRIPT_CONFIG"
DEFAULT_CONFIG_NAME = "podtranscript.yaml"


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Heuristics used while turning export files into episodes.

    Attributes:
        seconds_per_segment:
            Synthetic spacing between segments that carry no timing data.
        trailing_segment_seconds:
            Assumed length of the last segment when estimating an episode's
            duration.
        imported_podcast_title:
            Podcast title for episodes built from bare segment lists, markup
            strings or free text.
        unknown_podcast_title:
            Podcast title for episode records that do not name their show.
        min_text_payload_length:
            Free-text payloads must be strictly longer than this.
        min_keyword_hits:
            Number of distinct transcript keywords a free-text payload needs.
        min_line_length:
            Free-text lines with this many characters or fewer are dropped.
        min_markup_text_length:
            Markup fallback strings must be strictly longer than this.
        min_markup_words:
            Markup fallback strings need at least this many words.
    """

    seconds_per_segment: float = 5
    trailing_segment_seconds: float = 30
    imported_podcast_title: str = "Imported Podcast"
    unknown_podcast_title: str = "Unknown Podcast"
    min_text_payload_length: int = 100
    min_keyword_hits: int = 2
    min_line_length: int = 10
    min_markup_text_length: int = 20
    min_markup_words: int = 4


@dataclass(frozen=True)
class SearchConfig:
    """
    Search engine settings.

    Attributes:
        highlight_open:
            Markup inserted before every highlighted match.
        highlight_close:
            Markup inserted after every highlighted match.
    """

    highlight_open: str = "<mark>"
    highlight_close: str = "</mark>"


@dataclass(frozen=True)
class PodtranscriptConfig:
    """
    Parsed configuration.

    Attributes:
        config_path:
            Path to the YAML file used, or None for built-in defaults.
        extraction:
            Settings for the transcript extractor.
        search:
            Settings for the search engine.
    """

    config_path: Path | None = None
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    search: SearchConfig = field(default_factory=SearchConfig)


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing). The environment
        variable `PODTRANSCRIPT_CONFIG` is consulted before falling back to
        `./podtranscript.yaml`.
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_config(path: Path) -> PodtranscriptConfig:
    """
    Load and validate a `podtranscript.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated PodtranscriptConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or
            contains invalid values.
    """

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    # An empty file means "all defaults".
    if raw is None:
        raw = {}

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    unknown = sorted(set(raw) - {"extraction", "search"})
    if unknown:
        raise ConfigError(f"Config contains unknown section(s): {', '.join(map(str, unknown))}")

    return PodtranscriptConfig(
        config_path=path.resolve(),
        extraction=_parse_extraction(raw.get("extraction")),
        search=_parse_search(raw.get("search")),
    )


def load_config_or_default(path: Path) -> PodtranscriptConfig:
    """Load the config file if it exists, otherwise return built-in defaults."""

    if not path.exists():
        return PodtranscriptConfig()
    return load_config(path)


def _parse_extraction(value: Any) -> ExtractionConfig:
    """
    Parse and validate the optional `extraction` section.

    Args:
        value:
            Raw YAML value for the `extraction` key.

    Returns:
        An ExtractionConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return ExtractionConfig()

    if not isinstance(value, dict):
        raise ConfigError("'extraction' must be a mapping if provided")

    defaults = ExtractionConfig()

    seconds_per_segment = _number(value, "seconds_per_segment", defaults.seconds_per_segment)
    trailing = _number(value, "trailing_segment_seconds", defaults.trailing_segment_seconds)
    if seconds_per_segment <= 0:
        raise ConfigError("extraction.seconds_per_segment must be > 0")
    if trailing < 0:
        raise ConfigError("extraction.trailing_segment_seconds must be >= 0")

    imported_title = _title(value, "imported_podcast_title", defaults.imported_podcast_title)
    unknown_title = _title(value, "unknown_podcast_title", defaults.unknown_podcast_title)

    ints: dict[str, int] = {}
    for key in (
        "min_text_payload_length",
        "min_keyword_hits",
        "min_line_length",
        "min_markup_text_length",
        "min_markup_words",
    ):
        raw_int = value.get(key, getattr(defaults, key))
        if not isinstance(raw_int, int) or isinstance(raw_int, bool):
            raise ConfigError(f"extraction.{key} must be an integer")
        if raw_int < 0:
            raise ConfigError(f"extraction.{key} must be >= 0")
        ints[key] = raw_int

    if ints["min_keyword_hits"] < 1:
        raise ConfigError("extraction.min_keyword_hits must be >= 1")

    return ExtractionConfig(
        seconds_per_segment=seconds_per_segment,
        trailing_segment_seconds=trailing,
        imported_podcast_title=imported_title,
        unknown_podcast_title=unknown_title,
        **ints,
    )


def _parse_search(value: Any) -> SearchConfig:
    """
    Parse and validate the optional `search` section.

    Args:
        value:
            Raw YAML value for the `search` key.

    Returns:
        A SearchConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return SearchConfig()

    if not isinstance(value, dict):
        raise ConfigError("'search' must be a mapping if provided")

    highlight_open = value.get("highlight_open", SearchConfig.highlight_open)
    highlight_close = value.get("highlight_close", SearchConfig.highlight_close)

    if not isinstance(highlight_open, str) or not highlight_open:
        raise ConfigError("search.highlight_open must be a non-empty string")
    if not isinstance(highlight_close, str) or not highlight_close:
        raise ConfigError("search.highlight_close must be a non-empty string")

    return SearchConfig(highlight_open=highlight_open, highlight_close=highlight_close)


def _number(section: dict[str, Any], key: str, default: float) -> float:
    value = section.get(key, default)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ConfigError(f"extraction.{key} must be a number")
    return value


def _title(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"extraction.{key} must be a non-empty string")
    return value.strip()
