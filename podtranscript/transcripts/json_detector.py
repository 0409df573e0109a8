# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Structured-data (JSON) transcript detector.

Recognized shapes, in priority order:

1. Apple Podcasts envelope: `{"MTEpisode": {...}}` or `{"episode": {...}}`.
2. Multi-episode envelope: `{"episodes": [...]}`; only the first episode is used.
3. Single episode: `{"title": ..., "transcript" | "segments" | "lines": [...]}`.
4. Bare segment list: `[{"text": ...}, ...]`.
5. Bare episode list: `[{"transcript": [...]}, ...]`; the first one is used.
6. Any top-level key holding a non-empty list of segment-like records.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from podtranscript.config import ExtractionConfig
from podtranscript.models import Episode
from podtranscript.transcripts.normalize import (
    episode_from_record,
    episode_from_segments,
    first_present,
    normalize_segments,
)


logger = logging.getLogger(__name__)

APPLE_ENVELOPE_KEYS = ("MTEpisode", "episode")
APPLE_SEGMENT_LIST_ALIASES = ("transcript", "transcriptSegments", "segments", "lines")
EPISODE_MARKER_KEYS = ("transcript", "segments", "lines")


def _looks_like_segment(value: Any) -> bool:
    return isinstance(value, dict) and first_present(value, ("text", "content")) is not None


def _looks_like_episode(value: Any) -> bool:
    return isinstance(value, dict) and first_present(value, ("transcript", "segments")) is not None


@dataclass(frozen=True)
class JsonTranscriptDetector:
    """Detect transcripts in JSON documents."""

    name: str = "json"
    config: ExtractionConfig = field(default_factory=ExtractionConfig)

    def attempt(self, payload: str, filename: str) -> Episode | None:
        try:
            data = json.loads(payload)
        except (ValueError, RecursionError):
            return None

        if isinstance(data, dict):
            logger.debug("Parsing JSON object from %s with keys %s", filename, list(data)[:20])
            return self._from_object(data, filename)

        if isinstance(data, list):
            return self._from_list(data, filename)

        return None

    def _from_object(self, data: dict[str, Any], filename: str) -> Episode | None:
        if first_present(data, APPLE_ENVELOPE_KEYS) is not None:
            return self._from_apple_envelope(data, filename)

        episodes = data.get("episodes")
        if isinstance(episodes, list) and episodes and isinstance(episodes[0], dict):
            episode = episode_from_record(episodes[0], filename, self.config)
            if episode is not None:
                return episode

        if first_present(data, EPISODE_MARKER_KEYS) is not None:
            return episode_from_record(data, filename, self.config)

        for key, value in data.items():
            if isinstance(value, list) and value and _looks_like_segment(value[0]):
                logger.debug("Found potential transcript data in property: %s", key)
                return self._from_segment_list(value, filename)

        return None

    def _from_list(self, data: list[Any], filename: str) -> Episode | None:
        if not data:
            return None

        first = data[0]
        if _looks_like_segment(first):
            return self._from_segment_list(data, filename)
        if _looks_like_episode(first):
            return episode_from_record(first, filename, self.config)
        return None

    def _from_apple_envelope(self, data: dict[str, Any], filename: str) -> Episode | None:
        envelope = first_present(data, APPLE_ENVELOPE_KEYS)
        if not isinstance(envelope, dict):
            envelope = data

        segment_nodes = first_present(envelope, APPLE_SEGMENT_LIST_ALIASES)
        if not isinstance(segment_nodes, list):
            logger.debug("No transcript data found in Apple Podcasts envelope: %s", filename)
            return None

        return episode_from_record(envelope, filename, self.config, segment_nodes=segment_nodes)

    def _from_segment_list(self, nodes: list[Any], filename: str) -> Episode | None:
        segments = normalize_segments(nodes, self.config)
        logger.debug("Extracted %d segment(s) from %s", len(segments), filename)
        return episode_from_segments(segments, filename, self.config)
