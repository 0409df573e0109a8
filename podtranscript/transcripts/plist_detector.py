# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Property-list / XML transcript detector.

Primary strategy: every `<dict>` whose `<key>`/value children carry a text-like
key (`text`, `content`, `transcript`) becomes one segment. Keys are compared
lower-cased.

Fallback (only when the primary strategy finds nothing): every `<string>` leaf
that reads like spoken text becomes one segment, spaced by the synthetic
segment interval.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any

from podtranscript.config import ExtractionConfig
from podtranscript.models import Episode, TranscriptSegment
from podtranscript.transcripts.normalize import episode_from_segments, normalize_segment


logger = logging.getLogger(__name__)

SEGMENT_TEXT_KEYS = ("text", "content", "transcript")
SCALAR_TAGS = {"string", "real", "integer"}

# Leaf strings that look like metadata rather than speech.
_METADATA_PATTERNS = [
    re.compile(r"^https?://"),
    re.compile(r"^\d+$"),
    re.compile(r"^[A-Z_]+$"),
    re.compile(r"^\w+\.\w+$"),
]


def _local_name(tag: Any) -> str:
    # Namespaced tags look like "{uri}dict"; comments/PIs have non-string tags.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def looks_like_spoken_text(text: str, min_words: int = 4) -> bool:
    """Return True if a string reads like transcript speech rather than metadata."""

    if any(pattern.search(text) for pattern in _METADATA_PATTERNS):
        return False
    return len(text.split()) >= min_words


def dict_entries(element: ET.Element) -> dict[str, str]:
    """Build a lower-cased key -> value map from a plist `<dict>` element.

    Only scalar values (`<string>`, `<real>`, `<integer>`) directly following
    their `<key>` are kept; nested containers are skipped.
    """

    entries: dict[str, str] = {}
    pending_key: str | None = None

    for child in element:
        tag = _local_name(child.tag)
        if tag == "key":
            pending_key = (child.text or "").strip().lower()
            continue

        if pending_key and tag in SCALAR_TAGS and child.text is not None:
            entries[pending_key] = child.text
        pending_key = None

    return entries


@dataclass(frozen=True)
class PlistTranscriptDetector:
    """Detect transcripts in property lists and other XML documents."""

    name: str = "plist"
    config: ExtractionConfig = field(default_factory=ExtractionConfig)

    def attempt(self, payload: str, filename: str) -> Episode | None:
        try:
            root = ET.fromstring(payload)
        except (ET.ParseError, ValueError) as exc:
            logger.debug("XML parsing error in %s: %s", filename, exc)
            return None

        segments = self._segments_from_dicts(root)
        if not segments:
            segments = self._segments_from_strings(root)

        logger.debug("Extracted %d segment(s) from %s", len(segments), filename)
        return episode_from_segments(segments, filename, self.config)

    def _segments_from_dicts(self, root: ET.Element) -> list[TranscriptSegment]:
        dicts = [el for el in root.iter() if _local_name(el.tag) == "dict"]

        segments: list[TranscriptSegment] = []
        for dict_index, element in enumerate(dicts):
            entries = dict_entries(element)
            if not any(entries.get(key, "").strip() for key in SEGMENT_TEXT_KEYS):
                continue

            segment = normalize_segment(entries, dict_index, self.config)
            if segment is not None:
                segments.append(segment)
        return segments

    def _segments_from_strings(self, root: ET.Element) -> list[TranscriptSegment]:
        strings = [el for el in root.iter() if _local_name(el.tag) == "string"]

        segments: list[TranscriptSegment] = []
        for index, element in enumerate(strings):
            text = (element.text or "").strip()
            if len(text) <= self.config.min_markup_text_length:
                continue
            if not looks_like_spoken_text(text, self.config.min_markup_words):
                continue

            segment = normalize_segment(text, index, self.config)
            if segment is not None:
                segments.append(segment)
        return segments
