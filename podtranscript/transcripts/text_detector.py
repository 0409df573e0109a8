# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Free-text transcript detector.

Rules:
- A payload qualifies if it is longer than `min_text_payload_length` characters
  and mentions at least `min_keyword_hits` distinct transcript keywords.
- Every non-blank line longer than `min_line_length` characters becomes one
  segment. Timing is synthetic: the n-th non-blank line starts at
  `n * seconds_per_segment`.
- Content with NUL characters is binary (images, databases) and never split.
"""

import logging
from dataclasses import dataclass, field

from podtranscript.config import ExtractionConfig
from podtranscript.models import Episode, TranscriptSegment
from podtranscript.transcripts.normalize import new_episode_id, now_iso, strip_extension


logger = logging.getLogger(__name__)

TRANSCRIPT_KEYWORDS = (
    "transcript",
    "speaker",
    "timestamp",
    "time",
    "text",
    "dialogue",
    "conversation",
)


def keyword_hits(content: str) -> int:
    """Count how many distinct transcript keywords occur in the content."""

    lowered = content.lower()
    return sum(1 for keyword in TRANSCRIPT_KEYWORDS if keyword in lowered)


def is_binary(content: str) -> bool:
    return "\x00" in content


def looks_like_transcript(content: str, config: ExtractionConfig | None = None) -> bool:
    config = config or ExtractionConfig()
    if is_binary(content):
        return False
    return keyword_hits(content) >= config.min_keyword_hits


def episode_from_text(
    content: str,
    filename: str,
    config: ExtractionConfig | None = None,
) -> Episode | None:
    """Split free text into one segment per line.

    Returns None for binary content or if no line is long enough to count as
    a segment.
    """

    config = config or ExtractionConfig()
    if is_binary(content):
        return None

    lines = [line for line in content.split("\n") if line.strip()]

    segments: list[TranscriptSegment] = []
    for index, line in enumerate(lines):
        text = line.strip()
        if len(text) <= config.min_line_length:
            continue
        segments.append(
            TranscriptSegment(
                id=f"segment-{index}",
                text=text,
                timestamp=index * config.seconds_per_segment,
            )
        )

    if not segments:
        return None

    return Episode(
        id=new_episode_id(),
        title=strip_extension(filename),
        podcast_title=config.imported_podcast_title,
        duration=len(segments) * config.seconds_per_segment,
        publish_date=now_iso(),
        transcript=tuple(segments),
    )


@dataclass(frozen=True)
class TextTranscriptDetector:
    """Last-resort detector for unstructured text."""

    name: str = "text"
    config: ExtractionConfig = field(default_factory=ExtractionConfig)

    def attempt(self, payload: str, filename: str) -> Episode | None:
        if len(payload) <= self.config.min_text_payload_length:
            return None
        if not looks_like_transcript(payload, self.config):
            return None

        logger.debug("Treating %s as free-text transcript", filename)
        return episode_from_text(payload, filename, self.config)
