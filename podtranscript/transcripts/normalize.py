# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Segment and episode normalization.

Export formats in the wild name the same field differently (`text` vs.
`content`, `timestamp` vs. `startTime`, ...). Instead of hard-coding one schema,
every logical field has an ordered list of alias keys, resolved by a single
"first present, non-empty value" lookup shared by all detectors.

Decoded documents are plain Python values (str, int/float, list, dict). Shapes
are checked with `isinstance` before any field is read.
"""

import math
import re
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Sequence

from podtranscript.config import ExtractionConfig
from podtranscript.models import Episode, TranscriptSegment


TEXT_ALIASES = ("text", "content", "transcript", "body", "message")
TIMESTAMP_ALIASES = ("timestamp", "time", "start", "startTime")
SPEAKER_ALIASES = ("speaker", "name", "author")
CONFIDENCE_ALIASES = ("confidence",)

# Keys under which an episode record keeps its segment list.
SEGMENT_LIST_ALIASES = ("transcript", "segments", "lines", "transcriptSegments", "items")

TITLE_ALIASES = ("title", "episodeTitle", "name")
PODCAST_TITLE_ALIASES = ("podcastTitle", "showTitle", "podcast")
DURATION_ALIASES = ("duration",)
PUBLISH_DATE_ALIASES = ("publishDate", "date", "pubDate")
DESCRIPTION_ALIASES = ("description", "summary")

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def first_present(record: Mapping[str, Any], aliases: Sequence[str]) -> Any | None:
    """Return the value of the first alias that is present and non-empty.

    `None`, empty strings and empty containers count as absent; `0` and `False`
    count as present. Keys are matched exactly first, then lower-cased (markup
    dictionaries store their keys lower-cased).
    """

    for alias in aliases:
        for key in (alias, alias.lower()):
            if key not in record:
                continue
            value = record[key]
            if value is None:
                continue
            if isinstance(value, str) and not value.strip():
                continue
            if isinstance(value, (list, dict)) and not value:
                continue
            return value
    return None


def parse_seconds(value: Any) -> float | None:
    """Parse a timestamp/duration value as non-negative, finite seconds."""

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        raw: int | float | str = value
    elif isinstance(value, str):
        raw = value.strip()
    else:
        return None

    try:
        seconds = float(raw)
    except (OverflowError, ValueError):
        return None

    if not math.isfinite(seconds) or seconds < 0:
        return None
    return seconds


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def normalize_segment(
    node: Any,
    index: int,
    config: ExtractionConfig | None = None,
) -> TranscriptSegment | None:
    """Turn one raw node into a transcript segment.

    Args:
        node:
            A string (used as the text) or a mapping with arbitrary keys.
        index:
            Ordinal position of the node; determines the segment id and the
            synthetic timestamp used when the node has no usable timing.
        config:
            Extraction heuristics (defaults if omitted).

    Returns:
        A segment, or None if the node carries no non-blank text.
    """

    config = config or ExtractionConfig()
    fallback_timestamp = index * config.seconds_per_segment

    speaker: str | None = None
    confidence: Any = None

    if isinstance(node, str):
        text = node
        timestamp = fallback_timestamp
    elif isinstance(node, Mapping):
        text = _as_text(first_present(node, TEXT_ALIASES)) or ""

        parsed = parse_seconds(first_present(node, TIMESTAMP_ALIASES))
        timestamp = fallback_timestamp if parsed is None else parsed

        raw_speaker = _as_text(first_present(node, SPEAKER_ALIASES))
        if raw_speaker is not None and raw_speaker.strip():
            speaker = raw_speaker.strip()

        confidence = first_present(node, CONFIDENCE_ALIASES)
    else:
        return None

    text = text.strip()
    if not text:
        return None

    return TranscriptSegment(
        id=f"segment-{index}",
        text=text,
        timestamp=timestamp,
        speaker=speaker,
        confidence=confidence,
    )


def normalize_segments(
    nodes: Iterable[Any],
    config: ExtractionConfig | None = None,
) -> list[TranscriptSegment]:
    """Normalize a node list, dropping nodes without text.

    Ordinal positions refer to the input list, so ids stay stable even when
    some nodes are dropped.
    """

    segments: list[TranscriptSegment] = []
    for index, node in enumerate(nodes):
        segment = normalize_segment(node, index, config)
        if segment is not None:
            segments.append(segment)
    return segments


def estimate_duration(segments: Sequence[TranscriptSegment], config: ExtractionConfig) -> float:
    """Last segment's timestamp plus the assumed length of the last segment."""

    if not segments:
        return 0
    return segments[-1].timestamp + config.trailing_segment_seconds


def new_episode_id() -> str:
    return f"episode-{uuid.uuid4().hex}"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def strip_extension(filename: str) -> str:
    """Drop the last extension from a file name (`a/b.c.json` -> `a/b.c`)."""

    return _EXTENSION_RE.sub("", filename)


def episode_from_record(
    record: Mapping[str, Any],
    filename: str,
    config: ExtractionConfig | None = None,
    segment_nodes: Any = None,
) -> Episode | None:
    """Build an episode from a record carrying metadata and a segment list.

    Args:
        record:
            Episode-level mapping (title, podcastTitle, duration, ...).
        filename:
            Source file name; used as the title if the record has none.
        config:
            Extraction heuristics (defaults if omitted).
        segment_nodes:
            Explicit segment list. If omitted, it is resolved from the record
            via `SEGMENT_LIST_ALIASES`.

    Returns:
        The episode, or None if no segment could be resolved.
    """

    config = config or ExtractionConfig()

    if segment_nodes is None:
        segment_nodes = first_present(record, SEGMENT_LIST_ALIASES)
    if not isinstance(segment_nodes, list):
        return None

    segments = normalize_segments(segment_nodes, config)
    if not segments:
        return None

    title = _as_text(first_present(record, TITLE_ALIASES))
    podcast_title = _as_text(first_present(record, PODCAST_TITLE_ALIASES))
    publish_date = _as_text(first_present(record, PUBLISH_DATE_ALIASES))
    description = _as_text(first_present(record, DESCRIPTION_ALIASES))

    duration = parse_seconds(first_present(record, DURATION_ALIASES))
    if duration is None:
        duration = estimate_duration(segments, config)

    return Episode(
        id=new_episode_id(),
        title=title.strip() if title and title.strip() else filename,
        podcast_title=podcast_title.strip() if podcast_title else config.unknown_podcast_title,
        duration=duration,
        publish_date=publish_date.strip() if publish_date else now_iso(),
        transcript=tuple(segments),
        description=description,
    )


def episode_from_segments(
    segments: Sequence[TranscriptSegment],
    filename: str,
    config: ExtractionConfig | None = None,
    duration: float | None = None,
) -> Episode | None:
    """Wrap already-normalized segments in an episode with placeholder metadata.

    The title is the file name without its extension. Returns None for an
    empty segment list so that empty drafts are never surfaced.
    """

    config = config or ExtractionConfig()
    if not segments:
        return None

    return Episode(
        id=new_episode_id(),
        title=strip_extension(filename),
        podcast_title=config.imported_podcast_title,
        duration=estimate_duration(segments, config) if duration is None else duration,
        publish_date=now_iso(),
        transcript=tuple(segments),
    )
