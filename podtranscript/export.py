# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Episode export.

Renders one episode as plain text or Markdown. Both renderings are pure
functions of the episode and the timestamp flag; writing files or copying to a
clipboard is up to the caller.
"""

from datetime import datetime

from podtranscript.models import Episode


def format_time(seconds: float) -> str:
    """Format seconds as `m:ss`, or `h:mm:ss` from one hour on."""

    total = int(max(seconds, 0))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_duration(seconds: float) -> str:
    """Format a duration as `1h 5m` or `42m`."""

    total = int(max(seconds, 0))
    hours, rest = divmod(total, 3600)
    minutes = rest // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_date(value: str) -> str:
    """Return the date part of an ISO-8601 timestamp, or the value unchanged."""

    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value


def export_as_text(episode: Episode, include_timestamps: bool = True) -> str:
    lines = [
        episode.title,
        f"Podcast: {episode.podcast_title}",
        f"Published: {format_date(episode.publish_date)}",
        f"Duration: {format_duration(episode.duration)}",
        "",
    ]

    if episode.description:
        lines += ["Description:", episode.description, ""]

    lines += ["TRANSCRIPT", "=" * 50, ""]

    for segment in episode.transcript:
        prefix = ""
        if include_timestamps:
            prefix += f"[{format_time(segment.timestamp)}] "
        if segment.speaker:
            prefix += f"{segment.speaker}: "
        lines += [prefix + segment.text, ""]

    return "\n".join(lines)


def export_as_markdown(episode: Episode, include_timestamps: bool = True) -> str:
    lines = [
        f"# {episode.title}",
        "",
        f"**Podcast:** {episode.podcast_title}  ",
        f"**Published:** {format_date(episode.publish_date)}  ",
        f"**Duration:** {format_duration(episode.duration)}  ",
        "",
    ]

    if episode.description:
        lines += ["## Description", "", episode.description, ""]

    lines += ["## Transcript", ""]

    for segment in episode.transcript:
        prefix = ""
        if include_timestamps:
            prefix += f"**[{format_time(segment.timestamp)}]** "
        if segment.speaker:
            prefix += f"**{segment.speaker}:** "
        lines += [prefix + segment.text, ""]

    return "\n".join(lines)


def export_filename(episode: Episode, fmt: str = "text") -> str:
    """Build a file-system friendly export name (`My_Episode.txt` / `.md`)."""

    safe = "".join(ch if ch.isalnum() or ch in {"-", "_"} else "_" for ch in episode.title)
    safe = safe.strip("_") or "episode"
    suffix = ".md" if fmt == "markdown" else ".txt"
    return safe + suffix
