# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Canonical episode/transcript model.

All detectors normalize their input into these types. Segments and episodes
are immutable; the corpus holder replaces episodes rather than editing them.

Dictionary forms (`to_dict()`) use the camelCase keys of the exported episode
records so they can be fed back through the structured-data detector.
"""

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class InputFile:
    """
    One named file payload handed to the batch processor.

    Attributes:
        name:
            File name (used for extension-based dispatch and error messages).
        data:
            Raw file bytes.
        content_type:
            Declared MIME type, empty if unknown.
    """

    name: str
    data: bytes
    content_type: str = ""

    @property
    def size(self) -> int:
        return len(self.data)

    def read_text(self) -> str:
        """Decode the payload as UTF-8 without BOM, replacing undecodable bytes."""

        return self.data.decode("utf-8-sig", errors="replace")

    @classmethod
    def from_path(cls, path: Path) -> InputFile:
        """Read a file from disk, guessing its content type from the name."""

        content_type, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, data=path.read_bytes(), content_type=content_type or "")


@dataclass(frozen=True)
class TranscriptSegment:
    """
    One unit of transcript text.

    Attributes:
        id:
            Identifier derived from the ordinal position (`segment-<n>`); stable
            when the same input is extracted again.
        text:
            Trimmed, non-empty text.
        timestamp:
            Start time in seconds.
        speaker:
            Optional speaker attribution.
        confidence:
            Optional recognition confidence, passed through unvalidated.
    """

    id: str
    text: str
    timestamp: float
    speaker: str | None = None
    confidence: Any = None

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "timestamp": self.timestamp,
        }
        if self.speaker is not None:
            record["speaker"] = self.speaker
        if self.confidence is not None:
            record["confidence"] = self.confidence
        return record


@dataclass(frozen=True)
class Episode:
    """
    One normalized podcast episode.

    Attributes:
        id:
            Globally unique identifier generated at extraction time.
        title:
            Episode title.
        podcast_title:
            Title of the show the episode belongs to.
        duration:
            Duration in seconds (possibly estimated).
        publish_date:
            ISO-8601 publication date (extraction time if unknown).
        transcript:
            Segments in playback order. Never empty for extracted episodes.
        description:
            Optional episode description.
    """

    id: str
    title: str
    podcast_title: str
    duration: float
    publish_date: str
    transcript: tuple[TranscriptSegment, ...]
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "podcastTitle": self.podcast_title,
            "duration": self.duration,
            "publishDate": self.publish_date,
        }
        if self.description is not None:
            record["description"] = self.description
        record["transcript"] = [segment.to_dict() for segment in self.transcript]
        return record


@dataclass(frozen=True)
class SearchResult:
    """One matching segment, recomputed per query."""

    segment_id: str
    episode_id: str
    text: str
    timestamp: float
    highlighted_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "segmentId": self.segment_id,
            "episodeId": self.episode_id,
            "text": self.text,
            "timestamp": self.timestamp,
            "highlightedText": self.highlighted_text,
        }


@dataclass
class FileProcessingResult:
    """
    Episodes and error messages collected while processing files.

    Both lists keep discovery order. A fresh result is produced per batch; it
    is never merged with earlier corpus state.
    """

    episodes: list[Episode] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def extend(self, other: FileProcessingResult) -> None:
        """Append another result's episodes and errors, keeping order."""

        self.episodes.extend(other.episodes)
        self.errors.extend(other.errors)

    def summary(self) -> str:
        """
        Classify the outcome for user feedback.

        Returns:
            `found`, `errors`, `found_with_errors`, or `empty`. `empty` means the
            input held no detectable transcript data, which deserves a neutral
            message rather than an error.
        """

        if self.episodes and self.errors:
            return "found_with_errors"
        if self.episodes:
            return "found"
        if self.errors:
            return "errors"
        return "empty"
