# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript detector registry.

Maps file names to the ordered chain of detectors that may decode them. The
chain is tried front to back; the first detector returning an episode wins.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from podtranscript.config import ExtractionConfig
from podtranscript.models import Episode
from podtranscript.transcripts.base import Detector
from podtranscript.transcripts.json_detector import JsonTranscriptDetector
from podtranscript.transcripts.plist_detector import PlistTranscriptDetector
from podtranscript.transcripts.text_detector import TextTranscriptDetector


logger = logging.getLogger(__name__)

ARCHIVE_EXTENSIONS = (".zip",)
JSON_EXTENSIONS = (".json",)
MARKUP_EXTENSIONS = (".plist", ".xml")
DATABASE_EXTENSIONS = (".sqlite", ".db")


def has_extension(filename: str, extensions: Sequence[str]) -> bool:
    return filename.lower().endswith(tuple(extensions))


def mentions_transcript(filename: str) -> bool:
    return "transcript" in filename.lower()


@dataclass(frozen=True)
class DetectorRegistry:
    """The three detector variants, sharing one set of extraction settings."""

    config: ExtractionConfig = field(default_factory=ExtractionConfig)

    @property
    def json(self) -> JsonTranscriptDetector:
        return JsonTranscriptDetector(config=self.config)

    @property
    def plist(self) -> PlistTranscriptDetector:
        return PlistTranscriptDetector(config=self.config)

    @property
    def text(self) -> TextTranscriptDetector:
        return TextTranscriptDetector(config=self.config)

    def generic_chain(self) -> list[Detector]:
        """Fallback order for files without a decisive extension."""

        return [self.json, self.plist, self.text]

    def chain_for(self, filename: str) -> list[Detector]:
        """Select the detectors to try for a (non-archive, non-database) file.

        Args:
            filename:
                File or archive entry name.

        Returns:
            `[json]` for `.json`, `[plist]` for `.plist`/`.xml`, otherwise the
            generic chain.
        """

        if has_extension(filename, JSON_EXTENSIONS):
            return [self.json]
        if has_extension(filename, MARKUP_EXTENSIONS):
            return [self.plist]
        return self.generic_chain()


def run_detectors(detectors: Sequence[Detector], payload: str, filename: str) -> Episode | None:
    """Try detectors in order and return the first episode found."""

    for detector in detectors:
        episode = detector.attempt(payload, filename)
        if episode is not None:
            logger.debug(
                "%s detector matched %s (%d segment(s))",
                detector.name,
                filename,
                len(episode.transcript),
            )
            return episode
    return None
