# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ZIP container expansion.

Every file entry of an archive is decoded as text and routed by its name:

- `.json` entries go to the JSON detector only,
- `.plist`/`.xml` entries go to the property-list detector only,
- entries named like a transcript, or whose content mentions enough transcript
  keywords, are split as free text,
- everything else (images, binaries, ...) is skipped silently.

A corrupt archive produces a single error; a failing entry produces an error
naming the entry, and the remaining entries are still processed.
"""

import io
import logging
import zipfile
from dataclasses import dataclass, field

from podtranscript.models import Episode, FileProcessingResult, InputFile
from podtranscript.transcripts.registry import (
    JSON_EXTENSIONS,
    MARKUP_EXTENSIONS,
    DetectorRegistry,
    has_extension,
    mentions_transcript,
    run_detectors,
)
from podtranscript.transcripts.text_detector import episode_from_text, looks_like_transcript


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerExpander:
    """Unpack ZIP archives and dispatch their entries to detectors."""

    detectors: DetectorRegistry = field(default_factory=DetectorRegistry)

    def expand(self, file: InputFile) -> FileProcessingResult:
        """Process all entries of a ZIP archive.

        Args:
            file:
                The archive payload.

        Returns:
            Episodes and errors of all entries, in archive order.
        """

        result = FileProcessingResult()

        try:
            archive = zipfile.ZipFile(io.BytesIO(file.data))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, OSError) as exc:
            logger.warning("Error reading ZIP file %s: %s", file.name, exc)
            result.errors.append(f"Error reading ZIP file {file.name}: {exc}")
            return result

        with archive:
            entries = archive.infolist()
            logger.debug("ZIP file %s contains %d entries", file.name, len(entries))

            for info in entries:
                if info.is_dir():
                    continue

                try:
                    content = archive.read(info).decode("utf-8-sig", errors="replace")
                    episode = self._dispatch_entry(info.filename, content)
                except Exception as exc:  # noqa: BLE001
                    logger.warning("Error processing ZIP entry %s: %s", info.filename, exc)
                    result.errors.append(f"Error processing {info.filename}: {exc}")
                    continue

                if episode is not None:
                    result.episodes.append(episode)

        return result

    def _dispatch_entry(self, filename: str, content: str) -> Episode | None:
        logger.debug("Processing ZIP entry: %s", filename)
        config = self.detectors.config

        if has_extension(filename, JSON_EXTENSIONS):
            return run_detectors([self.detectors.json], content, filename)
        if has_extension(filename, MARKUP_EXTENSIONS):
            return run_detectors([self.detectors.plist], content, filename)
        if mentions_transcript(filename) or looks_like_transcript(content, config):
            return episode_from_text(content, filename, config)
        return None
