# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Per-file transcript extraction.

The extractor classifies one file by name, hands it to the container expander
or to the matching detector chain, and turns every failure into an error
message. It never raises for bad input.
"""

import logging

from podtranscript.config import ExtractionConfig
from podtranscript.models import FileProcessingResult, InputFile
from podtranscript.transcripts.base import ExtractionError, UnsupportedFormatError
from podtranscript.transcripts.container import ContainerExpander
from podtranscript.transcripts.registry import (
    ARCHIVE_EXTENSIONS,
    DATABASE_EXTENSIONS,
    DetectorRegistry,
    has_extension,
    mentions_transcript,
    run_detectors,
)


logger = logging.getLogger(__name__)


class TranscriptExtractor:
    """Extract episodes from a single input file."""

    def __init__(self, config: ExtractionConfig | None = None) -> None:
        self.config = config or ExtractionConfig()
        self.detectors = DetectorRegistry(config=self.config)
        self.container = ContainerExpander(detectors=self.detectors)

    def extract(self, file: InputFile) -> FileProcessingResult:
        """Process one file.

        Args:
            file:
                The file payload.

        Returns:
            A result holding the file's episodes and/or error messages. A file
            without recognizable transcript data yields an empty result.
        """

        logger.debug(
            "Processing file: %s, size: %d, type: %s",
            file.name,
            file.size,
            file.content_type or "-",
        )

        result = FileProcessingResult()

        # Directory placeholders from drag-and-drop have no type and no bytes.
        if not file.content_type and file.size == 0:
            result.errors.append(
                f'Cannot process directory "{file.name}". Please select individual files instead.'
            )
            return result

        try:
            result.extend(self._dispatch(file))
        except ExtractionError as exc:
            logger.warning("%s", exc)
            result.errors.append(str(exc))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Error processing %s: %s", file.name, exc)
            result.errors.append(f"Error processing {file.name}: {exc}")

        return result

    def _dispatch(self, file: InputFile) -> FileProcessingResult:
        if has_extension(file.name, ARCHIVE_EXTENSIONS):
            return self.container.expand(file)

        if has_extension(file.name, DATABASE_EXTENSIONS):
            raise UnsupportedFormatError(
                f"SQLite files are not supported ({file.name}). "
                "Please look for JSON or PLIST files in the podcast data folder."
            )

        result = FileProcessingResult()
        chain = self.detectors.chain_for(file.name)
        episode = run_detectors(chain, file.read_text(), file.name)

        if episode is not None:
            result.episodes.append(episode)
        elif mentions_transcript(file.name):
            logger.info("File looks like a transcript but could not be decoded: %s", file.name)
        else:
            logger.debug("No transcript data found in: %s", file.name)

        return result
