# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Batch processing.

Files are processed one after another. Every file contributes its episodes and
errors to a single result; a failing file never stops the batch.
"""

import logging
from typing import Iterable

from podtranscript.config import ExtractionConfig
from podtranscript.models import FileProcessingResult, InputFile
from podtranscript.transcripts.extractor import TranscriptExtractor


logger = logging.getLogger(__name__)


def process_files(
    files: Iterable[InputFile],
    *,
    config: ExtractionConfig | None = None,
    extractor: TranscriptExtractor | None = None,
) -> FileProcessingResult:
    """
    Extract episodes from a set of input files.

    Args:
        files:
            Input files in the order they should be processed.
        config:
            Extraction heuristics. Ignored if `extractor` is given.
        extractor:
            Optional preconfigured extractor.

    Returns:
        A fresh result with all episodes and errors in discovery order. Merging
        it into an existing corpus is up to the caller.
    """

    extractor = extractor or TranscriptExtractor(config)
    result = FileProcessingResult()

    count = 0
    for file in files:
        count += 1
        result.extend(extractor.extract(file))

    logger.info(
        "Processed %d file(s): found %d episode(s), %d error(s)",
        count,
        len(result.episodes),
        len(result.errors),
    )
    return result
