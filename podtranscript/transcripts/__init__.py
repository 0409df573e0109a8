"""Transcript extraction.

Export files come in several loosely specified shapes. Each detector tries to
decode one shape into the canonical episode model:

- `json`: structured JSON documents (Apple Podcasts envelopes, episode records,
  bare segment lists, ...)
- `plist`: property lists and other XML documents
- `text`: free text that mentions enough transcript keywords

The extractor picks the detector chain from the file name and collects errors
instead of raising.
"""

from podtranscript.transcripts.base import Detector, ExtractionError, UnsupportedFormatError
from podtranscript.transcripts.container import ContainerExpander
from podtranscript.transcripts.extractor import TranscriptExtractor
from podtranscript.transcripts.normalize import normalize_segment
from podtranscript.transcripts.registry import DetectorRegistry

__all__ = [
    "ContainerExpander",
    "Detector",
    "DetectorRegistry",
    "ExtractionError",
    "TranscriptExtractor",
    "UnsupportedFormatError",
    "normalize_segment",
]
