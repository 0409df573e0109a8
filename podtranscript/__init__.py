"""
Podcast transcript import and search package.

This package turns loosely structured podcast transcript exports into a
canonical episode model and searches the resulting corpus:
- detecting and decoding JSON, property-list/XML, ZIP and free-text exports,
- normalizing inconsistent field names into transcript segments,
- ranking and highlighting full-text matches,
- rendering episodes as plain text or Markdown.
"""

from podtranscript.batch import process_files
from podtranscript.models import Episode, FileProcessingResult, InputFile, SearchResult, TranscriptSegment
from podtranscript.search import SearchEngine, SearchOptions

__all__ = [
    "Episode",
    "FileProcessingResult",
    "InputFile",
    "SearchEngine",
    "SearchOptions",
    "SearchResult",
    "TranscriptSegment",
    "process_files",
]
