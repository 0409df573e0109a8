# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript detector interface."""

from dataclasses import dataclass
from typing import Protocol

from podtranscript.models import Episode


class Detector(Protocol):
    """Interface for one input-shape detector.

    Implementations must not raise for malformed input: a payload that does not
    decode or does not have the expected shape is simply "no match" (None).
    """

    name: str

    def attempt(self, payload: str, filename: str) -> Episode | None:
        """Return an episode draft for the payload, or None if it does not match."""

        raise NotImplementedError


@dataclass(eq=False)
class ExtractionError(RuntimeError):
    """Raised when a file cannot be turned into episodes."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class UnsupportedFormatError(ExtractionError):
    """Raised for formats that are recognized but never parsed."""
