"""Shared test fixtures."""

from __future__ import annotations

import io
import json
import zipfile

import pytest

from podtranscript.models import Episode, InputFile, TranscriptSegment


def _zip_bytes(entries: dict[str, bytes | str]) -> bytes:
    """Build an in-memory ZIP archive from name -> content pairs."""

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def scenario_payload() -> str:
    return json.dumps(
        {
            "title": "Ep1",
            "transcript": [
                {"text": "Hello world", "timestamp": 0},
                {"text": "", "timestamp": 5},
            ],
        }
    )


@pytest.fixture
def json_file(scenario_payload: str) -> InputFile:
    return InputFile(name="episode.json", data=scenario_payload.encode("utf-8"), content_type="application/json")


@pytest.fixture
def plist_payload() -> str:
    return """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<array>
    <dict>
        <key>Text</key>
        <string>Welcome back to the show everyone.</string>
        <key>Timestamp</key>
        <real>1.5</real>
        <key>Speaker</key>
        <string>Alice</string>
    </dict>
    <dict>
        <key>text</key>
        <string>Thanks for having me today.</string>
        <key>time</key>
        <string>7</string>
    </dict>
</array>
</plist>
"""


@pytest.fixture
def fake_png() -> bytes:
    return b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4


@pytest.fixture
def corpus() -> list[Episode]:
    return [
        Episode(
            id="episode-a",
            title="Episode A",
            podcast_title="Show",
            duration=60,
            publish_date="2024-01-01T00:00:00+00:00",
            transcript=(
                TranscriptSegment(id="segment-0", text="The quick brown fox", timestamp=10),
                TranscriptSegment(id="segment-1", text="Nothing to see here", timestamp=20),
            ),
        ),
        Episode(
            id="episode-b",
            title="Episode B",
            podcast_title="Show",
            duration=60,
            publish_date="2024-01-02T00:00:00+00:00",
            transcript=(
                TranscriptSegment(id="segment-0", text="A quick fox jumps", timestamp=5, speaker="Bob"),
            ),
        ),
    ]


@pytest.fixture
def make_zip():
    return _zip_bytes
