"""Tests for episode export."""

from podtranscript.export import (
    export_as_markdown,
    export_as_text,
    export_filename,
    format_duration,
    format_time,
)
from podtranscript.models import Episode, TranscriptSegment


def sample_episode(description: str | None = "A chat about tests") -> Episode:
    return Episode(
        id="episode-1",
        title="Testing Things",
        podcast_title="Dev Talk",
        duration=3900,
        publish_date="2024-05-17T08:30:00Z",
        transcript=(
            TranscriptSegment("segment-0", "Hello and welcome", 0, speaker="Ann"),
            TranscriptSegment("segment-1", "Let us begin", 3725),
        ),
        description=description,
    )


class TestFormatting:
    def test_format_time(self):
        assert format_time(0) == "0:00"
        assert format_time(125) == "2:05"
        assert format_time(3725.9) == "1:02:05"

    def test_format_duration(self):
        assert format_duration(42 * 60) == "42m"
        assert format_duration(3900) == "1h 5m"


class TestTextExport:
    def test_with_timestamps(self):
        text = export_as_text(sample_episode())
        assert text.startswith("Testing Things\nPodcast: Dev Talk\nPublished: 2024-05-17\nDuration: 1h 5m\n")
        assert "Description:\nA chat about tests\n" in text
        assert "TRANSCRIPT\n" + "=" * 50 in text
        assert "[0:00] Ann: Hello and welcome\n" in text
        assert "[1:02:05] Let us begin\n" in text

    def test_without_timestamps_or_description(self):
        text = export_as_text(sample_episode(description=None), include_timestamps=False)
        assert "Description" not in text
        assert "[0:00]" not in text
        assert "Ann: Hello and welcome\n" in text

    def test_unparsable_date_is_kept(self):
        episode = Episode("e", "T", "P", 60, "last tuesday", (TranscriptSegment("segment-0", "hi", 0),))
        assert "Published: last tuesday" in export_as_text(episode)


class TestMarkdownExport:
    def test_layout(self):
        md = export_as_markdown(sample_episode())
        assert md.startswith("# Testing Things\n\n**Podcast:** Dev Talk  \n")
        assert "## Description\n\nA chat about tests\n" in md
        assert "## Transcript\n" in md
        assert "**[0:00]** **Ann:** Hello and welcome\n" in md
        assert "**[1:02:05]** Let us begin\n" in md

    def test_filename(self):
        assert export_filename(sample_episode()) == "Testing_Things.txt"
        assert export_filename(sample_episode(), "markdown") == "Testing_Things.md"
