"""Tests for segment normalization and field-alias resolution."""

from podtranscript.config import ExtractionConfig
from podtranscript.transcripts.normalize import (
    episode_from_record,
    episode_from_segments,
    first_present,
    normalize_segment,
    normalize_segments,
    parse_seconds,
    strip_extension,
)


class TestFirstPresent:
    def test_takes_first_alias_in_order(self):
        record = {"content": "second", "text": "first"}
        assert first_present(record, ("text", "content")) == "first"

    def test_skips_empty_values(self):
        record = {"text": "   ", "content": "", "body": "found"}
        assert first_present(record, ("text", "content", "body")) == "found"

    def test_zero_counts_as_present(self):
        assert first_present({"timestamp": 0, "time": 9}, ("timestamp", "time")) == 0

    def test_lower_cased_keys(self):
        assert first_present({"starttime": "3"}, ("startTime",)) == "3"

    def test_missing(self):
        assert first_present({"other": 1}, ("text",)) is None


class TestParseSeconds:
    def test_numbers_and_strings(self):
        assert parse_seconds(4) == 4.0
        assert parse_seconds("12.5") == 12.5

    def test_rejects_invalid(self):
        assert parse_seconds("12s") is None
        assert parse_seconds(-1) is None
        assert parse_seconds(float("nan")) is None
        assert parse_seconds(True) is None
        assert parse_seconds(None) is None

    def test_integer_too_large_for_float(self):
        assert parse_seconds(10**400) is None
        assert parse_seconds("1e400") is None


class TestNormalizeSegment:
    def test_string_node(self):
        segment = normalize_segment("  Hello there  ", 3)
        assert segment is not None
        assert segment.id == "segment-3"
        assert segment.text == "Hello there"
        assert segment.timestamp == 15
        assert segment.speaker is None

    def test_text_aliases(self):
        for key in ("text", "content", "transcript", "body", "message"):
            segment = normalize_segment({key: "spoken"}, 0)
            assert segment is not None and segment.text == "spoken"

    def test_timestamp_aliases(self):
        for key in ("timestamp", "time", "start", "startTime"):
            segment = normalize_segment({"text": "x", key: "42"}, 7)
            assert segment is not None and segment.timestamp == 42

    def test_timestamp_fallback_uses_position(self):
        segment = normalize_segment({"text": "x", "timestamp": "soon"}, 4)
        assert segment is not None and segment.timestamp == 20

    def test_fallback_spacing_follows_config(self):
        segment = normalize_segment({"text": "x"}, 4, ExtractionConfig(seconds_per_segment=2))
        assert segment is not None and segment.timestamp == 8

    def test_speaker_aliases(self):
        assert normalize_segment({"text": "x", "speaker": "Ann"}, 0).speaker == "Ann"
        assert normalize_segment({"text": "x", "name": "Ben"}, 0).speaker == "Ben"
        assert normalize_segment({"text": "x", "author": "Cy"}, 0).speaker == "Cy"

    def test_confidence_passthrough(self):
        segment = normalize_segment({"text": "x", "confidence": 0.87}, 0)
        assert segment is not None and segment.confidence == 0.87
        assert normalize_segment({"text": "x"}, 0).confidence is None

    def test_rejects_blank_text(self):
        assert normalize_segment({"text": "   \n"}, 0) is None
        assert normalize_segment("", 0) is None
        assert normalize_segment({"timestamp": 3}, 0) is None
        assert normalize_segment(42, 0) is None

    def test_idempotent_on_normalized_record(self):
        first = normalize_segment({"content": " Hi ", "start": 3, "author": "Ann"}, 2)
        again = normalize_segment(first.to_dict(), 2)
        assert (again.text, again.timestamp, again.speaker) == (first.text, first.timestamp, first.speaker)
        assert again.id == first.id

    def test_ids_refer_to_input_positions(self):
        segments = normalize_segments([{"text": "a"}, {"text": ""}, {"text": "c"}])
        assert [s.id for s in segments] == ["segment-0", "segment-2"]


class TestEpisodeBuilding:
    def test_metadata_aliases(self):
        record = {
            "episodeTitle": "Pilot",
            "showTitle": "The Show",
            "pubDate": "2024-03-01",
            "summary": "About things",
            "lines": ["first line", "second line"],
        }
        episode = episode_from_record(record, "file.json")
        assert episode is not None
        assert episode.title == "Pilot"
        assert episode.podcast_title == "The Show"
        assert episode.publish_date == "2024-03-01"
        assert episode.description == "About things"
        assert len(episode.transcript) == 2

    def test_defaults(self):
        episode = episode_from_record({"segments": [{"text": "a", "timestamp": 100}]}, "file.json")
        assert episode is not None
        assert episode.title == "file.json"
        assert episode.podcast_title == "Unknown Podcast"
        assert episode.duration == 130
        assert episode.publish_date

    def test_explicit_duration_wins(self):
        episode = episode_from_record({"duration": "3600", "transcript": ["abc"]}, "f.json")
        assert episode is not None and episode.duration == 3600

    def test_no_segments_is_no_episode(self):
        assert episode_from_record({"transcript": [{"text": " "}]}, "f.json") is None
        assert episode_from_record({"title": "x"}, "f.json") is None
        assert episode_from_segments([], "f.json") is None

    def test_episode_ids_are_unique(self):
        record = {"transcript": ["abc"]}
        assert episode_from_record(record, "f").id != episode_from_record(record, "f").id

    def test_strip_extension(self):
        assert strip_extension("talk.transcript.txt") == "talk.transcript"
        assert strip_extension("noext") == "noext"
