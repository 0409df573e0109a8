# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Full-text search over the episode corpus.

The engine works on a snapshot of episodes. Updating the corpus swaps the whole
snapshot in one assignment, so a query running concurrently sees either the old
or the new corpus, never a mix. Episodes are never modified.

Matching, ranking and highlighting share one regex-based comparison, so every
returned segment carries at least one highlight.
Highlighting ignores word boundaries so every literal occurrence is marked.
"""

import re
from dataclasses import dataclass
from typing import Iterable

from podtranscript.config import SearchConfig
from podtranscript.models import Episode, SearchResult, TranscriptSegment


@dataclass(frozen=True)
class SearchOptions:
    """
    Query options.

    Attributes:
        case_sensitive:
            Compare letters exactly instead of ignoring case.
        whole_words:
            Only match the query at word boundaries.
    """

    case_sensitive: bool = False
    whole_words: bool = False


@dataclass(frozen=True)
class _Snapshot:
    episodes: tuple[Episode, ...]
    by_id: dict[str, Episode]
    segments: dict[tuple[str, str], TranscriptSegment]


def _build_snapshot(episodes: Iterable[Episode]) -> _Snapshot:
    ordered = tuple(episodes)
    by_id: dict[str, Episode] = {}
    segments: dict[tuple[str, str], TranscriptSegment] = {}
    for episode in ordered:
        by_id.setdefault(episode.id, episode)
        for segment in episode.transcript:
            segments.setdefault((episode.id, segment.id), segment)
    return _Snapshot(episodes=ordered, by_id=by_id, segments=segments)


def _flags(case_sensitive: bool) -> int:
    return 0 if case_sensitive else re.IGNORECASE


def literal_pattern(
    query: str,
    *,
    case_sensitive: bool = False,
    whole_words: bool = False,
) -> re.Pattern[str]:
    """Compile the literal query, optionally anchored at word boundaries."""

    pattern = re.escape(query)
    if whole_words:
        pattern = rf"\b{pattern}\b"
    return re.compile(pattern, _flags(case_sensitive))


def _options_pattern(query: str, options: SearchOptions) -> re.Pattern[str]:
    return literal_pattern(query, case_sensitive=options.case_sensitive, whole_words=options.whole_words)


def matches(text: str, query: str, options: SearchOptions) -> bool:
    """Return True if the segment text matches the query."""

    return _options_pattern(query, options).search(text) is not None


def count_matches(text: str, query: str, options: SearchOptions) -> int:
    """Count non-overlapping occurrences of the query in the text."""

    return len(_options_pattern(query, options).findall(text))


def highlight(
    text: str,
    query: str,
    *,
    case_sensitive: bool = False,
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
) -> str:
    """Wrap every occurrence of the literal query in highlight markup.

    Text outside the matches is left untouched, so removing the markup yields
    the original text.
    """

    if not query.strip():
        return text

    pattern = literal_pattern(query, case_sensitive=case_sensitive)
    return pattern.sub(lambda m: f"{open_tag}{m.group(0)}{close_tag}", text)


class SearchEngine:
    """Ranked, highlighted search over a snapshot of episodes."""

    def __init__(
        self,
        episodes: Iterable[Episode] = (),
        config: SearchConfig | None = None,
    ) -> None:
        self.config = config or SearchConfig()
        self._snapshot = _build_snapshot(episodes)

    @property
    def episodes(self) -> tuple[Episode, ...]:
        return self._snapshot.episodes

    def set_episodes(self, episodes: Iterable[Episode]) -> None:
        """Replace the whole corpus."""

        self._snapshot = _build_snapshot(episodes)

    def search(self, query: str, options: SearchOptions | None = None) -> list[SearchResult]:
        """
        Find all segments matching the query.

        Args:
            query:
                Literal query text. Blank queries return no results.
            options:
                Casing and word-boundary options.

        Returns:
            Results ordered by descending match count, then ascending
            timestamp; ties keep corpus order.
        """

        if not query.strip():
            return []

        options = options or SearchOptions()
        snapshot = self._snapshot

        ranked: list[tuple[int, SearchResult]] = []
        for episode in snapshot.episodes:
            for segment in episode.transcript:
                if not matches(segment.text, query, options):
                    continue

                result = SearchResult(
                    segment_id=segment.id,
                    episode_id=episode.id,
                    text=segment.text,
                    timestamp=segment.timestamp,
                    highlighted_text=highlight(
                        segment.text,
                        query,
                        case_sensitive=options.case_sensitive,
                        open_tag=self.config.highlight_open,
                        close_tag=self.config.highlight_close,
                    ),
                )
                ranked.append((count_matches(segment.text, query, options), result))

        ranked.sort(key=lambda item: (-item[0], item[1].timestamp))
        return [result for _, result in ranked]

    def get_episode(self, episode_id: str) -> Episode | None:
        return self._snapshot.by_id.get(episode_id)

    def get_segment(self, episode_id: str, segment_id: str) -> TranscriptSegment | None:
        return self._snapshot.segments.get((episode_id, segment_id))
