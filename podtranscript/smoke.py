# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Smoke-test helpers.

Run via:

    poetry run python -m podtranscript.smoke exports/*.json --query "keyword"

This is intentionally lightweight: it extracts episodes from the given files,
prints what was found, and optionally runs one search over the result.
"""

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from podtranscript.batch import process_files
from podtranscript.config import ConfigError, find_config_path, load_config_or_default
from podtranscript.models import InputFile
from podtranscript.search import SearchEngine, SearchOptions


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Podcast transcript smoke test")
    parser.add_argument("files", nargs="+", help="Export files (.json, .plist, .xml, .zip, ...)")
    parser.add_argument(
        "--config",
        help="Path to podtranscript.yaml (default: $PODTRANSCRIPT_CONFIG or ./podtranscript.yaml)",
    )
    parser.add_argument("--query", "-q", help="Search the extracted episodes")
    parser.add_argument("--case-sensitive", action="store_true", help="Match letter case exactly")
    parser.add_argument("--whole-words", action="store_true", help="Only match whole words")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config_or_default(find_config_path(args.config))
    except ConfigError as exc:
        print(f"CONFIG ERROR: {exc}")
        return 2

    inputs: list[InputFile] = []
    for name in args.files:
        path = Path(name)
        if not path.is_file():
            print(f"Skipping missing file: {path}")
            continue
        inputs.append(InputFile.from_path(path))

    result = process_files(inputs, config=cfg.extraction)

    for episode in result.episodes:
        print(f"Episode: {episode.title} ({episode.podcast_title}), {len(episode.transcript)} segment(s)")
    for error in result.errors:
        print(f"ERROR: {error}")

    if result.summary() == "empty":
        print("No transcript data found in the given files.")

    if args.query:
        engine = SearchEngine(result.episodes, config=cfg.search)
        options = SearchOptions(case_sensitive=args.case_sensitive, whole_words=args.whole_words)
        hits = engine.search(args.query, options)
        print(f"Search '{args.query}': {len(hits)} result(s)")
        for hit in hits:
            print(f"  [{hit.episode_id} {hit.segment_id} @ {hit.timestamp:g}s] {hit.highlighted_text}")

    return 1 if result.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
