#!/usr/bin/env python3
"""
Interactive search over the corpus.

Usage:
    docsearch-cli                       # bundled corpus, TF-IDF
    docsearch-cli --algorithm bm25      # BM25 scoring
    docsearch-cli --corpus docs.json    # custom JSON corpus
    python -m docsearch.cli --limit 5

Enter a query per line; an empty line (or EOF) exits.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, TextIO, Union

from .bootstrap import build_engine
from .config import load_env_files, load_settings
from .logging_config import setup_logging
from .ranking.engine import SearchEngine
from .ranking.ranker import SearchResult
from .ranking.scorer import ScoringAlgorithm

logger = logging.getLogger(__name__)

PROMPT = "Enter a search query: "


def format_results(query: str, results: List[SearchResult]) -> str:
    """Render results as the header line plus one "- content (score=x.xx)" line each."""
    lines = [f"{len(results)} results for query '{query}':"]
    lines.extend(f"- {result.content} (score={result.score:.2f})" for result in results)
    return "\n".join(lines)


def run_loop(
    engine: SearchEngine,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
    algorithm: Union[str, ScoringAlgorithm, None] = None,
    limit: Optional[int] = None,
) -> int:
    """
    Read queries until an empty line or EOF.

    Args:
        engine: Built search engine
        input_stream: Query source (default: sys.stdin)
        output_stream: Result sink (default: sys.stdout)
        algorithm: Scoring override for every query
        limit: Result limit override for every query

    Returns:
        Number of queries answered
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    answered = 0
    while True:
        output_stream.write(PROMPT)
        output_stream.flush()

        line = input_stream.readline()
        query = line.strip()
        if not query:
            if not line:
                output_stream.write("\n")  # EOF: finish the prompt line
            break

        results = engine.search(query, algorithm=algorithm, limit=limit)
        output_stream.write(format_results(query, results) + "\n")
        answered += 1

    return answered


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsearch-cli",
        description="Interactive TF-IDF / BM25 search over an in-memory corpus",
    )
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in ScoringAlgorithm],
        help="Scoring algorithm (default: SEARCH_ALGORITHM or tfidf)",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        help="Maximum results per query (default: SEARCH_LIMIT or 10)",
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        help="JSON corpus file (default: CORPUS_PATH or bundled documents)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to console only",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_env_files()
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    overrides = {}
    if args.algorithm:
        overrides["algorithm"] = ScoringAlgorithm.parse(args.algorithm)
    if args.limit:
        overrides["limit"] = args.limit
    if args.corpus:
        overrides["corpus_path"] = args.corpus
    settings = replace(settings, **overrides)

    # Console stays quiet so the prompt is readable; details go to the file
    try:
        setup_logging(
            log_file=None if args.no_log_file else settings.log_file,
            console_level=max(settings.log_level, logging.WARNING),
        )
    except OSError as e:
        print(f"Configuration error: cannot open log file {settings.log_file}: {e}", file=sys.stderr)
        return 2

    try:
        engine = build_engine(settings)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to build search engine: {e}")
        return 1

    run_loop(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
