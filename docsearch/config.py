"""
Configuration from environment variables.

Load order:
1. .env.local at project root (highest priority, local dev)
2. .env at project root
3. System environment only

Variables:
    SEARCH_ALGORITHM: "tfidf" | "bm25" (default: tfidf)
    SEARCH_LIMIT: Maximum results per query (default: 10)
    BM25_K1: BM25 term frequency saturation (default: 1.2)
    BM25_K2: BM25 length normalization weight, 0-1 (default: 0.75)
    CORPUS_PATH: JSON corpus file (default: bundled documents)
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base log file path (default: logs/docsearch.log)
    PORT: HTTP port (default: 8080)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .ranking.scorer import ScoringAlgorithm

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


@dataclass(frozen=True)
class Settings:
    algorithm: ScoringAlgorithm = ScoringAlgorithm.TFIDF
    limit: int = 10
    k1: float = 1.2
    k2: float = 0.75
    corpus_path: Optional[Path] = None
    log_level: int = logging.INFO
    log_file: str = "logs/docsearch.log"
    port: int = 8080


def load_env_files(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local or .env into os.environ.

    Returns:
        Path of the loaded file, or None if neither exists
    """
    env_local = root / ".env.local"
    env_file = root / ".env"

    if env_local.exists():
        load_dotenv(env_local, override=True)
        return env_local
    if env_file.exists():
        load_dotenv(env_file, override=True)
        return env_file
    return None


def _parse_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _parse_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def load_settings() -> Settings:
    """
    Read settings from the current environment.

    Call load_env_files() first to pick up .env.local / .env.

    Raises:
        ValueError: Invalid value (message names the variable)
    """
    algorithm = ScoringAlgorithm.parse(os.getenv("SEARCH_ALGORITHM", "tfidf"))

    limit = _parse_int("SEARCH_LIMIT", 10)
    if limit < 1:
        raise ValueError(f"SEARCH_LIMIT must be >= 1, got {limit}")

    k1 = _parse_float("BM25_K1", 1.2)
    if k1 < 0:
        raise ValueError(f"BM25_K1 must be >= 0, got {k1}")

    k2 = _parse_float("BM25_K2", 0.75)
    if not 0.0 <= k2 <= 1.0:
        raise ValueError(f"BM25_K2 must be within [0, 1], got {k2}")

    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, None)
    if not isinstance(log_level, int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level_name!r}")

    corpus_path = os.getenv("CORPUS_PATH")

    return Settings(
        algorithm=algorithm,
        limit=limit,
        k1=k1,
        k2=k2,
        corpus_path=Path(corpus_path) if corpus_path else None,
        log_level=log_level,
        log_file=os.getenv("LOG_FILE", "logs/docsearch.log"),
        port=_parse_int("PORT", 8080),
    )
