"""
Top-K ranking of scored documents.

Order: score descending, then document id ascending for equal scores.
"""

from dataclasses import dataclass
from typing import List, Mapping

from .corpus import Corpus

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class SearchResult:
    """Single ranked result"""
    document_id: int
    content: str
    score: float


def rank(scores: Mapping[int, float], corpus: Corpus, limit: int = DEFAULT_LIMIT) -> List[SearchResult]:
    """
    Sort scored documents and keep the top `limit`.

    Args:
        scores: Mapping doc_id -> score (from a scorer)
        corpus: Corpus the scores were computed against
        limit: Maximum number of results (must be >= 1)

    Returns:
        Up to `limit` results, best first

    Example:
        >>> corpus = Corpus([{"id": 0, "content": "a"}, {"id": 1, "content": "b"}])
        >>> [r.document_id for r in rank({0: 0.5, 1: 0.5}, corpus)]
        [0, 1]
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")

    if not scores:
        return []

    ordered = sorted(scores.items(), key=lambda item: (-item[1], item[0]))

    return [
        SearchResult(document_id=doc_id, content=corpus.get(doc_id).content, score=score)
        for doc_id, score in ordered[:limit]
    ]
