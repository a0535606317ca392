"""
Relevance scorers: TF-IDF and BM25.

Both scorers share one interface so the engine can swap them:

    score(tokens, corpus, index) -> {doc_id: score}

Only documents that contain at least one query token appear in the result.
Query tokens missing from the index contribute nothing.

TF-IDF:
    score(d) = Σ tf(t, d) × ln(N / df(t))

BM25 (legacy operator grouping, kept for ranking compatibility):
    idf(t)   = ln(N - df(t) + 0.5) / (df(t) + 0.5)
    norm(d)  = 1 - k2 + k2 × dl/avgdl
    score(d) = Σ idf(t) × ((k1 + 1) × tf × (k1 + 1)) / (tf + k1 × norm) / (tf + k1 × norm)

Where:
    N = number of documents in the corpus
    df(t) = number of documents containing t
    tf(t, d) = substring occurrences of t in d (see Corpus.term_frequency)
    dl = document length in tokens
    k1 = term frequency saturation (default: 1.2)
    k2 = length normalization weight (default: 0.75)

Note: this BM25 is not the textbook form. Textbook BM25 uses
ln((N - df + 0.5) / (df + 0.5)) and (k1 + 1) × tf / (tf + k1 × norm).
"""

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Sequence, Union

from .corpus import Corpus
from .index_builder import InvertedIndex

logger = logging.getLogger(__name__)

ScoreMap = Dict[int, float]


class ScoringAlgorithm(str, Enum):
    """Available scoring strategies"""
    TFIDF = "tfidf"
    BM25 = "bm25"

    @classmethod
    def parse(cls, value: Union[str, "ScoringAlgorithm"]) -> "ScoringAlgorithm":
        """Parse algorithm name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(
                f"Unknown scoring algorithm: {value}. Valid options: {valid}"
            ) from None


class BaseScorer(ABC):
    """
    Abstract base class for scoring strategies.

    Scorers are stateless apart from their immutable parameters, so one
    instance can serve any number of concurrent queries.
    """

    algorithm: ScoringAlgorithm

    @abstractmethod
    def score(self, tokens: Sequence[str], corpus: Corpus, index: InvertedIndex) -> ScoreMap:
        """
        Score documents against query tokens.

        Args:
            tokens: Tokenized query (lowercase)
            corpus: Corpus with document statistics
            index: Inverted index built from the same corpus

        Returns:
            Mapping doc_id -> accumulated score, only for matched documents
        """
        pass

    @abstractmethod
    def get_info(self) -> dict:
        """Scorer name and parameters."""
        pass


class TfIdfScorer(BaseScorer):
    """Classical TF-IDF scoring"""

    algorithm = ScoringAlgorithm.TFIDF

    def score(self, tokens: Sequence[str], corpus: Corpus, index: InvertedIndex) -> ScoreMap:
        scores: ScoreMap = {}
        total_documents = corpus.total_documents

        for token in tokens:
            doc_ids = index.postings(token)
            if not doc_ids:
                continue

            idf = math.log(total_documents / len(doc_ids))
            for doc_id in doc_ids:
                tf = corpus.term_frequency(doc_id, token)
                scores[doc_id] = scores.get(doc_id, 0.0) + tf * idf

        return scores

    def get_info(self) -> dict:
        return {"name": self.algorithm.value, "parameters": {}}

    def __repr__(self) -> str:
        return "TfIdfScorer()"


class BM25Scorer(BaseScorer):
    """
    BM25 scoring with term frequency saturation and length normalization.
    """

    algorithm = ScoringAlgorithm.BM25

    def __init__(self, k1: float = 1.2, k2: float = 0.75):
        """
        Initialize BM25 scorer.

        Args:
            k1: Term frequency saturation parameter
                Higher = more weight to repeated terms
                Default: 1.2

            k2: Length normalization weight
                0.0 = no length normalization, 1.0 = full normalization
                Default: 0.75
        """
        if k1 < 0:
            raise ValueError(f"k1 must be >= 0, got {k1}")
        if not 0.0 <= k2 <= 1.0:
            raise ValueError(f"k2 must be within [0, 1], got {k2}")
        self._k1 = float(k1)
        self._k2 = float(k2)

    @property
    def k1(self) -> float:
        return self._k1

    @property
    def k2(self) -> float:
        return self._k2

    def idf(self, document_frequency: int, total_documents: int) -> float:
        return math.log(total_documents - document_frequency + 0.5) / (document_frequency + 0.5)

    def score(self, tokens: Sequence[str], corpus: Corpus, index: InvertedIndex) -> ScoreMap:
        scores: ScoreMap = {}
        total_documents = corpus.total_documents
        avgdl = corpus.average_document_length
        k1, k2 = self._k1, self._k2

        for token in tokens:
            doc_ids = index.postings(token)
            if not doc_ids:
                continue

            idf = self.idf(len(doc_ids), total_documents)
            for doc_id in doc_ids:
                tf = corpus.term_frequency(doc_id, token)
                dl = corpus.document_length(doc_id)
                saturation = tf + k1 * (1.0 - k2 + k2 * dl / avgdl)

                numerator = (k1 + 1) * tf * (k1 + 1) / saturation
                scores[doc_id] = scores.get(doc_id, 0.0) + idf * numerator / saturation

        return scores

    def get_info(self) -> dict:
        return {"name": self.algorithm.value, "parameters": {"k1": self._k1, "k2": self._k2}}

    def __repr__(self) -> str:
        return f"BM25Scorer(k1={self._k1}, k2={self._k2})"


def create_scorer(
    algorithm: Union[str, ScoringAlgorithm] = ScoringAlgorithm.TFIDF,
    k1: float = 1.2,
    k2: float = 0.75,
) -> BaseScorer:
    """
    Create scorer for the given algorithm.

    Args:
        algorithm: "tfidf" | "bm25" (or ScoringAlgorithm)
        k1: BM25 saturation parameter (ignored for TF-IDF)
        k2: BM25 length normalization weight (ignored for TF-IDF)

    Raises:
        ValueError: Unknown algorithm or invalid BM25 parameters
    """
    algorithm = ScoringAlgorithm.parse(algorithm)

    if algorithm is ScoringAlgorithm.BM25:
        scorer: BaseScorer = BM25Scorer(k1=k1, k2=k2)
    else:
        scorer = TfIdfScorer()

    logger.debug(f"Created scorer: {scorer!r}")
    return scorer
