"""
Search engine - owns the corpus, the inverted index and the scoring setup.

Build once with SearchEngine.initialize(), then call search() per query.
Nothing is mutated after construction, so one engine can be shared by any
number of readers without locking.
"""

import logging
import time
from typing import Dict, Iterable, List, Optional, Union

from .corpus import Corpus, DocumentInput
from .index_builder import InvertedIndex, build_inverted_index
from .ranker import DEFAULT_LIMIT, SearchResult, rank
from .scorer import BaseScorer, ScoringAlgorithm, create_scorer
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class SearchEngine:
    """In-memory document search over a static corpus"""

    def __init__(
        self,
        corpus: Corpus,
        index: InvertedIndex,
        algorithm: Union[str, ScoringAlgorithm] = ScoringAlgorithm.TFIDF,
        k1: float = 1.2,
        k2: float = 0.75,
        limit: int = DEFAULT_LIMIT,
    ):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        self._corpus = corpus
        self._index = index
        self._default_algorithm = ScoringAlgorithm.parse(algorithm)
        self._limit = limit

        # One scorer per algorithm so per-query overrides don't rebuild them
        self._scorers: Dict[ScoringAlgorithm, BaseScorer] = {
            a: create_scorer(a, k1=k1, k2=k2) for a in ScoringAlgorithm
        }

    @classmethod
    def initialize(
        cls,
        documents: Iterable[DocumentInput],
        algorithm: Union[str, ScoringAlgorithm] = ScoringAlgorithm.TFIDF,
        k1: float = 1.2,
        k2: float = 0.75,
        limit: int = DEFAULT_LIMIT,
    ) -> "SearchEngine":
        """
        Build corpus and inverted index from raw documents.

        Args:
            documents: Mappings with 'id' and 'content' (or Document instances)
            algorithm: Default scoring algorithm ("tfidf" | "bm25")
            k1: BM25 term frequency saturation
            k2: BM25 length normalization weight
            limit: Default maximum number of results per query

        Raises:
            CorpusError: Duplicate ids or malformed documents
            ValueError: Invalid algorithm, BM25 parameters or limit
        """
        start = time.perf_counter()

        corpus = Corpus(documents)
        index = build_inverted_index(corpus)
        engine = cls(corpus, index, algorithm=algorithm, k1=k1, k2=k2, limit=limit)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Search engine ready: {len(corpus)} documents, {len(index)} terms, "
            f"algorithm={engine.default_algorithm.value}, limit={limit} ({elapsed_ms:.1f}ms)"
        )
        return engine

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @property
    def index(self) -> InvertedIndex:
        return self._index

    @property
    def default_algorithm(self) -> ScoringAlgorithm:
        return self._default_algorithm

    @property
    def limit(self) -> int:
        return self._limit

    def scorer(self, algorithm: Union[str, ScoringAlgorithm, None] = None) -> BaseScorer:
        """Scorer for algorithm (engine default when None)."""
        if algorithm is None:
            return self._scorers[self._default_algorithm]
        return self._scorers[ScoringAlgorithm.parse(algorithm)]

    def search(
        self,
        query: str,
        algorithm: Union[str, ScoringAlgorithm, None] = None,
        limit: Optional[int] = None,
    ) -> List[SearchResult]:
        """
        Rank documents against a free-text query.

        Args:
            query: Query text (empty or unmatched query -> empty list)
            algorithm: Override the engine's default scoring algorithm
            limit: Override the engine's default result limit

        Returns:
            Results sorted by score descending (ties by document id)
        """
        start = time.perf_counter()

        scorer = self.scorer(algorithm)
        tokens = tokenize(query)
        scores = scorer.score(tokens, self._corpus, self._index)
        results = rank(scores, self._corpus, self._limit if limit is None else limit)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            f"Query {query!r}: {len(tokens)} tokens, {len(scores)} matches, "
            f"{len(results)} results ({scorer.algorithm.value}, {elapsed_ms:.2f}ms)"
        )
        return results
