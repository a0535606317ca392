"""
Classical lexical ranking over an in-memory corpus.

Components:
- tokenizer: Lowercase whitespace tokenization (shared by index and queries)
- corpus: Documents with cached length and term statistics
- index_builder: Inverted index (term -> deduplicated document ids)
- scorer: TF-IDF and BM25 scoring strategies
- ranker: Top-K selection with deterministic tie-break
- engine: SearchEngine tying the above together

Build once, query many times. Nothing is updated after the build.
"""

from .tokenizer import tokenize
from .corpus import Corpus, CorpusError, Document
from .index_builder import InvertedIndex, build_inverted_index
from .scorer import BaseScorer, BM25Scorer, ScoringAlgorithm, TfIdfScorer, create_scorer
from .ranker import DEFAULT_LIMIT, SearchResult, rank
from .engine import SearchEngine

__all__ = [
    "tokenize",
    "Corpus",
    "CorpusError",
    "Document",
    "InvertedIndex",
    "build_inverted_index",
    "BaseScorer",
    "BM25Scorer",
    "TfIdfScorer",
    "ScoringAlgorithm",
    "create_scorer",
    "DEFAULT_LIMIT",
    "SearchResult",
    "rank",
    "SearchEngine",
]
