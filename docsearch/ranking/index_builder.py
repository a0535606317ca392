"""
Inverted index builder - maps terms to the documents that contain them.

Posting lists hold each document id at most once, no matter how often the
term occurs in the document. Term frequency is recovered from the corpus at
scoring time, not from posting list repetition.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterator, Set, Tuple

from .corpus import Corpus

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Read-only term -> document ids mapping.

    Posting lists are returned in ascending document id order so that score
    accumulation and tests are reproducible.
    """

    def __init__(self, postings: Dict[str, Tuple[int, ...]]):
        self._postings = postings

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def postings(self, term: str) -> Tuple[int, ...]:
        """Document ids containing term (empty tuple if the term is unseen)."""
        return self._postings.get(term, ())

    def document_frequency(self, term: str) -> int:
        """Number of documents containing term."""
        return len(self._postings.get(term, ()))

    def terms(self) -> Iterator[str]:
        return iter(self._postings)


def build_inverted_index(corpus: Corpus) -> InvertedIndex:
    """
    Build inverted index from corpus documents.

    Uses each document's cached term_counts (computed with the shared
    tokenizer), so every distinct term maps to the document exactly once.

    Args:
        corpus: Built corpus

    Returns:
        InvertedIndex

    Example:
        >>> corpus = Corpus([
        ...     {"id": 0, "content": "the quick brown fox"},
        ...     {"id": 1, "content": "the lazy dog"},
        ... ])
        >>> index = build_inverted_index(corpus)
        >>> index.postings("the")
        (0, 1)
        >>> index.postings("cat")
        ()
    """
    postings: Dict[str, Set[int]] = defaultdict(set)

    for doc in corpus:
        for term in doc.term_counts:
            postings[term].add(doc.id)

    index = InvertedIndex({
        term: tuple(sorted(doc_ids))
        for term, doc_ids in postings.items()
    })

    logger.debug(f"Built inverted index: {len(index)} unique terms from {len(corpus)} documents")

    return index
