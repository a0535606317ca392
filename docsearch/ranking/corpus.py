"""
Document corpus with cached per-document statistics.

Statistics are computed once when the corpus is built:
- length: number of tokens in the document
- term_counts: token occurrences within the document
- average_document_length: mean token length over the whole corpus

Term frequency used for scoring is NOT taken from term_counts. It counts
case-insensitive substring occurrences in the raw content, so a term that is
part of a longer word is counted too ("cat" inside "category").
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Union

from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class CorpusError(ValueError):
    """Corpus input is malformed (duplicate ids, missing fields, bad types)"""


@dataclass(frozen=True)
class Document:
    """Single indexed document (immutable after creation)"""
    id: int
    content: str
    length: int = 0
    term_counts: Mapping[str, int] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self):
        # Read-only view; frozen only blocks attribute assignment
        object.__setattr__(self, "term_counts", MappingProxyType(dict(self.term_counts)))

    @classmethod
    def from_content(cls, doc_id: int, content: str) -> "Document":
        """Create a document and compute its token statistics."""
        tokens = tokenize(content)
        return cls(
            id=doc_id,
            content=content,
            length=len(tokens),
            term_counts=Counter(tokens),
        )


DocumentInput = Union[Document, Mapping[str, Any]]


def _coerce(entry: DocumentInput, position: int) -> Document:
    if isinstance(entry, Document):
        doc_id, content = entry.id, entry.content
    elif isinstance(entry, Mapping):
        try:
            doc_id = entry["id"]
            content = entry["content"]
        except KeyError as e:
            raise CorpusError(f"Document #{position} is missing required field {e}") from e
    else:
        raise CorpusError(
            f"Document #{position} must be a mapping with 'id' and 'content', got {type(entry).__name__}"
        )

    # bool is an int subclass but never a valid id
    if isinstance(doc_id, bool) or not isinstance(doc_id, int):
        raise CorpusError(f"Document #{position} has non-integer id: {doc_id!r}")
    if not isinstance(content, str):
        raise CorpusError(f"Document {doc_id} content must be a string, got {type(content).__name__}")

    return Document.from_content(doc_id, content)


class Corpus:
    """
    Ordered collection of documents, addressable by id.

    Ids only need to be unique, not dense. Documents keep the order they were
    supplied in.
    """

    def __init__(self, documents: Iterable[DocumentInput] = ()):
        """
        Build corpus and statistics.

        Args:
            documents: Document instances or mappings with 'id' and 'content'

        Raises:
            CorpusError: Duplicate ids or malformed entries
        """
        self._documents: Dict[int, Document] = {}

        for position, entry in enumerate(documents):
            doc = _coerce(entry, position)
            if doc.id in self._documents:
                raise CorpusError(f"Duplicate document id: {doc.id}")
            self._documents[doc.id] = doc

        total_length = sum(doc.length for doc in self._documents.values())
        self.average_document_length = (
            total_length / len(self._documents) if self._documents else 0.0
        )

        logger.debug(
            f"Built corpus: {len(self._documents)} documents, "
            f"avgdl={self.average_document_length:.2f}"
        )

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    @property
    def total_documents(self) -> int:
        return len(self._documents)

    @property
    def ids(self) -> List[int]:
        return list(self._documents)

    def get(self, doc_id: int) -> Document:
        """Look up a document by id (KeyError if unknown)."""
        return self._documents[doc_id]

    def document_length(self, doc_id: int) -> int:
        """Number of tokens in the document."""
        return self._documents[doc_id].length

    def term_frequency(self, doc_id: int, term: str) -> int:
        """
        Count occurrences of term in the document content.

        Matching is case-insensitive and substring based (non-overlapping),
        not token based:

            >>> corpus = Corpus([{"id": 0, "content": "The cat in the category"}])
            >>> corpus.term_frequency(0, "cat")
            2
        """
        if not term:
            return 0
        return self._documents[doc_id].content.lower().count(term.lower())
