"""
Unit tests for Corpus statistics and validation.
"""

import pytest
from docsearch.ranking.corpus import Corpus, CorpusError, Document

pytestmark = pytest.mark.unit


class TestDocument:
    """Test Document statistics"""

    def test_from_content_statistics(self):
        """Test length and term counts are computed from tokens"""
        doc = Document.from_content(7, "Blah blah fox")
        assert doc.id == 7
        assert doc.content == "Blah blah fox"
        assert doc.length == 3
        assert doc.term_counts == {"blah": 2, "fox": 1}

    def test_immutable(self):
        """Test documents cannot be modified"""
        doc = Document.from_content(0, "fox")
        with pytest.raises(AttributeError):
            doc.content = "dog"

    def test_term_counts_read_only(self):
        """Test term counts cannot be changed through the document"""
        doc = Document.from_content(0, "cat cat dog")
        with pytest.raises(TypeError):
            doc.term_counts["cat"] = 5
        assert doc.term_counts["cat"] == 2

    def test_term_counts_copied_on_construction(self):
        """Test a caller-owned dict does not alias the stored counts"""
        counts = {"fox": 1}
        doc = Document(id=0, content="fox", length=1, term_counts=counts)
        counts["fox"] = 9
        assert doc.term_counts == {"fox": 1}

    def test_empty_content(self):
        """Test empty document has zero length"""
        doc = Document.from_content(0, "")
        assert doc.length == 0
        assert doc.term_counts == {}


class TestCorpus:
    """Test Corpus construction and lookups"""

    def test_build_from_dicts(self, sample_documents):
        """Test corpus built from id/content mappings"""
        corpus = Corpus(sample_documents)
        assert len(corpus) == 2
        assert corpus.total_documents == 2
        assert corpus.ids == [0, 1]
        assert corpus.get(1).content == "the lazy dog"

    def test_build_from_documents(self):
        """Test corpus accepts Document instances"""
        corpus = Corpus([Document(id=3, content="Brown Fox")])
        assert corpus.get(3).length == 2
        assert corpus.get(3).term_counts == {"brown": 1, "fox": 1}

    def test_sparse_ids(self):
        """Test ids only need to be unique, not dense"""
        corpus = Corpus([
            {"id": 100, "content": "a b"},
            {"id": 5, "content": "c"},
        ])
        assert corpus.ids == [100, 5]  # Insertion order kept
        assert 100 in corpus
        assert 0 not in corpus
        assert corpus.document_length(5) == 1

    def test_document_length(self, sample_documents):
        """Test token counts per document"""
        corpus = Corpus(sample_documents)
        assert corpus.document_length(0) == 4
        assert corpus.document_length(1) == 3

    def test_average_document_length(self, sample_documents):
        """Test average is the mean token count"""
        corpus = Corpus(sample_documents)
        assert corpus.average_document_length == pytest.approx(3.5)

    def test_empty_corpus(self):
        """Test empty corpus is valid with zero average length"""
        corpus = Corpus([])
        assert len(corpus) == 0
        assert corpus.average_document_length == 0.0
        assert list(corpus) == []

    def test_iteration_order(self, sample_documents):
        """Test iteration yields documents in insertion order"""
        corpus = Corpus(sample_documents)
        assert [doc.id for doc in corpus] == [0, 1]

    def test_unknown_id_raises(self, sample_documents):
        """Test lookup of unknown id raises KeyError"""
        corpus = Corpus(sample_documents)
        with pytest.raises(KeyError):
            corpus.get(42)


class TestTermFrequency:
    """Test substring-based term frequency"""

    def test_single_occurrence(self, sample_documents):
        corpus = Corpus(sample_documents)
        assert corpus.term_frequency(0, "fox") == 1

    def test_case_insensitive(self):
        """Test matching ignores case in content"""
        corpus = Corpus([{"id": 0, "content": "The dog. THE end. the"}])
        assert corpus.term_frequency(0, "the") == 3

    def test_substring_overcount(self):
        """Test terms inside longer words are counted"""
        corpus = Corpus([{"id": 0, "content": "The cat in the category"}])
        assert corpus.term_frequency(0, "cat") == 2

    def test_punctuation_neighbours_counted(self):
        """Test 'dog' is counted in 'dog.' as well"""
        corpus = Corpus([{"id": 0, "content": "the lazy dog. The dog slept"}])
        assert corpus.term_frequency(0, "dog") == 2

    def test_non_overlapping(self):
        """Test occurrences are counted without overlap"""
        corpus = Corpus([{"id": 0, "content": "aaaa"}])
        assert corpus.term_frequency(0, "aa") == 2

    def test_absent_term(self, sample_documents):
        corpus = Corpus(sample_documents)
        assert corpus.term_frequency(1, "fox") == 0

    def test_empty_term(self, sample_documents):
        """Test empty term never matches"""
        corpus = Corpus(sample_documents)
        assert corpus.term_frequency(0, "") == 0


class TestCorpusValidation:
    """Test fail-fast construction errors"""

    def test_duplicate_ids(self):
        """Test duplicate ids raise a single construction error"""
        with pytest.raises(CorpusError, match="Duplicate document id: 1"):
            Corpus([
                {"id": 1, "content": "a"},
                {"id": 1, "content": "b"},
            ])

    def test_corpus_error_is_value_error(self):
        """Test callers can catch ValueError"""
        with pytest.raises(ValueError):
            Corpus([{"id": 0, "content": "a"}, {"id": 0, "content": "a"}])

    def test_missing_field(self):
        with pytest.raises(CorpusError, match="missing required field"):
            Corpus([{"id": 0}])

    def test_non_integer_id(self):
        with pytest.raises(CorpusError, match="non-integer id"):
            Corpus([{"id": "zero", "content": "a"}])

    def test_bool_id_rejected(self):
        with pytest.raises(CorpusError, match="non-integer id"):
            Corpus([{"id": True, "content": "a"}])

    def test_non_string_content(self):
        with pytest.raises(CorpusError, match="content must be a string"):
            Corpus([{"id": 0, "content": 42}])

    def test_non_mapping_entry(self):
        with pytest.raises(CorpusError, match="must be a mapping"):
            Corpus([(0, "a")])

    def test_document_instance_with_non_integer_id(self):
        """Test Document instances get the same id check as mappings"""
        with pytest.raises(CorpusError, match="non-integer id"):
            Corpus([Document(id="zero", content="fox")])

    def test_document_instance_with_bool_id(self):
        with pytest.raises(CorpusError, match="non-integer id"):
            Corpus([Document(id=False, content="fox")])

    def test_document_instance_with_non_string_content(self):
        """Test Document instances get the same content check as mappings"""
        with pytest.raises(CorpusError, match="content must be a string"):
            Corpus([Document(id=0, content=None)])
