"""DocSearch - in-memory TF-IDF / BM25 document search"""

__version__ = "0.1.0"
