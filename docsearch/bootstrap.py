"""Engine construction from settings (shared by CLI and HTTP service)"""

import logging

from .config import Settings
from .documents import DEFAULT_DOCUMENTS, load_documents
from .ranking.engine import SearchEngine

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> SearchEngine:
    """
    Load corpus (CORPUS_PATH or bundled documents) and build the engine.

    Raises:
        FileNotFoundError: CORPUS_PATH does not exist
        CorpusError: Corpus file or documents are malformed
    """
    if settings.corpus_path is not None:
        documents = load_documents(settings.corpus_path)
    else:
        logger.info(f"Using bundled corpus ({len(DEFAULT_DOCUMENTS)} documents)")
        documents = DEFAULT_DOCUMENTS

    return SearchEngine.initialize(
        documents,
        algorithm=settings.algorithm,
        k1=settings.k1,
        k2=settings.k2,
        limit=settings.limit,
    )
