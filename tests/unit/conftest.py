"""Unit test configuration - isolated environment and logging"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from docsearch.documents import DEFAULT_DOCUMENTS
from docsearch.ranking.engine import SearchEngine

CONFIG_ENV_VARS = (
    "SEARCH_ALGORITHM",
    "SEARCH_LIMIT",
    "BM25_K1",
    "BM25_K2",
    "CORPUS_PATH",
    "LOG_LEVEL",
    "LOG_FILE",
    "PORT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove search configuration from the environment.

    Unit tests must not depend on the developer's shell or .env files.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """
    Undo setup_logging() side effects.

    setup_logging() installs a console handler and a rotating file handler on
    the root logger; remove and close them (pytest's own capture handlers are
    subclasses and are left alone).
    """
    root = logging.getLogger()
    saved_level = root.level

    yield

    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)


@pytest.fixture
def engine(sample_documents):
    """Engine over the two-document sample corpus (TF-IDF default)"""
    return SearchEngine.initialize(sample_documents)


@pytest.fixture(scope="session")
def default_engine():
    """Engine over the bundled corpus"""
    return SearchEngine.initialize(DEFAULT_DOCUMENTS)
