"""Pytest configuration shared by all test suites"""

import sys
from pathlib import Path

import pytest

# Add project root to path for docsearch imports without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_documents():
    """Two-document corpus used across the suites"""
    return [
        {"id": 0, "content": "the quick brown fox"},
        {"id": 1, "content": "the lazy dog"},
    ]
