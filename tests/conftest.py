"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from test_fixtures import make_collections, make_client  # noqa: E402


@pytest.fixture
def collections():
    """Mocked collection handles with empty-database defaults"""
    return make_collections()


@pytest.fixture
def client(collections):
    """TestClient around an app wired to the mocked collections"""
    return make_client(collections)
