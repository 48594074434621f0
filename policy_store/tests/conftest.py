"""
Shared fixtures for policy store tests.
"""

import pytest
from unittest.mock import MagicMock

from policy_store.persistence.mongo import MongoAdapter
from shared.test_helpers import InMemoryMongoClient, create_model


@pytest.fixture
def mongo_client():
    """Create in-memory MongoDB client."""
    return InMemoryMongoClient()


@pytest.fixture
def adapter(mongo_client):
    """Create adapter backed by the in-memory client."""
    return MongoAdapter(mongo_client, "casbin_test")


@pytest.fixture
def collection(mongo_client):
    """Collection the adapter writes to."""
    return mongo_client["casbin_test"]["casbin_rule"]


@pytest.fixture
def mock_collection():
    """Create mock pymongo collection."""
    return MagicMock()


@pytest.fixture
def mock_adapter(mock_collection):
    """Create adapter whose client always returns the mock collection."""
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = mock_collection
    return MongoAdapter(client, "casbin_test")


@pytest.fixture
def model():
    """Create empty policy model."""
    return create_model()
