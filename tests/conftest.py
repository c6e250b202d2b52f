# conftest.py
from unittest.mock import AsyncMock

import pytest
from qdrant_client import AsyncQdrantClient

from qdrant_admin.config import Settings, get_settings
from qdrant_admin.services.qdrant_clients import QdrantCluster, QdrantClusterClient


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached process-wide; start each test from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def aclient() -> AsyncMock:
    """Async Qdrant client double that accepts every request."""
    client = AsyncMock(spec=AsyncQdrantClient)
    client.create_collection.return_value = True
    client.create_shard_key.return_value = True
    return client


@pytest.fixture
def cluster_client(aclient: AsyncMock) -> QdrantClusterClient:
    return QdrantClusterClient(
        cluster=QdrantCluster.CLUSTER_0,
        client=aclient,
        collection_prefix="c1",
        shard_key_prefix="sk1",
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        qdrant_cluster_0_url="http://localhost:6333",
        qdrant_cluster_0_api_key="test-key",
        qdrant_dedicated_0_url="http://localhost:6334",
        qdrant_prefer_grpc=False,
        qdrant_timeout=5,
    )
