"""Tests for collection definition and creation."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from qdrant_client import models as q

from qdrant_admin.core.exceptions import (
    CollectionCreationError,
    CollectionNotCreatedError,
    ProvisioningError,
)
from qdrant_admin.providers.registry import (
    SUPPORTED_MODELS,
    EmbedderModel,
    ProviderID,
)
from qdrant_admin.services.collection_builder import (
    CollectionBuilder,
    build_collection_definition,
    collection_name,
)
from qdrant_admin.services.qdrant_clients import QdrantCluster, QdrantClusterClient

pytestmark = pytest.mark.asyncio

SUPPORTED_PAIRS = [(p, m) for p, models in SUPPORTED_MODELS.items() for m in sorted(models)]


async def test_collection_name_format():
    name = collection_name("c1", ProviderID.OPENAI, EmbedderModel.TEXT_EMBEDDING_3_SMALL)
    assert name == "c1_openai_text-embedding-3-small"


async def test_collection_name_is_deterministic_and_injective():
    """Same inputs give the same name; distinct pairs on a cluster never collide."""
    for cluster in QdrantCluster:
        names = [collection_name(cluster.collection_prefix, p, m) for p, m in SUPPORTED_PAIRS]
        again = [collection_name(cluster.collection_prefix, p, m) for p, m in SUPPORTED_PAIRS]
        assert names == again
        assert len(set(names)) == len(SUPPORTED_PAIRS)


async def test_collection_names_differ_across_clusters():
    provider, model = ProviderID.MISTRAL, EmbedderModel.MISTRAL_EMBED
    names = {collection_name(c.collection_prefix, provider, model) for c in QdrantCluster}
    assert len(names) == len(QdrantCluster)


async def test_definition_policy(cluster_client: QdrantClusterClient):
    """The definition carries the fixed storage, index and sharding policy."""
    definition = build_collection_definition(
        cluster_client, ProviderID.MISTRAL, EmbedderModel.MISTRAL_EMBED
    )

    assert definition.collection_name == "c1_mistral_mistral-embed"

    assert definition.vectors_config.size == 1024
    assert definition.vectors_config.distance == q.Distance.COSINE
    assert definition.vectors_config.on_disk is True

    assert definition.hnsw_config.m == 0
    assert definition.hnsw_config.payload_m == 16
    assert definition.optimizers_config.memmap_threshold == 16384

    scalar = definition.quantization_config.scalar
    assert scalar.type == q.ScalarType.INT8
    assert scalar.quantile == 0.99
    assert scalar.always_ram is True

    assert definition.on_disk_payload is True
    assert definition.sharding_method == q.ShardingMethod.CUSTOM
    assert definition.shard_number == 2
    assert definition.replication_factor == 2
    assert definition.write_consistency_factor == 1


async def test_to_create_kwargs_covers_every_parameter(cluster_client: QdrantClusterClient):
    definition = build_collection_definition(
        cluster_client, ProviderID.OPENAI, EmbedderModel.TEXT_EMBEDDING_3_LARGE_1536
    )

    kwargs = definition.to_create_kwargs()

    assert kwargs["collection_name"] == "c1_openai_text-embedding-3-large-1536"
    assert kwargs["vectors_config"].size == 1536
    assert kwargs["quantization_config"] is definition.quantization_config
    assert set(kwargs) == {
        "collection_name",
        "vectors_config",
        "hnsw_config",
        "optimizers_config",
        "quantization_config",
        "on_disk_payload",
        "sharding_method",
        "shard_number",
        "replication_factor",
        "write_consistency_factor",
    }


async def test_describe_mentions_name_and_topology(cluster_client: QdrantClusterClient):
    definition = build_collection_definition(
        cluster_client, ProviderID.OPENAI, EmbedderModel.TEXT_EMBEDDING_3_SMALL
    )

    text = "\n".join(definition.describe())

    assert "c1_openai_text-embedding-3-small" in text
    assert "Vector size: 1536" in text
    assert "shards=2" in text


async def test_create_submits_single_request(
    cluster_client: QdrantClusterClient, aclient: AsyncMock
):
    definition = build_collection_definition(
        cluster_client, ProviderID.OPENAI, EmbedderModel.TEXT_EMBEDDING_3_SMALL
    )

    await CollectionBuilder(cluster_client).create(definition)

    aclient.create_collection.assert_awaited_once_with(**definition.to_create_kwargs())


async def test_create_false_result_raises(cluster_client: QdrantClusterClient, aclient: AsyncMock):
    aclient.create_collection.return_value = False
    definition = build_collection_definition(
        cluster_client, ProviderID.OPENAI, EmbedderModel.TEXT_EMBEDDING_3_SMALL
    )

    with pytest.raises(CollectionNotCreatedError, match="Collection not created!") as exc_info:
        await CollectionBuilder(cluster_client).create(definition)

    assert exc_info.value.collection_name == "c1_openai_text-embedding-3-small"
    assert exc_info.value.cluster == "cluster-0"


async def test_create_transport_error_is_not_retried(
    cluster_client: QdrantClusterClient, aclient: AsyncMock
):
    boom = ConnectionError("connection refused")
    aclient.create_collection.side_effect = boom
    definition = build_collection_definition(
        cluster_client, ProviderID.OPENAI, EmbedderModel.TEXT_EMBEDDING_3_SMALL
    )

    with pytest.raises(CollectionCreationError) as exc_info:
        await CollectionBuilder(cluster_client).create(definition)

    assert isinstance(exc_info.value, ProvisioningError)
    assert exc_info.value.__cause__ is boom
    assert "connection refused" in str(exc_info.value)
    assert aclient.create_collection.await_count == 1


async def test_every_supported_pair_builds(cluster_client: QdrantClusterClient):
    for provider, model in SUPPORTED_PAIRS:
        definition = build_collection_definition(cluster_client, provider, model)
        assert definition.collection_name == f"c1_{provider.value}_{model.value}"
        assert definition.vectors_config.size > 0
