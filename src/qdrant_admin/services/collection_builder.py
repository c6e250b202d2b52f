"""Collection definition and creation for an embedding provider/model pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from qdrant_client import models as q

from qdrant_admin.core.constants import (
    HNSW_M,
    HNSW_PAYLOAD_M,
    MEMMAP_THRESHOLD_KB,
    QUANTIZATION_QUANTILE,
    REPLICATION_FACTOR,
    SHARD_NUMBER,
    WRITE_CONSISTENCY_FACTOR,
)
from qdrant_admin.core.exceptions import CollectionCreationError, CollectionNotCreatedError
from qdrant_admin.core.logging import get_logger
from qdrant_admin.providers.registry import EmbedderModel, ProviderID, embedding_size
from qdrant_admin.services.qdrant_clients import QdrantClusterClient

logger = get_logger(__name__)


def collection_name(collection_prefix: str, provider: ProviderID, model: EmbedderModel) -> str:
    """Return the collection name for a cluster prefix and provider/model pair."""
    return f"{collection_prefix}_{provider.value}_{model.value}"


@dataclass(frozen=True)
class CollectionDefinition:
    """Every parameter of a create-collection request."""

    collection_name: str
    vectors_config: q.VectorParams
    hnsw_config: q.HnswConfigDiff
    optimizers_config: q.OptimizersConfigDiff
    quantization_config: q.ScalarQuantization
    on_disk_payload: bool
    sharding_method: q.ShardingMethod
    shard_number: int
    replication_factor: int
    write_consistency_factor: int

    def to_create_kwargs(self) -> dict[str, Any]:
        """Render as keyword arguments for ``AsyncQdrantClient.create_collection``."""
        return {
            "collection_name": self.collection_name,
            "vectors_config": self.vectors_config,
            "hnsw_config": self.hnsw_config,
            "optimizers_config": self.optimizers_config,
            "quantization_config": self.quantization_config,
            "on_disk_payload": self.on_disk_payload,
            "sharding_method": self.sharding_method,
            "shard_number": self.shard_number,
            "replication_factor": self.replication_factor,
            "write_consistency_factor": self.write_consistency_factor,
        }

    def describe(self) -> list[str]:
        """Human-readable lines summarizing the configuration."""
        scalar = self.quantization_config.scalar
        return [
            f"Collection: {self.collection_name}",
            f"  Vector size: {self.vectors_config.size}",
            f"  Distance: {self.vectors_config.distance}",
            f"  Vectors on-disk: {self.vectors_config.on_disk}",
            f"  HNSW: m={self.hnsw_config.m}, payload_m={self.hnsw_config.payload_m}",
            f"  Memmap threshold: {self.optimizers_config.memmap_threshold}",
            f"  Quantization: {scalar.type} (quantile={scalar.quantile}, "
            f"always_ram={scalar.always_ram})",
            f"  Payload on-disk: {self.on_disk_payload}",
            f"  Sharding: {self.sharding_method}, shards={self.shard_number}, "
            f"replication={self.replication_factor}, "
            f"write_consistency={self.write_consistency_factor}",
        ]


def build_collection_definition(
    cluster_client: QdrantClusterClient,
    provider: ProviderID,
    model: EmbedderModel,
) -> CollectionDefinition:
    """Resolve the collection definition for a provider/model on a cluster.

    The pair must already have been checked against the provider registry.

    Vectors and payloads live on disk while int8-quantized vectors stay in
    RAM. The vector HNSW graph is disabled (``m=0``) and only the payload
    graph is built. Sharding is custom: shard keys are created explicitly
    once the collection exists.

    Args:
        cluster_client: Target cluster handle, supplies the collection prefix.
        provider: Embedding provider.
        model: Embedding model, supplies the vector size.

    Returns:
        CollectionDefinition: The full creation request.
    """
    return CollectionDefinition(
        collection_name=collection_name(cluster_client.collection_prefix, provider, model),
        vectors_config=q.VectorParams(
            size=embedding_size(model),
            distance=q.Distance.COSINE,
            on_disk=True,
        ),
        hnsw_config=q.HnswConfigDiff(m=HNSW_M, payload_m=HNSW_PAYLOAD_M),
        optimizers_config=q.OptimizersConfigDiff(memmap_threshold=MEMMAP_THRESHOLD_KB),
        quantization_config=q.ScalarQuantization(
            scalar=q.ScalarQuantizationConfig(
                type=q.ScalarType.INT8,
                quantile=QUANTIZATION_QUANTILE,
                always_ram=True,
            ),
        ),
        on_disk_payload=True,
        sharding_method=q.ShardingMethod.CUSTOM,
        shard_number=SHARD_NUMBER,
        replication_factor=REPLICATION_FACTOR,
        write_consistency_factor=WRITE_CONSISTENCY_FACTOR,
    )


class CollectionBuilder:
    """Submits a collection definition to a cluster."""

    def __init__(self, cluster_client: QdrantClusterClient):
        self.cluster_client = cluster_client

    async def create(self, definition: CollectionDefinition) -> None:
        """Create the collection, exactly once.

        A second create for the same name is rejected by Qdrant, so failures
        are raised and never retried.

        Raises:
            CollectionCreationError: The request did not complete.
            CollectionNotCreatedError: Qdrant returned a false result.
        """
        cluster = str(self.cluster_client.cluster)
        name = definition.collection_name

        logger.info("Creating collection '%s' on cluster '%s'", name, cluster)
        try:
            created = await self.cluster_client.client.create_collection(
                **definition.to_create_kwargs()
            )
        except Exception as exc:
            raise CollectionCreationError(
                str(exc), collection_name=name, cluster=cluster
            ) from exc

        if not created:
            raise CollectionNotCreatedError(collection_name=name, cluster=cluster)

        logger.info("Done creating collection '%s' on cluster '%s'", name, cluster)


__all__ = [
    "CollectionBuilder",
    "CollectionDefinition",
    "build_collection_definition",
    "collection_name",
]
