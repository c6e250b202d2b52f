"""Two-phase provisioning: create the collection, then its shard keys."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from qdrant_admin.core.exceptions import AbortedError
from qdrant_admin.core.logging import get_logger
from qdrant_admin.core.prompt import Confirm
from qdrant_admin.providers.registry import EmbedderModel, ProviderID
from qdrant_admin.services.collection_builder import (
    CollectionBuilder,
    CollectionDefinition,
    build_collection_definition,
)
from qdrant_admin.services.qdrant_clients import QdrantClusterClient
from qdrant_admin.services.shard_keys import ShardKeyProvisioner

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProvisioningResult:
    """Outcome of a provisioning run."""

    collection_name: str
    cluster: str
    definition: CollectionDefinition
    shard_keys: list[str] = field(default_factory=list)
    dry_run: bool = False


async def provision_collection(
    cluster_client: QdrantClusterClient,
    provider: ProviderID,
    model: EmbedderModel,
    confirm: Confirm,
    *,
    dry_run: bool = False,
) -> ProvisioningResult:
    """Create a collection for a provider/model pair and all its shard keys.

    Nothing is sent to the cluster until ``confirm`` accepts. Every failure
    stops the run: a failed collection creation means no shard-key request is
    sent, and a failed shard key leaves the collection and the keys before it
    in place.

    Args:
        cluster_client: Target cluster handle.
        provider: Embedding provider, already validated against the registry.
        model: Embedding model, already validated against the registry.
        confirm: Asked once before the first mutating call.
        dry_run: Only resolve and log the definition.

    Returns:
        ProvisioningResult: Collection name and created shard keys.

    Raises:
        AbortedError: The operator declined.
        ProvisioningError: Collection or shard-key creation failed.
    """
    cluster = str(cluster_client.cluster)
    definition = build_collection_definition(cluster_client, provider, model)
    name = definition.collection_name

    if dry_run:
        logger.info("Dry run: collection '%s' would be created on cluster '%s'", name, cluster)
        for line in definition.describe():
            logger.info(line)
        return ProvisioningResult(
            collection_name=name,
            cluster=cluster,
            definition=definition,
            dry_run=True,
        )

    logger.info("About to create collection %s on cluster %s", name, cluster)
    question = f"Are you sure you want to create collection {name} on cluster {cluster}?"
    # The prompt blocks on stdin; keep it off the event loop.
    if not await asyncio.to_thread(confirm, question):
        raise AbortedError()

    await CollectionBuilder(cluster_client).create(definition)
    shard_keys = await ShardKeyProvisioner(cluster_client).provision(name)

    return ProvisioningResult(
        collection_name=name,
        cluster=cluster,
        definition=definition,
        shard_keys=shard_keys,
    )


__all__ = ["ProvisioningResult", "provision_collection"]
