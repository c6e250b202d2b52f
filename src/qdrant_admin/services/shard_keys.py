"""Shard key naming, routing and provisioning for custom-sharded collections."""

from __future__ import annotations

import hashlib

from qdrant_admin.core.constants import SHARD_KEY_COUNT
from qdrant_admin.core.exceptions import ShardKeyCreationError, ShardKeyNotCreatedError
from qdrant_admin.core.logging import get_logger
from qdrant_admin.services.qdrant_clients import QdrantClusterClient

logger = get_logger(__name__)


def shard_key_name(shard_key_prefix: str, index: int) -> str:
    """Return the name of the shard key at ``index``."""
    return f"{shard_key_prefix}_{index}"


def shard_key_names(shard_key_prefix: str, count: int = SHARD_KEY_COUNT) -> list[str]:
    """Return every shard key name of a collection, in index order."""
    return [shard_key_name(shard_key_prefix, i) for i in range(count)]


def route_shard_key(shard_key_prefix: str, routing_key: str) -> str:
    """Map a routing identifier onto one of the provisioned shard keys.

    Reference router only: it shows that any routing over ``SHARD_KEY_COUNT``
    lands on a key this module provisions. It is not the routing contract of
    existing writers, which may hash differently; only the key count and the
    ``{prefix}_{index}`` naming are shared.

    Args:
        shard_key_prefix: Shard key prefix of the cluster.
        routing_key: Identifier documents are grouped by (e.g. a data source id).

    Returns:
        The shard key documents with this routing key are written to.
    """
    digest = hashlib.sha256(routing_key.encode("utf-8")).digest()
    index = int.from_bytes(digest[:8], "big") % SHARD_KEY_COUNT
    return shard_key_name(shard_key_prefix, index)


class ShardKeyProvisioner:
    """Creates the shard keys of a freshly created collection."""

    def __init__(self, cluster_client: QdrantClusterClient, count: int = SHARD_KEY_COUNT):
        self.cluster_client = cluster_client
        self.count = count

    async def provision(self, collection_name: str) -> list[str]:
        """Create every shard key, one request at a time in index order.

        Shard number and replication factor are not passed, so the values set
        on the collection apply. Keys created before a failure are kept.

        Args:
            collection_name: Collection the keys are created on.

        Returns:
            list[str]: Created shard keys, in creation order.

        Raises:
            ShardKeyCreationError: A request did not complete.
            ShardKeyNotCreatedError: Qdrant returned a false result.
        """
        cluster = str(self.cluster_client.cluster)
        created: list[str] = []

        for index in range(self.count):
            shard_key = shard_key_name(self.cluster_client.shard_key_prefix, index)

            try:
                ok = await self.cluster_client.client.create_shard_key(
                    collection_name=collection_name,
                    shard_key=shard_key,
                )
            except Exception as exc:
                raise ShardKeyCreationError(
                    str(exc),
                    collection_name=collection_name,
                    cluster=cluster,
                    shard_key=shard_key,
                    index=index,
                ) from exc

            if not ok:
                raise ShardKeyNotCreatedError(
                    collection_name=collection_name,
                    cluster=cluster,
                    shard_key=shard_key,
                    index=index,
                )

            created.append(shard_key)
            logger.info(
                "Done creating shard key [%s] for collection '%s' on cluster '%s' (%d/%d)",
                shard_key,
                collection_name,
                cluster,
                index + 1,
                self.count,
            )

        return created


__all__ = ["ShardKeyProvisioner", "route_shard_key", "shard_key_name", "shard_key_names"]
