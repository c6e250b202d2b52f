"""Qdrant clusters and the client handles used to reach them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from qdrant_client import AsyncQdrantClient

from qdrant_admin.config import Settings
from qdrant_admin.core.exceptions import ClusterNotConfiguredError
from qdrant_admin.core.logging import get_logger

logger = get_logger(__name__)


class QdrantCluster(str, Enum):
    """Physically distinct Qdrant clusters."""

    CLUSTER_0 = "cluster-0"
    DEDICATED_0 = "dedicated-0"
    DEDICATED_1 = "dedicated-1"
    DEDICATED_2 = "dedicated-2"

    def __str__(self) -> str:
        return self.value

    @property
    def settings_key(self) -> str:
        """Key used for this cluster's settings fields (``qdrant_<key>_url``)."""
        return self.value.replace("-", "_")

    @property
    def collection_prefix(self) -> str:
        return _PREFIXES[self][0]

    @property
    def shard_key_prefix(self) -> str:
        return _PREFIXES[self][1]


# (collection prefix, shard key prefix) per cluster.
_PREFIXES: dict[QdrantCluster, tuple[str, str]] = {
    QdrantCluster.CLUSTER_0: ("c0", "key_c0"),
    QdrantCluster.DEDICATED_0: ("d0", "key_d0"),
    QdrantCluster.DEDICATED_1: ("d1", "key_d1"),
    QdrantCluster.DEDICATED_2: ("d2", "key_d2"),
}


@dataclass(frozen=True, slots=True)
class QdrantClusterClient:
    """Client handle for one cluster, with the cluster's naming prefixes."""

    cluster: QdrantCluster
    client: AsyncQdrantClient
    collection_prefix: str
    shard_key_prefix: str


class QdrantClients:
    """Lazily builds and caches one async client per cluster."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._clients: dict[QdrantCluster, QdrantClusterClient] = {}

    def client(self, cluster: QdrantCluster) -> QdrantClusterClient:
        """Return the client handle for a cluster, building it on first use.

        Args:
            cluster: Target cluster.

        Returns:
            QdrantClusterClient: Client and naming prefixes for the cluster.

        Raises:
            ClusterNotConfiguredError: If no usable URL is configured for the cluster.
        """
        if cluster in self._clients:
            return self._clients[cluster]

        url, api_key = self.settings.qdrant_endpoint(cluster.settings_key)
        if not url:
            raise ClusterNotConfiguredError(str(cluster))

        try:
            aclient = AsyncQdrantClient(
                url=url,
                api_key=api_key,
                prefer_grpc=self.settings.qdrant_prefer_grpc,
                timeout=self.settings.qdrant_timeout,
            )
        except Exception as exc:
            # e.g. urllib3 LocationParseError for a malformed URL
            raise ClusterNotConfiguredError(str(cluster), reason=str(exc)) from exc

        handle = QdrantClusterClient(
            cluster=cluster,
            client=aclient,
            collection_prefix=cluster.collection_prefix,
            shard_key_prefix=cluster.shard_key_prefix,
        )
        self._clients[cluster] = handle

        logger.info("Qdrant client initialized for cluster '%s' (%s)", cluster, url)
        return handle

    async def aclose(self) -> None:
        """Close every client built so far."""
        for handle in self._clients.values():
            await handle.client.close()
        self._clients.clear()


__all__ = ["QdrantCluster", "QdrantClusterClient", "QdrantClients"]
