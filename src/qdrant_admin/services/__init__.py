"""Collection provisioning services."""

from qdrant_admin.services.collection_builder import (
    CollectionBuilder,
    CollectionDefinition,
    build_collection_definition,
    collection_name,
)
from qdrant_admin.services.provisioning import ProvisioningResult, provision_collection
from qdrant_admin.services.qdrant_clients import (
    QdrantCluster,
    QdrantClusterClient,
    QdrantClients,
)
from qdrant_admin.services.shard_keys import (
    ShardKeyProvisioner,
    route_shard_key,
    shard_key_name,
    shard_key_names,
)

__all__ = [
    # Clusters
    "QdrantCluster",
    "QdrantClusterClient",
    "QdrantClients",
    # Collection
    "CollectionBuilder",
    "CollectionDefinition",
    "build_collection_definition",
    "collection_name",
    # Shard keys
    "ShardKeyProvisioner",
    "route_shard_key",
    "shard_key_name",
    "shard_key_names",
    # Workflow
    "ProvisioningResult",
    "provision_collection",
]
