"""Custom exceptions raised while provisioning a collection."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class UnsupportedModelError(AppException):
    """The embedding model is not available for the provider."""

    def __init__(self, provider: str, model: str):
        self.provider = provider
        self.model = model
        super().__init__(f"Model {model} is not available for provider {provider}.")


class ClusterNotConfiguredError(AppException):
    """No usable endpoint is configured for the cluster."""

    def __init__(self, cluster: str, reason: str | None = None):
        self.cluster = cluster
        if reason is None:
            message = f"No Qdrant URL configured for cluster {cluster}"
        else:
            message = f"Invalid Qdrant configuration for cluster {cluster}: {reason}"
        super().__init__(message)


class AbortedError(AppException):
    """The operator declined the confirmation prompt."""

    def __init__(self, message: str = "Aborted"):
        super().__init__(message)


class ProvisioningError(AppException):
    """A mutating call against the cluster failed."""

    def __init__(self, message: str, *, collection_name: str, cluster: str):
        self.collection_name = collection_name
        self.cluster = cluster
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} (collection={self.collection_name}, cluster={self.cluster})"


class CollectionNotCreatedError(ProvisioningError):
    """Qdrant answered the create-collection request with a false result."""

    def __init__(self, *, collection_name: str, cluster: str):
        super().__init__(
            "Collection not created!",
            collection_name=collection_name,
            cluster=cluster,
        )


class CollectionCreationError(ProvisioningError):
    """The create-collection request did not complete."""

    def __init__(self, reason: str, *, collection_name: str, cluster: str):
        super().__init__(
            f"Failed to create collection: {reason}",
            collection_name=collection_name,
            cluster=cluster,
        )


class ShardKeyError(ProvisioningError):
    """Base class for shard-key failures; records which key failed."""

    def __init__(
        self,
        message: str,
        *,
        collection_name: str,
        cluster: str,
        shard_key: str,
        index: int,
    ):
        self.shard_key = shard_key
        self.index = index
        super().__init__(message, collection_name=collection_name, cluster=cluster)

    def __str__(self) -> str:
        return (
            f"{self.message} (collection={self.collection_name}, cluster={self.cluster}, "
            f"shard_key={self.shard_key}, index={self.index})"
        )


class ShardKeyNotCreatedError(ShardKeyError):
    """Qdrant answered the create-shard-key request with a false result."""

    def __init__(self, *, collection_name: str, cluster: str, shard_key: str, index: int):
        super().__init__(
            "Shard key not created!",
            collection_name=collection_name,
            cluster=cluster,
            shard_key=shard_key,
            index=index,
        )


class ShardKeyCreationError(ShardKeyError):
    """The create-shard-key request did not complete."""

    def __init__(
        self,
        reason: str,
        *,
        collection_name: str,
        cluster: str,
        shard_key: str,
        index: int,
    ):
        super().__init__(
            f"Failed to create shard key: {reason}",
            collection_name=collection_name,
            cluster=cluster,
            shard_key=shard_key,
            index=index,
        )
