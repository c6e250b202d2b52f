"""Embedding provider and model registry."""

from qdrant_admin.providers.registry import (
    EmbedderModel,
    ProviderID,
    embedding_size,
    is_model_supported,
    supported_models,
)

__all__ = [
    "EmbedderModel",
    "ProviderID",
    "embedding_size",
    "is_model_supported",
    "supported_models",
]
