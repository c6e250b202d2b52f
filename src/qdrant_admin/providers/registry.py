"""Embedding providers, their models and the provider/model support matrix."""

from enum import Enum
from typing import Final


class ProviderID(str, Enum):
    """Embedding providers."""

    OPENAI = "openai"
    MISTRAL = "mistral"

    def __str__(self) -> str:
        return self.value


class EmbedderModel(str, Enum):
    """Embedding models a collection can be provisioned for."""

    TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
    TEXT_EMBEDDING_3_LARGE_1536 = "text-embedding-3-large-1536"
    MISTRAL_EMBED = "mistral-embed"

    def __str__(self) -> str:
        return self.value


EMBEDDING_SIZES: Final[dict[EmbedderModel, int]] = {
    EmbedderModel.TEXT_EMBEDDING_3_SMALL: 1536,
    # text-embedding-3-large shortened to 1536 dimensions
    EmbedderModel.TEXT_EMBEDDING_3_LARGE_1536: 1536,
    EmbedderModel.MISTRAL_EMBED: 1024,
}

SUPPORTED_MODELS: Final[dict[ProviderID, frozenset[EmbedderModel]]] = {
    ProviderID.OPENAI: frozenset(
        {
            EmbedderModel.TEXT_EMBEDDING_3_SMALL,
            EmbedderModel.TEXT_EMBEDDING_3_LARGE_1536,
        }
    ),
    ProviderID.MISTRAL: frozenset({EmbedderModel.MISTRAL_EMBED}),
}


def supported_models(provider: ProviderID) -> frozenset[EmbedderModel]:
    """Return the models available for a provider."""
    return SUPPORTED_MODELS.get(provider, frozenset())


def is_model_supported(provider: ProviderID, model: EmbedderModel) -> bool:
    """Return True if the provider serves the model."""
    return model in supported_models(provider)


def embedding_size(model: EmbedderModel) -> int:
    """Return the output dimensionality of a model."""
    return EMBEDDING_SIZES[model]


__all__ = [
    "EMBEDDING_SIZES",
    "SUPPORTED_MODELS",
    "EmbedderModel",
    "ProviderID",
    "embedding_size",
    "is_model_supported",
    "supported_models",
]
