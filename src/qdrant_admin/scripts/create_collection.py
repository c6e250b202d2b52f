#!/usr/bin/env python3
"""Create a Qdrant collection for an embedding provider/model and its shard keys.

This script should be run ONCE per (cluster, provider, model). A second run
fails because the collection already exists; after a partial failure, inspect
the cluster before re-running.

Usage:
    python -m qdrant_admin.scripts.create_collection \
        --provider openai \
        --model text-embedding-3-small \
        --cluster cluster-0 \
        [--dry-run]
"""

import argparse
import asyncio
import sys

from pydantic import ValidationError

from qdrant_admin.config import get_settings
from qdrant_admin.core.exceptions import (
    AbortedError,
    AppException,
    ProvisioningError,
    ShardKeyError,
    UnsupportedModelError,
)
from qdrant_admin.core.logging import get_logger, setup_logging
from qdrant_admin.core.prompt import Confirm, confirm
from qdrant_admin.providers.registry import EmbedderModel, ProviderID, is_model_supported
from qdrant_admin.services.provisioning import ProvisioningResult, provision_collection
from qdrant_admin.services.qdrant_clients import QdrantClients, QdrantCluster

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_UNSUPPORTED_MODEL = 1
EXIT_FAILED = 2


async def create_qdrant_collection(
    cluster: QdrantCluster,
    provider: ProviderID,
    model: EmbedderModel,
    confirm_fn: Confirm = confirm,
    *,
    dry_run: bool = False,
) -> ProvisioningResult:
    """Provision the collection and shard keys on a cluster.

    Returns:
        ProvisioningResult: What was created.
    """
    clients = QdrantClients(get_settings())
    try:
        cluster_client = clients.client(cluster)
        result = await provision_collection(
            cluster_client,
            provider,
            model,
            confirm_fn,
            dry_run=dry_run,
        )
    finally:
        await clients.aclose()

    if not result.dry_run:
        logger.info("=== Provisioning Complete ===")
        logger.info(f"Collection: {result.collection_name}")
        logger.info(f"Cluster: {result.cluster}")
        logger.info(
            f"Shard keys: {len(result.shard_keys)} "
            f"({result.shard_keys[0]}..{result.shard_keys[-1]})"
        )

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a Qdrant collection for an embedding model, with its shard keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the OpenAI text-embedding-3-small collection on cluster-0
  python -m qdrant_admin.scripts.create_collection -p openai -m text-embedding-3-small -c cluster-0

  # Print the collection configuration without touching the cluster
  python -m qdrant_admin.scripts.create_collection -p mistral -m mistral-embed -c dedicated-0 --dry-run
        """,
    )
    parser.add_argument(
        "-p",
        "--provider",
        required=True,
        type=ProviderID,
        choices=list(ProviderID),
        help="Name of the embedding provider",
    )
    parser.add_argument(
        "-m",
        "--model",
        required=True,
        type=EmbedderModel,
        choices=list(EmbedderModel),
        help="Name of the embedding model",
    )
    parser.add_argument(
        "-c",
        "--cluster",
        required=True,
        type=QdrantCluster,
        choices=list(QdrantCluster),
        help="Name of the Qdrant cluster",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the collection configuration without creating anything",
    )
    return parser


def main(argv: list[str] | None = None, confirm_fn: Confirm = confirm) -> None:
    """Entry point."""
    args = build_parser().parse_args(argv)

    # Validate the model for the given provider before loading settings or
    # touching any cluster.
    if not is_model_supported(args.provider, args.model):
        print(f"Error: {UnsupportedModelError(args.provider, args.model)}", file=sys.stderr)
        sys.exit(EXIT_UNSUPPORTED_MODEL)

    try:
        setup_logging()
    except ValidationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILED)

    try:
        asyncio.run(
            create_qdrant_collection(
                args.cluster,
                args.provider,
                args.model,
                confirm_fn,
                dry_run=args.dry_run,
            )
        )
    except AbortedError as e:
        logger.warning(e.message)
        sys.exit(EXIT_FAILED)
    except ShardKeyError as e:
        logger.error(f"Provisioning failed: {e}", exc_info=True)
        logger.error(
            f"Collection '{e.collection_name}' exists with the first {e.index} shard keys; "
            "verify the cluster state before re-running"
        )
        sys.exit(EXIT_FAILED)
    except AppException as e:
        logger.error(f"Provisioning failed: {e}", exc_info=isinstance(e, ProvisioningError))
        sys.exit(EXIT_FAILED)

    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
