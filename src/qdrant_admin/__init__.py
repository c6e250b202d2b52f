"""Provisioning tools for custom-sharded Qdrant collections."""

__version__ = "0.1.0"
