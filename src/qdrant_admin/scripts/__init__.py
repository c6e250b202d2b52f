"""Operator scripts, run with ``python -m qdrant_admin.scripts.<name>``."""
