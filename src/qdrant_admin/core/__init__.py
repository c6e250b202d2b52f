"""Shared constants, exceptions, logging and prompts."""
