"""Shared helpers used across the CLI, versioning and runtime modules."""
