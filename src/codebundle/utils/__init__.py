"""Shared helpers (paths, extensions)."""
