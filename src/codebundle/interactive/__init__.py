"""Interactive console helpers."""
