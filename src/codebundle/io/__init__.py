"""Filesystem readers and writers."""
