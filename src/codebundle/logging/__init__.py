"""Logging configuration and helpers for codebundle."""
