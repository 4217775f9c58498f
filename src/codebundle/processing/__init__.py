"""Public API surface for codebundle.processing."""
__all__ = [
    "filters",
    "line_ops",
    "sorter",
    "transformer",
]
