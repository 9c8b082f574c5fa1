"""Tatu Language Server package.

This package provides:
- A pygls-based Language Server for Tatu source files.
- An indexer that runs the real scanner and parser over a buffer without evaluating it.
"""

__all__ = [
    "server",
    "indexer",
]
