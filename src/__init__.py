# src/__init__.py — v1
"""rebuildcheck: incremental rebuild decisions for native compilation units."""

from rebuildcheck.version import __version__

__all__ = ["__version__"]
