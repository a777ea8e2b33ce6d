"""Filesystem helpers for a storage engine's on-disk directories (see kiwistorage.util)."""

__version__ = "0.1.0"
__all__ = ["__version__"]