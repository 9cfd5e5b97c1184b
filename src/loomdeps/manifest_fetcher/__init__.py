"""
Version manifest fetching.

This package resolves a Minecraft version in the launcher index and caches
its manifest locally.
"""

from .fetcher import ManifestFetcher

__all__ = ["ManifestFetcher"]
