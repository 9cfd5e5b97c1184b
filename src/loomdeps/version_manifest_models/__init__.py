"""
Version manifest models.

This package provides Pydantic data models for parsing the Minecraft
per-version manifest into an immutable VersionDescriptor.
"""

from .version_manifest import (
    VersionDescriptor,
    LibraryEntry,
    LibraryDownloads,
    DownloadArtifact,
    Rule,
    RuleAction,
    OsConstraint,
    parse,
    serialize,
    load,
)

__all__ = [
    "VersionDescriptor",
    "LibraryEntry",
    "LibraryDownloads",
    "DownloadArtifact",
    "Rule",
    "RuleAction",
    "OsConstraint",
    "parse",
    "serialize",
    "load",
]
