"""
Pydantic data models for the Minecraft per-version manifest (<version>.json).

Only the fields the dependency pass consumes are modelled; everything else in
the document is ignored so newer manifests keep parsing.
"""

import json
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

from loomdeps.loomdeps_exceptions import FetchFailure, MalformedManifest, UnresolvableEntry


class RuleAction(str, Enum):
    """Action of a platform rule."""

    ALLOW = "allow"
    DISALLOW = "disallow"


class OsConstraint(BaseModel):
    """
    The "os" block of a rule. A constraint without a name matches every platform.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = None

    def matches(self, os_name: str) -> bool:
        return self.name is None or self.name == os_name


class Rule(BaseModel):
    """A single platform rule of a library entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    action: RuleAction
    os: Optional[OsConstraint] = None

    def applies_to(self, os_name: str) -> bool:
        return self.os is None or self.os.matches(os_name)


class DownloadArtifact(BaseModel):
    """A downloadable file referenced by a library entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    path: Optional[str] = None
    url: Optional[str] = None
    sha1: Optional[str] = None
    size: Optional[int] = None


class LibraryDownloads(BaseModel):
    """The "downloads" block of a library entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    artifact: Optional[DownloadArtifact] = None
    classifiers: Optional[Mapping[str, DownloadArtifact]] = None

    @field_validator("classifiers")
    @classmethod
    def _read_only_classifiers(cls, value):
        return None if value is None else MappingProxyType(dict(value))

    @field_serializer("classifiers", mode="wrap")
    def _dump_classifiers(self, value, handler):
        return handler(None if value is None else dict(value))


class LibraryEntry(BaseModel):
    """
    One dependency record of the manifest.

    ``name`` is a Maven coordinate, group:artifact:version with an optional
    fourth classifier part.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    rules: Tuple[Rule, ...] = ()
    natives: Optional[Mapping[str, str]] = None
    downloads: Optional[LibraryDownloads] = None

    @field_validator("name")
    @classmethod
    def _check_coordinate(cls, value: str) -> str:
        parts = value.split(":")
        if len(parts) not in (3, 4) or not all(parts):
            raise ValueError(f"'{value}' is not a group:artifact:version coordinate")
        return value

    @field_validator("rules", mode="before")
    @classmethod
    def _null_rules(cls, value):
        return () if value is None else value

    @field_validator("natives")
    @classmethod
    def _read_only_natives(cls, value):
        return None if value is None else MappingProxyType(dict(value))

    @field_serializer("natives", mode="wrap")
    def _dump_natives(self, value, handler):
        return handler(None if value is None else dict(value))

    @property
    def group(self) -> str:
        return self.name.split(":")[0]

    @property
    def artifact(self) -> str:
        return self.name.split(":")[1]

    @property
    def version(self) -> str:
        return self.name.split(":")[2]

    @property
    def classifier(self) -> Optional[str]:
        parts = self.name.split(":")
        return parts[3] if len(parts) == 4 else None

    def natives_classifier(self, os_name: str, arch_bits: str = "64") -> Optional[str]:
        """
        Resolves the natives classifier for a platform, e.g. "natives-windows-64".

        Args:
            os_name: Manifest OS name ("windows", "osx", "linux")
            arch_bits: Substituted for ${arch} in the classifier template

        Returns:
            The classifier, or None if the entry has no natives for this platform
        """
        if not self.natives:
            return None
        template = self.natives.get(os_name)
        if not template:
            return None
        return template.replace("${arch}", arch_bits)

    def derived_path(self, classifier: Optional[str] = None) -> str:
        """Repository-relative path of the jar derived from the coordinate."""
        classifier = classifier or self.classifier
        suffix = f"-{classifier}" if classifier else ""
        return "/".join(
            [
                self.group.replace(".", "/"),
                self.artifact,
                self.version,
                f"{self.artifact}-{self.version}{suffix}.jar",
            ]
        )

    def is_natives_only(self) -> bool:
        """True when the entry ships per-platform jars under "classifiers" and no main artifact."""
        if self.downloads is None or not self.downloads.classifiers:
            return False
        artifact = self.downloads.artifact
        return artifact is None or not artifact.path

    def artifact_path(self) -> Optional[str]:
        """
        Returns the repository-relative path of the main artifact, or None if the
        entry does not reference one.

        Entries from older manifests carry no "downloads" block at all; their
        path is derived from the coordinate.
        """
        if self.downloads is None:
            return self.derived_path()
        if self.downloads.artifact is not None and self.downloads.artifact.path:
            return self.downloads.artifact.path
        return None

    def natives_path(self, classifier: str) -> Optional[str]:
        """
        Returns the repository-relative path of the natives jar for a classifier,
        or None if the manifest does not list that classifier.
        """
        if self.downloads is None:
            return self.derived_path(classifier)
        if not self.downloads.classifiers or classifier not in self.downloads.classifiers:
            return None
        return self.downloads.classifiers[classifier].path or self.derived_path(classifier)

    def require_artifact_path(self) -> str:
        path = self.artifact_path()
        if path is None:
            raise UnresolvableEntry(self.name)
        return path


class VersionDescriptor(BaseModel):
    """
    Structured form of a version manifest: the main artifact id and the
    ordered library list. Immutable once parsed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    main_artifact_id: str = Field(..., alias="id")
    libraries: Tuple[LibraryEntry, ...]

    @field_validator("libraries", mode="before")
    @classmethod
    def _libraries_is_list(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("libraries must be a list")
        return value


def parse(raw: Union[bytes, str]) -> VersionDescriptor:
    """
    Parses a version manifest document.

    Args:
        raw: The JSON document as bytes or str

    Returns:
        The parsed VersionDescriptor

    Raises:
        MalformedManifest: if the document is not JSON, or required fields are
            missing or have the wrong type
    """
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise MalformedManifest(f"Version manifest is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedManifest("Version manifest must be a JSON object")

    try:
        return VersionDescriptor.model_validate(data)
    except ValidationError as exc:
        raise MalformedManifest(f"Invalid version manifest: {exc}") from exc


def serialize(descriptor: VersionDescriptor) -> bytes:
    """Serializes a descriptor back to manifest JSON, using the manifest field names."""
    return descriptor.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


def load(path: str) -> VersionDescriptor:
    """Reads and parses a cached manifest file."""
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise FetchFailure(f"Cannot read cached version manifest {path}: {exc}") from exc
    return parse(raw)
