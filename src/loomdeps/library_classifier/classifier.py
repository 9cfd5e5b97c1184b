"""
Library classification.

Decides, per manifest library, whether it is allowed on the current platform
and which dependency configuration it belongs to, and turns a whole version
descriptor into a registration plan.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from loomdeps import constants
from loomdeps.loomdeps_exceptions import UnresolvableEntry
from loomdeps.loomdeps_logger import LoomLogger
from loomdeps.loomdeps_utils import PlatformUtils
from loomdeps.version_manifest_models import LibraryEntry, RuleAction, VersionDescriptor


class DependencyBucket(str, Enum):
    """Named dependency configurations; the value is the configuration name."""

    COMMON = constants.CONFIG_MC_DEPENDENCIES
    CLIENT_ONLY = constants.CONFIG_MC_DEPENDENCIES_CLIENT
    NATIVES = constants.CONFIG_NATIVES


class ClassificationResult:
    """
    Outcome of classifying one library entry.
    """

    def __init__(
        self,
        include: bool,
        bucket: DependencyBucket = DependencyBucket.COMMON,
        natives_classifier: Optional[str] = None,
        main_artifact: bool = True,
    ):
        self.include = include
        self.bucket = bucket
        self.natives_classifier = natives_classifier
        # False for natives-only entries, which publish no jar under the plain coordinate
        self.main_artifact = main_artifact

    def __eq__(self, other) -> bool:
        if not isinstance(other, ClassificationResult):
            return NotImplemented
        return (
            self.include == other.include
            and self.bucket == other.bucket
            and self.natives_classifier == other.natives_classifier
            and self.main_artifact == other.main_artifact
        )

    def __repr__(self) -> str:
        return (
            f"ClassificationResult(include={self.include}, "
            f"bucket={self.bucket.name}, natives={self.natives_classifier}, "
            f"main_artifact={self.main_artifact})"
        )


class PlannedDependency:
    """
    A coordinate to be added to a configuration, with the library it came from.
    """

    def __init__(self, bucket: DependencyBucket, coordinate: str, source: str):
        self.bucket = bucket
        self.coordinate = coordinate
        self.source = source

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlannedDependency):
            return NotImplemented
        return (self.bucket, self.coordinate, self.source) == (
            other.bucket,
            other.coordinate,
            other.source,
        )

    def __repr__(self) -> str:
        return f"PlannedDependency(bucket={self.bucket.name}, coordinate={self.coordinate})"


class RegistrationPlan:
    """
    Ordered list of registrations computed for one version descriptor.
    """

    def __init__(self, main_artifact_id: str):
        self.main_artifact_id = main_artifact_id
        self.dependencies: List[PlannedDependency] = []
        self.excluded: List[str] = []

    def add(self, bucket: DependencyBucket, coordinate: str, source: str) -> None:
        self.dependencies.append(PlannedDependency(bucket, coordinate, source))

    def coordinates(self, bucket: DependencyBucket) -> List[str]:
        """
        Get the planned coordinates of one bucket, in manifest order.
        """
        return [d.coordinate for d in self.dependencies if d.bucket == bucket]

    def __len__(self) -> int:
        return len(self.dependencies)

    def __iter__(self):
        return iter(self.dependencies)


class LibraryClassifier:
    """
    Classifies manifest libraries against a fixed platform and keyword table.

    Rules are evaluated in order and the last rule that applies to the platform
    decides; when no rule applies the library is allowed.
    """

    def __init__(
        self,
        logger: LoomLogger,
        client_only_keywords: Iterable[str] = constants.CLIENT_ONLY_KEYWORDS,
        os_name: Optional[str] = None,
        arch_bits: Optional[str] = None,
    ):
        """
        Args:
            logger: Logger for exclusion messages
            client_only_keywords: Substrings that mark a coordinate as client-only
            os_name: Manifest OS name to evaluate rules for, defaults to the host
            arch_bits: Value for ${arch} in natives classifiers, defaults to the host
        """
        self.logger = logger
        self.client_only_keywords: Tuple[str, ...] = tuple(client_only_keywords)
        self.os_name = os_name or PlatformUtils.get_os_name().value
        self.arch_bits = arch_bits or PlatformUtils.get_arch_bits()

    def is_allowed(self, entry: LibraryEntry) -> bool:
        allowed = True
        for rule in entry.rules:
            if rule.applies_to(self.os_name):
                allowed = rule.action == RuleAction.ALLOW
        return allowed

    def bucket_for(self, name: str) -> DependencyBucket:
        if any(keyword in name for keyword in self.client_only_keywords):
            return DependencyBucket.CLIENT_ONLY
        return DependencyBucket.COMMON

    def classify(self, entry: LibraryEntry) -> ClassificationResult:
        """
        Classify a single library entry.

        Args:
            entry: The library entry from the manifest

        Returns:
            ClassificationResult; include is False when the platform rules
            disallow the library or it has no resolvable artifact
        """
        if not self.is_allowed(entry):
            return ClassificationResult(include=False)

        natives = entry.natives_classifier(self.os_name, self.arch_bits)
        if natives is not None and entry.natives_path(natives) is None:
            natives = None

        try:
            if entry.is_natives_only():
                if natives is None:
                    raise UnresolvableEntry(entry.name)
            else:
                entry.require_artifact_path()
        except UnresolvableEntry as exc:
            self.logger.log(str(exc), logging.DEBUG)
            return ClassificationResult(include=False)

        return ClassificationResult(
            include=True,
            bucket=self.bucket_for(entry.name),
            natives_classifier=natives,
            main_artifact=not entry.is_natives_only(),
        )

    def plan(self, descriptor: VersionDescriptor) -> RegistrationPlan:
        """
        Classify every library of a descriptor, in manifest order.

        Args:
            descriptor: The parsed version manifest

        Returns:
            RegistrationPlan with one entry per included library that has a main
            artifact, plus one natives entry for each library that carries natives
            for this platform
        """
        plan = RegistrationPlan(descriptor.main_artifact_id)
        for entry in descriptor.libraries:
            result = self.classify(entry)
            if not result.include:
                self.logger.log(
                    f"Skipping {entry.name} on {self.os_name}", logging.DEBUG
                )
                plan.excluded.append(entry.name)
                continue

            if result.main_artifact:
                plan.add(result.bucket, entry.name, entry.name)
            if result.natives_classifier:
                plan.add(
                    DependencyBucket.NATIVES,
                    f"{entry.name}:{result.natives_classifier}",
                    entry.name,
                )

        self.logger.log(
            f"Planned {len(plan)} dependencies for {descriptor.main_artifact_id}, "
            f"{len(plan.excluded)} libraries excluded",
            logging.INFO,
        )
        return plan
