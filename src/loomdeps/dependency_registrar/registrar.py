"""
Dependency registrar.

Applies registration plans and the derived Minecraft coordinates onto the
configurations of a project.
"""

import logging
import os
from typing import Optional

from loomdeps import constants
from loomdeps.dependency_registrar.configurations import ConfigurationRegistry
from loomdeps.library_classifier import DependencyBucket, RegistrationPlan
from loomdeps.loomdeps_logger import LoomLogger


class DependencyRegistrar:
    """
    Adds dependency coordinates to named configurations of a registry.

    Whether registering the same coordinate twice has any effect is up to the
    registry.
    """

    def __init__(self, registry: ConfigurationRegistry, logger: LoomLogger):
        """
        Args:
            registry: The project's configuration registry
            logger: Logger for registration messages
        """
        self.registry = registry
        self.logger = logger

    def register(
        self, bucket: DependencyBucket, coordinate: str, source: Optional[str] = None
    ) -> None:
        origin = f" (from {source})" if source and source != coordinate else ""
        self.logger.log(f"Adding {coordinate} to {bucket.value}{origin}", logging.DEBUG)
        self.registry.add_dependency(bucket.value, coordinate)

    def register_derived(self, bucket: DependencyBucket, coordinate: str) -> None:
        """
        Register a coordinate that does not come from the manifest.
        """
        self.logger.log(f"Adding derived {coordinate} to {bucket.value}", logging.INFO)
        self.registry.add_dependency(bucket.value, coordinate)

    def apply(self, plan: RegistrationPlan) -> int:
        """
        Register every planned dependency, in plan order.

        Args:
            plan: The plan produced by LibraryClassifier.plan

        Returns:
            Number of registrations made
        """
        for planned in plan:
            self.register(planned.bucket, planned.coordinate, planned.source)
        self.logger.log(
            f"Registered {len(plan)} libraries of {plan.main_artifact_id}",
            logging.INFO,
        )
        return len(plan)

    def register_client_jar(self, mapped_jar_path: str) -> str:
        """
        Register the mapped client jar from the cache directory.

        Args:
            mapped_jar_path: Path of the cached jar, e.g. .../minecraft-1.12.2-client-mapped.jar

        Returns:
            The registered coordinate, e.g. net.minecraft:minecraft-1.12.2-client-mapped
        """
        file_name = os.path.basename(mapped_jar_path)
        if file_name.endswith(".jar"):
            file_name = file_name[: -len(".jar")]
        coordinate = f"{constants.MINECRAFT_GROUP}:{file_name}"
        self.register_derived(DependencyBucket.COMMON, coordinate)
        return coordinate

    def register_base(
        self, target_version: str, loader_version: Optional[str]
    ) -> Optional[str]:
        """
        Register fabric-base for the target version when a loader version is configured.

        Args:
            target_version: The Minecraft version, e.g. 1.12.2
            loader_version: The loader version, e.g. 0.3.2; nothing is registered when empty

        Returns:
            The registered coordinate, or None if nothing was registered
        """
        if not loader_version:
            return None
        coordinate = f"{constants.FABRIC_BASE_ARTIFACT}:{target_version}-{loader_version}"
        self.register_derived(DependencyBucket.COMMON, coordinate)
        return coordinate
