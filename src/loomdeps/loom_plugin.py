"""
Sets up a project to compile against Minecraft: creates the Minecraft
configurations and repositories, and populates the configurations from the
version manifest once the project has been evaluated.
"""

import dataclasses
import logging
from typing import List, Optional

from loomdeps import constants
from loomdeps.dependency_registrar import ConfigurationContainer, DependencyRegistrar
from loomdeps.library_classifier import LibraryClassifier, RegistrationPlan
from loomdeps.loomdeps_config import LoomConfig
from loomdeps.loomdeps_logger import LoomLogger
from loomdeps.manifest_fetcher import ManifestFetcher
from loomdeps.version_manifest_models import load


@dataclasses.dataclass
class Repository:
    """
    A repository declared on the project, either a maven url or a flat directory
    """

    name: str
    url: Optional[str] = None
    flat_dir: Optional[str] = None


@dataclasses.dataclass
class LoomProject:
    """
    The parts of a build project the plugin works with
    """

    config: LoomConfig
    configurations: ConfigurationContainer = dataclasses.field(
        default_factory=ConfigurationContainer
    )
    repositories: List[Repository] = dataclasses.field(default_factory=list)

    def add_maven_repo(self, name: str, url: str) -> Repository:
        repo = Repository(name=name, url=url)
        self.repositories.append(repo)
        return repo

    def add_flat_dir(self, name: str, directory: str) -> Repository:
        repo = Repository(name=name, flat_dir=directory)
        self.repositories.append(repo)
        return repo


class LoomPlugin:
    """
    Applies the Minecraft dependency setup to a LoomProject
    """

    def __init__(
        self,
        logger: LoomLogger,
        fetcher: Optional[ManifestFetcher] = None,
        classifier: Optional[LibraryClassifier] = None,
    ):
        self.logger = logger
        self.fetcher = fetcher
        self.classifier = classifier

    def apply(self, project: LoomProject) -> None:
        """
        Create the Minecraft configurations and add the Mojang repository.
        minecraftDependencies extends from minecraftClientDependencies so it holds every Minecraft dependency.
        """
        project.add_maven_repo(*constants.MOJANG_REPOSITORY)

        configurations = project.configurations
        common = configurations.maybe_create(constants.CONFIG_MC_DEPENDENCIES)
        client = configurations.maybe_create(constants.CONFIG_MC_DEPENDENCIES_CLIENT)
        configurations.maybe_create(constants.CONFIG_NATIVES)
        common.extends_from(client)

    def after_evaluate(self, project: LoomProject) -> RegistrationPlan:
        """
        Populate the Minecraft configurations. Called once by the host after the project is configured.

        This method:
        1. Declares the repositories the Minecraft libraries resolve from
        2. Fetches and parses the version manifest
        3. Classifies every library into a registration plan
        4. Registers the plan, then the mapped client jar and fabric-base

        Raises:
            FetchFailure: if the manifest could not be acquired
            MalformedManifest: if the manifest could not be parsed
        """
        config = project.config
        project.add_flat_dir(constants.CACHE_FILES_REPOSITORY_NAME, config.cache_dir)
        project.add_maven_repo(*constants.FABRIC_REPOSITORY)
        project.add_maven_repo(*constants.SPONGE_REPOSITORY)
        project.add_maven_repo(*constants.MOJANG_REPOSITORY)
        project.add_maven_repo(*constants.MAVEN_CENTRAL_REPOSITORY)
        project.add_maven_repo(*constants.JCENTER_REPOSITORY)

        fetcher = self.fetcher or ManifestFetcher(config, self.logger)
        classifier = self.classifier or LibraryClassifier(self.logger)

        # Nothing is registered until the whole manifest has been classified
        manifest_path = fetcher.fetch()
        descriptor = load(manifest_path)
        plan = classifier.plan(descriptor)

        registrar = DependencyRegistrar(project.configurations, self.logger)
        registrar.apply(plan)
        registrar.register_client_jar(config.client_mapped_jar_path)
        registrar.register_base(config.target_version, config.loader_version)

        self.logger.log(
            f"Minecraft {config.target_version} dependencies configured",
            logging.INFO,
        )
        return plan
