"""
Version manifest fetcher.

Downloads the per-version manifest into the cache directory.
"""

import logging
import os

from loomdeps.loomdeps_config import LoomConfig
from loomdeps.loomdeps_exceptions import FetchFailure
from loomdeps.loomdeps_logger import LoomLogger
from loomdeps.loomdeps_utils import FileUtils


class ManifestFetcher:
    """
    Fetches the manifest of the configured Minecraft version.

    The cached file is reused when it already exists, so repeated fetches do
    not touch the network.
    """

    def __init__(self, config: LoomConfig, logger: LoomLogger):
        """
        Args:
            config: The loom configuration (target version, cache dir, index url)
            logger: Logger for progress and error messages
        """
        self.config = config
        self.logger = logger

    def fetch(self) -> str:
        """
        Make sure the version manifest is in the cache.

        Returns:
            Path of the cached manifest

        Raises:
            FetchFailure: if the manifest could not be downloaded or written
        """
        target_path = self.config.minecraft_json_path
        if os.path.isfile(target_path):
            self.logger.log(f"Using cached manifest {target_path}", logging.DEBUG)
            return target_path

        version_url = self._find_version_url()
        self.logger.log(
            f"Downloading manifest of {self.config.target_version} from {version_url}",
            logging.INFO,
        )
        FileUtils.download_file(
            self.logger, version_url, target_path, timeout=self.config.request_timeout
        )
        return target_path

    def _find_version_url(self) -> str:
        index = FileUtils.get_json(
            self.logger,
            self.config.manifest_index_url,
            timeout=self.config.request_timeout,
        )
        versions = index.get("versions") if isinstance(index, dict) else None
        if not isinstance(versions, list):
            raise FetchFailure(
                f"Version index {self.config.manifest_index_url} has no version list"
            )

        for version in versions:
            if isinstance(version, dict) and version.get("id") == self.config.target_version:
                url = version.get("url")
                if isinstance(url, str) and url:
                    return url
                raise FetchFailure(
                    f"Version {self.config.target_version} has no manifest url in the index"
                )

        raise FetchFailure(
            f"Minecraft version {self.config.target_version} not found in "
            f"{self.config.manifest_index_url}"
        )
