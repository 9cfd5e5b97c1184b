"""
Configuration parameters for loomdeps. This is the "minecraft" extension a build script fills in.
"""

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Optional

from loomdeps import constants
from loomdeps.loomdeps_settings import LoomSettings


@dataclass
class LoomConfig:
    """
    Configuration parameters
    """

    target_version: str
    loader_version: str = ""
    cache_dir: str = field(default_factory=LoomSettings.get_cache_directory)
    manifest_index_url: str = constants.VERSION_MANIFEST_INDEX_URL
    request_timeout: Optional[float] = constants.REQUEST_TIMEOUT

    @classmethod
    def from_dict(cls, env: dict):
        """
        Create a LoomConfig instance from a dictionary, ignoring unknown keys
        """
        import inspect

        return cls(
            **{k: v for k, v in env.items() if k in inspect.signature(cls).parameters}
        )

    @property
    def minecraft_json_path(self) -> str:
        """Cached per-version manifest, e.g. <cache>/1.12.2-info.json"""
        return str(PurePath(self.cache_dir, f"{self.target_version}-info.json"))

    @property
    def client_mapped_jar_path(self) -> str:
        """Mapped client jar produced by the mapping step, published through the cache flat dir"""
        return str(
            PurePath(self.cache_dir, f"minecraft-{self.target_version}-client-mapped.jar")
        )
