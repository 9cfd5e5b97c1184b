"""
loomdeps populates the Minecraft dependency configurations of a build from a version manifest.
"""

from .loom_plugin import LoomPlugin, LoomProject
from .loomdeps_config import LoomConfig
from .loomdeps_logger import LoomLogger

__all__ = ["LoomPlugin", "LoomProject", "LoomConfig", "LoomLogger"]
