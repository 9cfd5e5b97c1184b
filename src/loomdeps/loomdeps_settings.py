"""
Default locations used by loomdeps.
"""

import os
from pathlib import PurePath


class LoomSettings:
    """
    Provides the various settings for loomdeps.
    """

    @staticmethod
    def get_gradle_user_home() -> str:
        """
        Returns the gradle user home, honouring GRADLE_USER_HOME
        """
        return os.environ.get(
            "GRADLE_USER_HOME", str(PurePath(os.path.expanduser("~"), ".gradle"))
        )

    @staticmethod
    def get_cache_directory() -> str:
        """
        Returns the directory where manifests and mapped jars are cached
        """
        return str(PurePath(LoomSettings.get_gradle_user_home(), "caches", "fabric-loom"))
