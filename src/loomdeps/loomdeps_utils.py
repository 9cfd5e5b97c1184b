"""
This file contains various utility functions like platform detection and file downloads.
"""

import logging
import os
import platform
import tempfile
from enum import Enum
from typing import Optional

import requests

from loomdeps.loomdeps_exceptions import FetchFailure, LoomException
from loomdeps.loomdeps_logger import LoomLogger


class OSName(str, Enum):
    """
    Operating system names as they appear in version manifest rules
    """

    WINDOWS = "windows"
    OSX = "osx"
    LINUX = "linux"


class PlatformUtils:
    """
    This class provides utilities for platform detection and identification.
    """

    @staticmethod
    def get_os_name() -> OSName:
        """
        Returns the manifest OS name of the current platform
        """
        system = platform.system()
        if system == "Windows":
            return OSName.WINDOWS
        elif system == "Darwin":
            return OSName.OSX
        elif system == "Linux":
            return OSName.LINUX
        raise LoomException(f"Unsupported platform: {system}")

    @staticmethod
    def get_arch_bits() -> str:
        """
        Returns "64" or "32", the value substituted for ${arch} in natives classifiers
        """
        return "64" if platform.architecture()[0] == "64bit" else "32"


class FileUtils:
    """
    Utility functions for files
    """

    @staticmethod
    def get_json(logger: LoomLogger, url: str, timeout: Optional[float] = None):
        """
        Fetches a JSON document from the given url
        """
        logger.log(f"Fetching {url}", logging.DEBUG)
        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            logger.log(f"Error fetching '{url}': {exc}", logging.ERROR)
            raise FetchFailure(f"Error fetching '{url}': {exc}") from exc
        except ValueError as exc:
            logger.log(f"Invalid JSON from '{url}': {exc}", logging.ERROR)
            raise FetchFailure(f"Invalid JSON from '{url}': {exc}") from exc

    @staticmethod
    def download_file(
        logger: LoomLogger, url: str, target_path: str, timeout: Optional[float] = None
    ) -> None:
        """
        Downloads the file from the given URL to the given target path.
        The file is written to a temporary file first and moved into place once complete.
        """
        target_dir = os.path.dirname(target_path) or "."
        tmp_name = None
        try:
            os.makedirs(target_dir, exist_ok=True)
            with requests.get(url, stream=True, timeout=timeout) as response:
                if response.status_code != 200:
                    logger.log(
                        f"Error downloading file '{url}': {response.status_code} {response.text}",
                        logging.ERROR,
                    )
                    raise FetchFailure(
                        f"Error downloading file '{url}': HTTP {response.status_code}"
                    )
                with tempfile.NamedTemporaryFile("wb", dir=target_dir, delete=False) as tmp_file:
                    tmp_name = tmp_file.name
                    for chunk in response.iter_content(chunk_size=8192):
                        tmp_file.write(chunk)
            os.replace(tmp_name, target_path)
        except requests.RequestException as exc:
            FileUtils._discard(tmp_name)
            logger.log(f"Error downloading file '{url}': {exc}", logging.ERROR)
            raise FetchFailure(f"Error downloading file '{url}': {exc}") from exc
        except OSError as exc:
            FileUtils._discard(tmp_name)
            logger.log(f"Error writing '{target_path}': {exc}", logging.ERROR)
            raise FetchFailure(f"Error writing '{target_path}': {exc}") from exc

    @staticmethod
    def _discard(tmp_name: Optional[str]) -> None:
        if tmp_name and os.path.exists(tmp_name):
            os.remove(tmp_name)
