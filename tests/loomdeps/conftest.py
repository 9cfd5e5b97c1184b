import pathlib

import pytest

from loomdeps.loomdeps_logger import LoomLogger


@pytest.fixture
def logger():
    return LoomLogger()


@pytest.fixture
def manifest_path():
    """Path to a trimmed 1.12.2 version manifest."""
    return pathlib.Path(__file__).parent / "resources" / "1.12.2.json"


@pytest.fixture
def manifest_bytes(manifest_path):
    return manifest_path.read_bytes()
