"""Shared pytest configuration and fixtures for all tests."""

import os
import tempfile
from pathlib import Path

import pytest

# Keep the lazily configured log file out of the real home directory. This runs
# before any deltapipe module is imported during collection.
os.environ.setdefault("DELTAPIPE_HOME", tempfile.mkdtemp(prefix="deltapipe-test-home-"))

from deltapipe.api.codec.DeltaAlgorithm import DeltaAlgorithm  # noqa: E402
from deltapipe.api.errors.DeltaComputeError import DeltaComputeError  # noqa: E402
from deltapipe.api.storage.FastTempProbe import FastTempProbe  # noqa: E402

MARKERS = {
    "unit": "unit tests",
    "storage": "storage accessor tests",
    "codec": "delta codec tests",
    "pipeline": "produce/apply pipeline tests",
    "verify": "verification and metrics tests",
    "config": "configuration tests",
    "cmd": "command result tests",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Test Doubles
# =============================================================================


class DirProbe(FastTempProbe):
    """Probe that always answers with a fixed directory (or None)."""

    name = "fixed"

    def __init__(self, directory: Path | None):
        self.directory = directory

    def preferred_dir(self) -> Path | None:
        return self.directory


class LiteralAlgorithm(DeltaAlgorithm):
    """Delta whose encoding is simply the new contents."""

    name = "literal"

    def compute(self, old, new, out):
        out.write(bytes(new))

    def apply(self, old, patch):
        return patch.read()


class FailingAlgorithm(DeltaAlgorithm):
    """Delta algorithm that writes some output, then gives up."""

    name = "failing"

    def compute(self, old, new, out):
        out.write(b"partial delta")
        raise DeltaComputeError("pathological input")

    def apply(self, old, patch):
        raise AssertionError("apply should not be reached")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def deltapipe_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DELTAPIPE_HOME at an empty directory.

    Returns:
        Path to the deltapipe home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("DELTAPIPE_HOME", str(home))
    return home


@pytest.fixture
def write_file(tmp_path: Path):
    """Factory writing ``data`` to ``tmp_path / name`` and returning the path."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def stage_dir(tmp_path: Path) -> Path:
    """Directory standing in for the fast temp directory."""
    path = tmp_path / "stage"
    path.mkdir()
    return path


@pytest.fixture
def stage_probe(stage_dir: Path) -> DirProbe:
    return DirProbe(stage_dir)


@pytest.fixture
def hello_files(write_file):
    """Old/new pair from the reference scenario."""
    old = write_file("old.txt", b"Hello World! old version.")
    new = write_file("new.txt", b"Hello World! new version with extra content.")
    return old, new
