"""
conftest.py - shared fixtures for the embedgen test suite.

Settings are read from EMBEDGEN_* environment variables, so every test
gets the environment it started with back when it finishes.
"""
import os
import sys

import pytest

# Make the package importable when the suite runs from a source checkout
_repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)


_ENV_KEYS_TO_PROTECT = [
    "EMBEDGEN_DEFAULT_PREFIX",
    "EMBEDGEN_DEFAULT_DIR",
    "EMBEDGEN_BYTES_PER_LINE",
    "EMBEDGEN_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def _clean_env_vars():
    """Snapshot and restore embedgen environment variables after each test."""
    saved = {}
    for key in _ENV_KEYS_TO_PROTECT:
        if key in os.environ:
            saved[key] = os.environ[key]

    yield

    for key in _ENV_KEYS_TO_PROTECT:
        if key in saved:
            os.environ[key] = saved[key]
        else:
            os.environ.pop(key, None)


@pytest.fixture
def workdir(tmp_path):
    """A temporary directory with a few small input files."""
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.png").write_bytes(bytes([0x00, 0x01, 0xFF]))
    (tmp_path / "assets" / "a.bin").write_bytes(b"\x42")
    (tmp_path / "assets" / "b.bin").write_bytes(b"\x41")
    return tmp_path
