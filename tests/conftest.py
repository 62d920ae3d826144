"""
Pytest configuration and fixtures
"""
from pathlib import Path

import pytest


@pytest.fixture
def make_file(tmp_path):
    """Create a file under tmp_path with the given bytes."""
    def _make(relpath: str, data: bytes) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path
    return _make
