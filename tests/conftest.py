"""
Pytest configuration and fixtures for roomguard tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path so imports work without an editable install
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "app_config.yml"
