"""
Shared pytest fixtures and configuration for Retrolambda tests.

This module provides common fixtures used across the test suite, including
property sets, list files on disk and a Typer test client.
"""

import os
import sys
from pathlib import Path
from typing import Dict

import pytest

# Put `src/` first so `import retrolambda` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(1, str(_REPO_ROOT))

from retrolambda import api  # noqa: E402
from retrolambda.core.utils.logger import reset_logging  # noqa: E402


# ============================================================================
# Property Fixtures
# ============================================================================

@pytest.fixture
def minimal_properties() -> Dict[str, str]:
    """Smallest property set that satisfies every required property."""
    return {
        api.INPUT_DIR: "/in",
        api.CLASSPATH: os.pathsep.join(["/a", "/b"]),
    }


@pytest.fixture
def list_file_factory(tmp_path: Path):
    """Write a UTF-8 list file and return its path."""

    def _write(content: str, name: str = "list.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


# ============================================================================
# CLI Fixtures
# ============================================================================

@pytest.fixture
def typer_test_client():
    """Typer CliRunner for invoking the CLI."""
    from typer.testing import CliRunner

    return CliRunner()


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_logging():
    """Drop handlers installed by a test so later tests start from scratch."""
    yield
    reset_logging()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual functions/classes")
    config.addinivalue_line("markers", "integration: Tests that exercise the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        path_str = str(item.fspath).replace("\\", "/").lower()
        if "/tests/cli/" in path_str:
            if not any(marker.name == "integration" for marker in item.iter_markers()):
                item.add_marker(pytest.mark.integration)
        elif not any(marker.name == "unit" for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
