"""Test configuration and fixtures for etree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create the reference tree: x/a/f.txt (10 bytes) and x/b.tmp."""
    root = tmp_path / "x"
    root.mkdir()
    (root / "a").mkdir()
    (root / "a" / "f.txt").write_bytes(b"0123456789")
    (root / "b.tmp").write_bytes(b"tmp")
    return root
