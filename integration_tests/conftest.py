"""Fixtures for the end-to-end tracking tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Tag everything collected from this directory with the integration marker."""
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the app and the CLI at the same throwaway data directory."""
    monkeypatch.setenv("BMI_TRACKER_DATA_DIR", str(tmp_path))
    return tmp_path
