import pytest

from prngseq.core.registry import PluginRegistry


@pytest.fixture
def isolated_registry():
    """Snapshot the registry table and restore it after the test."""
    saved = dict(PluginRegistry._generators)
    yield PluginRegistry
    PluginRegistry._generators.clear()
    PluginRegistry._generators.update(saved)
