import pytest

import tool_forge.hosts.llm  # noqa: F401
import tool_forge.hosts.mcp  # noqa: F401
from tool_forge import hosts


@pytest.fixture
def without_host(monkeypatch):
    """Mark a host kind as not loaded for the duration of a test."""

    def _remove(kind):
        monkeypatch.setitem(hosts._HOSTS, kind, None)

    return _remove
