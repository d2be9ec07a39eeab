"""Shared pytest fixtures for tests."""

import pytest

from window_board import tools
from fakes import FakeDesktop, make_display


@pytest.fixture
def desktop(monkeypatch):
    """Fake desktop wired into the tool invoker."""
    fake = FakeDesktop()
    monkeypatch.setattr(tools, "run", fake.run)
    monkeypatch.setattr(tools, "exists", fake.exists)
    return fake


@pytest.fixture
def dual_displays():
    """Main 1920x1080 (top bar 32px) with a 2560x1440 display to its right."""
    return [
        make_display(1, (0, 0, 1920, 1080), (0, 32, 1920, 1048)),
        make_display(2, (1920, 0, 2560, 1440), (1920, 0, 2560, 1440)),
    ]
