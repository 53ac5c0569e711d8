"""Pytest configuration and shared fixtures."""
from datetime import datetime, timezone

import pytest
from rich.console import Console
from typer.testing import CliRunner

from strftime_cli.cli import AppState
from strftime_cli.services import FormatService, TimeResolver

REFERENCE = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def reference():
    """Fixed reference instant used as "now"."""
    return REFERENCE


@pytest.fixture
def resolver(reference):
    """TimeResolver whose clock always returns the reference instant."""
    return TimeResolver(clock=lambda: reference)


@pytest.fixture
def formats():
    return FormatService()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def make_state():
    """Build CLI state around a given clock."""
    def _make(clock):
        return AppState(
            console=Console(soft_wrap=True, highlight=False, emoji=False, force_terminal=False),
            resolver=TimeResolver(clock=clock),
            formats=FormatService(),
        )
    return _make
