"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from witness.config import WitnessConfig, config_scope
from witness.reporting import console_scope


@pytest.fixture
def console() -> Console:
    """Console recording witness output in memory."""
    return Console(file=io.StringIO(), width=120, no_color=True, highlight=False)


@pytest.fixture(autouse=True)
def witness_scope(console: Console):
    """Isolate every test from the environment's witness settings and stdout."""
    with config_scope(WitnessConfig(color=False)), console_scope(console):
        yield


@pytest.fixture
def output(console: Console) -> io.StringIO:
    """Text written to the recording console."""
    return console.file
