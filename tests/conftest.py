"""
Shared pytest fixtures for store and shell tests.
"""

import asyncio
import io

import pytest

from command_shell.shell import Shell
from repl import register_commands
from txdb.engine.store import Store
from txdb.models.overlay import Overlay
from txdb.models.value_index import ValueIndex


@pytest.fixture
def store():
    """Provide a fresh Store instance."""
    return Store()


@pytest.fixture
def index():
    """Provide an empty ValueIndex."""
    return ValueIndex()


@pytest.fixture
def overlay():
    """Provide an empty outermost Overlay."""
    return Overlay()


@pytest.fixture
def output():
    """Provide a text buffer capturing shell output."""
    return io.StringIO()


@pytest.fixture
def shell(store, output):
    """Provide a Shell wired to a fresh Store."""
    sh = Shell(out=output)
    register_commands(sh, store)
    return sh


@pytest.fixture
def feed():
    """Build a StreamReader preloaded with the given lines."""

    def _feed(*lines: str, eof: bool = True) -> asyncio.StreamReader:
        reader = asyncio.StreamReader()
        reader.feed_data("".join(f"{line}\n" for line in lines).encode())
        if eof:
            reader.feed_eof()
        return reader

    return _feed
