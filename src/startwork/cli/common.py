"""Options and helpers shared by the store-backed commands."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Coroutine, TypeVar

import click

from startwork.store import JsonFileStore, PreferenceStore

T = TypeVar("T")

STORE_ENVVAR = "STARTWORK_STORE"
DEFAULT_STORE_PATH = Path.home() / ".startwork" / "store.json"


def store_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--store PATH`` (env ``STARTWORK_STORE``) to a command."""
    return click.option(
        "--store", "store_path",
        type=click.Path(dir_okay=False, path_type=Path),
        envvar=STORE_ENVVAR,
        default=DEFAULT_STORE_PATH,
        show_default=True,
        help="JSON file holding board preferences.",
    )(func)


def board_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the required ``--board ID`` option to a command."""
    return click.option("--board", "board_id", required=True, help="Board id.")(func)


def open_preferences(store_path: Path) -> PreferenceStore:
    """Return a preference adapter over the JSON store at ``store_path``."""
    return PreferenceStore(JsonFileStore(store_path))


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine in a synchronous context."""
    return asyncio.run(coro)
