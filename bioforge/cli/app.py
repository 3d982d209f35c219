"""Typer application and shared CLI helpers."""

import asyncio
import logging
from typing import Awaitable, TypeVar

import typer
from dotenv import load_dotenv
from rich.console import Console

from .. import __version__
from ..config import get_config
from ..core.llm import close_providers
from ..core.models import SpecimenProfile
from ..logging_config import setup_logging
from ..session import LabSession
from ..storage import JsonFileStore

T = TypeVar("T")

app = typer.Typer(
    name="bioforge",
    help="Synthesize fictional organisms and browse your specimen archive.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"bioforge {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress and provider calls."
    ),
) -> None:
    load_dotenv()
    setup_logging(logging.INFO if verbose else logging.WARNING)


def open_session() -> LabSession:
    """Session backed by the configured data directory."""
    return LabSession(JsonFileStore(get_config().storage.data_path))


def run_async(coro: Awaitable[T]) -> T:
    """Run a coroutine, closing provider clients before the loop shuts down."""

    async def _wrapped() -> T:
        try:
            return await coro
        finally:
            await close_providers()

    return asyncio.run(_wrapped())


def resolve_specimen(session: LabSession, specimen_id: str) -> SpecimenProfile:
    """Find a specimen by full id or unique prefix, or exit with an error."""
    specimen = session.archive.get(specimen_id)
    if specimen is not None:
        return specimen

    matches = session.archive.find_by_prefix(specimen_id)
    if len(matches) == 1:
        return matches[0]
    if not matches:
        console.print(f"[red]✗[/red] No specimen with id '{specimen_id}'")
    else:
        console.print(
            f"[red]✗[/red] Id '{specimen_id}' is ambiguous ({len(matches)} matches)"
        )
    raise typer.Exit(1)
