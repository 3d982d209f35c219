"""Display language command."""

import typer

from ...editor import SUPPORTED_LOCALES
from ..app import app, console, open_session


@app.command()
def lang(
    code: str = typer.Argument(None, help=f"Language code: {', '.join(SUPPORTED_LOCALES)}, or 'toggle'."),
) -> None:
    """Show or change the language used for generated text."""
    session = open_session()
    if code is None:
        console.print(f"Language: [bold]{session.locale}[/bold]")
        return

    try:
        if code == "toggle":
            session.toggle_locale()
        else:
            session.set_locale(code)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Language set to [bold]{session.locale}[/bold]")
