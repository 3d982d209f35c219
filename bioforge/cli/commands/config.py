"""Config command: show or change persisted settings."""

import typer
from rich.table import Table

from ...config import BioforgeConfig, config_path, get_config, set_config
from ..app import app, console


def _show() -> None:
    config = get_config()
    for section, values in config.flatten().items():
        table = Table(title=section.capitalize(), show_header=False, title_justify="left")
        table.add_column("key", style="dim")
        table.add_column("value")
        for key, value in values.items():
            table.add_row(f"{section}.{key}", "[dim]default[/dim]" if value is None else str(value))
        console.print(table)
    console.print(f"[dim]Config file: {config_path()}[/dim]")


def _set(key: str | None, value: str | None) -> None:
    if key is None or value is None:
        console.print("[red]✗[/red] Usage: bioforge config set KEY VALUE")
        raise typer.Exit(1)

    # Environment overrides are per-run and are not written back
    current = BioforgeConfig.load(apply_env=False)
    try:
        updated = current.set_value(key, value)
    except KeyError:
        console.print(f"[red]✗[/red] Unknown key: {key}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    path = updated.save()
    set_config(None)
    console.print(f"[green]✓[/green] {key} = {value}  ({path})")


@app.command()
def config(
    action: str = typer.Argument(..., help="show or set"),
    key: str = typer.Argument(None, help="Dotted key, e.g. providers.text_provider"),
    value: str = typer.Argument(None, help="New value"),
) -> None:
    """Show or change configuration."""
    if action == "show":
        _show()
    elif action == "set":
        _set(key, value)
    else:
        console.print(f"[red]✗[/red] Unknown action: {action}. Use 'show' or 'set'.")
        raise typer.Exit(1)
