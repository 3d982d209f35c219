"""Archive browsing commands: list, show, delete."""

from pathlib import Path

import typer

from ...viewer import export_image, render_gallery
from ..app import app, console, open_session, resolve_specimen

archive_app = typer.Typer(help="Browse and prune the specimen archive.", no_args_is_help=True)
app.add_typer(archive_app, name="archive")


@archive_app.command("list")
def list_specimens() -> None:
    """List archived specimens, newest first."""
    session = open_session()
    if not len(session.archive):
        console.print("[dim]No specimens archived yet. Run 'bioforge synthesize' first.[/dim]")
        return
    console.print(render_gallery(session.archive.specimens))
    console.print(f"[dim]{len(session.archive)} specimens[/dim]")


@archive_app.command("show")
def show_specimen(
    specimen_id: str = typer.Argument(..., help="Specimen id or unique prefix."),
    save_image: Path = typer.Option(None, "--save-image", help="Write the embedded image to this file."),
) -> None:
    """Show every field of one specimen."""
    session = open_session()
    specimen = resolve_specimen(session, specimen_id)
    console.print(session.viewer.show(specimen))

    if save_image is not None:
        try:
            export_image(specimen, save_image)
        except ValueError as e:
            console.print(f"[red]✗[/red] {e}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] Image saved to {save_image}")


@archive_app.command("delete")
def delete_specimen(
    specimen_id: str = typer.Argument(..., help="Specimen id or unique prefix."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
) -> None:
    """Delete a specimen from the archive."""
    session = open_session()
    specimen = resolve_specimen(session, specimen_id)

    if not yes and not typer.confirm(f"Delete {specimen.name} ({specimen.id[:8]})?"):
        console.print("[dim]Cancelled.[/dim]")
        raise typer.Exit()

    session.remove(specimen.id)
    console.print(f"[green]✓[/green] Deleted {specimen.name}  ({len(session.archive)} specimens left)")
