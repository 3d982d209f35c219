"""Synthesize and randomize commands."""

import random
from pathlib import Path

import typer
from rich.table import Table

from ...core.llm import get_image_provider, get_text_provider
from ...editor import TraitEditor
from ...viewer import export_image, render_specimen
from ..app import app, console, open_session, run_async


def _apply_overrides(
    editor: TraitEditor,
    category: str | None,
    idea: str | None,
    habitat: str | None,
    behavior: str | None,
    color: str | None,
    size: str | None,
    stability: int | None,
) -> None:
    if category is not None:
        editor.set_category(category)
    if idea is not None:
        editor.set_base_idea(idea)
    for name, value in (
        ("habitat", habitat),
        ("behavior", behavior),
        ("primary_color", color),
        ("size", size),
        ("stability", stability),
    ):
        if value is not None:
            editor.set_trait(name, value)


def _editor_table(editor: TraitEditor) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Category", editor.category.value)
    table.add_row("Concept", editor.base_idea or "[dim](empty)[/dim]")
    table.add_row("Habitat", editor.traits.habitat)
    table.add_row("Behavior", editor.traits.behavior)
    table.add_row("Color", editor.traits.primary_color)
    table.add_row("Size", editor.traits.size.value)
    table.add_row("Stability", f"{editor.traits.stability}%")
    return table


@app.command()
def synthesize(
    idea: str = typer.Option(None, "--idea", "-i", help="Free-text concept for the organism."),
    category: str = typer.Option(None, "--category", "-c", help="Animal, Plant, Fantasy, Microbe or Hybrid."),
    habitat: str = typer.Option(None, "--habitat", help="Habitat trait."),
    behavior: str = typer.Option(None, "--behavior", help="Behavior trait."),
    color: str = typer.Option(None, "--color", help="Primary color trait."),
    size: str = typer.Option(None, "--size", help="Microscopic, Small, Medium, Large or Colossal."),
    stability: int = typer.Option(None, "--stability", min=1, max=100, help="Genetic stability 1-100."),
    random_fill: bool = typer.Option(False, "--random", "-r", help="Start from a random fill; explicit options still apply."),
    save_image: Path = typer.Option(None, "--save-image", help="Write the embedded image to this file."),
) -> None:
    """Synthesize a new specimen and add it to the archive."""
    session = open_session()
    editor = session.editor

    if random_fill:
        editor.randomize()
    try:
        _apply_overrides(editor, category, idea, habitat, behavior, color, size, stability)
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    request = editor.submit()
    if request is None:
        console.print("[red]✗[/red] Concept is empty. Pass --idea or use --random.")
        raise typer.Exit(1)

    try:
        get_text_provider()
        get_image_provider()
    except ValueError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    console.print(_editor_table(editor))
    with console.status("[green]Recombining genetic sequence...[/green]"):
        specimen = run_async(session.synthesize(request))

    if specimen is None:
        console.print(f"[red]✗[/red] {session.error}")
        raise typer.Exit(1)

    console.print(render_specimen(specimen))
    console.print(f"[green]✓[/green] Archived as {specimen.id}  ({len(session.archive)} specimens)")

    if save_image is not None:
        try:
            export_image(specimen, save_image)
        except ValueError as e:
            console.print(f"[yellow]![/yellow] {e}")
        else:
            console.print(f"[green]✓[/green] Image saved to {save_image}")


@app.command()
def randomize(
    seed: int = typer.Option(None, "--seed", help="Seed for a reproducible fill."),
) -> None:
    """Show a random editor fill without synthesizing it."""
    session = open_session()
    editor = TraitEditor(locale=session.locale, rng=random.Random(seed))
    editor.randomize()
    console.print(_editor_table(editor))
