"""Read-only presentation of specimens."""

import base64
import binascii
from datetime import datetime
from pathlib import Path

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .core.models import SpecimenProfile


def format_timestamp(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M")


def describe_image(image_url: str) -> str:
    """Short description of an image reference; data URIs are not printed whole."""
    if image_url.startswith("data:"):
        header, _, payload = image_url.partition(",")
        media_type = header[5:].split(";")[0] or "image"
        size_kb = len(payload) * 3 / 4 / 1024
        return f"embedded {media_type} ({size_kb:.0f} KB)"
    return image_url


def render_specimen(specimen: SpecimenProfile) -> Panel:
    """Full detail view of one specimen."""
    facts = Table.grid(padding=(0, 2))
    facts.add_column(style="dim")
    facts.add_column()
    facts.add_row("Domain", specimen.category.value)
    facts.add_row("Taxonomy", specimen.taxonomy)
    facts.add_row("Lifespan", specimen.lifespan)
    facts.add_row("Diet", specimen.diet)
    facts.add_row("Habitat", specimen.habitat_detail)
    facts.add_row("Image", describe_image(specimen.image_url))
    facts.add_row("Synthesized", format_timestamp(specimen.timestamp))
    facts.add_row("ID", specimen.id)

    abilities = Text()
    for ability in specimen.unique_abilities:
        abilities.append("  • ", style="green")
        abilities.append(f"{ability}\n")

    body = Group(
        Text(specimen.scientific_name, style="italic green"),
        Text(""),
        Text(specimen.description),
        Text(""),
        facts,
        Text(""),
        Text("Unique abilities", style="bold"),
        abilities,
    )
    return Panel(body, title=f"[bold]{specimen.name}[/bold]", border_style="green")


def render_gallery(specimens: tuple[SpecimenProfile, ...] | list[SpecimenProfile]) -> Table:
    """One-row-per-specimen summary, newest first."""
    table = Table(title="Specimen Archive", show_lines=False)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Scientific name", style="italic green")
    table.add_column("Category")
    table.add_column("Synthesized", no_wrap=True)
    for specimen in specimens:
        table.add_row(
            specimen.id[:8],
            specimen.name,
            specimen.scientific_name,
            specimen.category.value,
            format_timestamp(specimen.timestamp),
        )
    return table


def export_image(specimen: SpecimenProfile, path: Path) -> Path:
    """Write an embedded image to disk.

    Raises:
        ValueError: If the image is a remote URL or the payload is not base64.
    """
    if not specimen.image_url.startswith("data:"):
        raise ValueError(f"Image is not embedded: {specimen.image_url}")
    _, _, payload = specimen.image_url.partition(",")
    try:
        data = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Embedded image is not valid base64: {e}") from e
    path.write_bytes(data)
    return path


class SpecimenViewer:
    """Tracks which specimen is on display. Holds no other state."""

    def __init__(self) -> None:
        self.current: SpecimenProfile | None = None

    def show(self, specimen: SpecimenProfile) -> Panel:
        self.current = specimen
        return render_specimen(specimen)

    def close(self) -> None:
        self.current = None
