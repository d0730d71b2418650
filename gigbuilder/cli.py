"""gig-builder CLI: setlists, smart sets and chord charts for gigging musicians."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gigbuilder.models import FilterCriteria, Song

app = typer.Typer(
    name="gigbuilder",
    help="Filter a song catalog, build gig setlists, and read chord charts on stage.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

    from gigbuilder.config import ConfigError, get_settings

    try:
        get_settings()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _set_name(value: str) -> str:
    return value.strip()


def _load_catalog() -> list[Song]:
    from gigbuilder.catalog.loader import CatalogError
    from gigbuilder.services import load_library

    try:
        return load_library()
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _criteria(query, era, artist, tag, sort) -> FilterCriteria:
    return FilterCriteria(query=query, era=era, artist=artist, tag=tag, sort=sort)


def _set_table(title: str, songs: list[Song]) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="dim")
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Key")
    table.add_column("Capo")
    table.add_column("Energy", justify="right")
    for i, s in enumerate(songs, 1):
        table.add_row(str(i), s.key_id, s.title, s.artist, s.key, str(s.capo), str(s.energy))
    return table


@app.command()
def songs(
    query: Optional[str] = typer.Option(None, "-q", help="Search title/artist"),
    era: Optional[str] = typer.Option(None, help="Exact era"),
    artist: Optional[str] = typer.Option(None, help="Exact artist"),
    tag: Optional[str] = typer.Option(None, help="Tag the song must carry"),
    sort: str = typer.Option("default", help="popularityDesc, popularityAsc, energyAsc or energyDesc"),
    require_filter: bool = typer.Option(False, "--require-filter", help="List nothing until a filter is set"),
):
    """List catalog songs matching the filters."""
    from gigbuilder.catalog.filters import filter_catalog

    catalog = _load_catalog()
    criteria = _criteria(query, era, artist, tag, sort)
    if require_filter and criteria.is_unfiltered:
        console.print("[yellow]Set a search or filter to list songs.[/yellow]")
        raise typer.Exit(0)

    results = filter_catalog(catalog, criteria)
    if not results:
        console.print("[yellow]No songs found matching criteria.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Songs ({len(results)})")
    table.add_column("ID", style="dim")
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Era")
    table.add_column("Key")
    table.add_column("Capo")
    table.add_column("Energy", justify="right")
    table.add_column("Popularity", justify="right")
    table.add_column("Tags")

    for s in results:
        table.add_row(
            s.key_id, s.title, s.artist, s.era, s.key, str(s.capo),
            str(s.energy), f"{s.popularity:g}", ", ".join(s.tags),
        )

    console.print(table)


@app.command()
def facets():
    """Show the artists, eras and tags available for filtering."""
    from gigbuilder.catalog.filters import list_artists, list_eras, list_tags

    catalog = _load_catalog()
    for label, values in (
        ("Artists", list_artists(catalog)),
        ("Eras", list_eras(catalog)),
        ("Tags", list_tags(catalog)),
    ):
        console.print(f"[bold]{label}[/bold] ({len(values)})")
        console.print(", ".join(values) if values else "[dim]none[/dim]")
        console.print()


@app.command()
def chords(
    song_id: str = typer.Argument(..., help="Song id"),
    transpose: int = typer.Option(0, "--transpose", "-t", help="Semitones to shift"),
):
    """Show a song's chord chart."""
    from gigbuilder.catalog.filters import find_song
    from gigbuilder.chords.chart import render_chart
    from gigbuilder.chords.transpose import normalize_offset

    song = find_song(_load_catalog(), song_id)
    if song is None:
        console.print(f"[red]Error:[/red] Song '{song_id}' not found.")
        raise typer.Exit(1)

    offset = normalize_offset(transpose)
    subtitle = f"Key {song.key} | Capo {song.capo}"
    if offset:
        subtitle += f" | Transpose {offset:+d}"
    console.print(Panel(Text(render_chart(song, offset)), title=song.display_name, subtitle=subtitle))


@app.command()
def build(
    name: str = typer.Argument(..., help="Name to save the set under", callback=_set_name),
    query: Optional[str] = typer.Option(None, "-q", help="Search title/artist"),
    era: Optional[str] = typer.Option(None, help="Exact era"),
    artist: Optional[str] = typer.Option(None, help="Exact artist"),
    tag: Optional[str] = typer.Option(None, help="Tag the song must carry"),
):
    """Build a ~90 minute set from the filtered catalog and save it."""
    from gigbuilder.services import open_session, save_working_set

    session = open_session(_load_catalog())
    built = session.build(_criteria(query, era, artist, tag, None))
    if not built:
        console.print("[yellow]No songs match those filters; nothing to build.[/yellow]")
        raise typer.Exit(1)

    try:
        save_working_set(session, name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(_set_table(name, built))
    console.print(f"\n[green]Set '{name}' saved with {len(built)} songs.[/green]")


@app.command()
def add(
    name: str = typer.Argument(..., help="Saved set to add to (created if missing)", callback=_set_name),
    song_ids: List[str] = typer.Argument(..., help="Song ids to append"),
):
    """Append songs to a saved set."""
    from gigbuilder.db import get_saved_set
    from gigbuilder.services import load_saved_set, open_session, save_working_set

    session = open_session(_load_catalog())
    if get_saved_set(name) is not None:
        load_saved_set(session, name)

    for song_id in song_ids:
        if not session.add(song_id):
            console.print(f"[yellow]Skipped {song_id}:[/yellow] unknown id or already in the set")

    try:
        save_working_set(session, name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(_set_table(name, session.working_set))


@app.command()
def remove(
    name: str = typer.Argument(..., help="Saved set", callback=_set_name),
    position: int = typer.Argument(..., help="1-based position to remove"),
):
    """Remove one song from a saved set."""
    from gigbuilder.services import delete_set, load_saved_set, open_session, save_working_set

    session = open_session(_load_catalog())
    try:
        load_saved_set(session, name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    removed = session.remove(position - 1)
    if removed is None:
        console.print(f"[red]Error:[/red] Position must be between 1 and {len(session.working_set)}")
        raise typer.Exit(1)

    if session.working_set:
        save_working_set(session, name)
        console.print(_set_table(name, session.working_set))
    else:
        delete_set(name)
        console.print(f"[yellow]Removed the last song; set '{name}' deleted.[/yellow]")


@app.command()
def show(
    name: str = typer.Argument(..., help="Name of the set to display", callback=_set_name),
):
    """View a saved set."""
    from gigbuilder.services import get_set_songs

    try:
        set_songs, dropped = get_set_songs(_load_catalog(), name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not set_songs:
        console.print(f"[yellow]Set '{name}' has no songs in the current catalog.[/yellow]")
        raise typer.Exit(0)

    console.print(_set_table(name, set_songs))
    if dropped:
        console.print(f"[dim]{dropped} song(s) no longer in the catalog were skipped.[/dim]")


@app.command()
def sets():
    """List saved sets."""
    from gigbuilder.services import list_sets

    names = list_sets()
    if not names:
        console.print("[yellow]No saved sets.[/yellow]")
        return
    for n in names:
        console.print(n)


@app.command()
def delete(
    name: str = typer.Argument(..., help="Name of the set to delete", callback=_set_name),
):
    """Delete a saved set."""
    from gigbuilder.services import delete_set

    try:
        delete_set(name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]Deleted '{name}'.[/green]")


@app.command()
def stage(
    name: str = typer.Argument(..., help="Name of the set to perform", callback=_set_name),
    transpose: int = typer.Option(0, "--transpose", "-t", help="Semitones to shift"),
):
    """Print a set in large-print stage mode."""
    from gigbuilder.chords.chart import render_chart
    from gigbuilder.chords.transpose import normalize_offset
    from gigbuilder.services import get_set_songs

    try:
        set_songs, _ = get_set_songs(_load_catalog(), name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    offset = normalize_offset(transpose)
    console.rule(f"[bold]{name}[/bold]" + (f"  (transpose {offset:+d})" if offset else ""))
    for i, song in enumerate(set_songs, 1):
        console.print(Panel(
            Text(render_chart(song, offset), style="bold"),
            title=f"[bold]{i}. {song.display_name}[/bold]",
            subtitle=f"Key {song.key} | Capo {song.capo}",
            padding=(1, 4),
        ))


@app.command()
def export(
    name: str = typer.Argument(..., help="Name of the set to export", callback=_set_name),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file path"),
    transpose: int = typer.Option(0, "--transpose", "-t", help="Semitones to shift"),
):
    """Export a set as a plain-text stage sheet."""
    from gigbuilder.chords.transpose import normalize_offset
    from gigbuilder.export.stage_sheet import export_stage_sheet

    path = export_stage_sheet(name, _load_catalog(), normalize_offset(transpose), output)
    if path:
        console.print(f"[green]Exported:[/green] {path}")
    else:
        console.print(f"[red]Error:[/red] Set '{name}' not found or has no songs.")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
