"""Command-line interface for audio works."""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import LibraryConfig, load_config, setup_logging
from .files.cover_images import CoverImageStore
from .files.scanner import WorkFolderScanner
from .files.tracks import TrackLister

console = Console()


def get_config(ctx: click.Context) -> LibraryConfig:
    """Load the library config once per invocation."""
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = load_config(ctx.obj["config_path"])
        except (OSError, ValidationError) as e:
            raise click.ClickException(f"Invalid configuration: {e}")
    return ctx.obj["config"]


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.audio_works/config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Audio works library - find work folders, list tracks and manage cover images."""
    setup_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# ============================================================================
# Library Commands
# ============================================================================


@cli.command("scan")
@click.pass_context
def scan(ctx: click.Context):
    """List work folders found under the root directories."""
    config = get_config(ctx)
    scanner = WorkFolderScanner.from_config(config)

    table = Table(title="Work Folders", show_header=True, header_style="bold")
    table.add_column("Root", style="cyan")
    table.add_column("Folder", no_wrap=True)

    total = 0
    try:
        for root in scanner.root_dirs:
            for folder in scanner.scan_root(root):
                table.add_row(escape(str(root)), escape(folder))
                total += 1
    except OSError as e:
        raise click.ClickException(str(e))

    console.print(table)
    console.print(f"\nFound [bold]{total}[/bold] work folders")


@cli.command("tracks")
@click.argument("work_id")
@click.argument("work_dir")
@click.pass_context
def tracks(ctx: click.Context, work_id: str, work_dir: str):
    """List playable tracks of a work."""
    config = get_config(ctx)
    lister = TrackLister.from_config(config)

    try:
        track_list = lister.list_tracks(work_id, work_dir)
    except OSError as e:
        raise click.ClickException(str(e))

    if not track_list:
        console.print(f"[yellow]No tracks found for {escape(work_dir)}[/yellow]")
        return

    table = Table(title=f"Tracks: {escape(work_id)}", show_header=True, header_style="bold")
    table.add_column("Hash", style="cyan", no_wrap=True)
    table.add_column("Subtitle")
    table.add_column("Title", no_wrap=True)

    for track in track_list:
        table.add_row(escape(track.hash), escape(track.subtitle or ""), escape(track.title))

    console.print(table)


# ============================================================================
# Cover Image Commands
# ============================================================================


@cli.group()
def cover():
    """Cover image operations."""
    pass


@cover.command("save")
@click.argument("code")
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def cover_save(ctx: click.Context, code: str, image: Path):
    """Store IMAGE as the cover of work RJ<CODE>."""
    store = CoverImageStore.from_config(get_config(ctx))

    try:
        with open(image, "rb") as f:
            path = store.save(f, code)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Failed to save cover image: {e}")

    console.print(f"[green]✓[/green] Saved cover: {escape(str(path))}")


@cover.command("delete")
@click.argument("code")
@click.pass_context
def cover_delete(ctx: click.Context, code: str):
    """Delete the cover of work RJ<CODE>."""
    store = CoverImageStore.from_config(get_config(ctx))

    try:
        store.delete(code)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Failed to delete cover image: {e}")

    console.print(f"[green]✓[/green] Deleted cover: {escape(str(store.image_path(code)))}")


if __name__ == "__main__":
    cli()
