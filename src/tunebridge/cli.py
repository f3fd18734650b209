#!/usr/bin/env python3
"""Command-line interface for tunebridge.

This CLI is primarily for debugging and tuning against the live YouTube
Music catalog. For production use, import tunebridge as a library.
"""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from tunebridge.client import CatalogSearch, YTMusicCatalog
from tunebridge.config import APIConfig, MatcherConfig, RecommenderConfig
from tunebridge.exceptions import TuneBridgeError
from tunebridge.lib.loader import load_playlist, load_tracks
from tunebridge.models.matching import (
    Matched,
    MultipleOptions,
    NotFound,
    Skipped,
    TrackMatchState,
)
from tunebridge.models.profile import PlaylistProfile
from tunebridge.models.track import CatalogResult
from tunebridge.services import RecommendationService, TrackMatcherService, analyze
from tunebridge.services.matcher import count_outcomes
from tunebridge.utils.duration import format_duration

logger = logging.getLogger("tunebridge")

# Using the same console for Progress and RichHandler ensures logs appear
# above the progress bar rather than interfering with it.
PROGRESS_COLUMNS = (
    SpinnerColumn(),
    TextColumn("[progress.description]{task.description}"),
    BarColumn(),
    TaskProgressColumn(),
    TimeElapsedColumn(),
)


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first so it can be called again to switch to a
    console shared with a progress bar.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def get_catalog(ctx: click.Context, search_limit: int) -> CatalogSearch:
    """Return the catalog injected via ``ctx.obj["catalog"]`` or YouTube Music."""
    injected = ctx.obj.get("catalog")
    if injected is not None:
        return injected
    return YTMusicCatalog(config=APIConfig(search_limit=search_limit))


# ============================================================================
# OUTPUT
# ============================================================================


def describe_outcome(state: TrackMatchState) -> tuple[str, str, str]:
    """Return (status, confidence, result) cells for a match state."""
    match state.outcome:
        case Matched(result=result, confidence=confidence):
            return "[green]matched[/green]", f"{confidence:.2f}", _result_label(result)
        case MultipleOptions(options=options):
            labels = "\n".join(_result_label(o) for o in options)
            return f"[yellow]{len(options)} options[/yellow]", "-", labels
        case NotFound():
            return "[red]not found[/red]", "-", ""
        case Skipped():
            return "[dim]skipped[/dim]", "-", ""


def _result_label(result: CatalogResult) -> str:
    return (
        f"{result.artist} - {result.title} "
        f"[dim]({format_duration(result.duration_ms)}, {result.source_type.label})"
        "[/dim]"
    )


def print_match_table(console: Console, states: list[TrackMatchState]) -> None:
    """Print batch match results as a table with a summary line."""
    table = Table(show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Track")
    table.add_column("Status")
    table.add_column("Conf.", justify="right")
    table.add_column("Catalog result")

    for i, state in enumerate(states, 1):
        d = state.descriptor
        status, confidence, result = describe_outcome(state)
        table.add_row(
            str(i),
            f"{d.artist} - {d.name} [dim]({d.formatted_duration})[/dim]",
            status,
            confidence,
            result,
        )

    console.print(table)
    counts = count_outcomes(states)
    console.print(
        f"\n[green]{counts['matched']} matched[/green], "
        f"[yellow]{counts['multiple_options']} ambiguous[/yellow], "
        f"[red]{counts['not_found']} not found[/red] "
        f"of {len(states)} track(s)"
    )


def print_profile(console: Console, profile: PlaylistProfile) -> None:
    """Print a taste profile as a two-column table."""
    table = Table(show_header=False)
    table.add_column(style="cyan")
    table.add_column()
    table.add_row("Top artists", ", ".join(profile.top_artists) or "-")
    table.add_row("Keywords", ", ".join(profile.keywords) or "-")
    table.add_row("Avg. duration", format_duration(profile.avg_duration_ms))
    table.add_row("Genres", ", ".join(sorted(profile.genres)) or "-")
    table.add_row(
        "Sources", ", ".join(s.label for s in profile.preferred_sources) or "-"
    )
    console.print(table)


def print_results(console: Console, results: list[CatalogResult]) -> None:
    """Print recommendation results, best first."""
    table = Table()
    table.add_column("#", justify="right", style="dim")
    table.add_column("Artist")
    table.add_column("Title")
    table.add_column("Length", justify="right")
    table.add_column("Source")
    for i, r in enumerate(results, 1):
        table.add_row(
            str(i),
            r.artist,
            r.title,
            format_duration(r.duration_ms),
            r.source_type.label,
        )
    console.print(table)


# ============================================================================
# COMMANDS
# ============================================================================


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Match imported playlists to music catalogs and recommend tracks."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose)


@main.command(name="match")
@click.argument(
    "playlist_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    metavar="PLAYLIST.json",
)
@click.option(
    "--delay",
    type=float,
    default=MatcherConfig.search_delay,
    show_default=True,
    help="Seconds to wait between tracks.",
)
@click.option(
    "--search-limit",
    type=int,
    default=APIConfig.search_limit,
    show_default=True,
    help="Catalog results to consider per track.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def match_cmd(
    ctx: click.Context,
    playlist_file: Path,
    delay: float,
    search_limit: int,
    as_json: bool,
) -> None:
    """Match every track of an imported playlist against the catalog.

    PLAYLIST.json is either {"id", "name", "tracks": [...]} or a bare list of
    {"name", "artist", "album", "duration_ms"} objects.

    \b
    Examples:
      tunebridge match exported_playlist.json
      tunebridge match tracks.json --delay 1 --json
    """
    console = Console(stderr=as_json)
    setup_logging(verbose=ctx.obj.get("verbose", False), console=console)

    try:
        playlist = load_playlist(playlist_file)
        if not as_json:
            console.print(
                f"[bold]{playlist.name}[/bold]: {playlist.track_count} track(s), "
                f"{playlist.formatted_total_duration}"
            )

        matcher = TrackMatcherService(
            get_catalog(ctx, search_limit), MatcherConfig(search_delay=delay)
        )

        with Progress(
            *PROGRESS_COLUMNS, console=console, disable=as_json
        ) as progress:
            task = progress.add_task("Matching tracks", total=playlist.track_count)
            states = matcher.match_all(
                playlist.tracks,
                on_progress=lambda _: progress.advance(task),
            )

        if as_json:
            data = [s.model_dump(mode="json") for s in states]
            json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        else:
            print_match_table(console, states)

    except TuneBridgeError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e


@main.command(name="profile")
@click.argument(
    "library_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    metavar="LIBRARY.json",
)
def profile_cmd(library_file: Path) -> None:
    """Show the taste profile of a JSON list of library tracks."""
    console = Console()
    try:
        songs = load_tracks(library_file)
    except TuneBridgeError as e:
        raise click.ClickException(str(e)) from e

    if not songs:
        console.print("[yellow]No tracks in library file[/yellow]")
        return
    print_profile(console, analyze(songs))


@main.command(name="recommend")
@click.argument(
    "library_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    metavar="LIBRARY.json",
)
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=RecommenderConfig.default_limit,
    show_default=True,
    help="Number of recommendations.",
)
@click.option("--seed", type=int, default=None, help="Shuffle seed for variety.")
@click.option(
    "--filter-music",
    is_flag=True,
    help="Drop results that look like non-music content.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def recommend_cmd(
    ctx: click.Context,
    library_file: Path,
    limit: int,
    seed: int | None,
    filter_music: bool,
    as_json: bool,
) -> None:
    """Recommend new tracks based on a JSON list of library tracks.

    \b
    Examples:
      tunebridge recommend library.json
      tunebridge recommend library.json -n 20 --seed 7 --filter-music
    """
    console = Console(stderr=as_json)
    setup_logging(verbose=ctx.obj.get("verbose", False), console=console)

    try:
        songs = load_tracks(library_file)
        service = RecommendationService(
            get_catalog(ctx, APIConfig.search_limit),
            RecommenderConfig(filter_non_music=filter_music),
        )
        with console.status("Finding recommendations"):
            results = service.recommend(songs, limit=limit, shuffle_seed=seed)
    except TuneBridgeError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if as_json:
        data = [r.model_dump(mode="json") for r in results]
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
    elif results:
        print_results(console, results)
    else:
        console.print("[yellow]No recommendations found[/yellow]")


if __name__ == "__main__":
    main()
