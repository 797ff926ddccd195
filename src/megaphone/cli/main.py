"""Main CLI application for megaphone."""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from megaphone.cli.output import configure_logging, display_result, parse_pairs
from megaphone.client import MegaphoneClient
from megaphone.errors import MegaphoneError
from megaphone.models import EpisodeOptions

app = typer.Typer(
    name="megaphone",
    help="Manage episodes through the Megaphone API.",
    no_args_is_help=True,
)
episode_app = typer.Typer(help="Create, show, update and delete a single episode.", no_args_is_help=True)
episodes_app = typer.Typer(help="List or search episodes.", no_args_is_help=True)
app.add_typer(episode_app, name="episode")
app.add_typer(episodes_app, name="episodes")

console = Console()
error_console = Console(stderr=True)


class State:
    """Global CLI state."""

    def __init__(self) -> None:
        self.config_path: Path | None = None


state = State()

SetOption = Annotated[
    list[str] | None,
    typer.Option("--set", "-s", help="Extra episode field as key=value, or key:=json for numbers, booleans and null (repeatable)"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from megaphone import __version__

        console.print(f"megaphone version {__version__}")
        raise typer.Exit()


def _run(operation: Callable[[MegaphoneClient], Any]) -> None:
    """Run an operation against a configured client and print its result."""
    try:
        with MegaphoneClient.from_config_file(state.config_path) as client:
            result = operation(client)
    except MegaphoneError as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    display_result(result, console)


@app.callback()
def main(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to configuration file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log requests to stderr"),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """megaphone - Megaphone API client."""
    state.config_path = config_path
    configure_logging(verbose, error_console)


@episode_app.command("show")
def episode_show(
    podcast_id: Annotated[str, typer.Argument(help="Podcast id")],
    episode_id: Annotated[str, typer.Argument(help="Episode id")],
) -> None:
    """Show an episode."""
    _run(lambda client: client.podcast(podcast_id).episode(episode_id).show())


@episode_app.command("create")
def episode_create(
    podcast_id: Annotated[str, typer.Argument(help="Podcast id")],
    title: Annotated[str, typer.Option("--title", "-t", help="Episode title")],
    pubdate: Annotated[
        str,
        typer.Option("--pubdate", "-p", help="Publish date, e.g. 2020-06-01T14:54:02.690Z"),
    ],
    fields: SetOption = None,
) -> None:
    """Create an episode."""
    options = EpisodeOptions.from_mapping({**parse_pairs(fields), "title": title, "pubdate": pubdate})
    _run(lambda client: client.podcast(podcast_id).episode().create(options))


@episode_app.command("update")
def episode_update(
    podcast_id: Annotated[str, typer.Argument(help="Podcast id")],
    episode_id: Annotated[str, typer.Argument(help="Episode id")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    pubdate: Annotated[str | None, typer.Option("--pubdate", "-p", help="New publish date")] = None,
    fields: SetOption = None,
) -> None:
    """Update fields of an episode."""
    changes = parse_pairs(fields)
    if title is not None:
        changes["title"] = title
    if pubdate is not None:
        changes["pubdate"] = pubdate
    options = EpisodeOptions.from_mapping(changes)
    _run(lambda client: client.podcast(podcast_id).episode(episode_id).update(options))


@episode_app.command("delete")
def episode_delete(
    podcast_id: Annotated[str, typer.Argument(help="Podcast id")],
    episode_id: Annotated[str, typer.Argument(help="Episode id")],
) -> None:
    """Delete an episode."""
    _run(lambda client: client.podcast(podcast_id).episode(episode_id).delete())


@episodes_app.command("list")
def episodes_list(
    podcast_id: Annotated[str, typer.Argument(help="Podcast id")],
) -> None:
    """List the episodes of a podcast."""
    _run(lambda client: client.podcast(podcast_id).episodes.list())


@episodes_app.command("search")
def episodes_search(
    params: Annotated[
        list[str] | None,
        typer.Option("--param", "-q", help="Search parameter as key=value or key:=json (repeatable)"),
    ] = None,
) -> None:
    """Search episodes across the network."""
    query = parse_pairs(params)
    _run(lambda client: client.episodes.search(query))
