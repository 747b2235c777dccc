import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pymonad.either import Either, Left, Right
from rich.console import Console
from rich.markup import escape
from toolz import pipe

from playlist_csv.adapters.bs4_adapter import NextDataExtractor
from playlist_csv.adapters.requests_adapter import RequestsFetcher
from playlist_csv.config import Settings, load_settings
from playlist_csv.csv_format import format_csv
from playlist_csv.domain.errors import AppError, OutputError
from playlist_csv.domain.models import Playlist
from playlist_csv.i18n import get_message, set_lang
from playlist_csv.logger_config import setup_logger
from playlist_csv.service import fetch_playlist, playlist_id_from_url

# Initialization
# stdout carries the CSV, everything else goes to stderr
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)
logger = logging.getLogger(__name__)

EXIT_FAILURE = 2

app = typer.Typer(
    name="playlist-csv",
    help=get_message("app_help"),
    add_completion=False,
)


# --- Helper Functions ---


def _handle_usage(_: AppError) -> None:
    """Displays the usage hint and exits the application."""
    err_console.print(escape(get_message("usage")))
    raise typer.Exit(code=EXIT_FAILURE)


def _handle_error(error: AppError) -> None:
    """Displays a formatted error message and exits the application."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")
    raise typer.Exit(code=EXIT_FAILURE)


def _fetch(playlist_id: str, settings: Settings) -> Either[AppError, Playlist]:
    with RequestsFetcher(settings) as fetcher:
        return fetch_playlist(playlist_id, fetcher, NextDataExtractor(), settings)


def _write_output(csv_text: str, output: Optional[Path]) -> Either[OutputError, None]:
    if output is None:
        # click.echo would strip escape sequences from the titles when piped
        sys.stdout.write(csv_text)
        sys.stdout.flush()
        return Right(None)

    try:
        with open(output, "w", encoding="utf-8", newline="") as file:
            file.write(csv_text)
    except OSError as e:
        logger.error(f"Could not write '{output}': {e}")
        return Left(OutputError(f"Could not write '{output}': {e}"))
    logger.info(f"CSV written to '{output}'.")
    return Right(None)


# --- CLI Command ---


@app.command()
def export(
    url: str = typer.Argument("", help=get_message("help_url"), show_default=False),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help=get_message("help_output"),
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help=get_message("help_config"),
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    lang: Optional[str] = typer.Option(
        None, "--lang", help=get_message("help_lang"), show_default=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=get_message("help_verbose")),
):
    """Exports the tracks of a Spotify playlist as CSV."""
    setup_logger(verbose)
    if lang:
        set_lang(lang)
        logger.info(f"Language explicitly set to: {lang}")

    playlist_id = playlist_id_from_url(url).either(_handle_usage, lambda value: value)

    def on_success(playlist: Playlist) -> None:
        if output is not None:
            err_console.print(
                escape(get_message("csv_written", count=len(playlist.track_list), path=output))
            )

    pipe(
        load_settings(config),
        lambda e: e.bind(lambda settings: _fetch(playlist_id, settings)),
        lambda e: e.bind(
            lambda playlist: _write_output(format_csv(playlist), output).map(lambda _: playlist)
        ),
        lambda e: e.either(_handle_error, on_success),
    )


if __name__ == "__main__":
    app()
