"""Eight Puzzle.

Usage::

    eightpuzzle                    # play in the terminal
    eightpuzzle --seed 42          # reproducible scramble
    eightpuzzle -v --log-file puzzle.log
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_TAG = "_eightpuzzle_handler"


# -- helpers ------------------------------------------------------------------


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """Route log records to *log_file*, or to stderr through Rich.

    The game screen is redrawn on stdout, so log output never goes there.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    root = logging.getLogger()
    # Replace the handler from an earlier call instead of stacking another.
    for old in [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]:
        root.removeHandler(old)
        old.close()
    setattr(handler, _HANDLER_TAG, True)
    root.setLevel(level)
    root.addHandler(handler)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle. Omit for a random game.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log moves, undos and shuffles at DEBUG level.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        dir_okay=False,
        help="Write log records to this file instead of stderr.",
    ),
) -> None:
    """Eight Puzzle."""
    configure_logging(verbose, log_file)

    from eightpuzzle.frontend.cli.rich.app import run

    run(seed=seed)


if __name__ == "__main__":
    app()
