"""Rich terminal frontend — tables, colours, and panels.

Pure presentation: every frame is drawn from a ``Snapshot`` and every
keypress is forwarded to the game session, which decides what happens.
"""

from __future__ import annotations

import logging
import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.backend.engine.gameplay import GamePlay
from eightpuzzle.backend.engine.gamestate import Snapshot
from eightpuzzle.backend.models.board import NUM_TILES, Board, Direction
from eightpuzzle.frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {d.value: d for d in Direction}
_TILE_KEYS = {str(i + 1): i for i in range(NUM_TILES - 1)}


# -- board rendering ----------------------------------------------------------


def render_board(snap: Snapshot) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles are labelled ``index + 1``; tiles sitting in their home cell
    are green.
    """
    board = Board(positions=snap.board)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=2, justify="center")

    for row in board.to_grid():
        cells: list[str] = []
        for index in row:
            if index is None:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(index):
                cells.append(f"[bold green]{index + 1}[/bold green]")
            else:
                cells.append(f"[bold white]{index + 1}[/bold white]")
        table.add_row(*cells)

    return table


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("1-8", style="bold cyan")
    controls.append("  tile   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _moves_line(snap: Snapshot) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(snap.moves), style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def draw_game(snap: Snapshot, status: str = "", out: Console | None = None) -> None:
    """Draw the play screen."""
    out = out or console
    out.clear()

    panel = Panel(
        Align.center(render_board(snap)),
        title="[bold cyan]Eight Puzzle[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    out.print()
    out.print(Align.center(panel))
    out.print(Align.center(_moves_line(snap)))
    if status:
        out.print(Align.center(Text.from_markup(f"  {status}")))
    out.print(Align.center(_controls()))


def draw_win(snap: Snapshot, out: Console | None = None) -> None:
    out = out or console
    out.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append(f"  in {snap.moves} moves  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(snap)), Align.center(congrats)),
        title="[bold green]Eight Puzzle[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    out.print()
    out.print(Align.center(panel))
    out.print(
        Align.center(
            Text("\n  PLAY AGAIN: press R or Enter.  U to undo, Q to quit.\n", style="dim")
        )
    )


def draw_help(out: Console | None = None) -> None:
    out = out or console
    out.clear()

    help_table = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    help_table.add_column(style="bold cyan", justify="right")
    help_table.add_column()
    help_table.add_row("↑ / W", "slide the tile below the blank up")
    help_table.add_row("↓ / S", "slide the tile above the blank down")
    help_table.add_row("← / A", "slide the tile right of the blank left")
    help_table.add_row("→ / D", "slide the tile left of the blank right")
    help_table.add_row("1-8", "slide that tile, if it touches the blank")
    help_table.add_row("U", "undo the last move")
    help_table.add_row("R", "new game")
    help_table.add_row("Q", "quit")

    out.print()
    out.print(Align.center(Panel(help_table, title="[bold]HELP[/bold]", border_style="bright_blue")))
    out.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))


# -- input dispatch -----------------------------------------------------------


def apply_key(game: GamePlay, key: str) -> str:
    """Forward one action to *game* and return a status message.

    Rejected actions are reported, never raised.
    """
    if key in _DIRECTIONS:
        ok, _ = game.move_direction(_DIRECTIONS[key])
        return "" if ok else f"[yellow]Nothing slides {key}.[/yellow]"
    if key in _TILE_KEYS:
        ok, _ = game.move(_TILE_KEYS[key])
        return "" if ok else f"[yellow]Can't move tile {key}.[/yellow]"
    if key == "undo":
        ok, _ = game.undo()
        return "[cyan]Undone.[/cyan]" if ok else "[yellow]Nothing to undo.[/yellow]"
    # Enter only means "play again" on the win screen.
    if key == "restart" or (key == "enter" and game.is_won):
        game.new_game()
        return "[yellow]New game![/yellow]"
    return ""


# -- game loop ----------------------------------------------------------------


def _game_loop(game: GamePlay) -> None:
    status = ""
    while True:
        snap = game.snapshot()
        if snap.solved:
            draw_win(snap)
        else:
            draw_game(snap, status)
        status = ""

        key = get_key()
        if key == "quit":
            return
        if key == "help":
            draw_help()
            get_key()
            continue
        if snap.solved and key not in ("restart", "enter", "undo"):
            continue
        status = apply_key(game, key)


# -- public entry point -------------------------------------------------------


def run(seed: int | None = None) -> None:
    """Launch the Rich terminal game."""
    game = GamePlay(random.Random(seed))
    logger.debug("Terminal frontend started (seed=%s)", seed)
    try:
        _game_loop(game)
    finally:
        console.clear()
        console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
