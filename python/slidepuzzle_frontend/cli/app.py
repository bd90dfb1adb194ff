"""Terminal frontend for the sliding puzzle solvers.

Usage::

    slidepuzzle solve 8,1,2,0,3,5,6,4,7 -w 3          # optimal on small boards
    slidepuzzle solve <tiles> -w 4 -s dac --animate    # divide and conquer
    slidepuzzle shuffle -s 4 -m 30 --seed 7            # print a scramble
    slidepuzzle demo -s 5                              # scramble + animate
"""

from __future__ import annotations

import logging
import random
import time
from typing import Optional

import typer
from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from slidepuzzle.config import (
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    NUM_SHUFFLES,
    SHUFFLES_ENVVAR,
    SIZE_ENVVAR,
    SWAP_INTERVAL_FAST,
)
from slidepuzzle.engine.gameplay import PuzzleSession, Strategy
from slidepuzzle.engine.shuffle import generate_shuffle
from slidepuzzle.errors import SlidePuzzleError
from slidepuzzle.models.board import Board, Swap
from slidepuzzle_frontend.cli.render import format_tiles, render_board, render_swaps

console = Console()
logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_tiles(raw: str) -> list[int]:
    parts = raw.replace(",", " ").split()
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise typer.BadParameter(
            f"expected comma-separated integers, got {raw!r}"
        ) from None


def _fail(err: SlidePuzzleError) -> typer.Exit:
    console.print(f"[bold red]Cannot solve this configuration:[/bold red] {err}")
    return typer.Exit(code=1)


def _animate(session: PuzzleSession, swaps: list[Swap], interval: float) -> None:
    """Play *swaps* on the session, redrawing the board after each one."""
    board = session.board
    total = len(swaps)

    def draw(i: int, swap: Swap) -> None:
        console.clear()
        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{total} ", style="bold cyan")
        progress.append(f"({swap[0]} → {swap[1]})", style="dim")
        panel = Panel(
            Align.center(render_board(board)),
            title=f"[bold cyan]Auto-Solve  {board.width}×{board.height}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        if interval > 0:
            time.sleep(interval)

    session.play(swaps, on_swap=draw)


def _run_solve(
    session: PuzzleSession, strategy: Strategy, animate: bool, interval: float
) -> None:
    try:
        swaps = session.solve(strategy)
    except SlidePuzzleError as err:
        raise _fail(err) from err

    if not swaps:
        if session.is_solved:
            console.print("[green]Already solved![/green]")
        else:
            console.print("[red]Board is unsolvable.[/red]")
        return

    console.print(render_swaps(swaps))
    if animate:
        _animate(session, swaps, interval)
    else:
        session.play(swaps)
        console.print(render_board(session.board))

    used = session.resolve_strategy(strategy)
    console.print(
        f"[bold green]Solved in {len(swaps)} moves ({used.value})![/bold green]"
    )


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Sliding puzzle solvers."""
    _configure_logging(verbose)


@app.command()
def solve(
    tiles: str = typer.Argument(
        ...,
        help="Row-major tile ids 0..N-1, comma separated; N-1 is the blank.",
    ),
    width: int = typer.Option(
        DEFAULT_SIZE, "-w", "--width",
        min=MIN_SIZE,
        help="Board width.",
    ),
    height: Optional[int] = typer.Option(
        None, "-H", "--height",
        min=MIN_SIZE,
        help="Board height (defaults to the width).",
    ),
    strategy: Strategy = typer.Option(
        Strategy.AUTO, "-s", "--strategy",
        help="Solver to use.",
    ),
    animate: bool = typer.Option(
        False, "--animate",
        help="Replay the solution step by step.",
    ),
    interval: float = typer.Option(
        SWAP_INTERVAL_FAST, "--interval",
        min=0.0,
        help="Seconds between animated moves.",
    ),
) -> None:
    """Solve the given board and print the swap sequence."""
    height = width if height is None else height
    try:
        board = Board.from_flat(width, height, _parse_tiles(tiles))
    except SlidePuzzleError as err:
        raise _fail(err) from err

    console.print(render_board(board))
    session = PuzzleSession.from_board(board)
    _run_solve(session, strategy, animate, interval)


@app.command()
def shuffle(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar=SIZE_ENVVAR,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    moves: int = typer.Option(
        NUM_SHUFFLES, "-m", "--moves",
        min=0,
        envvar=SHUFFLES_ENVVAR,
        help="Number of random blank moves.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
) -> None:
    """Print a scrambled board that is solvable by construction."""
    rng = random.Random(seed) if seed is not None else None
    board = Board.goal(size)
    try:
        swaps = generate_shuffle(size, board.blank_index, moves, rng=rng)
    except SlidePuzzleError as err:
        raise _fail(err) from err
    board.apply_swaps(swaps)

    console.print(render_board(board))
    console.print(render_swaps(swaps))
    console.print(format_tiles(board))


@app.command()
def demo(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar=SIZE_ENVVAR,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    moves: int = typer.Option(
        NUM_SHUFFLES, "-m", "--moves",
        min=0,
        envvar=SHUFFLES_ENVVAR,
        help="Number of random blank moves.",
    ),
    strategy: Strategy = typer.Option(
        Strategy.AUTO, "--strategy",
        help="Solver to use.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
    interval: float = typer.Option(
        SWAP_INTERVAL_FAST, "--interval",
        min=0.0,
        help="Seconds between animated moves.",
    ),
) -> None:
    """Scramble a board, then animate its solution."""
    session = PuzzleSession(size)
    rng = random.Random(seed) if seed is not None else None
    try:
        session.shuffle(moves, rng=rng)
    except SlidePuzzleError as err:
        raise _fail(err) from err

    console.print(render_board(session.board))
    console.print(format_tiles(session.board))
    _run_solve(session, strategy, animate=True, interval=interval)


if __name__ == "__main__":
    app()
