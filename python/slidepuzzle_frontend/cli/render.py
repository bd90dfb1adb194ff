"""Rich renderables for boards and swap lists."""

from __future__ import annotations

import rich.box
from rich.table import Table
from rich.text import Text

from slidepuzzle.models.board import Board, Swap

BLANK_GLYPH = "·"


def _cell(board: Board, index: int, digits: int) -> Text:
    value = board.tiles[index]
    if value == board.blank_value:
        return Text(BLANK_GLYPH, style="dim")
    style = "bold green" if board.is_tile_correct(index) else "bold white"
    return Text(str(value).rjust(digits), style=style)


def render_board(board: Board) -> Table:
    """Grid of tiles; placed tiles are green and the blank is a dot."""
    digits = len(str(board.blank_value))
    table = Table(
        show_header=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=digits + 1, justify="center")

    for start in range(0, board.size, board.width):
        table.add_row(
            *(_cell(board, i, digits) for i in range(start, start + board.width))
        )
    return table


def render_swaps(swaps: list[Swap]) -> Text:
    text = Text()
    text.append(f"{len(swaps)} swaps", style="bold cyan")
    if swaps:
        text.append(": ")
        text.append(", ".join(f"({a}, {b})" for a, b in swaps), style="dim")
    return text


def format_tiles(board: Board) -> str:
    return ",".join(str(v) for v in board.tiles)
