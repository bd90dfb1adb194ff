"""Rich renderables for boards and swap lists."""

from __future__ import annotations

import io

from rich.console import Console

from slidepuzzle.models.board import Board
from slidepuzzle_frontend.cli.render import (
    BLANK_GLYPH,
    _cell,
    format_tiles,
    render_board,
    render_swaps,
)


def _plain(renderable) -> str:
    console = Console(file=io.StringIO(), width=80, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_board_table_shape() -> None:
    table = render_board(Board.goal(4, 3))
    assert len(table.columns) == 4
    assert table.row_count == 3


def test_board_output_shows_tiles_and_blank() -> None:
    out = _plain(render_board(Board.from_flat(3, 3, [8, 1, 2, 0, 3, 5, 6, 4, 7])))
    assert BLANK_GLYPH in out
    for value in range(8):
        assert str(value) in out
    assert "8" not in out


def test_cell_styles() -> None:
    board = Board.from_flat(2, 2, [0, 1, 3, 2])
    assert _cell(board, 0, 1).style == "bold green"
    assert _cell(board, 3, 1).style == "bold white"
    blank = _cell(board, 2, 1)
    assert blank.plain == BLANK_GLYPH
    assert blank.style == "dim"


def test_cells_are_right_aligned_to_widest_value() -> None:
    board = Board.goal(4)
    assert _cell(board, 3, 2).plain == " 3"
    assert _cell(board, 12, 2).plain == "12"


def test_render_swaps() -> None:
    assert render_swaps([]).plain == "0 swaps"
    assert render_swaps([(8, 7), (7, 4)]).plain == "2 swaps: (8, 7), (7, 4)"


def test_format_tiles() -> None:
    assert format_tiles(Board.goal(2)) == "0,1,2,3"
