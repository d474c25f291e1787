"""Board - disc placement on an 8x8 grid."""

from __future__ import annotations

from reversi.core.enums import Cell, Side
from reversi.core.errors import OutOfRangeError
from reversi.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Square,
    is_on_board,
    is_valid_square,
    make_square,
)


class Board:
    """Mutable 64-square board stored as a flat row-major list of cells."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Cell] = [Cell.EMPTY] * SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Cell:
        if not is_valid_square(sq):
            raise OutOfRangeError(f"Square out of range: {sq}")
        return self._cells[sq]

    def __setitem__(self, sq: Square, cell: Cell) -> None:
        if not is_valid_square(sq):
            raise OutOfRangeError(f"Square out of range: {sq}")
        self._cells[sq] = cell

    def get(self, row: int, col: int) -> Cell:
        if not is_on_board(row, col):
            raise OutOfRangeError(f"Coordinate out of range: ({row}, {col})")
        return self._cells[row * BOARD_SIZE + col]

    def set(self, row: int, col: int, cell: Cell) -> None:
        if not is_on_board(row, col):
            raise OutOfRangeError(f"Coordinate out of range: ({row}, {col})")
        self._cells[row * BOARD_SIZE + col] = cell

    def is_empty(self, sq: Square) -> bool:
        return self[sq] == Cell.EMPTY

    # -- Query helpers ------------------------------------------------------

    @property
    def cells(self) -> tuple[Cell, ...]:
        """Snapshot of all 64 cells in row-major order."""
        return tuple(self._cells)

    def count(self, what: Side | Cell) -> int:
        """Number of squares holding *what* (a side's disc or a cell value)."""
        cell = what.cell if isinstance(what, Side) else what
        return self._cells.count(cell)

    def empty_count(self) -> int:
        return self._cells.count(Cell.EMPTY)

    def is_full(self) -> bool:
        return Cell.EMPTY not in self._cells

    def squares(self, what: Side | Cell) -> list[Square]:
        """Squares holding *what*, row-major."""
        cell = what.cell if isinstance(what, Side) else what
        return [sq for sq, c in enumerate(self._cells) if c == cell]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._cells = [Cell.EMPTY] * SQUARE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: Light on d4/e5, Dark on e4/d5."""
        b = cls()
        b[make_square(3, 3)] = Cell.LIGHT
        b[make_square(4, 4)] = Cell.LIGHT
        b[make_square(3, 4)] = Cell.DARK
        b[make_square(4, 3)] = Cell.DARK
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        chars = {Cell.EMPTY: ".", Cell.DARK: "X", Cell.LIGHT: "O"}
        rows: list[str] = ["  a b c d e f g h"]
        for row in range(BOARD_SIZE):
            cells = self._cells[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]
            rows.append(f"{row + 1} {' '.join(chars[c] for c in cells)}")
        return "\n".join(rows)
