"""Legal move generation and capture-line detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reversi.core.enums import Cell, Side
from reversi.core.errors import OutOfRangeError
from reversi.core.move import Move
from reversi.core.types import (
    BOARD_SIZE,
    DIRECTIONS,
    SQUARE_COUNT,
    Square,
    is_valid_square,
)

if TYPE_CHECKING:
    from reversi.core.board import Board


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    """For every square, the squares met walking outward in each direction."""
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(SQUARE_COUNT):
        row_idx = sq >> 3
        col_idx = sq & 7
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in DIRECTIONS:
            ar = row_idx + dr
            ac = col_idx + dc
            ray: list[Square] = []
            while 0 <= ar < BOARD_SIZE and 0 <= ac < BOARD_SIZE:
                ray.append(ar * BOARD_SIZE + ac)
                ar += dr
                ac += dc
            # A capture needs at least one opponent disc plus the anchor.
            if len(ray) >= 2:
                square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_RAYS = _build_rays()


def _check_square(sq: Square) -> None:
    if not is_valid_square(sq):
        raise OutOfRangeError(f"Square out of range: {sq}")


class MoveGenerator:
    """Generates legal placements for a :class:`Board`.

    Move order is row-major (a1, b1, ..., h1, a2, ...). The search bot relies
    on this order for its deterministic tie-break.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def capture_lines(self, sq: Square, side: Side) -> list[tuple[Square, ...]]:
        """Capture lines a placement on *sq* by *side* would flip, one per direction.

        An occupied square captures nothing; a square off the board raises
        :class:`OutOfRangeError`.
        """
        _check_square(sq)
        cells = self._board.cells
        if cells[sq] != Cell.EMPTY:
            return []
        own = side.cell
        theirs = side.opposite.cell
        lines: list[tuple[Square, ...]] = []
        for ray in _RAYS[sq]:
            if cells[ray[0]] != theirs:
                continue
            for idx in range(1, len(ray)):
                cell = cells[ray[idx]]
                if cell == own:
                    lines.append(ray[:idx])
                    break
                if cell != theirs:
                    break
        return lines

    def flips(self, sq: Square, side: Side) -> list[Square]:
        """All discs flipped by a placement on *sq*, in direction order."""
        return [flipped for line in self.capture_lines(sq, side) for flipped in line]

    def is_legal(self, sq: Square, side: Side) -> bool:
        _check_square(sq)
        cells = self._board.cells
        if cells[sq] != Cell.EMPTY:
            return False
        return self._has_capture(cells, sq, side.cell, side.opposite.cell)

    def generate_legal_moves(self, side: Side) -> list[Move]:
        """All legal moves for *side*, row-major."""
        cells = self._board.cells
        own = side.cell
        theirs = side.opposite.cell
        return [
            Move(sq, side)
            for sq in range(SQUARE_COUNT)
            if cells[sq] == Cell.EMPTY and self._has_capture(cells, sq, own, theirs)
        ]

    def has_legal_move(self, side: Side) -> bool:
        cells = self._board.cells
        own = side.cell
        theirs = side.opposite.cell
        return any(
            cells[sq] == Cell.EMPTY and self._has_capture(cells, sq, own, theirs)
            for sq in range(SQUARE_COUNT)
        )

    @staticmethod
    def _has_capture(
        cells: tuple[Cell, ...],
        sq: Square,
        own: Cell,
        theirs: Cell,
    ) -> bool:
        for ray in _RAYS[sq]:
            if cells[ray[0]] != theirs:
                continue
            for idx in range(1, len(ray)):
                cell = cells[ray[idx]]
                if cell == own:
                    return True
                if cell != theirs:
                    break
        return False
