from __future__ import annotations

from typing import NamedTuple

from .board import Board, Position, board_size, is_legal

Offset = tuple[int, int]

# Enumeration order breaks ties between equally weighted candidates.
KNIGHT_MOVES: tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (2, -1),
    (2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
)


class Candidate(NamedTuple):
    weight: int
    offset: Offset


def destination(position: Position, offset: Offset) -> Position:
    return position[0] + offset[0], position[1] + offset[1]


def onward_moves(position: Position, board: Board) -> int:
    return sum(1 for offset in KNIGHT_MOVES if is_legal(destination(position, offset), board))


def rank_moves(
    position: Position,
    move_number: int,
    board: Board,
    total_cells: int | None = None,
) -> list[Candidate]:
    """Order the legal knight moves from ``position`` by Warnsdorf's Rule.

    Each legal destination is weighted by how many legal moves it would
    leave one ply later. Destinations with no onward move are dead ends and
    are dropped, unless ``move_number`` is the move that completes the tour,
    in which case the weight is forced to zero. Sorting is stable, so equal
    weights keep ``KNIGHT_MOVES`` order.
    """
    if total_cells is None:
        total_cells = board_size(board) ** 2

    candidates: list[Candidate] = []
    for offset in KNIGHT_MOVES:
        target = destination(position, offset)
        if not is_legal(target, board):
            continue
        # A square is never a knight jump away from itself, so probing from
        # the target needs no scratch board with the target marked.
        weight = onward_moves(target, board)
        if move_number == total_cells:
            candidates.append(Candidate(0, offset))
        elif weight > 0:
            candidates.append(Candidate(weight, offset))
    return sorted(candidates, key=lambda candidate: candidate.weight)
