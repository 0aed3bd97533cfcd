from __future__ import annotations

from .errors import InvalidConfiguration

UNVISITED = -1
OUT_OF_BOUNDS = -2
PADDING = 2

Board = list[list[int]]
Position = tuple[int, int]


def create_board(size: int) -> Board:
    if size < 1:
        raise InvalidConfiguration("Board size must be at least 1.")
    length = size + 2 * PADDING
    board: Board = []
    for row in range(length):
        cells = []
        for col in range(length):
            inside = PADDING <= row < length - PADDING and PADDING <= col < length - PADDING
            cells.append(UNVISITED if inside else OUT_OF_BOUNDS)
        board.append(cells)
    return board


def board_size(board: Board) -> int:
    return len(board) - 2 * PADDING


def is_legal(position: Position, board: Board) -> bool:
    # Padding and visited cells both fail this one comparison.
    row, col = position
    return board[row][col] == UNVISITED


def mark(position: Position, value: int, board: Board) -> Board:
    row, col = position
    board[row][col] = value
    return board


def clone_board(board: Board) -> Board:
    return [list(row) for row in board]


def to_padded(row: int, col: int) -> Position:
    return row + PADDING, col + PADDING


def to_logical(position: Position) -> Position:
    row, col = position
    return row - PADDING, col - PADDING
