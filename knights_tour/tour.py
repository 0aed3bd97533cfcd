from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import logging
import random
import sys
from time import perf_counter
from typing import Iterator, Literal, Sequence

from .board import (
    PADDING,
    Board,
    Position,
    board_size,
    clone_board,
    create_board,
    mark,
    to_logical,
    to_padded,
)
from .errors import InvalidConfiguration, NoSolutionFound, SearchAborted
from .metrics import SearchStats
from .moves import KNIGHT_MOVES, destination, rank_moves

logger = logging.getLogger(__name__)

TourStatus = Literal["solved", "no-solution", "aborted"]

_RECURSION_MARGIN = 100


@dataclass
class TourResult:
    size: int
    start: Position
    status: TourStatus
    board: Board | None
    stats: SearchStats
    max_nodes: int | None = None

    @property
    def solved(self) -> bool:
        return self.status == "solved"

    @property
    def path(self) -> list[Position]:
        if self.board is None:
            return []
        return tour_path(self.board)

    @property
    def grid(self) -> tuple[tuple[int, ...], ...] | None:
        if self.board is None:
            return None
        return visit_grid(self.board)

    def unwrap(self) -> tuple[tuple[int, ...], ...]:
        if self.status == "aborted":
            raise SearchAborted(self.max_nodes or self.stats.nodes_visited)
        grid = self.grid
        if grid is None:
            raise NoSolutionFound(self.size, self.start)
        return grid

    def to_dict(self, include_board: bool = False) -> dict[str, object]:
        payload: dict[str, object] = {
            "size": self.size,
            "start": list(self.start),
            "status": self.status,
            "stats": self.stats.to_dict(),
        }
        if self.board is not None:
            payload["path"] = [list(position) for position in self.path]
            if include_board:
                payload["board"] = render_tour_board(self.unwrap()).splitlines()
        return payload


def tour_path(board: Board) -> list[Position]:
    size = board_size(board)
    visits: list[tuple[int, Position]] = []
    for row in range(PADDING, PADDING + size):
        for col in range(PADDING, PADDING + size):
            value = board[row][col]
            if value > 0:
                visits.append((value, to_logical((row, col))))
    visits.sort()
    return [position for _, position in visits]


def visit_grid(board: Board) -> tuple[tuple[int, ...], ...]:
    size = board_size(board)
    return tuple(
        tuple(board[row][PADDING : PADDING + size])
        for row in range(PADDING, PADDING + size)
    )


def verify_tour(path: Sequence[Position], size: int) -> bool:
    cells = {(row, col) for row in range(size) for col in range(size)}
    if len(path) != len(cells) or set(path) != cells:
        return False
    for (row, col), (next_row, next_col) in zip(path, path[1:]):
        if (next_row - row, next_col - col) not in KNIGHT_MOVES:
            return False
    return True


def render_tour_board(grid: Sequence[Sequence[int]]) -> str:
    width = max(4, len(str(len(grid) ** 2)) + 1)
    return "\n".join(
        "".join(f"{value:<{width}}" for value in row).rstrip() for row in grid
    )


def random_start(size: int, rng: random.Random | None = None) -> Position:
    if size < 1:
        raise InvalidConfiguration("Board size must be at least 1.")
    source = rng if rng is not None else random
    return source.randrange(size), source.randrange(size)


def _stack_depth() -> int:
    depth = 0
    frame = sys._getframe(1)
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@contextmanager
def _recursion_headroom(depth: int) -> Iterator[None]:
    # The search nests one frame per move on top of whatever the caller holds.
    previous = sys.getrecursionlimit()
    needed = _stack_depth() + depth + _RECURSION_MARGIN
    if needed > previous:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(size: int, start_row: int, start_col: int, max_nodes: int | None) -> None:
    for name, value in (("size", size), ("start_row", start_row), ("start_col", start_col)):
        if not _is_integer(value):
            raise InvalidConfiguration(f"{name} must be an integer, got {value!r}.")
    if max_nodes is not None and not _is_integer(max_nodes):
        raise InvalidConfiguration(f"max_nodes must be an integer, got {max_nodes!r}.")
    if size < 1:
        raise InvalidConfiguration("Board size must be at least 1.")
    if not (0 <= start_row < size and 0 <= start_col < size):
        raise InvalidConfiguration(
            f"Start square ({start_row}, {start_col}) is outside the {size}x{size} board."
        )
    if max_nodes is not None and max_nodes < 1:
        raise InvalidConfiguration("max_nodes must be >= 1.")


def find_tour(
    size: int,
    start_row: int,
    start_col: int,
    *,
    max_nodes: int | None = None,
) -> TourResult:
    _validate(size, start_row, start_col, max_nodes)

    total_cells = size * size
    stats = SearchStats()
    start = perf_counter()

    def step(position: Position, move_number: int, board: Board) -> Board | None:
        stats.nodes_visited += 1
        if max_nodes is not None and stats.nodes_visited > max_nodes:
            raise SearchAborted(max_nodes)
        stats.max_depth = max(stats.max_depth, move_number - 1)
        if move_number > total_cells:
            return board

        for candidate in rank_moves(position, move_number, board, total_cells):
            target = destination(position, candidate.offset)
            branch = mark(target, move_number, clone_board(board))
            stats.boards_cloned += 1
            solution = step(target, move_number + 1, branch)
            if solution is not None:
                return solution
            stats.backtracks += 1
        return None

    origin = to_padded(start_row, start_col)
    board = mark(origin, 1, create_board(size))
    logger.debug("Searching %dx%d board from (%d, %d)", size, size, start_row, start_col)

    status: TourStatus
    solution: Board | None = None
    try:
        with _recursion_headroom(total_cells):
            solution = step(origin, 2, board)
    except SearchAborted:
        logger.info("Search aborted after %d nodes", max_nodes)
        status = "aborted"
    else:
        status = "solved" if solution is not None else "no-solution"

    if solution is not None:
        stats.solutions_found = 1
    stats.elapsed_ms = (perf_counter() - start) * 1000
    logger.debug(
        "Search finished: %s, %d nodes, %d backtracks",
        status,
        stats.nodes_visited,
        stats.backtracks,
    )
    return TourResult(
        size=size,
        start=(start_row, start_col),
        status=status,
        board=solution,
        stats=stats,
        max_nodes=max_nodes,
    )
