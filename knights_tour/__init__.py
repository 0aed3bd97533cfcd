"""Knight's tour package exports."""

from .board import (
    OUT_OF_BOUNDS,
    PADDING,
    UNVISITED,
    clone_board,
    create_board,
    is_legal,
    mark,
)
from .errors import InvalidConfiguration, KnightsTourError, NoSolutionFound, SearchAborted
from .metrics import SearchStats
from .moves import KNIGHT_MOVES, Candidate, rank_moves
from .tour import (
    TourResult,
    find_tour,
    random_start,
    render_tour_board,
    tour_path,
    verify_tour,
    visit_grid,
)

__all__ = [
    "Candidate",
    "InvalidConfiguration",
    "KNIGHT_MOVES",
    "KnightsTourError",
    "NoSolutionFound",
    "OUT_OF_BOUNDS",
    "PADDING",
    "SearchAborted",
    "SearchStats",
    "TourResult",
    "UNVISITED",
    "clone_board",
    "create_board",
    "find_tour",
    "is_legal",
    "mark",
    "random_start",
    "rank_moves",
    "render_tour_board",
    "tour_path",
    "verify_tour",
    "visit_grid",
]
