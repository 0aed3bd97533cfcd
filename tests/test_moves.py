import unittest

from knights_tour.board import create_board, mark, to_padded
from knights_tour.moves import KNIGHT_MOVES, Candidate, rank_moves


def _board_with(size: int, *cells: tuple[int, int]):
    board = create_board(size)
    for order, (row, col) in enumerate(cells, start=1):
        mark(to_padded(row, col), order, board)
    return board


class RankMovesTests(unittest.TestCase):
    def test_knight_moves_enumeration(self) -> None:
        self.assertEqual(len(KNIGHT_MOVES), 8)
        self.assertEqual(len(set(KNIGHT_MOVES)), 8)
        self.assertEqual(KNIGHT_MOVES[0], (-2, -1))
        self.assertEqual(KNIGHT_MOVES[-1], (1, 2))

    def test_equal_weights_keep_enumeration_order(self) -> None:
        board = _board_with(5, (0, 0))
        ranked = rank_moves(to_padded(0, 0), 2, board)
        self.assertEqual(ranked, [Candidate(5, (2, 1)), Candidate(5, (1, 2))])

    def test_sorted_by_onward_mobility(self) -> None:
        board = _board_with(5, (0, 0), (0, 4))
        ranked = rank_moves(to_padded(0, 0), 3, board)
        self.assertEqual(ranked, [Candidate(4, (1, 2)), Candidate(5, (2, 1))])
        weights = [candidate.weight for candidate in ranked]
        self.assertEqual(weights, sorted(weights))

    def test_dead_ends_are_pruned(self) -> None:
        board = _board_with(5, (0, 0), (0, 2), (4, 0), (4, 2), (1, 3), (3, 3))
        ranked = rank_moves(to_padded(0, 0), 7, board)
        self.assertEqual(ranked, [Candidate(4, (1, 2))])

    def test_final_move_is_forced_to_zero_weight(self) -> None:
        board = _board_with(5, (0, 0), (0, 2), (4, 0), (4, 2), (1, 3), (3, 3))
        ranked = rank_moves(to_padded(0, 0), 7, board, total_cells=7)
        self.assertEqual(ranked, [Candidate(0, (2, 1)), Candidate(0, (1, 2))])

    def test_ranking_does_not_mutate_board(self) -> None:
        board = _board_with(5, (2, 2))
        snapshot = [list(row) for row in board]
        rank_moves(to_padded(2, 2), 2, board)
        self.assertEqual(board, snapshot)


if __name__ == "__main__":
    unittest.main()
