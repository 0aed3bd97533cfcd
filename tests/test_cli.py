from contextlib import redirect_stderr, redirect_stdout
import io
import json
import unittest

from knights_tour.cli import main


def _run(*argv: str) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class CliTests(unittest.TestCase):
    def test_solve_prints_board(self) -> None:
        code, out, _ = _run("solve", "--size", "5", "--row", "0", "--col", "0")
        self.assertEqual(code, 0)
        self.assertIn("Start: (0, 0)", out)
        self.assertIn("25", out)

    def test_solve_json(self) -> None:
        code, out, _ = _run("solve", "-n", "5", "--row", "0", "--col", "0", "--json")
        payload = json.loads(out)
        self.assertEqual(code, 0)
        self.assertEqual(payload["status"], "solved")
        self.assertEqual(len(payload["path"]), 25)

    def test_solve_without_tour_exits_nonzero(self) -> None:
        code, out, _ = _run("solve", "--size", "3", "--row", "0", "--col", "0")
        self.assertEqual(code, 1)
        self.assertIn("No tour found", out)

    def test_random_start_with_seed(self) -> None:
        code, out, _ = _run("solve", "--size", "1", "--seed", "4")
        self.assertEqual(code, 0)
        self.assertIn("Start: (0, 0)", out)

    def test_invalid_start_reports_error(self) -> None:
        code, _, err = _run("solve", "--size", "5", "--row", "0")
        self.assertEqual(code, 2)
        self.assertIn("Error:", err)

        code, _, err = _run("solve", "--size", "5", "--row", "5", "--col", "0")
        self.assertEqual(code, 2)
        self.assertIn("outside", err)

    def test_benchmark_json(self) -> None:
        code, out, _ = _run("benchmark", "--sizes", "1", "3", "--json")
        rows = json.loads(out)
        self.assertEqual(code, 0)
        self.assertEqual([row["size"] for row in rows], [1, 3])
        self.assertEqual([row["status"] for row in rows], ["solved", "no-solution"])

    def test_benchmark_table(self) -> None:
        code, out, _ = _run("benchmark", "--sizes", "1")
        self.assertEqual(code, 0)
        self.assertIn("size", out.splitlines()[0])


if __name__ == "__main__":
    unittest.main()
