class KnightsTourError(Exception):
    """Base class for knight's tour failures."""


class InvalidConfiguration(KnightsTourError, ValueError):
    pass


class NoSolutionFound(KnightsTourError):
    def __init__(self, size: int, start: tuple[int, int]) -> None:
        super().__init__(f"No knight's tour of a {size}x{size} board starts at {start}.")
        self.size = size
        self.start = start


class SearchAborted(KnightsTourError):
    def __init__(self, max_nodes: int) -> None:
        super().__init__(f"Search stopped after exceeding {max_nodes} nodes.")
        self.max_nodes = max_nodes
