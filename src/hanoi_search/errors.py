"""Exception types raised at the solver entry points."""


class HanoiError(Exception):
    """Base class for all puzzle errors."""


class InvalidDiskCount(HanoiError, ValueError):
    """Disk count was negative or not an integer."""

    def __init__(self, n):
        self.n = n
        super().__init__(f"Disk count must be a non-negative integer (got {n!r})")


class NoSolutionFound(HanoiError, RuntimeError):
    """The frontier was exhausted before the goal was dequeued."""


class IllegalMoveError(HanoiError, ValueError):
    """A replayed move broke the stacking rule."""


def check_disk_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidDiskCount(n)
    return n
