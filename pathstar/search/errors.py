class SearchError(Exception):
    """
    Base class for errors raised by the search itself, as opposed to errors
    raised by an edge source, which propagate unchanged.
    """


class NoPathFound(SearchError):
    """
    Raised when the frontier is exhausted without reaching a goal node. This is an
    expected outcome of a search, not a defect.

    :param start: The node the search started from.
    :param goal: The goal exactly as passed to ``find_path``, a node or a predicate
        rather than its normalized ``GoalSpec``.
    """

    message = "No path to goal"

    def __init__(self, start=None, goal=None):
        super().__init__(self.message)
        self.start = start
        self.goal = goal
