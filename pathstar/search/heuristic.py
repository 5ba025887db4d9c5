from typing import Any, Callable, Hashable

Heuristic = Callable[[Hashable, Any], float]


def zero_heuristic(node: Hashable, target: Any) -> float:
    """
    The default heuristic. Ignores both arguments and estimates zero remaining
    cost, which turns A* into uniform-cost (Dijkstra) search.

    :param node: The node being estimated from.
    :param target: The goal node, or the goal predicate when searching by predicate.
    """
    del node, target
    return 0
