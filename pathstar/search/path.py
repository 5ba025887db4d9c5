from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple

from pathstar.graph.edge import Edge


@dataclass
class SearchRecord:
    """
    What the search knows about a node it has seen.

    :param cost: Best known cumulative cost from the start node.
    :param predecessor: The edge that achieved ``cost``; None for the start node.
    :param closed: Whether the node has been expanded. A closed node's cost is final.
    """

    cost: float
    predecessor: Optional[Edge] = None
    closed: bool = False


@dataclass(frozen=True)
class Path:
    """
    The result of a successful search.

    :param cost: Total cost of the path.
    :param path: The edges from the start node to the goal node, in order. Empty iff
        the start node was itself a goal.
    """

    cost: float
    path: Tuple[Edge, ...] = ()

    @property
    def nodes(self) -> List[Hashable]:
        """
        The nodes visited by the path, start first. Empty for an empty path, since
        an empty path does not record its start node.
        """
        if not self.path:
            return []
        return [self.path[0].from_node] + [edge.to_node for edge in self.path]

    def to_dict(self) -> dict:
        return {"cost": self.cost, "path": [edge.to_dict() for edge in self.path]}


def reconstruct_path(records: Dict[Hashable, SearchRecord], goal: Hashable) -> Path:
    """
    Walk predecessor edges back from ``goal`` to the start node and return the
    path in start-to-goal order. The cost is the goal's recorded cost rather than a
    fresh sum over the edges.
    """
    edges = []
    record = records[goal]
    while record.predecessor is not None:
        edges.append(record.predecessor)
        record = records[record.predecessor.from_node]
    edges.reverse()
    return Path(records[goal].cost, tuple(edges))
