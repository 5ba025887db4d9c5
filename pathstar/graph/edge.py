from dataclasses import dataclass
from typing import Hashable, Mapping, TypeVar, Union

NodeId = TypeVar("NodeId", bound=Hashable)


@dataclass(frozen=True)
class Edge:
    """
    A directed, weighted edge between two nodes of a graph. Nodes are opaque
    hashable values; the search never inspects them beyond equality.

    :param from_node: The node the edge leaves.
    :param to_node: The node the edge enters. May equal ``from_node``.
    :param cost: The non-negative cost of traversing the edge.
    """

    from_node: Hashable
    to_node: Hashable
    cost: float

    @property
    def is_self_loop(self) -> bool:
        return self.from_node == self.to_node

    def to_dict(self) -> dict:
        """
        Render the edge as a ``{"from": ..., "to": ..., "cost": ...}`` dictionary.
        """
        return {"from": self.from_node, "to": self.to_node, "cost": self.cost}

    @classmethod
    def from_dict(cls, record: Mapping) -> "Edge":
        """
        Build an edge from a ``{"from": ..., "to": ..., "cost": ...}`` dictionary.
        """
        return cls(record["from"], record["to"], record["cost"])


def as_edge(value: Union[Edge, Mapping]) -> Edge:
    if isinstance(value, Mapping):
        return Edge.from_dict(value)
    return value
