import inspect
from typing import Awaitable, Callable, Hashable, Iterable, List, Tuple, Union

from frozendict import frozendict

from .edge import Edge, as_edge

EdgeSource = Callable[[Hashable], Union[Iterable[Edge], Awaitable[Iterable[Edge]]]]


async def fetch_edges(source: EdgeSource, node: Hashable) -> List[Edge]:
    """
    Ask ``source`` for the outgoing edges of ``node``. The source may be a plain
    function or a coroutine function; in the latter case the result is awaited.
    Edges given as ``{"from": ..., "to": ..., "cost": ...}`` dictionaries are
    converted to ``Edge`` objects. Exceptions raised by the source are not caught.

    :param source: The edge source to query.
    :param node: The node whose outgoing edges are wanted.
    """
    result = source(node)
    if inspect.isawaitable(result):
        result = await result
    return [as_edge(edge) for edge in result]


class EdgeListSource:
    """
    An edge source backed by a fixed list of edges. The adjacency is computed once
    and stored immutably, so the same instance can serve any number of concurrent
    searches. Edges leaving a node are returned in the order they were given.

    :param edges: The edges of the graph, either ``Edge`` objects or
        ``{"from": ..., "to": ..., "cost": ...}`` dictionaries.
    """

    def __init__(self, edges: Iterable[Union[Edge, dict]]):
        adjacency = {}
        nodes = {}
        for edge in edges:
            edge = as_edge(edge)
            adjacency.setdefault(edge.from_node, []).append(edge)
            nodes.setdefault(edge.from_node, None)
            nodes.setdefault(edge.to_node, None)
        self._adjacency = frozendict({k: tuple(v) for k, v in adjacency.items()})
        self._nodes = tuple(nodes)

    def nodes(self) -> Tuple[Hashable, ...]:
        """
        Every node mentioned by some edge, in the order first seen.
        """
        return self._nodes

    def edges(self) -> Tuple[Edge, ...]:
        return tuple(edge for out in self._adjacency.values() for edge in out)

    async def __call__(self, node: Hashable) -> Tuple[Edge, ...]:
        return self._adjacency.get(node, ())
