import asyncio
import logging
from typing import Dict, Hashable, Mapping

from pathstar.graph.edge_source import EdgeSource, fetch_edges

from .errors import NoPathFound
from .frontier import Frontier
from .goal import GoalSpec, goal_spec
from .heuristic import Heuristic, zero_heuristic
from .path import Path, SearchRecord, reconstruct_path
from .path_search import PathSearch

logger = logging.getLogger(__name__)


class AStar(PathSearch):
    """
    Performs an A* search over a graph that is only known through its edge source.
    Nodes are expanded in order of ``g + h``, where ``g`` is the cost accumulated
    from the start and ``h`` the heuristic estimate of the remaining cost. Ties are
    broken first-in, first-out, so a fixed graph always yields the same path.

    Edge costs must be non-negative. A closed node is never reopened, so each
    node's edges are requested at most once per search.

    :param exit_arcs_for_node_id: The edge source. Called with a node, returns the
        edges leaving it, either directly or as an awaitable.
    :param h: The heuristic, called as ``h(node, target)`` where ``target`` is the
        goal node or the goal predicate. Defaults to ``zero_heuristic``.
    """

    OPTIONS = ("exitArcsForNodeId", "h")

    def __init__(
        self, exit_arcs_for_node_id: EdgeSource, h: Heuristic = zero_heuristic
    ):
        if not callable(exit_arcs_for_node_id):
            raise TypeError(
                f"Edge source must be callable, got {exit_arcs_for_node_id!r}"
            )
        if not callable(h):
            raise TypeError(f"Heuristic must be callable, got {h!r}")
        self.exit_arcs_for_node_id = exit_arcs_for_node_id
        self.h = h

    @classmethod
    def from_options(cls, options: Mapping) -> "AStar":
        """
        Construct from an options mapping with the keys ``exitArcsForNodeId``
        (required) and ``h`` (optional).
        """
        unknown = set(options) - set(cls.OPTIONS)
        if unknown:
            raise TypeError(f"Unknown options: {sorted(unknown)}")
        if "exitArcsForNodeId" not in options:
            raise TypeError("Missing required option: exitArcsForNodeId")
        return cls(options["exitArcsForNodeId"], h=options.get("h", zero_heuristic))

    async def find_path(self, start, goal) -> Path:
        """
        Find the lowest-cost path from ``start`` to a node satisfying ``goal``.

        :param start: The node to start from.
        :param goal: A goal node, a predicate over nodes, or a ``GoalSpec``.

        :return: The path found. If ``start`` is itself a goal, a path of cost 0
            with no edges.
        :raises NoPathFound: If no goal node is reachable from ``start``.
        """
        spec = goal_spec(goal)
        if spec.matches(start):
            logger.debug("Start node %r already satisfies the goal", start)
            return Path(0)
        return await _SearchState(self, spec, goal).run(start)

    def find_path_sync(self, start, goal) -> Path:
        """
        Run ``find_path`` to completion on a fresh event loop. Must not be called
        from inside a running loop.
        """
        return asyncio.run(self.find_path(start, goal))


class _SearchState:
    """
    The mutable state of a single search. Never shared between searches.
    """

    def __init__(self, astar: AStar, goal: GoalSpec, requested_goal):
        self.astar = astar
        self.goal = goal
        self.requested_goal = requested_goal
        self.records: Dict[Hashable, SearchRecord] = {}
        self.frontier = Frontier()
        self.expansions = 0

    def estimate(self, node) -> float:
        return self.astar.h(node, self.goal.target)

    async def run(self, start) -> Path:
        logger.debug("Searching from %r to %r", start, self.goal)
        self.records[start] = SearchRecord(0)
        self.frontier.push(start, self.estimate(start))
        while self.frontier:
            node = self.frontier.pop()
            record = self.records[node]
            if record.closed:
                continue
            record.closed = True
            if self.goal.matches(node):
                path = reconstruct_path(self.records, node)
                logger.debug(
                    "Reached goal %r with cost %s after %d expansions",
                    node,
                    path.cost,
                    self.expansions,
                )
                return path
            await self.expand(node, record)
        logger.debug(
            "No path from %r to %r after %d expansions",
            start,
            self.goal,
            self.expansions,
        )
        raise NoPathFound(start, self.requested_goal)

    async def expand(self, node, record: SearchRecord) -> None:
        self.expansions += 1
        logger.debug(
            "Expanding %r (cost %s, frontier size %d)",
            node,
            record.cost,
            len(self.frontier),
        )
        edges = await fetch_edges(self.astar.exit_arcs_for_node_id, node)
        for edge in edges:
            neighbor = self.records.get(edge.to_node)
            if neighbor is not None and neighbor.closed:
                continue
            candidate = record.cost + edge.cost
            if neighbor is not None and candidate >= neighbor.cost:
                continue
            self.records[edge.to_node] = SearchRecord(candidate, edge)
            self.frontier.push(edge.to_node, candidate + self.estimate(edge.to_node))
