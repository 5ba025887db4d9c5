from . import graph, search
from .graph.edge import Edge, as_edge
from .graph.edge_source import EdgeListSource, EdgeSource, fetch_edges
from .search.astar_search import AStar
from .search.errors import NoPathFound, SearchError
from .search.goal import GoalSpec, LiteralGoal, PredicateGoal, goal_spec
from .search.heuristic import zero_heuristic
from .search.path import Path
from .search.path_search import PathSearch
