from .astar_search import AStar
from .errors import NoPathFound, SearchError
from .frontier import Frontier
from .goal import GoalSpec, LiteralGoal, PredicateGoal, goal_spec
from .heuristic import Heuristic, zero_heuristic
from .path import Path, SearchRecord, reconstruct_path
from .path_search import PathSearch
