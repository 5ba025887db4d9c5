from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Union


class GoalSpec(ABC):
    """
    Represents the set of nodes a search is trying to reach.
    """

    @abstractmethod
    def matches(self, node: Hashable) -> bool:
        """
        Return True iff the node is a goal node.
        """

    @property
    @abstractmethod
    def target(self) -> Any:
        """
        The value handed to the heuristic as its second argument.
        """


@dataclass(frozen=True)
class LiteralGoal(GoalSpec):
    """
    A goal satisfied by exactly one node, compared by equality.
    """

    node: Hashable

    def matches(self, node):
        return node == self.node

    @property
    def target(self):
        return self.node


@dataclass(frozen=True)
class PredicateGoal(GoalSpec):
    """
    A goal satisfied by every node for which ``predicate`` holds. There may be no
    single target node, so the heuristic receives the predicate itself.
    """

    predicate: Callable[[Hashable], bool]

    def matches(self, node):
        return bool(self.predicate(node))

    @property
    def target(self):
        return self.predicate


def goal_spec(goal: Union[GoalSpec, Hashable, Callable[[Hashable], bool]]) -> GoalSpec:
    """
    Normalize a goal argument. Callables become a ``PredicateGoal``, existing
    ``GoalSpec`` objects are returned unchanged and anything else is treated as a
    literal node. Since every callable is taken as a predicate, a node that is
    itself callable (a class, a ``functools.partial``) must be wrapped as
    ``LiteralGoal(node)`` to be searched for by equality.
    """
    if isinstance(goal, GoalSpec):
        return goal
    if callable(goal):
        return PredicateGoal(goal)
    return LiteralGoal(goal)
