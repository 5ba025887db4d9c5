from abc import ABC, abstractmethod

from typing_extensions import TypeVar

from .path import Path

X = TypeVar("X")


class PathSearch(ABC):
    @abstractmethod
    async def find_path(self, start: X, goal) -> Path:
        """Find the lowest-cost path from ``start`` to a node satisfying ``goal``.

        Args:
            start: The node to start from.
            goal: A goal node, or a predicate over nodes.

        Returns:
            Path: The path found.
        """
