"""Append-only arena of search nodes linked to their parents by index."""

from __future__ import annotations

from dataclasses import dataclass

from goap_engine.planning.blackboard import Blackboard

ROOT_NAME = "root"


@dataclass(frozen=True)
class SearchNode:
    """A visited hypothetical state.

    ``action`` is the index of the action that produced this node and
    ``parent`` the arena index of the node it was expanded from; both are
    None for the root.
    """

    name: str
    facts: Blackboard
    cost: int
    action: int | None = None
    parent: int | None = None


class NodeArena:
    """Growable indexed node storage for one search.

    Indices are only ever handed out by ``push``, so every parent link stored
    in the arena refers to a node that exists.
    """

    def __init__(self):
        self._nodes: list[SearchNode] = []

    def push(self, node: SearchNode) -> int:
        if node.parent is not None and not 0 <= node.parent < len(self._nodes):
            raise IndexError(f"Parent index {node.parent} was not issued by this arena")
        self._nodes.append(node)
        return len(self._nodes) - 1

    def root(self, facts: Blackboard) -> int:
        return self.push(SearchNode(name=ROOT_NAME, facts=facts, cost=0))

    def child(self, parent: int, action: int, name: str, facts: Blackboard, cost: int) -> int:
        return self.push(SearchNode(name=name, facts=facts, cost=cost, action=action, parent=parent))

    def path(self, index: int) -> list[int]:
        """Action indices from the root to the node at ``index``, root side first."""
        actions: list[int] = []
        current: int | None = index
        while current is not None:
            node = self._nodes[current]
            if node.action is not None:
                actions.append(node.action)
            current = node.parent
        actions.reverse()
        return actions

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)
