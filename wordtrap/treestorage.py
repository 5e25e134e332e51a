"""Breadth-first search storage: discovered words in order, each linked to its parent."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from wordtrap.board import WordSet


@dataclass(eq=False)
class TreeStorageNode:
    """A discovered word and the word it was reached from."""

    id: int
    depth: int = 0
    prev: TreeStorageNode | None = field(default=None, repr=False)
    no_connections: bool = False

    def reverse_connections(self) -> list[int]:
        """Ids from this node back to the start word."""
        ids = []
        node: TreeStorageNode | None = self
        while node is not None:
            ids.append(node.id)
            node = node.prev
        return ids

    def path(self) -> list[int]:
        """Ids from the start word to this node."""
        return self.reverse_connections()[::-1]


class TreeStorage:
    """Nodes in discovery order, starting with the start word at depth 0."""

    def __init__(self, start_id: int, no_connections: bool = False) -> None:
        self._nodes: list[TreeStorageNode] = [
            TreeStorageNode(start_id, 0, None, no_connections)
        ]

    @property
    def root(self) -> TreeStorageNode:
        """The first node stored."""
        return self._nodes[0]

    def add(
        self, word_id: int, prev: TreeStorageNode, no_connections: bool = False
    ) -> TreeStorageNode:
        """Append a word reached from ``prev`` and return its node."""
        node = TreeStorageNode(word_id, prev.depth + 1, prev, no_connections)
        self._nodes.append(node)
        return node

    def last(self) -> TreeStorageNode | None:
        """The most recently added node, or None if the storage is empty."""
        return self._nodes[-1] if self._nodes else None

    def copy_connections(
        self,
        prev: TreeStorageNode,
        ids: Iterable[int],
        goal: int | None,
        min_connections: int,
    ) -> TreeStorageNode | None:
        """Add ``ids`` as children of ``prev`` until one is found.

        A node is found when its id is ``goal``, or, with no goal, when its
        depth equals ``min_connections``. Returns the last node at that point,
        or None if nothing was found.
        """
        for word_id in ids:
            node = self.add(word_id, prev)
            found = node.depth == min_connections if goal is None else node.id == goal
            if found:
                return self.last()
        return None

    def remove(self, word_id: int, used: WordSet) -> None:
        """Remove the first node holding ``word_id`` and mark the word unused."""
        for index, node in enumerate(self._nodes):
            if node.id == word_id:
                del self._nodes[index]
                used.unmark(word_id)
                return
        raise KeyError(word_id)

    def remove_all(self, word_id: int, used: WordSet) -> None:
        """Remove every node holding ``word_id`` and mark the word unused."""
        kept = [node for node in self._nodes if node.id != word_id]
        if len(kept) == len(self._nodes):
            raise KeyError(word_id)
        self._nodes = kept
        used.unmark(word_id)

    def remove_from(self, node: TreeStorageNode, used: WordSet) -> None:
        """Remove ``node`` and every node after it, marking their words unused."""
        index = next(
            (i for i, candidate in enumerate(self._nodes) if candidate is node), None
        )
        if index is None:
            raise ValueError("node is not in this storage")
        for removed in self._nodes[index:]:
            used.unmark(removed.id)
        del self._nodes[index:]

    def __iter__(self) -> Iterator[TreeStorageNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)