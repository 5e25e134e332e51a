"""Breadth-first searches over the word board."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from functools import lru_cache

from wordtrap.board import WordBoard, WordSet
from wordtrap.treestorage import TreeStorage, TreeStorageNode


@dataclass
class BFSResult:
    """The words found at the requested distance and the search tree behind them."""

    options: list[TreeStorageNode]
    storage: TreeStorage

    @property
    def option_ids(self) -> list[int]:
        """Ids of the words at the requested distance, in discovery order."""
        return [node.id for node in self.options]


def breadth_first_search_distance(
    board: WordBoard, start: int, min_connections: int, used: WordSet
) -> BFSResult:
    """Search outwards from ``start`` until words ``min_connections`` away are found.

    Words already in ``used`` are never entered. Every word the search
    discovers, the start included, is marked in ``used`` and left marked.
    """
    storage = TreeStorage(start)
    used.mark(start)
    options: list[TreeStorageNode] = []
    queue: deque[TreeStorageNode] = deque([storage.root])

    while queue:
        parent = queue.popleft()
        depth = parent.depth + 1
        if depth > min_connections:
            break
        for word_id in board.connections(parent.id):
            if word_id in used:
                continue
            node = storage.add(word_id, parent)
            used.mark(word_id)
            queue.append(node)
            if depth == min_connections:
                options.append(node)

    return BFSResult(options, storage)


def breadth_first_search_goal(
    board: WordBoard,
    start: int,
    min_connections: int,
    used: WordSet,
    rng: random.Random | None = None,
) -> int | None:
    """Pick a random word exactly ``min_connections`` away from ``start``.

    Returns None when no word is that far away. ``used`` is reset afterwards.
    """
    if min_connections < 2:
        raise ValueError("min_connections must be at least 2")
    chooser = rng if rng is not None else random.Random()
    result = breadth_first_search_distance(board, start, min_connections, used)
    used.reset()
    if not result.options:
        return None
    return result.options[chooser.randrange(len(result.options))].id


def _trace(parents: dict[int, int | None], word_id: int) -> list[int]:
    path: list[int] = []
    current: int | None = word_id
    while current is not None:
        path.append(current)
        current = parents[current]
    return path[::-1]


def _first_walk(
    board: WordBoard, start: int, length: int, avoid_words: WordSet
) -> list[int]:
    """The walk of ``length`` steps that comes first in breadth-first order."""

    @lru_cache(maxsize=None)
    def extends(word_id: int, steps: int) -> bool:
        if steps == 0:
            return True
        return any(
            extends(child, steps - 1)
            for child in board.connections(word_id)
            if child not in avoid_words
        )

    if not extends(start, length):
        return []
    walk = [start]
    current = start
    for steps in range(length - 1, -1, -1):
        current = next(
            child
            for child in board.connections(current)
            if child not in avoid_words and extends(child, steps)
        )
        walk.append(current)
    return walk


def path_to_nearest_word(
    board: WordBoard,
    word_id: int,
    max_distance: int,
    goal_words: WordSet,
    avoid_words: WordSet,
) -> list[int]:
    """The path from ``word_id`` to the nearest goal word, never through avoided words.

    The path holds both ends. When the search reaches ``max_distance`` words
    without a goal, the first path of that many words is returned instead.
    An empty list means the start is avoided or the search ran out of words.
    A ``max_distance`` below 1 puts no limit on the search.
    """
    if word_id in avoid_words:
        return []
    cutoff = max_distance - 1 if max_distance >= 1 else None

    parents: dict[int, int | None] = {word_id: None}
    level = [word_id]
    depth = 0
    while level and (cutoff is None or depth < cutoff):
        for node in level:
            if node in goal_words:
                return _trace(parents, node)
        following: list[int] = []
        for node in level:
            for child in board.connections(node):
                if child not in parents and child not in avoid_words:
                    parents[child] = node
                    following.append(child)
        level = following
        depth += 1

    if cutoff is None:
        return []
    return _first_walk(board, word_id, cutoff, avoid_words)