"""Goal and avoid word sets, and start-word selection for the challenge game."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

from wordtrap.bfs import breadth_first_search_distance, path_to_nearest_word
from wordtrap.board import WordBoard, WordSet


def contains_letter(word: str, letter: str) -> bool:
    """Whether ``word`` holds ``letter``."""
    return letter in word


_COMPARATORS: tuple[Callable[[str, str], bool], ...] = (contains_letter,)


@dataclass(frozen=True)
class EndWordParameters:
    """A condition a word must meet; a blank letter matches no word."""

    letter: str
    comparator_id: int = 0


@dataclass(kw_only=True)
class StartWordParameters:
    """Limits a start word must meet."""

    goal_words: WordSet
    avoid_words: WordSet
    min_goal_distance: int
    max_goal_distance: int = 8
    min_avoid_distance: int
    max_avoid_distance: int = 8
    min_adjacencies: int
    max_adjacencies: int = 100


def word_set_given_condition(board: WordBoard, params: EndWordParameters) -> WordSet:
    """Every word on the board that meets the condition."""
    result = board.new_word_set()
    if params.letter == " ":
        return result
    if not 0 <= params.comparator_id < len(_COMPARATORS):
        raise ValueError(f"unknown comparator {params.comparator_id}")
    comparator = _COMPARATORS[params.comparator_id]
    for word_id, word in enumerate(board):
        if comparator(word, params.letter):
            result.mark(word_id)
    return result


def choose_start_word(
    board: WordBoard,
    params: StartWordParameters,
    rng: random.Random | None = None,
) -> tuple[int, list[int]]:
    """Pick a random start word and the path that solves it.

    A start word has between ``min_adjacencies`` and ``max_adjacencies``
    links, and its path to the nearest goal word holds more than
    ``min_goal_distance`` and fewer than ``max_goal_distance`` words.
    """
    chooser = rng if rng is not None else random.Random()
    valid = [
        word_id
        for word_id in range(len(board))
        if params.min_adjacencies
        <= board.num_connections(word_id)
        <= params.max_adjacencies
        and params.min_goal_distance
        < len(
            path_to_nearest_word(
                board,
                word_id,
                params.max_goal_distance,
                params.goal_words,
                params.avoid_words,
            )
        )
        < params.max_goal_distance
    ]
    if not valid:
        raise ValueError("there are no valid start words")

    start = valid[chooser.randrange(len(valid))]
    solution = path_to_nearest_word(
        board, start, params.max_goal_distance, params.goal_words, params.avoid_words
    )
    return start, solution


def surrounding_words(board: WordBoard, word_id: int, distance: int) -> WordSet:
    """The word and every word within ``distance`` links of it."""
    used = board.new_word_set()
    result = breadth_first_search_distance(board, word_id, distance, used)
    found = board.new_word_set()
    for node in result.storage:
        found.mark(node.id)
    return found