import random

import pytest

from wordtrap.bfs import (
    BFSResult,
    breadth_first_search_distance,
    breadth_first_search_goal,
    path_to_nearest_word,
)
from wordtrap.board import WordBoard


@pytest.fixture
def board():
    # A chain: dog - cog - cot - cat - bat - bag - big
    return WordBoard.from_words(["cat", "cot", "cog", "dog", "bat", "bag", "big"])


def ids(board, *words):
    return [board.word_id(w) for w in words]


def words(board, word_ids):
    return [board.word(i) for i in word_ids]


def word_set(board, *names):
    result = board.new_word_set()
    for name in names:
        result.mark(board.word_id(name))
    return result


def test_distance_options_in_discovery_order(board):
    used = board.new_word_set()
    result = breadth_first_search_distance(board, board.word_id("cat"), 2, used)
    assert isinstance(result, BFSResult)
    assert words(board, result.option_ids) == ["cog", "bag"]


def test_distance_options_sit_at_requested_depth(board):
    used = board.new_word_set()
    start = board.word_id("cat")
    result = breadth_first_search_distance(board, start, 2, used)
    for node in result.options:
        assert node.depth == 2
        path = node.path()
        assert path[0] == start
        assert len(path) == 3
        for a, b in zip(path, path[1:]):
            assert b in board.connections(a)


def test_distance_marks_every_stored_word(board):
    used = board.new_word_set()
    result = breadth_first_search_distance(board, board.word_id("cat"), 2, used)
    stored = [node.id for node in result.storage]
    assert len(used) == len(stored)
    assert all(word_id in used for word_id in stored)


def test_distance_zero_finds_nothing(board):
    used = board.new_word_set()
    result = breadth_first_search_distance(board, board.word_id("cat"), 0, used)
    assert result.options == []
    assert len(result.storage) == 1


def test_distance_skips_used_words(board):
    used = word_set(board, "bat")
    result = breadth_first_search_distance(board, board.word_id("cat"), 2, used)
    assert words(board, result.option_ids) == ["cog"]


def test_goal_picks_an_option_and_resets(board):
    used = board.new_word_set()
    goal = breadth_first_search_goal(
        board, board.word_id("cat"), 2, used, random.Random(7)
    )
    assert board.word(goal) in {"cog", "bag"}
    assert len(used) == 0


def test_goal_single_option(board):
    used = board.new_word_set()
    goal = breadth_first_search_goal(board, board.word_id("dog"), 6, used)
    assert board.word(goal) == "big"


def test_goal_too_far_returns_none(board):
    used = board.new_word_set()
    assert breadth_first_search_goal(board, board.word_id("dog"), 7, used) is None
    assert len(used) == 0


def test_goal_rejects_short_distance(board):
    with pytest.raises(ValueError):
        breadth_first_search_goal(board, 0, 1, board.new_word_set())


def test_path_to_nearest_goal(board):
    goals = word_set(board, "big")
    path = path_to_nearest_word(
        board, board.word_id("cat"), 8, goals, board.new_word_set()
    )
    assert words(board, path) == ["cat", "bat", "bag", "big"]


def test_path_start_is_goal(board):
    goals = word_set(board, "cat")
    path = path_to_nearest_word(
        board, board.word_id("cat"), 8, goals, board.new_word_set()
    )
    assert words(board, path) == ["cat"]


def test_path_avoided_start_is_empty(board):
    avoid = word_set(board, "cat")
    goals = word_set(board, "big")
    assert path_to_nearest_word(board, board.word_id("cat"), 8, goals, avoid) == []


def test_path_cut_off_at_max_distance(board):
    goals = word_set(board, "big")
    avoid = word_set(board, "bat")
    start = board.word_id("cat")
    path = path_to_nearest_word(board, start, 8, goals, avoid)
    assert len(path) == 8
    assert path[0] == start
    assert all(word_id not in avoid for word_id in path)
    for a, b in zip(path, path[1:]):
        assert b in board.connections(a)


def test_path_max_distance_one_is_start(board):
    goals = word_set(board, "big")
    path = path_to_nearest_word(
        board, board.word_id("cat"), 1, goals, board.new_word_set()
    )
    assert words(board, path) == ["cat"]


def test_path_isolated_word_is_empty():
    board = WordBoard.from_words(["cat", "dog"])
    goals = board.new_word_set()
    goals.mark(board.word_id("dog"))
    assert (
        path_to_nearest_word(board, board.word_id("cat"), 8, goals, board.new_word_set())
        == []
    )


def test_path_without_limit(board):
    goals = word_set(board, "big")
    path = path_to_nearest_word(
        board, board.word_id("dog"), 0, goals, board.new_word_set()
    )
    assert words(board, path) == ["dog", "cog", "cot", "cat", "bat", "bag", "big"]


def test_path_without_limit_unreachable(board):
    goals = word_set(board, "big")
    avoid = word_set(board, "bat")
    assert path_to_nearest_word(board, board.word_id("dog"), 0, goals, avoid) == []