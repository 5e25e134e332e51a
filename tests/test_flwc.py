import random

import pytest

from wordtrap.board import WordBoard
from wordtrap.flwc import (
    bot_ply_flwc,
    bot_ply_max_adjacencies,
    bot_ply_random,
    generalized_flwc_game,
)


@pytest.fixture
def path_board():
    # cat - cot - cog - dog
    return WordBoard.from_words(["cat", "cot", "cog", "dog"])


@pytest.fixture
def wide_board():
    return WordBoard.from_words(
        ["bat", "bit", "but", "cat", "cot", "cut", "hat", "hit", "hot", "hut"]
    )


def test_random_bot_picks_unused_link_and_marks_it(wide_board):
    used = wide_board.new_word_set()
    start = wide_board.word_id("hat")
    used.mark(start)
    choice = bot_ply_random(wide_board, used, start, random.Random(3))
    assert choice in wide_board.connections(start)
    assert choice in used
    assert len(used) == 2


def test_random_bot_trapped_returns_minus_one(path_board):
    used = path_board.new_word_set()
    used.mark(path_board.word_id("cat"))
    used.mark(path_board.word_id("cot"))
    assert bot_ply_random(path_board, used, path_board.word_id("cat")) == -1
    assert len(used) == 2


def test_max_adjacencies_prefers_most_linked(path_board):
    used = path_board.new_word_set()
    cot = path_board.word_id("cot")
    used.mark(cot)
    choice = bot_ply_max_adjacencies(path_board, used, cot)
    assert choice == path_board.word_id("cog")
    assert choice in used


def test_max_adjacencies_with_goals_keeps_first_unless_goal(path_board):
    cot = path_board.word_id("cot")
    cog = path_board.word_id("cog")
    cat = path_board.word_id("cat")

    used = path_board.new_word_set()
    used.mark(cot)
    no_goals = path_board.new_word_set()
    assert bot_ply_max_adjacencies(path_board, used, cot, no_goals) == cat

    used = path_board.new_word_set()
    used.mark(cot)
    goals = path_board.new_word_set()
    goals.mark(cog)
    assert bot_ply_max_adjacencies(path_board, used, cot, goals) == cog


def test_max_adjacencies_trapped(path_board):
    used = path_board.new_word_set()
    used.mark(path_board.word_id("dog"))
    used.mark(path_board.word_id("cog"))
    assert bot_ply_max_adjacencies(path_board, used, path_board.word_id("dog")) == -1


def test_flwc_bot_heads_for_goal(path_board):
    used = path_board.new_word_set()
    cot = path_board.word_id("cot")
    used.mark(cot)
    goals = path_board.new_word_set()
    goals.mark(path_board.word_id("dog"))
    avoid = path_board.new_word_set()
    choice = bot_ply_flwc(path_board, used, cot, 2, goals, avoid)
    assert choice == path_board.word_id("cog")
    assert choice in used
    assert cot in used


def test_flwc_bot_steers_away_from_avoided(path_board):
    used = path_board.new_word_set()
    cot = path_board.word_id("cot")
    used.mark(cot)
    goals = path_board.new_word_set()
    avoid = path_board.new_word_set()
    avoid.mark(path_board.word_id("dog"))
    choice = bot_ply_flwc(path_board, used, cot, 2, goals, avoid)
    assert choice == path_board.word_id("cat")


def test_flwc_bot_trapped_returns_minus_one(path_board):
    used = path_board.new_word_set()
    cat = path_board.word_id("cat")
    used.mark(cat)
    used.mark(path_board.word_id("cot"))
    result = bot_ply_flwc(
        path_board, used, cat, 2, path_board.new_word_set(), path_board.new_word_set()
    )
    assert result == -1
    assert len(used) == 2


def test_generalized_game_moves_follow_links(wide_board):
    moves = generalized_flwc_game(wide_board, random.Random(7))
    assert moves[0] == 0
    assert len(moves) <= 11
    played = [move for move in moves if move != -1]
    assert len(played) == len(set(played))
    for before, after in zip(moves, moves[1:]):
        if after == -1:
            break
        assert after in wide_board.connections(before)
    if -1 in moves:
        assert moves[-1] == -1