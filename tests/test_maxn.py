import pytest

from wordtrap.board import WordBoard
from wordtrap.maxn import (
    MIN_SCORE,
    MaxNScore,
    RawScore,
    assign_score,
    max_n,
    raw_to_int,
    to_zero_sum,
    unknown_outcome,
)


@pytest.fixture
def choice_board():
    # aa links to ab (a dead end) and ba; ba links on to bc (a dead end).
    return WordBoard.from_words(["aa", "ab", "ba", "bc"])


def test_raw_to_int_weights_come_from_the_format():
    assert raw_to_int(RawScore(1, 0.0, 0)) == 1_000_000_000
    assert raw_to_int(RawScore(0, 1.0, 0)) == 100_000_000


def test_raw_to_int_adds_depth():
    base = raw_to_int(RawScore(1, 0.5, 0))
    assert raw_to_int(RawScore(1, 0.5, 7)) - base == 7


def test_raw_to_int_orders_outcomes():
    win = raw_to_int(RawScore(1, 0.0, 0))
    unknown = raw_to_int(RawScore(0, 1.0, 0))
    loss = raw_to_int(RawScore(-1, 1.0, 9))
    assert win > unknown > loss


@pytest.mark.parametrize("scores", [[10, 20, 30], [5, -5], [7, 7, 7, 7]])
def test_to_zero_sum_keeps_differences_when_mean_is_whole(scores):
    result = to_zero_sum(scores)
    assert sum(result) == 0
    assert result[0] - result[-1] == scores[0] - scores[-1]


def test_to_zero_sum_truncates_toward_zero():
    assert to_zero_sum([1, 0]) == [0, 0]


def test_to_zero_sum_rejects_empty():
    with pytest.raises(ValueError):
        to_zero_sum([])


def test_unknown_outcome_is_even_for_everyone():
    score = unknown_outcome(4, 3)
    assert score.word_id == 4
    assert len(set(score.scores)) == 1
    assert sum(score.scores) == 0
    assert all(raw.is_win_percent == 0.5 for raw in score.raw_scores)


def test_assign_score_makes_mover_lose():
    score = assign_score(2, 5, 1, 3)
    assert score.word_id == 5
    assert score.raw_scores[1].is_winning_position == -1
    assert score.raw_scores[0].is_winning_position == 1
    assert score.raw_scores[2].is_winning_position == 1
    assert score.scores[1] == min(score.scores)
    assert score.scores[0] == score.scores[2]
    assert abs(sum(score.scores)) < 3


def test_assign_score_rejects_bad_player():
    with pytest.raises(ValueError):
        assign_score(0, 0, 3, 3)


def test_minimum_score():
    score = MaxNScore.minimum(2)
    assert score.scores == [MIN_SCORE, MIN_SCORE]
    assert score.word_id == -1


def test_describe_lists_each_player():
    text = assign_score(1, 2, 0, 2).describe()
    assert text.startswith("MaxN Score 2:")
    assert "0: {-1, 0.000000, 1}" in text


def test_max_n_picks_the_trapping_move(choice_board):
    used = choice_board.new_word_set()
    used.mark(0)
    score = max_n(choice_board, 0, 0, 2, 4, 4, used)
    assert score.word_id == 1
    assert score.scores[0] > score.scores[1]
    assert list(used) == [0]


def test_max_n_shallow_still_sees_immediate_trap(choice_board):
    used = choice_board.new_word_set()
    used.mark(0)
    score = max_n(choice_board, 0, 0, 2, 1, 1, used)
    assert score.word_id == 1
    assert list(used) == [0]


def test_max_n_without_moves_reports_loss():
    board = WordBoard.from_words(["ab"])
    used = board.new_word_set()
    used.mark(0)
    score = max_n(board, 0, 0, 3, 3, 3, used)
    assert score.word_id == -1
    assert score.scores[0] == min(score.scores)


def test_max_n_only_move_is_taken():
    board = WordBoard.from_words(["aa", "ab", "bb"])
    used = board.new_word_set()
    used.mark(0)
    score = max_n(board, 0, 0, 2, 5, 5, used)
    assert score.word_id == 1
    assert score.scores[0] < score.scores[1]
    assert list(used) == [0]


def test_max_n_rejects_bad_player_count(choice_board):
    with pytest.raises(ValueError):
        max_n(choice_board, 0, 0, 0, 2, 2, choice_board.new_word_set())