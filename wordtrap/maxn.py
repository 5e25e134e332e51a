"""Max-N search: every player maximises its own score in a game of three or more."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from wordtrap.board import WordBoard, WordSet

MIN_SCORE = -2_000_000_000
"""A score no real position can reach; it stands in for minus infinity."""


@dataclass
class RawScore:
    """How a position looks to one player before it is folded into a single number.

    ``is_winning_position`` is +1 for a win, -1 for a loss and 0 when unknown;
    ``is_win_percent`` is the share of games that look winnable; ``depth`` is
    the remaining search depth at which the outcome was settled.
    """

    is_winning_position: int
    is_win_percent: float
    depth: int

    def __str__(self) -> str:
        return f"{{{self.is_winning_position}, {self.is_win_percent:f}, {self.depth}}}"


@dataclass
class MaxNScore:
    """One score per player, the raw scores behind them, and the word they belong to."""

    scores: list[int]
    raw_scores: list[RawScore] | None = None
    word_id: int = -1

    @classmethod
    def minimum(cls, num_players: int) -> MaxNScore:
        """The worst possible score for every player, with no word."""
        _check_players(0, num_players)
        return cls([MIN_SCORE] * num_players, None, -1)

    @classmethod
    def from_raw(cls, raw_scores: list[RawScore], word_id: int) -> MaxNScore:
        """Fold raw scores into zero-sum integer scores."""
        return cls(
            to_zero_sum([raw_to_int(raw) for raw in raw_scores]),
            list(raw_scores),
            word_id,
        )

    def describe(self) -> str:
        """A readable listing of every player's score."""
        lines = [f"MaxN Score {self.word_id}:", "Raw Scores: "]
        for player, score in enumerate(self.scores):
            if self.raw_scores is None:
                lines.append(f"{player}: {score}")
            else:
                lines.append(f"{player}: {self.raw_scores[player]}: {score}")
        return "\n".join(lines)


def _check_players(player_id: int, num_players: int) -> None:
    if num_players < 1:
        raise ValueError("num_players must be at least 1")
    if not 0 <= player_id < num_players:
        raise ValueError(f"player_id {player_id} is outside 0..{num_players - 1}")


def raw_to_int(score: RawScore) -> int:
    """Fold a raw score into one integer: outcome first, then win share, then depth."""
    output = int(
        score.is_winning_position * 1_000_000_000
        + score.is_win_percent * 100_000_000
    )
    return output + score.depth


def to_zero_sum(scores: list[int]) -> list[int]:
    """Subtract the mean from every score, truncating toward zero."""
    if not scores:
        raise ValueError("at least one score is needed")
    mean = Fraction(sum(scores), len(scores))
    return [int(score - mean) for score in scores]


def unknown_outcome(word_id: int, num_players: int) -> MaxNScore:
    """The score of a position whose outcome lies beyond the search depth."""
    _check_players(0, num_players)
    return MaxNScore.from_raw(
        [RawScore(0, 0.5, 0) for _ in range(num_players)], word_id
    )


def assign_score(depth: int, word_id: int, player_id: int, num_players: int) -> MaxNScore:
    """The score of a dead end: the player to move loses, every other player wins."""
    _check_players(player_id, num_players)
    raw = [
        RawScore(-1, 0.0, depth) if player == player_id else RawScore(1, 1.0, depth)
        for player in range(num_players)
    ]
    return MaxNScore.from_raw(raw, word_id)


def _settle(
    best: MaxNScore, beta_scores: list[float], num_children: int, word_id: int
) -> MaxNScore:
    """Replace the best child's win shares with the children's average."""
    if best.raw_scores is None:
        raise ValueError("the best score carries no raw scores")
    raw = [
        RawScore(previous.is_winning_position, beta / num_children, previous.depth)
        for previous, beta in zip(best.raw_scores, beta_scores)
    ]
    return MaxNScore.from_raw(raw, word_id)


def max_n(
    board: WordBoard,
    word_id: int,
    player_id: int,
    num_players: int,
    depth: int,
    max_depth: int,
    used: WordSet,
) -> MaxNScore:
    """Score the moves from ``word_id`` for ``player_id``.

    At the root (``depth == max_depth``) the returned score carries the word
    to move to, or -1 when there is no move. The root stays marked in
    ``used``; every other word is marked only while it is being searched.
    """
    _check_players(player_id, num_players)
    if depth != 0:
        used.mark(word_id)
    beta_scores = [0.0] * num_players
    num_children = 0
    best = MaxNScore.minimum(num_players)

    for child in board.connections(word_id):
        if child in used:
            continue
        if depth == 0:
            return unknown_outcome(word_id, num_players)
        num_children += 1
        child_score = max_n(
            board,
            child,
            (player_id + 1) % num_players,
            num_players,
            depth - 1,
            max_depth,
            used,
        )
        if child_score.raw_scores is not None:
            for player, raw in enumerate(child_score.raw_scores):
                beta_scores[player] += raw.is_win_percent
        if child_score.scores[player_id] > best.scores[player_id]:
            best = child_score

    if num_children == 0:
        if depth != max_depth:
            used.unmark(word_id)
        else:
            word_id = -1
        return assign_score(depth, word_id, player_id, num_players)

    result_id = best.word_id
    if depth != max_depth:
        result_id = word_id
        used.unmark(word_id)
    return _settle(best, beta_scores, num_children, result_id)