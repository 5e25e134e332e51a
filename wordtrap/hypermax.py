"""Hypermax: Max-N search that stops early once the players' alphas sum to zero or more."""

from __future__ import annotations

from collections.abc import Sequence

from wordtrap.board import WordBoard, WordSet
from wordtrap.maxn import (
    MIN_SCORE,
    MaxNScore,
    _check_players,
    _settle,
    assign_score,
    unknown_outcome,
)


def hypermax(
    board: WordBoard,
    word_id: int,
    player_id: int,
    num_players: int,
    depth: int,
    used: WordSet,
) -> int:
    """The word ``player_id`` should move to from ``word_id``, or -1 if there is none."""
    _check_players(player_id, num_players)
    alphas = [MIN_SCORE] * num_players
    best = hypermax_search(
        board, word_id, player_id, num_players, depth, depth, alphas, used
    )
    return best.word_id


def hypermax_search(
    board: WordBoard,
    word_id: int,
    player_id: int,
    num_players: int,
    depth: int,
    max_depth: int,
    alphas: Sequence[int],
    used: WordSet,
) -> MaxNScore:
    """Score the moves from ``word_id`` for ``player_id``, culling with ``alphas``.

    ``alphas`` is read, never changed. At the root the returned score carries
    the chosen word, or -1 when no move is kept.
    """
    _check_players(player_id, num_players)
    if len(alphas) != num_players:
        raise ValueError("there must be one alpha per player")
    if depth != 0:
        used.mark(word_id)
    beta_scores = [0.0] * num_players
    current_alphas = list(alphas)
    num_children = 0
    best: MaxNScore | None = None

    for child in board.connections(word_id):
        if child in used:
            continue
        if depth == 0:
            return unknown_outcome(word_id, num_players)
        child_score = hypermax_search(
            board,
            child,
            (player_id + 1) % num_players,
            num_players,
            depth - 1,
            max_depth,
            current_alphas,
            used,
        )
        if child_score.raw_scores is not None:
            for player, raw in enumerate(child_score.raw_scores):
                beta_scores[player] += raw.is_win_percent

        if num_children == 0:
            best = child_score
        elif current_alphas[player_id] < child_score.scores[player_id]:
            current_alphas[player_id] = child_score.scores[player_id]
            best = child_score

        if MIN_SCORE not in current_alphas and sum(current_alphas) >= 0:
            break
        num_children += 1

    if num_children == 0 or best is None:
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