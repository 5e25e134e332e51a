"""Minimax with pluggable score functions for the trap game and the challenge game."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from dataclasses import dataclass, replace

from wordtrap.board import WordBoard, WordSet


@dataclass(frozen=True)
class Score:
    """The evaluation of a word.

    ``score`` runs from 0 (bad for the maximizer) to 1 (good for it);
    ``win_percentage`` is the share of lines that look winning; ``depth`` is
    the remaining depth at which the evaluation was settled. A ``word_id`` of
    -1 from a score function means "keep searching".
    """

    word_id: int
    score: float
    win_percentage: float
    depth: int

    def __str__(self) -> str:
        return f"{self.word_id}: {{{self.score:f}, {self.win_percentage:f}, {self.depth}}}"


def _has_unused_connection(board: WordBoard, used: WordSet, word_id: int) -> bool:
    return any(child not in used for child in board.connections(word_id))


def flwg_score(
    board: WordBoard, used: WordSet, word_id: int, parameters: ScoreParameters
) -> Score:
    """Score a word in the trap game, or return id -1 when the search must go on."""
    if parameters.remaining_depth == 0:
        return Score(word_id, 0.5, 0.5, 0)
    if _has_unused_connection(board, used, word_id):
        return Score(-1, 0.0, 0.0, 0)
    if parameters.is_maximizing:
        return Score(word_id, 0.0, 0.0, parameters.remaining_depth)
    return Score(word_id, 1.0, 1.0, parameters.remaining_depth)


def flwc_score(
    board: WordBoard, used: WordSet, word_id: int, parameters: ScoreParameters
) -> Score:
    """Score a word in the challenge game, or return id -1 when the search must go on.

    Below the root, reaching a goal word scores 1 and an avoided word -1.
    """
    if parameters.remaining_depth != parameters.start_depth:
        if parameters.goal_words is not None and word_id in parameters.goal_words:
            return Score(word_id, 1.0, 0.0, parameters.remaining_depth)
        if parameters.avoid_words is not None and word_id in parameters.avoid_words:
            return Score(word_id, -1.0, 0.0, parameters.remaining_depth)
    if parameters.remaining_depth == 0:
        found = parameters.goal_words_found
        return Score(word_id, found, found, 0)
    if _has_unused_connection(board, used, word_id):
        return Score(-1, 0.0, 0.0, 0)
    return Score(word_id, 0.0, 0.0, 0)


ScoreFunction = Callable[[WordBoard, WordSet, int, "ScoreParameters"], Score]


@dataclass(frozen=True, kw_only=True)
class ScoreParameters:
    """What the search weighs when it scores a word."""

    remaining_depth: int
    start_depth: int
    is_maximizing: int = 1
    goal_words: WordSet | None = None
    avoid_words: WordSet | None = None
    score_function: ScoreFunction = flwg_score
    goal_words_found: float = 0.0


def compare_scores(a: Score, b: Score, is_maximizing: int) -> int:
    """The word id of the better score from the given side's view.

    Score decides first, then win share, then depth: a side that is doing
    well prefers the greater depth, otherwise the smaller. Full ties go to ``a``.
    """
    a_score, b_score = a.score, b.score
    if not is_maximizing:
        a_score, b_score = 1 - a_score, 1 - b_score
    if a_score != b_score:
        return a.word_id if a_score > b_score else b.word_id
    if a.win_percentage != b.win_percentage:
        return a.word_id if a.win_percentage > b.win_percentage else b.word_id
    if a.depth != b.depth:
        if a_score > 0.5:
            return a.word_id if a.depth > b.depth else b.word_id
        return b.word_id if a.depth > b.depth else a.word_id
    return a.word_id


def alpha_beta_prune(
    alpha: Score, beta: Score, candidate: Score, is_maximizing: int
) -> tuple[Score, Score, bool]:
    """Fold ``candidate`` into the bounds; return the new alpha, beta and whether to prune."""
    if is_maximizing:
        if compare_scores(candidate, alpha, 1) == candidate.word_id:
            alpha = candidate
        return alpha, beta, compare_scores(candidate, beta, 1) == candidate.word_id
    if compare_scores(candidate, beta, 1) != candidate.word_id:
        beta = candidate
    return alpha, beta, compare_scores(candidate, alpha, 1) == alpha.word_id


def minimax2(
    board: WordBoard,
    used: WordSet,
    word_id: int,
    remaining_depth: int,
    is_maximizing: int,
    parameters: ScoreParameters,
    alpha: Score,
    beta: Score,
) -> Score:
    """Search the moves from ``word_id`` and return the best score.

    At the root (``remaining_depth == parameters.start_depth``) the result's
    ``word_id`` is the word to move to, or -1 when there is none. The side is
    any truthy value for the maximizer; each ply below passes the side less one.
    The root stays marked in ``used``; deeper words are marked only while searched.
    """
    side = int(is_maximizing)
    parameters = replace(parameters, is_maximizing=side, remaining_depth=remaining_depth)
    is_root = remaining_depth == parameters.start_depth

    leaf = parameters.score_function(board, used, word_id, parameters)
    if leaf.word_id != -1:
        return Score(-1, 0.0, 0.0, 0) if is_root else leaf

    used.mark(word_id)
    best = Score(-1, -100.0, 1.0, 100) if side else Score(-1, 100.0, 1.0, 100)
    num_connections = 0
    win_percentage = 0.0

    for child in board.connections(word_id):
        if child in used:
            continue
        num_connections += 1
        candidate = minimax2(
            board, used, child, remaining_depth - 1, side - 1, parameters, alpha, beta
        )
        if compare_scores(candidate, best, side) == candidate.word_id:
            best = candidate
        win_percentage += best.win_percentage
        alpha, beta, prune = alpha_beta_prune(alpha, beta, best, side)
        if prune:
            break

    average = win_percentage / num_connections if num_connections else math.nan
    best = replace(best, win_percentage=average)
    if not is_root:
        best = replace(best, word_id=word_id)
        used.unmark(word_id)
    return best


def choose_random_word(
    board: WordBoard, used: WordSet, word_id: int, rng: random.Random | None = None
) -> int:
    """A random unused word linked to ``word_id``, or -1 when there is none."""
    options = [child for child in board.connections(word_id) if child not in used]
    if not options:
        return -1
    chooser = rng if rng is not None else random.Random()
    return options[chooser.randrange(len(options))]