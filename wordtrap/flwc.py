"""Bots for the challenge game: reach a goal word, steer clear of avoided words."""

from __future__ import annotations

import random

from wordtrap.board import WordBoard, WordSet
from wordtrap.minimax2 import (
    Score,
    ScoreParameters,
    choose_random_word,
    flwc_score,
    minimax2,
)


def bot_ply_flwc(
    board: WordBoard,
    used: WordSet,
    word_id: int,
    depth: int,
    goal_words: WordSet | None,
    avoid_words: WordSet | None,
) -> int:
    """The challenge bot's move from ``word_id``, marked as used; -1 if there is none."""
    alpha = Score(-1, -100.0, 0.0, 100)
    beta = Score(-1, 100.0, 1.0, 100)
    parameters = ScoreParameters(
        remaining_depth=depth,
        start_depth=depth,
        is_maximizing=1,
        goal_words=goal_words,
        avoid_words=avoid_words,
        score_function=flwc_score,
        goal_words_found=0.0,
    )
    result = minimax2(
        board, used, word_id, depth, parameters.is_maximizing, parameters, alpha, beta
    )
    if result.word_id != -1:
        used.mark(result.word_id)
    return result.word_id


def bot_ply_random(
    board: WordBoard, used: WordSet, word_id: int, rng: random.Random | None = None
) -> int:
    """A random unused link of ``word_id``, marked as used; -1 if there is none."""
    choice = choose_random_word(board, used, word_id, rng)
    if choice != -1:
        used.mark(choice)
    return choice


def bot_ply_max_adjacencies(
    board: WordBoard,
    used: WordSet,
    word_id: int,
    goal_words: WordSet | None = None,
) -> int:
    """The unused link of ``word_id`` with the most links of its own, marked as used.

    The first unused link is taken to start with. A later link replaces it only
    if it has strictly more links and, when ``goal_words`` is given, is a goal
    word. Returns -1 when every link is used.
    """
    result = -1
    for child in board.connections(word_id):
        if child in used:
            continue
        if result == -1:
            result = child
        elif board.num_connections(result) < board.num_connections(child):
            if goal_words is None or child in goal_words:
                result = child
    if result != -1:
        used.mark(result)
    return result


def generalized_flwc_game(
    board: WordBoard, rng: random.Random | None = None
) -> list[int]:
    """Play the challenge bot against a random bot for five rounds each.

    The challenge bot avoids words holding an ``e`` and searches two plies
    deep; play starts at word 0. Returns the start word followed by every
    move made; a -1 means the side to move was trapped and play stopped.
    """
    chooser = rng if rng is not None else random.Random()
    goal_words = board.new_word_set()
    avoid_words = board.new_word_set()
    for index, word in enumerate(board):
        if "e" in word:
            avoid_words.mark(index)

    used = board.new_word_set()
    start_word = 0
    depth = 2
    used.mark(start_word)
    moves = [start_word]
    word = start_word
    for _ in range(5):
        word = bot_ply_flwc(board, used, word, depth, goal_words, avoid_words)
        moves.append(word)
        if word == -1:
            break
        word = bot_ply_random(board, used, word, chooser)
        moves.append(word)
        if word == -1:
            break
    return moves