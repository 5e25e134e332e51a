"""Bots, hints and self-play for the two-player word trap game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from wordtrap.board import WordBoard, WordSet
from wordtrap.minimax import MinimaxOutput, minimax


def bot_ply(board: WordBoard, word_id: int, depth: int, used: WordSet) -> int:
    """The minimax bot's move from ``word_id``, marked as used; -1 if it has lost."""
    alpha = MinimaxOutput(-100, 0.0, -1, -1)
    beta = MinimaxOutput(100, 1.0, -1, -1)
    output = minimax(board, word_id, depth, depth, True, alpha, beta, used)
    if output.id == -1:
        return -1
    used.mark(output.id)
    return output.id


def weak_bot_ply(board: WordBoard, word_id: int, used: WordSet) -> int:
    """The first unused link of ``word_id``, marked as used; -1 if there is none."""
    choice = next((child for child in board.connections(word_id) if child not in used), -1)
    if choice != -1:
        used.mark(choice)
    return choice


def is_trapped(board: WordBoard, word_id: int, used: WordSet) -> bool:
    """Whether every word linked to ``word_id`` is used."""
    return all(child in used for child in board.connections(word_id))


def direct_adjacency_hint(
    board: WordBoard, word_id: int, used: WordSet, rng: random.Random | None = None
) -> int:
    """A random unused word linked to ``word_id``, or -1 when trapped."""
    options = [child for child in board.connections(word_id) if child not in used]
    if not options:
        return -1
    chooser = rng if rng is not None else random.Random()
    return options[chooser.randrange(len(options))]


@dataclass
class SelfPlayResult:
    """Tallies of games between the first-link bot (A) and the minimax bot (B)."""

    a_wins: int = 0
    b_wins: int = 0
    total_rounds: int = 0
    winners: list[str] = field(default_factory=list)

    @property
    def games(self) -> int:
        """How many games were played."""
        return len(self.winners)

    @property
    def average_rounds(self) -> int:
        """Rounds per game, rounded down."""
        return self.total_rounds // self.games


def self_play_test(
    board: WordBoard, start: int = 0, end: int = 10, depth: int = 3
) -> SelfPlayResult:
    """Play one game from each start word id in ``start..end-1``.

    Bot A moves first and takes the first free link; bot B searches with
    minimax to ``depth``. The player left without a move loses.
    """
    if end <= start:
        raise ValueError("end must be greater than start")
    result = SelfPlayResult()
    for first in range(start, end):
        used = board.new_word_set()
        word = first
        used.mark(word)
        winner = -1
        rounds = 0
        whose_turn = 0
        while word >= 0:
            if whose_turn == 0:
                word = weak_bot_ply(board, word, used)
            else:
                word = bot_ply(board, word, depth, used)
            whose_turn = (whose_turn + 1) % 2
            if word == -1:
                winner = whose_turn
            rounds += 1
        result.total_rounds += rounds
        if winner == 0:
            result.a_wins += 1
            result.winners.append("A")
        else:
            result.b_wins += 1
            result.winners.append("B")
    return result