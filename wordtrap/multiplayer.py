"""Bots and self-play for the word trap game with three or more players."""

from __future__ import annotations

from wordtrap.board import WordBoard, WordSet
from wordtrap.game import weak_bot_ply
from wordtrap.hypermax import hypermax
from wordtrap.maxn import max_n


def multi_bot_ply(
    board: WordBoard,
    word_id: int,
    player_id: int,
    num_players: int,
    depth: int,
    used: WordSet,
) -> int:
    """The Max-N bot's move from ``word_id``, marked as used; -1 if it has lost."""
    output = max_n(board, word_id, player_id, num_players, depth, depth, used)
    if output.word_id == -1:
        return -1
    used.mark(output.word_id)
    return output.word_id


def multiplayer_test(
    board: WordBoard, games: int = 100, num_players: int = 4, depth: int = 6
) -> list[int]:
    """Play one game from each word id below ``games`` and count wins per player.

    Player 0 searches with Hypermax to ``depth``; every other player takes the
    first free link. The player left without a move loses and every other
    player is credited with a win.
    """
    if num_players < 2:
        raise ValueError("num_players must be at least 2")
    if depth < 1:
        raise ValueError("depth must be at least 1")
    if not 0 <= games <= len(board):
        raise ValueError(f"games must lie in 0..{len(board)}")

    wins = [0] * num_players
    used = board.new_word_set()
    for start in range(games):
        word = start
        used.mark(word)
        current = 0
        while word != -1:
            if current == 0:
                word = hypermax(board, word, current, num_players, depth, used)
            else:
                word = weak_bot_ply(board, word, used)
            if word != -1:
                current = (current + 1) % num_players
        used.reset()
        for player in range(num_players):
            if player != current:
                wins[player] += 1
    return wins