"""Two-player minimax with alpha-beta pruning for the word trap game."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from wordtrap.board import WordBoard, WordSet


@dataclass
class MinimaxOutput:
    """The evaluation of a move.

    ``score`` is +1 when the maximizer traps the opponent, -1 when the
    maximizer is trapped and 0 when the outcome lies beyond the search depth.
    ``win_percent`` is the share of lines that look winning, ``depth`` the
    remaining depth at which the outcome was settled, and ``id`` the word
    the evaluation belongs to.
    """

    score: int
    win_percent: float
    depth: int
    id: int

    def __str__(self) -> str:
        return f"{self.id}: {{{self.score}, {int(self.win_percent * 100.0)}%, {self.depth}}}"


def _assign(target: MinimaxOutput, source: MinimaxOutput) -> None:
    for item in fields(MinimaxOutput):
        setattr(target, item.name, getattr(source, item.name))


def _worst(is_maximizing: bool) -> MinimaxOutput:
    if is_maximizing:
        return MinimaxOutput(-100, 0.0, -1, -1)
    return MinimaxOutput(100, 1.0, -1, -1)


def minimax(
    board: WordBoard,
    word_id: int,
    depth: int,
    max_depth: int,
    is_maximizing: bool,
    alpha: MinimaxOutput,
    beta: MinimaxOutput,
    used: WordSet,
) -> MinimaxOutput:
    """Evaluate the moves from ``word_id`` and return the best one.

    At the root (``depth == max_depth``) the result's ``id`` is the word to
    move to, or -1 when there is no move. ``alpha`` and ``beta`` are copied,
    never changed. The root stays marked in ``used``; deeper words are marked
    only while they are searched.
    """
    is_maximizing = bool(is_maximizing)
    alpha = replace(alpha)
    beta = replace(beta)
    used.mark(word_id)

    best = _worst(is_maximizing)
    num_connections = 0
    win_percent = 0.0
    pruned = False

    for child in board.connections(word_id):
        if child in used:
            continue
        num_connections += 1
        if depth == 0:
            used.unmark(word_id)
            return MinimaxOutput(0, 0.5, 0, word_id)

        current = minimax(
            board,
            child,
            depth - 1,
            max_depth,
            not is_maximizing,
            alpha,
            beta,
            used,
        )
        if -1 <= current.score <= 1:
            win_percent += current.win_percent

        if compare_outputs(best, current, is_maximizing) != is_maximizing:
            best = current

        if alpha_beta_prune(alpha, beta, best, is_maximizing):
            pruned = True
            break

    if num_connections == 0 and not pruned:
        if depth == max_depth:
            return MinimaxOutput(-1, 0.0, -1, -1)
        if is_maximizing:
            best = MinimaxOutput(-1, 0.0, depth, word_id)
        else:
            best = MinimaxOutput(1, 1.0, depth, word_id)
    elif num_connections != 0:
        best.win_percent = win_percent / num_connections

    if depth != max_depth:
        best.id = word_id
        used.unmark(word_id)

    return best


def compare_outputs(a: MinimaxOutput, b: MinimaxOutput, is_maximizing: bool) -> bool:
    """Whether ``a`` is the better evaluation from the given side's view.

    Score decides first, then win share, then depth; exact ties favour ``a``.
    """
    if a.score > b.score:
        return True
    if a.score < b.score:
        return False
    if a.win_percent > b.win_percent:
        return True
    if b.win_percent > a.win_percent:
        return False

    if is_maximizing:
        if a.score == 1:
            if a.depth > b.depth:
                return True
            if b.depth > a.depth:
                return False
        if a.score == -1:
            if a.depth > b.depth:
                return False
            if a.depth < b.depth:
                return True
    else:
        if a.score == 1:
            return a.depth > b.depth
        if a.score == -1:
            return a.depth < b.depth
    return True


def alpha_beta_prune(
    alpha: MinimaxOutput,
    beta: MinimaxOutput,
    evaluation: MinimaxOutput,
    is_maximizing: bool,
) -> bool:
    """Update ``alpha`` or ``beta`` in place and report whether to prune."""
    if is_maximizing:
        if compare_outputs(evaluation, alpha, True):
            _assign(alpha, evaluation)
        return compare_outputs(alpha, beta, True)

    if not compare_outputs(evaluation, beta, False):
        _assign(beta, evaluation)
    return not compare_outputs(beta, alpha, False)


def compare_output(
    curr: MinimaxOutput, potential: MinimaxOutput, is_maximizing: bool
) -> bool:
    """Whether ``potential`` is the maximizer's pick over ``curr``."""
    if potential.score > curr.score:
        return True
    if potential.score == curr.score:
        if is_maximizing and potential.win_percent != curr.win_percent:
            return compare_win_percent(potential.win_percent, curr.win_percent)
        return compare_depth(curr, potential, potential.score, is_maximizing)
    return False


def compare_depth(
    curr: MinimaxOutput,
    potential: MinimaxOutput,
    primary: int,
    is_maximizing: bool,
) -> bool:
    """Break a tie on score by depth, according to the shared ``primary`` score."""
    if primary == 1:
        return potential.depth >= curr.depth
    if primary == 0:
        return not is_maximizing
    if primary == -1:
        return potential.depth <= curr.depth
    return False


def compare_win_percent(potential: float, curr: float) -> bool:
    """Whether ``potential`` is the higher win share."""
    return potential > curr


def depth_first_order(board: WordBoard, word_id: int, used: WordSet) -> list[int]:
    """Walk every simple path from ``word_id`` and list each link as it is left.

    ``used`` is returned to its former state afterwards.
    """
    order: list[int] = []

    def visit(current: int) -> None:
        used.mark(current)
        for child in board.connections(current):
            if child not in used:
                visit(child)
            order.append(child)
        used.unmark(current)

    visit(word_id)
    return order