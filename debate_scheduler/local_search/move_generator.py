import random

from debate_scheduler.base_model.match import Match
from debate_scheduler.local_search.move import Move, MoveType, do_move, undo_move


def generate_moves(match_1: Match, match_2: Match) -> list[Move]:
    """One move of every type between the two matches"""
    return [Move(move_type, match_1, match_2) for move_type in MoveType]


def score_moves(schedule, moves: list[Move]) -> list[tuple[float, Move]]:
    """
    Score each move by applying it, measuring the schedule energy and
    reverting it again. The schedule is left exactly as it was found.
    """
    scored_moves = []
    for move in moves:
        do_move(move)
        scored_moves.append((schedule.energy(), move))
        undo_move(move)

    return scored_moves


def find_best_move(schedule, match_1: Match, match_2: Match, rng: random.Random) -> Move:
    """
    Apply the move between match_1 and match_2 that leaves the schedule with
    the highest energy. Ties are broken uniformly at random.

    Returns:
        The applied move
    """
    scored_moves = score_moves(schedule, generate_moves(match_1, match_2))
    rng.shuffle(scored_moves)
    _, best_move = max(scored_moves, key=lambda scored: scored[0])

    do_move(best_move)
    return best_move
