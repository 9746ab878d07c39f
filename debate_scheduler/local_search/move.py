from enum import Enum

from debate_scheduler.base_model.match import Match


class MoveType(Enum):
    SWAP_TEAM_A_WITH_TEAM_B = "swap_team_a_with_team_b"
    SWAP_TEAM_A = "swap_team_a"
    SWAP_JUDGE_PANELS = "swap_judge_panels"
    SWAP_FIRST_JUDGES = "swap_first_judges"


def apply_swap(move_type: MoveType, match_1: Match, match_2: Match) -> None:
    """
    Perform the swap described by move_type between two matches.

    Every swap is its own inverse: calling this twice with the same arguments
    restores both matches. The two matches may be the same object.
    """
    if move_type is MoveType.SWAP_TEAM_A_WITH_TEAM_B:
        match_1.team_a, match_2.team_b = match_2.team_b, match_1.team_a
    elif move_type is MoveType.SWAP_TEAM_A:
        match_1.team_a, match_2.team_a = match_2.team_a, match_1.team_a
    elif move_type is MoveType.SWAP_JUDGE_PANELS:
        match_1.judges, match_2.judges = match_2.judges, match_1.judges
    elif move_type is MoveType.SWAP_FIRST_JUDGES:
        # a missing first judge leaves both panels untouched
        if match_1.judges and match_2.judges:
            match_1.judges[0], match_2.judges[0] = match_2.judges[0], match_1.judges[0]
    else:
        raise ValueError(f"Unknown move type: {move_type}")


class Move:
    def __init__(self, move_type: MoveType, match_1: Match, match_2: Match):
        self.move_type = move_type
        self.match_1 = match_1
        self.match_2 = match_2
        self.is_applied = False

    def __str__(self):
        return f"Move({self.move_type.value}: {self.match_1.team_a.name}/{self.match_1.team_b.name} <-> {self.match_2.team_a.name}/{self.match_2.team_b.name})"


def do_move(move: Move) -> None:
    if move.is_applied:
        return

    apply_swap(move.move_type, move.match_1, move.match_2)
    move.is_applied = True


def undo_move(move: Move) -> None:
    if not move.is_applied:
        return

    apply_swap(move.move_type, move.match_1, move.match_2)
    move.is_applied = False
