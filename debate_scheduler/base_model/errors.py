class InvalidInputError(ValueError):
    """Raised when a tournament description or a search state cannot be used"""


class IncompleteRoundError(ValueError):
    """Raised when a recorded round has a match without a winner"""

    def __init__(self, team_a: str, team_b: str, round_number: int = None):
        self.team_a = team_a
        self.team_b = team_b
        self.round_number = round_number
        where = f" in round {round_number}" if round_number is not None else ""
        super().__init__(f"Please enter the winner of each match{where}: {team_a} vs {team_b} has no winner")


class UnknownWinnerError(ValueError):
    """Raised when a recorded winner is not one of the two teams in its match"""

    def __init__(self, winner: str, team_a: str, team_b: str, round_number: int = None):
        self.winner = winner
        self.team_a = team_a
        self.team_b = team_b
        self.round_number = round_number
        where = f" (round {round_number})" if round_number is not None else ""
        super().__init__(f"Unknown winner{where}: {winner} must be one of {team_a} or {team_b}")
