from typing import Dict, Iterable

from debate_scheduler.base_model.team import Team
from debate_scheduler.base_model.errors import IncompleteRoundError, UnknownWinnerError


def calculate_standings(team_names: Iterable[str], rounds: list[list[Dict]]) -> Dict[str, int]:
    """
    Count the wins of every registered team over the recorded rounds.

    Args:
        team_names: Names of the registered teams
        rounds: Earlier rounds in order, each a list of match records with
            "teamA", "teamB" and "winner"

    Returns:
        Number of wins per team name. Teams without wins have 0.
    """
    standings = {name: 0 for name in team_names}

    for round_number, matches in enumerate(rounds, start=1):
        for match in matches:
            team_a = match.get("teamA")
            team_b = match.get("teamB")
            winner = match.get("winner")

            if winner is None or (isinstance(winner, str) and not winner.strip()):
                raise IncompleteRoundError(team_a, team_b, round_number)

            if winner not in (team_a, team_b) or winner not in standings:
                raise UnknownWinnerError(winner, team_a, team_b, round_number)

            standings[winner] += 1

    return standings


def apply_standings(teams: list[Team], rounds: list[list[Dict]]) -> Dict[str, int]:
    """Set num_wins of every team from the recorded rounds"""
    standings = calculate_standings([t.name for t in teams], rounds)
    for team in teams:
        team.num_wins = standings[team.name]
    return standings


def rank_standings(standings: Dict[str, int]) -> list[tuple[str, int]]:
    """Teams sorted by wins, most wins first, then by name"""
    return sorted(standings.items(), key=lambda item: (-item[1], item[0]))
