import math
import random
from numbers import Real
from types import MappingProxyType
from typing import Dict, Mapping

from debate_scheduler.base_model.team import Team
from debate_scheduler.base_model.judge import Judge
from debate_scheduler.base_model.match import Match
from debate_scheduler.base_model.errors import InvalidInputError
from debate_scheduler.local_search.move import Move
from debate_scheduler.local_search.move_generator import find_best_move

TEAMS_SAME_SCHOOL = "teams_same_school"  # both teams in a match come from the same school
JUDGE_SAME_SCHOOL = "judge_same_school"  # a judge comes from the school of a team in the match
DIFFERENT_WIN_LOSS = "different_win_loss"  # the two teams have different win counts

PENALTY_NAMES = (TEAMS_SAME_SCHOOL, JUDGE_SAME_SCHOOL, DIFFERENT_WIN_LOSS)


def validate_penalties(penalties: Mapping[str, Real]) -> Mapping[str, Real]:
    """
    Check that every penalty weight is present, numeric and finite.

    Returns:
        A read-only copy of the penalties
    """
    if penalties is None:
        raise InvalidInputError("Penalties must be provided")

    unknown = set(penalties) - set(PENALTY_NAMES)
    if unknown:
        raise InvalidInputError(f"Unknown penalties: {sorted(unknown)}. Valid penalties are {list(PENALTY_NAMES)}")

    for name in PENALTY_NAMES:
        if name not in penalties:
            raise InvalidInputError(f"Missing penalty: {name}")
        value = penalties[name]
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidInputError(f"Penalty {name} must be numeric, got {value!r}")
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidInputError(f"Penalty {name} must be finite, got {value!r}")

    return MappingProxyType(dict(penalties))


def match_energy(match: Match, penalties: Mapping[str, Real]) -> Real:
    """The (non-positive) energy contribution of a single match"""
    score = 0
    team_a, team_b = match.team_a, match.team_b

    if team_a.school == team_b.school:
        score -= penalties[TEAMS_SAME_SCHOOL]

    # a judge from the school of both teams is counted once per side
    for judge in match.judges:
        if judge.school == team_a.school:
            score -= penalties[JUDGE_SAME_SCHOOL]
        if judge.school == team_b.school:
            score -= penalties[JUDGE_SAME_SCHOOL]

    if team_a.num_wins != team_b.num_wins:
        score -= (1 + penalties[DIFFERENT_WIN_LOSS]) ** abs(team_a.num_wins - team_b.num_wins)
        score -= 1

    return score


class Schedule:
    """
    A possible schedule for one tournament round.

    The energy of a schedule is the negated sum of the penalties it incurs, so
    a higher energy is a better schedule. The schedule is mutated in place by
    neighbor(); use clone() to keep a snapshot.
    """

    def __init__(self, matches: list[Match], penalties: Mapping[str, Real], rng: random.Random = None):
        self.matches: list[Match] = matches
        self.penalties: Mapping[str, Real] = validate_penalties(penalties)
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.last_move: Move = None  # the move applied by the latest neighbor() call

    def __str__(self):
        return "\n".join(str(m) for m in self.matches)

    def energy(self) -> Real:
        return sum(match_energy(m, self.penalties) for m in self.matches)

    def random_match(self) -> Match:
        if not self.matches:
            raise InvalidInputError("Schedule has no matches")
        return self.rng.choice(self.matches)

    def neighbor(self) -> "Schedule":
        """
        Move to a neighboring schedule: pick two matches (possibly the same one)
        and apply whichever of the four swaps between them scores best.
        """
        self.last_move = find_best_move(self, self.random_match(), self.random_match(), self.rng)
        return self

    def clone(self) -> "Schedule":
        # penalties are read-only and the generator is shared by the whole run
        return Schedule([m.clone() for m in self.matches], self.penalties, self.rng)

    def shuffle(self) -> "Schedule":
        """A completely new random schedule with the same teams, judges and penalties"""
        snapshot = self.clone()
        return generate_random_schedule(snapshot.get_all_teams(), snapshot.get_all_judges(), self.penalties, self.rng)

    def get_all_teams(self) -> list[Team]:
        teams = []
        for match in self.matches:
            teams.append(match.team_a)
            teams.append(match.team_b)
        return teams

    def get_all_judges(self) -> list[Judge]:
        return [judge for match in self.matches for judge in match.judges]

    def get_match_for_team(self, team_name: str) -> Match:
        for match in self.matches:
            if team_name in (match.team_a.name, match.team_b.name):
                return match
        raise ValueError(f"Team {team_name} is not in the schedule")

    def to_json(self) -> list[Dict]:
        return [m.to_json() for m in self.matches]


def generate_random_schedule(teams: list[Team], judges: list[Judge], penalties: Mapping[str, Real], rng: random.Random = None) -> Schedule:
    """
    Generate a random schedule: teams are paired at random and judges are dealt
    out to the matches one at a time, so earlier matches may hold one judge
    more than later ones.

    Args:
        teams: The teams taking part in the round, an even number of them
        judges: The judges available for the round
        penalties: The penalty weights, see PENALTY_NAMES
        rng: Random generator to draw from, shared by the returned schedule

    Returns:
        A new randomized Schedule
    """
    if rng is None:
        rng = random.Random()

    if not teams:
        raise InvalidInputError("At least two teams are needed to schedule a round")
    if len(teams) % 2 != 0:
        raise InvalidInputError(f"An even number of teams is needed to schedule a round, got {len(teams)}")

    names = [t.name for t in teams]
    if len(set(names)) != len(names):
        duplicates = sorted({n for n in names if names.count(n) > 1})
        raise InvalidInputError(f"Team names must be unique, duplicated: {duplicates}")

    penalties = validate_penalties(penalties)

    teams = list(teams)
    judges = list(judges)
    rng.shuffle(teams)
    rng.shuffle(judges)

    matches = []
    for _ in range(len(teams) // 2):
        team_a = teams.pop()
        team_b = teams.pop()
        matches.append(Match(team_a, team_b, []))

    while judges:
        for match in matches:
            if not judges:
                break
            match.judges.append(judges.pop())

    return Schedule(matches, penalties, rng)
