from dataclasses import dataclass, field
from typing import Dict

from debate_scheduler.base_model.team import Team
from debate_scheduler.base_model.judge import Judge
from debate_scheduler.base_model.errors import InvalidInputError


@dataclass(eq=False)
class Match:
    """Class representing a match between two teams with any number of judges"""
    team_a: Team
    team_b: Team
    judges: list[Judge] = field(default_factory=list)

    def __post_init__(self):
        if self.team_a is None or self.team_b is None:
            raise InvalidInputError("A match must contain exactly two teams")

    def __str__(self):
        return f"{self.team_a} vs {self.team_b}: {' '.join(str(j) for j in self.judges)}"

    def clone(self) -> "Match":
        return Match(self.team_a.clone(), self.team_b.clone(), [j.clone() for j in self.judges])

    def to_json(self) -> Dict:
        return {
            "teamA": self.team_a.name,
            "teamB": self.team_b.name,
            "judges": ", ".join(j.name for j in self.judges),
        }
