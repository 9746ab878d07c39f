from dataclasses import dataclass, field


@dataclass(eq=False)
class Team:
    """Class representing a team participating in the tournament"""
    name: str
    school: str
    members: list[str] = field(default_factory=list)
    num_wins: int = 0  # wins recorded in earlier rounds

    def __str__(self):
        return f"{self.name} ({self.num_wins})"

    def __eq__(self, other):
        if not isinstance(other, Team):
            return False

        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def clone(self) -> "Team":
        return Team(name=self.name, school=self.school, members=list(self.members), num_wins=self.num_wins)
