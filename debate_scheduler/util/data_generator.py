import random
from typing import Dict, Any

from debate_scheduler.util.parser import parse_request

SCHOOL_NAMES = [
    "Lincoln High", "Roosevelt Academy", "Jefferson Prep", "Madison High",
    "Hamilton School", "Franklin Academy", "Adams High", "Monroe Prep",
]

FIRST_NAMES = [
    "Alex", "Sam", "Jordan", "Taylor", "Morgan", "Casey", "Riley", "Jamie",
    "Avery", "Quinn", "Drew", "Parker", "Reese", "Rowan", "Skyler", "Emerson",
]

DEFAULT_PENALTIES = {
    "teams_same_school": 10,
    "judge_same_school": 5,
    "different_win_loss": 1,
}


def generate_test_data(n_teams: int, n_judges: int, n_schools: int = 4,
                       max_wins: int = 0, seed: int = 13062025,
                       penalties: Dict[str, float] = None) -> Dict[str, Any]:
    """Generate a scheduling request in the JSON request format."""
    gen = random.Random(seed)

    if n_schools < 1 or n_schools > len(SCHOOL_NAMES):
        raise ValueError(f"n_schools must be between 1 and {len(SCHOOL_NAMES)}")
    schools = SCHOOL_NAMES[:n_schools]

    teams = []
    for i in range(1, n_teams + 1):
        teams.append({
            "speaker1": f"{gen.choice(FIRST_NAMES)} {i}A",
            "speaker2": f"{gen.choice(FIRST_NAMES)} {i}B",
            "teamName": f"Team {i}",
            "teamSchool": gen.choice(schools),
            "numWins": gen.randint(0, max_wins),
        })

    judges = []
    for i in range(1, n_judges + 1):
        judges.append({
            "judgeName": f"Judge {i}",
            "judgeSchool": gen.choice(schools),
        })

    penalties = penalties if penalties is not None else DEFAULT_PENALTIES
    return {
        "teams": teams,
        "judges": judges,
        "penalties": [{"penaltyName": name, "penaltyValue": value} for name, value in penalties.items()],
    }


def generate_test_data_parsed(n_teams: int, n_judges: int, n_schools: int = 4,
                              max_wins: int = 0, seed: int = 13062025) -> Dict[str, Any]:
    """Generate test data and parse it into teams, judges and penalties."""
    return parse_request(generate_test_data(n_teams, n_judges, n_schools, max_wins, seed))
