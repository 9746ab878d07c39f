import json
import math
import re
from pathlib import Path
from typing import Dict

from debate_scheduler.base_model.team import Team
from debate_scheduler.base_model.judge import Judge
from debate_scheduler.base_model.errors import InvalidInputError
from debate_scheduler.base_model.schedule import validate_penalties


def _snake_case(name: str) -> str:
    """teamsSameSchool -> teams_same_school"""
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name.strip()).lower()


def _require(record: Dict, key: str, section: str, index: int):
    if not isinstance(record, dict) or key not in record:
        raise InvalidInputError(f"{section}[{index}] is missing '{key}'")
    return record[key]


def _parse_number(value, description: str):
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            try:
                value = float(value)
            except ValueError:
                raise InvalidInputError(f"{description} must be numeric, got {value!r}") from None

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{description} must be numeric, got {value!r}")
    # json accepts NaN and Infinity, and so does float()
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInputError(f"{description} must be finite, got {value!r}")
    return value


def parse_teams(records: list) -> list[Team]:
    teams = []
    for i, team in enumerate(records):
        name = _require(team, "teamName", "teams", i)
        school = _require(team, "teamSchool", "teams", i)
        members = [team[key] for key in ("speaker1", "speaker2") if team.get(key)]

        num_wins = team.get("numWins", 0)
        num_wins = 0 if num_wins in (None, "") else _parse_number(num_wins, f"numWins of team {name}")
        if num_wins != int(num_wins) or num_wins < 0:
            raise InvalidInputError(f"numWins of team {name} must be a non-negative whole number, got {num_wins!r}")

        teams.append(Team(name=str(name), school=str(school), members=members, num_wins=int(num_wins)))
    return teams


def parse_judges(records: list) -> list[Judge]:
    judges = []
    for i, judge in enumerate(records):
        name = _require(judge, "judgeName", "judges", i)
        school = _require(judge, "judgeSchool", "judges", i)
        judges.append(Judge(name=str(name), school=str(school)))
    return judges


def parse_penalties(records: list) -> Dict:
    penalties = {}
    for i, penalty in enumerate(records):
        name = _snake_case(str(_require(penalty, "penaltyName", "penalties", i)))
        value = _require(penalty, "penaltyValue", "penalties", i)
        penalties[name] = _parse_number(value, f"Penalty {name}")
    return dict(validate_penalties(penalties))


def parse_request(data: Dict) -> Dict:
    """
    Parse a scheduling request into domain objects.

    Args:
        data: A dict with "teams", "judges" and "penalties" lists, in the
            format accepted by the scheduling endpoint

    Returns:
        Dictionary with "teams", "judges" and "penalties"
    """
    if not isinstance(data, dict):
        raise InvalidInputError("The request must be a JSON object")

    for section in ("teams", "judges", "penalties"):
        if not isinstance(data.get(section), list):
            raise InvalidInputError(f"The request must contain a '{section}' list")

    return {
        "teams": parse_teams(data["teams"]),
        "judges": parse_judges(data["judges"]),
        "penalties": parse_penalties(data["penalties"]),
    }


def parse_input(input_path: Path) -> Dict:
    """
    Parse the input JSON file into a structured data dictionary.

    Args:
        input_path: Path to the input JSON file

    Returns:
        Dictionary containing parsed data
    """
    with open(input_path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"{input_path} is not valid JSON: {e}") from e

    parsed_data = parse_request(data)

    print(f"Parsed {len(parsed_data['teams'])} teams, {len(parsed_data['judges'])} judges, "
          f"{len(parsed_data['penalties'])} penalties")

    return parsed_data


def parse_rounds(input_path: Path) -> list[list[Dict]]:
    """Read earlier rounds: a JSON list of rounds, each a list of match records"""
    with open(input_path, 'r') as f:
        try:
            rounds = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"{input_path} is not valid JSON: {e}") from e

    if not isinstance(rounds, list) or not all(isinstance(r, list) for r in rounds):
        raise InvalidInputError("Rounds must be a JSON list of rounds, each a list of matches")
    return rounds
