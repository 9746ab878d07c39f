from debate_scheduler.base_model.schedule import Schedule, match_energy


def visualize(schedule: Schedule):
    """
    Print the schedule as a table with one row per match, showing both teams
    with their schools and win counts, the judges and the energy of the match.
    """
    headers = ["#", "Team A", "Team B", "Judges", "Energy"]
    rows = []
    for i, match in enumerate(schedule.matches, start=1):
        rows.append([
            str(i),
            f"{match.team_a} [{match.team_a.school}]",
            f"{match.team_b} [{match.team_b.school}]",
            ", ".join(str(j) for j in match.judges),
            f"{match_energy(match, schedule.penalties):g}",
        ])

    widths = [max(len(headers[c]), *(len(row[c]) for row in rows)) if rows else len(headers[c])
              for c in range(len(headers))]

    line = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    print(line)
    print("|" + "|".join(f" {headers[c]:^{widths[c]}} " for c in range(len(headers))) + "|")
    print(line)
    for row in rows:
        print("|" + "|".join(f" {row[c]:<{widths[c]}} " for c in range(len(headers))) + "|")
    print(line)
    print(f"Total energy: {schedule.energy():g}")
