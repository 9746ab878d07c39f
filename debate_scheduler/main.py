import argparse
import json
import random
from pathlib import Path
import sys

from debate_scheduler.util.parser import parse_input, parse_rounds
from debate_scheduler.util.standings import apply_standings, rank_standings
from debate_scheduler.util.schedule_visualizer import visualize
from debate_scheduler.util.sa_logger import SimulatedAnnealingLogger
from debate_scheduler.base_model.schedule import Schedule, generate_random_schedule
from debate_scheduler.local_search.simulated_annealing import (
    run_local_search, DEFAULT_ALPHA, DEFAULT_MAX_TIME, DEFAULT_RESTART_PROBABILITY, DEFAULT_MAX_ENERGY
)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Debate Tournament Scheduler')

    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--input', type=str, help='Path to request JSON file with teams, judges and penalties')

    group.add_argument('--test', nargs=2, type=int, metavar=('N_TEAMS', 'N_JUDGES'),
                       help='Generate test data with [n_teams] [n_judges]')

    parser.add_argument('--rounds', type=str,
                        help='Path to JSON file with earlier rounds and their winners, used for win counts')

    parser.add_argument('--output', type=str, default='output.json',
                        help='Path to output JSON file (default: output.json)')

    parser.add_argument('--log', type=str, help='Path to log file for simulated annealing output')

    parser.add_argument('--plot', type=str, help='Path to write an energy trace plot (PNG)')

    parser.add_argument('--seed', type=int, help='Seed for the random generator of the run')

    parser.add_argument('--max-time', type=int, default=DEFAULT_MAX_TIME,
                        help=f'Maximum number of annealing steps (default: {DEFAULT_MAX_TIME})')

    parser.add_argument('--max-energy', type=float, default=DEFAULT_MAX_ENERGY,
                        help=f'Stop once this energy is reached (default: {DEFAULT_MAX_ENERGY})')

    parser.add_argument('--restart-probability', type=float, default=DEFAULT_RESTART_PROBABILITY,
                        help=f'Chance per step of restarting from a random schedule (default: {DEFAULT_RESTART_PROBABILITY})')

    parser.add_argument('--alpha', type=float, default=DEFAULT_ALPHA,
                        help=f'Cooling multiplier, 0 < alpha < 1 (default: {DEFAULT_ALPHA})')

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the scheduler."""
    args = parse_arguments(argv)

    try:
        rng = random.Random(args.seed)

        if args.input:
            input_path = Path(args.input)
            if not input_path.exists():
                print(f"Error: Input file {args.input} not found")
                return 1
            parsed_data = parse_input(input_path)
        else:
            from debate_scheduler.util.data_generator import generate_test_data_parsed
            n_teams, n_judges = args.test
            parsed_data = generate_test_data_parsed(n_teams, n_judges, seed=args.seed if args.seed is not None else 13062025)

        teams = parsed_data["teams"]
        if args.rounds:
            standings = apply_standings(teams, parse_rounds(Path(args.rounds)))
            print("Standings:")
            for name, wins in rank_standings(standings):
                print(f"  {name}: {wins}")

        initial_schedule: Schedule = generate_random_schedule(teams, parsed_data["judges"], parsed_data["penalties"], rng)
        initial_energy = initial_schedule.energy()
        print(f"Initial energy: {initial_energy}")

        sa_logger = SimulatedAnnealingLogger(log_every_n_iterations=10) if args.plot else None
        final_schedule = run_local_search(
            initial_schedule,
            rng=rng,
            log_file_path=args.log,
            sa_logger=sa_logger,
            alpha=args.alpha,
            max_time=args.max_time,
            max_energy=args.max_energy,
            restart_probability=args.restart_probability
        )
        visualize(final_schedule)

        print(f"Initial energy: {initial_energy}")
        print(f"Final energy: {final_schedule.energy()}")

        if sa_logger is not None:
            sa_logger.create_visualization(args.plot)

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(final_schedule.to_json(), f, indent=2)
        print(f"Schedule written to {args.output}")

        return 0

    except Exception as e:
        print(f"Error: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
