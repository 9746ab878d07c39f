import unittest
import random

from debate_scheduler.base_model.team import Team
from debate_scheduler.base_model.judge import Judge
from debate_scheduler.base_model.match import Match
from debate_scheduler.base_model.schedule import Schedule, generate_random_schedule
from debate_scheduler.local_search.move import Move, MoveType, apply_swap, do_move, undo_move
from debate_scheduler.local_search.move_generator import generate_moves, score_moves, find_best_move

PENALTIES = {"teams_same_school": 10, "judge_same_school": 5, "different_win_loss": 1}


class TestMoves(unittest.TestCase):

    def setUp(self):
        rng = random.Random(2024)
        teams = [Team(name=f"T{i}", school=f"S{i % 3}", num_wins=i % 4) for i in range(12)]
        judges = [Judge(name=f"J{i}", school=f"S{i % 3}") for i in range(9)]
        self.schedule = generate_random_schedule(teams, judges, PENALTIES, rng)
        self.match_1, self.match_2 = self.schedule.matches[0], self.schedule.matches[4]

    def test_every_move_is_its_own_inverse(self):
        for move_type in MoveType:
            with self.subTest(move_type=move_type):
                energy_before = self.schedule.energy()
                json_before = self.schedule.to_json()

                apply_swap(move_type, self.match_1, self.match_2)
                apply_swap(move_type, self.match_1, self.match_2)

                self.assertEqual(self.schedule.energy(), energy_before)
                self.assertEqual(self.schedule.to_json(), json_before)

    def test_moves_within_one_match_are_their_own_inverse(self):
        for move_type in MoveType:
            with self.subTest(move_type=move_type):
                energy_before = self.schedule.energy()
                json_before = self.schedule.to_json()

                apply_swap(move_type, self.match_1, self.match_1)
                apply_swap(move_type, self.match_1, self.match_1)

                self.assertEqual(self.schedule.energy(), energy_before)
                self.assertEqual(self.schedule.to_json(), json_before)

    def test_do_and_undo(self):
        team_a_1, team_b_2 = self.match_1.team_a, self.match_2.team_b
        move = Move(MoveType.SWAP_TEAM_A_WITH_TEAM_B, self.match_1, self.match_2)

        do_move(move)
        self.assertTrue(move.is_applied)
        self.assertIs(self.match_1.team_a, team_b_2)
        self.assertIs(self.match_2.team_b, team_a_1)

        do_move(move)  # already applied, nothing happens
        self.assertIs(self.match_1.team_a, team_b_2)

        undo_move(move)
        self.assertFalse(move.is_applied)
        self.assertIs(self.match_1.team_a, team_a_1)
        self.assertIs(self.match_2.team_b, team_b_2)

    def test_swap_team_a(self):
        team_a_1, team_a_2 = self.match_1.team_a, self.match_2.team_a
        apply_swap(MoveType.SWAP_TEAM_A, self.match_1, self.match_2)
        self.assertIs(self.match_1.team_a, team_a_2)
        self.assertIs(self.match_2.team_a, team_a_1)

    def test_swap_judge_panels(self):
        panel_1, panel_2 = self.match_1.judges, self.match_2.judges
        apply_swap(MoveType.SWAP_JUDGE_PANELS, self.match_1, self.match_2)
        self.assertIs(self.match_1.judges, panel_2)
        self.assertIs(self.match_2.judges, panel_1)

    def test_swap_first_judges(self):
        self.match_1.judges = [Judge("A", "S0"), Judge("B", "S1")]
        self.match_2.judges = [Judge("C", "S2")]
        apply_swap(MoveType.SWAP_FIRST_JUDGES, self.match_1, self.match_2)
        self.assertEqual([j.name for j in self.match_1.judges], ["C", "B"])
        self.assertEqual([j.name for j in self.match_2.judges], ["A"])

    def test_swap_first_judges_with_empty_panel_does_nothing(self):
        self.match_1.judges = [Judge("A", "S0")]
        self.match_2.judges = []
        apply_swap(MoveType.SWAP_FIRST_JUDGES, self.match_1, self.match_2)
        self.assertEqual([j.name for j in self.match_1.judges], ["A"])
        self.assertEqual(self.match_2.judges, [])


class TestFindBestMove(unittest.TestCase):

    def setUp(self):
        self.a = Team(name="A", school="X")
        self.b = Team(name="B", school="X")
        self.c = Team(name="C", school="Y")
        self.d = Team(name="D", school="Y")

    def _same_school_schedule(self, rng):
        return Schedule([Match(self.a, self.b, []), Match(self.c, self.d, [])], PENALTIES, rng)

    def test_score_moves_leaves_schedule_unchanged(self):
        schedule = self._same_school_schedule(random.Random(0))
        json_before = schedule.to_json()

        scored = score_moves(schedule, generate_moves(*schedule.matches))

        self.assertEqual(schedule.to_json(), json_before)
        self.assertEqual(len(scored), len(MoveType))
        self.assertTrue(all(not move.is_applied for _, move in scored))
        energies = {move.move_type: energy for energy, move in scored}
        self.assertEqual(energies[MoveType.SWAP_TEAM_A_WITH_TEAM_B], 0)
        self.assertEqual(energies[MoveType.SWAP_TEAM_A], 0)
        self.assertEqual(energies[MoveType.SWAP_JUDGE_PANELS], -20)
        self.assertEqual(energies[MoveType.SWAP_FIRST_JUDGES], -20)

    def test_best_move_is_applied(self):
        schedule = self._same_school_schedule(random.Random(0))
        move = find_best_move(schedule, schedule.matches[0], schedule.matches[1], schedule.rng)

        self.assertTrue(move.is_applied)
        self.assertIn(move.move_type, (MoveType.SWAP_TEAM_A_WITH_TEAM_B, MoveType.SWAP_TEAM_A))
        self.assertEqual(schedule.energy(), 0)

    def test_ties_are_broken_at_random(self):
        chosen = set()
        for seed in range(50):
            self.setUp()
            schedule = self._same_school_schedule(random.Random(seed))
            move = find_best_move(schedule, schedule.matches[0], schedule.matches[1], schedule.rng)
            chosen.add(move.move_type)

        self.assertEqual(chosen, {MoveType.SWAP_TEAM_A_WITH_TEAM_B, MoveType.SWAP_TEAM_A})


if __name__ == '__main__':
    unittest.main()
