import unittest
import json
import os
import tempfile
from contextlib import redirect_stdout
from io import StringIO

from debate_scheduler.main import main
from debate_scheduler.util.data_generator import generate_test_data


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _path(self, name):
        return os.path.join(self.tmp.name, name)

    def _run(self, argv):
        with redirect_stdout(StringIO()) as out:
            code = main(argv)
        return code, out.getvalue()

    def test_generated_tournament(self):
        output = self._path("schedule.json")
        code, out = self._run(["--test", "8", "5", "--seed", "3", "--max-time", "300", "--output", output])

        self.assertEqual(code, 0, out)
        with open(output) as f:
            schedule = json.load(f)
        self.assertEqual(len(schedule), 4)
        self.assertEqual(sorted(name for match in schedule for name in (match["teamA"], match["teamB"])),
                         sorted(f"Team {i}" for i in range(1, 9)))
        self.assertIn("Final energy", out)

    def test_input_file_with_rounds_and_plot(self):
        request_path = self._path("request.json")
        with open(request_path, "w") as f:
            json.dump(generate_test_data(4, 2, seed=8), f)

        rounds_path = self._path("rounds.json")
        with open(rounds_path, "w") as f:
            json.dump([[{"teamA": "Team 1", "teamB": "Team 2", "winner": "Team 1"},
                        {"teamA": "Team 3", "teamB": "Team 4", "winner": "Team 4"}]], f)

        output = self._path("out/schedule.json")
        plot = self._path("trace.png")
        code, out = self._run(["--input", request_path, "--rounds", rounds_path, "--seed", "1",
                               "--max-time", "200", "--output", output, "--plot", plot])

        self.assertEqual(code, 0, out)
        self.assertIn("Team 1: 1", out)
        self.assertTrue(os.path.exists(output))
        self.assertTrue(os.path.exists(plot))

    def test_odd_team_count_fails(self):
        request_path = self._path("request.json")
        with open(request_path, "w") as f:
            json.dump(generate_test_data(5, 2), f)

        code, out = self._run(["--input", request_path, "--output", self._path("schedule.json")])
        self.assertEqual(code, 1)
        self.assertIn("even number of teams", out)
        self.assertFalse(os.path.exists(self._path("schedule.json")))

    def test_unknown_winner_fails(self):
        request_path = self._path("request.json")
        with open(request_path, "w") as f:
            json.dump(generate_test_data(4, 2), f)
        rounds_path = self._path("rounds.json")
        with open(rounds_path, "w") as f:
            json.dump([[{"teamA": "Team 1", "teamB": "Team 2", "winner": "Team 3"}]], f)

        code, out = self._run(["--input", request_path, "--rounds", rounds_path])
        self.assertEqual(code, 1)
        self.assertIn("Team 3 must be one of Team 1 or Team 2", out)

    def test_missing_input_file(self):
        code, out = self._run(["--input", self._path("missing.json")])
        self.assertEqual(code, 1)
        self.assertIn("not found", out)


if __name__ == '__main__':
    unittest.main()
