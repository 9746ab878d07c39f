import json
from dataclasses import dataclass
from typing import List, Optional

import numpy as np


@dataclass
class SearchState:
    """Represents a step in the search process"""
    iteration: int
    energy: float
    temperature: float
    is_accepted: bool
    is_best: bool
    event_type: Optional[str] = None  # 'start', 'restart'


class SimulatedAnnealingLogger:
    """Logger for capturing search states during simulated annealing"""

    def __init__(self, log_every_n_iterations: int = 1):
        if log_every_n_iterations < 1:
            raise ValueError("log_every_n_iterations must be at least 1")
        self.states: List[SearchState] = []
        self.log_every_n_iterations = log_every_n_iterations

    def log_state(self,
                  iteration: int,
                  energy: float,
                  temperature: float,
                  is_accepted: bool,
                  is_best: bool,
                  event_type: Optional[str] = None):
        """Log a search state"""

        # Only log every n iterations, but always keep special events and new bests
        if iteration % self.log_every_n_iterations != 0 and event_type is None and not is_best:
            return

        self.states.append(SearchState(
            iteration=iteration,
            energy=float(energy),
            temperature=float(temperature),
            is_accepted=is_accepted,
            is_best=is_best,
            event_type=event_type
        ))

    def iterations(self) -> np.ndarray:
        return np.array([s.iteration for s in self.states], dtype=int)

    def energies(self) -> np.ndarray:
        return np.array([s.energy for s in self.states], dtype=float)

    def temperatures(self) -> np.ndarray:
        return np.array([s.temperature for s in self.states], dtype=float)

    def best_energies(self) -> np.ndarray:
        """Energies of the states that were recorded as a new best, in order"""
        return np.array([s.energy for s in self.states if s.is_best], dtype=float)

    def running_best(self) -> np.ndarray:
        energies = self.energies()
        if energies.size == 0:
            return energies
        return np.maximum.accumulate(energies)

    def summary(self) -> dict:
        """Aggregate statistics over the logged states"""
        energies = self.energies()
        if energies.size == 0:
            return {"logged_states": 0}

        steps = [s for s in self.states if s.event_type != "start"]
        accepted = sum(1 for s in steps if s.is_accepted)
        return {
            "logged_states": len(self.states),
            "best_energy": float(energies.max()),
            "final_energy": float(energies[-1]),
            "mean_energy": float(energies.mean()),
            "std_energy": float(energies.std()),
            "acceptance_rate": accepted / len(steps) if steps else 0.0,
            "restarts": sum(1 for s in self.states if s.event_type == "restart"),
            "improvements": int(self.best_energies().size),
        }

    def create_visualization(self, output_path: str):
        """Plot the energy trace to output_path"""
        if not self.states:
            print("No states logged!")
            return None

        from debate_scheduler.util.energy_visualizer import plot_energy_trace

        print(f"Creating visualization from {len(self.states)} logged states...")
        return plot_energy_trace(self, output_path)

    def save_log(self, filepath: str):
        """Save the log data to a JSON file"""
        data = []
        for state in self.states:
            data.append({
                'iteration': state.iteration,
                'energy': state.energy,
                'temperature': state.temperature,
                'is_accepted': state.is_accepted,
                'is_best': state.is_best,
                'event_type': state.event_type
            })

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def load_log(filepath: str) -> 'SimulatedAnnealingLogger':
        """Load log data from a JSON file"""
        logger = SimulatedAnnealingLogger()

        with open(filepath, 'r') as f:
            data = json.load(f)

        for item in data:
            logger.states.append(SearchState(
                iteration=item['iteration'],
                energy=item['energy'],
                temperature=item['temperature'],
                is_accepted=item['is_accepted'],
                is_best=item['is_best'],
                event_type=item.get('event_type')
            ))

        return logger
