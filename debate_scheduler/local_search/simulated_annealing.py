import math
import random
from dataclasses import dataclass, field
from numbers import Real
from typing import Callable

from debate_scheduler.base_model.errors import InvalidInputError
from debate_scheduler.local_search.state_model import StateModel, validate_state
from debate_scheduler.util.sa_logger import SimulatedAnnealingLogger

DEFAULT_RESTART_PROBABILITY = 0.001
DEFAULT_MAX_TIME = 30000
DEFAULT_MAX_ENERGY = 0
DEFAULT_ALPHA = 0.95
DEFAULT_PROGRESS_INTERVAL = 1000


def make_default_temperature_fn(alpha: float = DEFAULT_ALPHA) -> Callable[[int], float]:
    """
    Create the cooling schedule T(k) = alpha ** k.

    Args:
        alpha: The cooling multiplier, 0 < alpha < 1. Should usually be close to 1

    Returns:
        A function from the number of steps since the last restart to a
        temperature in (0, 1]
    """
    if isinstance(alpha, bool) or not isinstance(alpha, Real) or not 0 < alpha < 1:
        raise InvalidInputError(f"alpha must be strictly between 0 and 1, got {alpha!r}")

    def temperature(step: int) -> float:
        return alpha ** step

    return temperature


def default_acceptance_probability(energy: Real, candidate_energy: Real, temperature: float) -> float:
    """
    Probability of moving from a state with the given energy to the candidate.
    Improvements are always accepted. Worse candidates are accepted with a
    probability that shrinks as the energy gap widens and as the temperature
    falls. Assumes 0 < temperature <= 1 and works best when energies span a
    range of about 25.
    """
    if candidate_energy > energy:
        return 1.0
    return math.exp((candidate_energy - energy) * (1.0 - temperature))


@dataclass
class AnnealingConfig:
    """Tuning of one simulated annealing run"""
    max_time: int = DEFAULT_MAX_TIME  # step budget
    max_energy: Real = DEFAULT_MAX_ENERGY  # stop once the current energy reaches this
    restart_probability: float = DEFAULT_RESTART_PROBABILITY  # 0 disables restarts
    cooling_schedule: Callable[[int], float] = field(default_factory=make_default_temperature_fn)
    acceptance_probability: Callable[[Real, Real, float], float] = default_acceptance_probability

    def validate(self) -> None:
        if isinstance(self.max_time, bool) or not isinstance(self.max_time, int) or self.max_time < 0:
            raise InvalidInputError(f"max_time must be a non-negative integer, got {self.max_time!r}")
        if isinstance(self.max_energy, bool) or not isinstance(self.max_energy, Real):
            raise InvalidInputError(f"max_energy must be numeric, got {self.max_energy!r}")
        if (isinstance(self.restart_probability, bool) or not isinstance(self.restart_probability, Real)
                or not 0 <= self.restart_probability <= 1):
            raise InvalidInputError(f"restart_probability must be between 0 and 1, got {self.restart_probability!r}")
        if not callable(self.cooling_schedule):
            raise InvalidInputError("cooling_schedule must be callable")
        if not callable(self.acceptance_probability):
            raise InvalidInputError("acceptance_probability must be callable")


class Annealer:
    """
    Generic simulated annealing driver.

    All random draws of a run come from one generator: rng when given,
    otherwise the generator of the initial state (its rng attribute), so a
    seeded schedule gives a reproducible run.
    """

    def __init__(self, rng: random.Random = None,
                 sa_logger: SimulatedAnnealingLogger = None,
                 log_file_path: str = None,
                 verbose: bool = False,
                 progress_interval: int = DEFAULT_PROGRESS_INTERVAL):
        self.rng = rng
        self.sa_logger = sa_logger
        self.log_file_path = log_file_path
        self.verbose = verbose
        self.progress_interval = progress_interval
        self._log_file = None

    def _log_output(self, message: str) -> None:
        if self.verbose:
            print(message)
        if self._log_file:
            self._log_file.write(message + "\n")
            self._log_file.flush()

    def run(self, initial_state: StateModel, config: AnnealingConfig = None) -> StateModel:
        """
        Search for the highest energy state reachable from initial_state.

        The initial state may be mutated by the search. The returned state is
        either initial_state itself (when no step was taken) or an independent
        clone of the best state seen.
        """
        config = config if config is not None else AnnealingConfig()
        config.validate()
        validate_state(initial_state, needs_shuffle=config.restart_probability > 0)

        rng = self.rng if self.rng is not None else getattr(initial_state, "rng", None)
        if rng is None:
            rng = random.Random()

        if self.log_file_path:
            self._log_file = open(self.log_file_path, 'w')
        try:
            return self._anneal(initial_state, config, rng)
        finally:
            if self._log_file:
                self._log_file.close()
                self._log_file = None

    def _anneal(self, initial_state: StateModel, config: AnnealingConfig, rng: random.Random) -> StateModel:
        current_state = initial_state
        current_energy = current_state.energy()
        best_state = current_state
        best_energy = current_energy
        current_time = 0  # steps since the last restart
        cumulative_time = 0

        self._log_output(f"Starting simulated annealing: max_time={config.max_time}, "
                         f"max_energy={config.max_energy}, restart_probability={config.restart_probability}")
        self._log_output(f"Initial energy: {current_energy}")
        if self.sa_logger is not None:
            self.sa_logger.log_state(0, current_energy, config.cooling_schedule(0), True, False, event_type="start")

        if cumulative_time < config.max_time and current_energy < config.max_energy:
            # neighbor() mutates in place, so the best state must not be the live one
            best_state = current_state.clone()

        while cumulative_time < config.max_time and current_energy < config.max_energy:
            event_type = None
            if rng.random() < config.restart_probability:
                current_time = 0
                new_state = current_state.shuffle()
                event_type = "restart"
            else:
                new_state = current_state.neighbor()

            new_energy = new_state.energy()
            temperature = config.cooling_schedule(current_time)

            is_accepted = config.acceptance_probability(current_energy, new_energy, temperature) > rng.random()
            if is_accepted:
                current_state = new_state
                current_energy = new_energy

            is_best = new_energy > best_energy
            if is_best:
                best_state = new_state.clone()
                best_energy = new_energy

            current_time += 1
            cumulative_time += 1

            if self.sa_logger is not None:
                self.sa_logger.log_state(cumulative_time, new_energy, temperature, is_accepted, is_best, event_type)
            if event_type == "restart":
                self._log_output(f"Restart at step {cumulative_time}, energy {new_energy}")
            if is_best:
                self._log_output(f"New best energy at step {cumulative_time}: {best_energy}")
            elif self.progress_interval and cumulative_time % self.progress_interval == 0:
                self._log_output(f"Step: {cumulative_time}, Temp: {temperature:.4f}, "
                                 f"Energy: {current_energy}, Best: {best_energy}")

        self._log_output(f"Final time: {cumulative_time}")
        self._log_output(f"Final energy: {current_energy}")
        self._log_output(f"Best energy: {best_energy}")

        return best_state


def simulated_annealing(initial_state: StateModel,
                        config: AnnealingConfig = None,
                        rng: random.Random = None,
                        sa_logger: SimulatedAnnealingLogger = None,
                        log_file_path: str = None,
                        verbose: bool = False) -> StateModel:
    annealer = Annealer(rng=rng, sa_logger=sa_logger, log_file_path=log_file_path, verbose=verbose)
    return annealer.run(initial_state, config)


def run_local_search(schedule: StateModel, rng: random.Random = None, log_file_path: str = None,
                     sa_logger: SimulatedAnnealingLogger = None, alpha: float = DEFAULT_ALPHA,
                     **overrides) -> StateModel:
    """Run simulated annealing on a schedule with the default tuning, printing progress"""
    config = AnnealingConfig(cooling_schedule=make_default_temperature_fn(alpha), **overrides)

    return simulated_annealing(
        schedule,
        config,
        rng=rng,
        sa_logger=sa_logger,
        log_file_path=log_file_path,
        verbose=True
    )
