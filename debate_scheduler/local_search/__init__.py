"""
Local search for debate round scheduling.
Includes the generic simulated annealing driver and the schedule moves.
"""

from debate_scheduler.local_search.simulated_annealing import (
    Annealer,
    AnnealingConfig,
    simulated_annealing,
    run_local_search,
    make_default_temperature_fn,
    default_acceptance_probability,
)
from debate_scheduler.local_search.state_model import StateModel, validate_state
from debate_scheduler.local_search.move import Move, MoveType, do_move, undo_move, apply_swap

__all__ = [
    'Annealer',
    'AnnealingConfig',
    'simulated_annealing',
    'run_local_search',
    'make_default_temperature_fn',
    'default_acceptance_probability',
    'StateModel',
    'validate_state',
    'Move',
    'MoveType',
    'do_move',
    'undo_move',
    'apply_swap',
]
