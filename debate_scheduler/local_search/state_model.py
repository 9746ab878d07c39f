from numbers import Real
from typing import Protocol, runtime_checkable

from debate_scheduler.base_model.errors import InvalidInputError


@runtime_checkable
class StateModel(Protocol):
    """
    What the annealer needs from a searchable state.

    energy() is higher for better states. neighbor() may mutate the state in
    place and return it, as long as the move it applies is its own inverse.
    clone() must share no mutable structure with the original. shuffle() is
    only used when restarts are enabled.
    """

    def energy(self) -> Real:
        ...

    def neighbor(self) -> "StateModel":
        ...

    def clone(self) -> "StateModel":
        ...

    def shuffle(self) -> "StateModel":
        ...


REQUIRED_CAPABILITIES = ("energy", "neighbor", "clone")


def validate_state(state, needs_shuffle: bool) -> None:
    """Raise InvalidInputError if the state cannot be searched"""
    if state is None:
        raise InvalidInputError("An initial state is required")

    required = REQUIRED_CAPABILITIES + (("shuffle",) if needs_shuffle else ())
    missing = [name for name in required if not callable(getattr(state, name, None))]
    if missing:
        raise InvalidInputError(f"State {type(state).__name__} is missing required capabilities: {', '.join(missing)}")
