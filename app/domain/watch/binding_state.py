"""Event code binding state machine."""

from enum import Enum

from .watch_models import EventCodeRecord


class BindingState(str, Enum):
    """Binding states of an event code.

    UNBOUND -> BOUND on the first successful resolution using the code.
    BOUND is terminal; only an administrative reset outside this service
    clears it.
    """

    UNBOUND = "unbound"
    BOUND = "bound"

    def __str__(self) -> str:
        return self.value


class BindingStateMachine:
    TRANSITIONS: dict[BindingState, set[BindingState]] = {
        BindingState.UNBOUND: {BindingState.BOUND},
        BindingState.BOUND: set(),
    }

    TERMINAL_STATES: set[BindingState] = {BindingState.BOUND}

    @classmethod
    def state_of(cls, record: EventCodeRecord) -> BindingState:
        return BindingState.BOUND if record.is_bound else BindingState.UNBOUND

    @classmethod
    def can_transition(cls, current: BindingState, new: BindingState) -> bool:
        return new in cls.TRANSITIONS.get(current, set())

    @classmethod
    def is_terminal(cls, state: BindingState) -> bool:
        return state in cls.TERMINAL_STATES
