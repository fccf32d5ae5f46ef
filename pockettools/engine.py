"""Calculator state machine."""

from dataclasses import replace
from typing import Iterable, Optional

from .actions import (
    Action,
    ApplyOperator,
    Clear,
    EnterDecimalPoint,
    EnterDigit,
    Equals,
    Percent,
    ToggleSign,
    action_for_key,
)
from .calc_state import CalcState, INITIAL_STATE
from .calculations import apply_operator, format_number, to_number


def transition(state: CalcState, action: Action) -> CalcState:
    """
    Produce the state that follows `action`.

    Operators evaluate immediately left to right: `3 + 4 × 2 =` is 14.
    The input state is never modified.
    """
    current = to_number(state.display)

    if isinstance(action, Clear):
        return INITIAL_STATE

    if isinstance(action, EnterDigit):
        if not state.entering or state.is_fresh_start:
            return replace(
                state, display=action.digit, entering=True, just_evaluated=False
            )
        if state.display == "0":
            return replace(state, display=action.digit, just_evaluated=False)
        return replace(
            state, display=state.display + action.digit, just_evaluated=False
        )

    if isinstance(action, EnterDecimalPoint):
        if not state.entering or state.is_fresh_start:
            return replace(state, display="0.", entering=True, just_evaluated=False)
        if "." in state.display:
            return state
        return replace(state, display=state.display + ".", just_evaluated=False)

    if isinstance(action, ToggleSign):
        # No signed zero
        if state.display == "0":
            return state
        return replace(state, display=format_number(-current), just_evaluated=False)

    if isinstance(action, Percent):
        return replace(
            state, display=format_number(current / 100), just_evaluated=False
        )

    if isinstance(action, ApplyOperator):
        if (
            state.pending_operator is not None
            and state.accumulator is not None
            and state.entering
        ):
            # Chained operator: settle the previous one first
            result = apply_operator(
                state.accumulator, current, state.pending_operator
            )
            return CalcState(
                display=format_number(result),
                accumulator=result,
                pending_operator=action.operator,
                entering=False,
                just_evaluated=False,
            )
        accumulator = state.accumulator if state.accumulator is not None else current
        return replace(
            state,
            accumulator=accumulator,
            pending_operator=action.operator,
            entering=False,
            just_evaluated=False,
        )

    if isinstance(action, Equals):
        if state.pending_operator is None or state.accumulator is None:
            return replace(state, entering=False, just_evaluated=True)
        result = apply_operator(state.accumulator, current, state.pending_operator)
        return CalcState(
            display=format_number(result),
            accumulator=None,
            pending_operator=None,
            entering=False,
            just_evaluated=True,
        )

    raise TypeError(f"Unsupported action: {action!r}")


def run_keys(keys: Iterable[str], state: Optional[CalcState] = None) -> CalcState:
    """Feed keypad labels through the state machine, starting fresh by default."""
    if state is None:
        state = INITIAL_STATE
    for key in keys:
        state = transition(state, action_for_key(key))
    return state
