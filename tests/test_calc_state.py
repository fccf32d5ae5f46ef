#!/usr/bin/env python3
"""Tests for CalcState dataclass."""

import dataclasses
import math

import pytest

from pockettools import CalcState, INITIAL_STATE, Operator, Phase


class TestInitialState:
    """Tests for the initial calculator state."""

    def test_fields(self):
        assert INITIAL_STATE.display == "0"
        assert INITIAL_STATE.accumulator is None
        assert INITIAL_STATE.pending_operator is None
        assert INITIAL_STATE.entering is True
        assert INITIAL_STATE.just_evaluated is False

    def test_equals_default_constructor(self):
        assert CalcState() == INITIAL_STATE

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            INITIAL_STATE.display = "5"


class TestIsFreshStart:
    """Tests for CalcState.is_fresh_start."""

    def test_after_equals(self):
        state = CalcState(display="14", entering=False, just_evaluated=True)
        assert state.is_fresh_start

    def test_not_when_operator_pending(self):
        state = CalcState(
            display="3",
            accumulator=3.0,
            pending_operator=Operator.ADD,
            entering=False,
            just_evaluated=True,
        )
        assert not state.is_fresh_start

    def test_not_without_equals(self):
        assert not INITIAL_STATE.is_fresh_start


class TestPhase:
    """Tests for CalcState.phase."""

    def test_idle(self):
        assert INITIAL_STATE.phase == Phase.IDLE

    def test_entering_operand(self):
        assert CalcState(display="12").phase == Phase.ENTERING_OPERAND

    def test_operator_pending(self):
        state = CalcState(
            display="3", accumulator=3.0, pending_operator=Operator.ADD, entering=False
        )
        assert state.phase == Phase.OPERATOR_PENDING

    def test_entering_second_operand(self):
        state = CalcState(
            display="4", accumulator=3.0, pending_operator=Operator.ADD, entering=True
        )
        assert state.phase == Phase.ENTERING_OPERAND

    def test_just_evaluated(self):
        state = CalcState(display="7", entering=False, just_evaluated=True)
        assert state.phase == Phase.JUST_EVALUATED


class TestSerialization:
    """Tests for to_dict / from_dict."""

    def test_to_dict(self):
        state = CalcState(
            display="3", accumulator=3.0, pending_operator=Operator.DIVIDE, entering=False
        )
        assert state.to_dict() == {
            "display": "3",
            "accumulator": 3.0,
            "pendingOperator": "÷",
            "entering": False,
            "justEvaluated": False,
        }

    def test_round_trip(self):
        state = CalcState(
            display="0.", accumulator=2.5, pending_operator=Operator.SUBTRACT
        )
        assert CalcState.from_dict(state.to_dict()) == state

    def test_from_empty_dict_is_initial(self):
        assert CalcState.from_dict({}) == INITIAL_STATE

    def test_nan_accumulator_survives(self):
        state = CalcState.from_dict(
            {"display": "Error", "accumulator": math.nan, "pendingOperator": "+"}
        )
        assert math.isnan(state.accumulator)

    def test_unknown_operator_rejected(self):
        with pytest.raises(ValueError):
            CalcState.from_dict({"pendingOperator": "^"})


class TestNonFiniteAccumulator:
    """Non-finite accumulators serialize to strings JSON can carry."""

    def test_nan_encoded_as_string(self):
        state = CalcState(
            display="Error", accumulator=math.nan, pending_operator=Operator.ADD
        )
        assert state.to_dict()["accumulator"] == "NaN"

    @pytest.mark.parametrize(
        "value,encoded", [(math.inf, "Infinity"), (-math.inf, "-Infinity")]
    )
    def test_infinity_encoded(self, value, encoded):
        state = CalcState(accumulator=value, pending_operator=Operator.MULTIPLY)
        assert state.to_dict()["accumulator"] == encoded
        assert CalcState.from_dict(state.to_dict()).accumulator == value

    def test_nan_round_trip(self):
        state = CalcState(accumulator=math.nan, pending_operator=Operator.ADD)
        restored = CalcState.from_dict(state.to_dict())
        assert math.isnan(restored.accumulator)

    def test_non_mapping_rejected(self):
        with pytest.raises(TypeError):
            CalcState.from_dict([1])
