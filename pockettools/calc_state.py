"""CalcState dataclass - the complete calculator display state."""

import math
from dataclasses import dataclass
from typing import Optional

from .operation import Operator
from .phase import Phase


def _encode_number(value: Optional[float]):
    """JSON has no NaN or Infinity, so non-finite values travel as strings."""
    if value is None or math.isfinite(value):
        return value
    return str(value).replace("inf", "Infinity").replace("nan", "NaN")


@dataclass(frozen=True)
class CalcState:
    """
    Immutable calculator state.

    The accumulator and pending operator are always set and cleared
    together. A new state is produced for every action.
    """

    display: str = "0"
    accumulator: Optional[float] = None
    pending_operator: Optional[Operator] = None
    entering: bool = True
    just_evaluated: bool = False

    @property
    def is_fresh_start(self) -> bool:
        """True right after '=' with nothing pending."""
        return (
            self.just_evaluated
            and self.pending_operator is None
            and self.accumulator is None
        )

    @property
    def phase(self) -> Phase:
        """Classify the state into an explicit phase."""
        if self.pending_operator is not None and not self.entering:
            return Phase.OPERATOR_PENDING
        if not self.entering:
            return Phase.JUST_EVALUATED
        if self.display == "0" and self.pending_operator is None:
            return Phase.IDLE
        return Phase.ENTERING_OPERAND

    def to_dict(self) -> dict:
        """Serialize for JSON transport."""
        return {
            "display": self.display,
            "accumulator": _encode_number(self.accumulator),
            "pendingOperator": (
                self.pending_operator.value if self.pending_operator else None
            ),
            "entering": self.entering,
            "justEvaluated": self.just_evaluated,
        }

    @classmethod
    def from_dict(cls, dct: dict) -> "CalcState":
        """Rebuild a state from `to_dict` output. Missing keys take defaults."""
        if not isinstance(dct, dict):
            raise TypeError(f"State must be an object, not {type(dct).__name__}")
        op = dct.get("pendingOperator")
        acc = dct.get("accumulator")
        return cls(
            display=str(dct.get("display", "0")),
            accumulator=float(acc) if acc is not None else None,
            pending_operator=Operator(op) if op is not None else None,
            entering=bool(dct.get("entering", True)),
            just_evaluated=bool(dct.get("justEvaluated", False)),
        )


INITIAL_STATE = CalcState()
