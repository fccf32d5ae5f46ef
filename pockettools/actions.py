"""Calculator actions and keypad label mapping."""

from dataclasses import dataclass
from typing import Union

from .operation import Operator


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class EnterDigit:
    digit: str

    def __post_init__(self):
        if len(self.digit) != 1 or self.digit not in "0123456789":
            raise ValueError(f"Not a digit: {self.digit!r}")


@dataclass(frozen=True)
class EnterDecimalPoint:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class ApplyOperator:
    operator: Operator


@dataclass(frozen=True)
class Equals:
    pass


Action = Union[
    Clear, EnterDigit, EnterDecimalPoint, ToggleSign, Percent, ApplyOperator, Equals
]

# ASCII stand-ins for keypad symbols that are awkward to type
KEY_ALIASES = {
    "c": "C",
    "*": "×",
    "x": "×",
    "X": "×",
    "/": "÷",
    "-": "−",
    "~": "±",
}


def action_for_key(key: str) -> Action:
    """Translate a keypad label into an action."""
    key = KEY_ALIASES.get(key, key)
    if key == "C":
        return Clear()
    if key == "±":
        return ToggleSign()
    if key == "%":
        return Percent()
    if key == ".":
        return EnterDecimalPoint()
    if key == "=":
        return Equals()
    if key in ("+", "−", "×", "÷"):
        return ApplyOperator(Operator(key))
    if len(key) == 1 and key in "0123456789":
        return EnterDigit(key)
    raise ValueError(f"Unknown key: {key!r}")
