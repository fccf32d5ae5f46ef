"""Operator enum for calculator keys."""

from enum import Enum


class Operator(Enum):
    """Binary operators on the keypad. Value is the key label."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"
