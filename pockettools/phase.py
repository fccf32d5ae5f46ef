"""Phase enum describing where the calculator is in an entry cycle."""

from enum import Enum


class Phase(Enum):
    """Derived calculator phases."""

    IDLE = 1  # Initial or cleared, nothing typed yet
    ENTERING_OPERAND = 2
    OPERATOR_PENDING = 3  # Operator pressed, waiting for the next operand
    JUST_EVALUATED = 4  # Result of '=' shown, next digit starts fresh
