"""Helper functions for calculator arithmetic and display formatting."""

import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP

from .operation import Operator

ERROR_DISPLAY = "Error"
MAX_DECIMALS = 10

_FIXED_QUANTUM = Decimal(1).scaleb(-MAX_DECIMALS)
_FIXED_CONTEXT = Context(prec=60)
_TRAILING_ZEROS = re.compile(r"\.?0+$")


def apply_operator(a: float, b: float, op: Operator) -> float:
    """Evaluate `a op b`. Division by zero yields NaN instead of raising."""
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    if b == 0:
        return math.nan
    return a / b


def to_number(display: str) -> float:
    """Parse a display string. Anything that is not a finite number reads as 0."""
    try:
        n = float(display)
    except ValueError:
        return 0.0
    return n if math.isfinite(n) else 0.0


def shortest_str(n: float) -> str:
    """
    Render a finite float the way calculators conventionally print numbers.

    Uses the shortest round-trip digits, switching to exponent form only
    for magnitudes >= 1e21 or < 1e-6 (e.g. '1e+21', '1.5e-7').
    """
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    parts = Decimal(repr(abs(n))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    k = len(digits)
    point = parts.exponent + k  # position of the decimal point

    if k <= point <= 21:
        body = digits + "0" * (point - k)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        exp = point - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
    return sign + body


def format_number(n: float) -> str:
    """
    Format a value for the calculator display.

    - Non-finite values show as 'Error'
    - Negative zero shows as '0'
    - Exponent forms are shown as-is
    - Fractions are limited to 10 decimals with trailing zeros removed
    """
    if not math.isfinite(n):
        return ERROR_DISPLAY
    if n == 0:
        n = 0.0
    s = shortest_str(n)
    if "e" in s:
        return s
    if "." in s:
        fixed = Decimal(n).quantize(
            _FIXED_QUANTUM, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT
        )
        return _TRAILING_ZEROS.sub("", f"{fixed:f}")
    return s
