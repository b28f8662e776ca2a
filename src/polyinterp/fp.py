"""IEEE-754 float helpers for the interpolation engine.

Python's float division raises ZeroDivisionError on a zero divisor.
The engine instead lets degenerate nodes surface as inf/nan in the
result, so every division over node differences goes through div().
"""

import math


def div(a: float, b: float) -> float:
    """a / b with IEEE-754 semantics for a zero divisor.

    x / +-0 is +-inf (sign of x times sign of the zero), 0 / 0 and
    nan / 0 are nan.
    """
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)
