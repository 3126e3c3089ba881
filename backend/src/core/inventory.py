from __future__ import annotations

import math


def clamp_inventory(value: int, capacity: int) -> int:
    if value < 0:
        return 0
    if value > capacity:
        return capacity
    return value


def round_half_up(value: float) -> int:
    if isinstance(value, int):
        return value
    return math.floor(value + 0.5)


def clamp_prediction(raw: float, total_docks: int) -> int:
    """Round a raw model estimate and pin it into ``[0, total_docks]``.

    Halves round upwards (``2.5 -> 3``, ``-2.5 -> -2``) so the result does not
    depend on the parity of the integer part.
    """
    return clamp_inventory(round_half_up(raw), total_docks)
