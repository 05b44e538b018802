# SPDX-License-Identifier: MIT

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves always rounding up.

    Every bar, percentage and sand count in the application goes through this
    function so that all themes agree on the number of filled cells.
    """
    return math.floor(value + 0.5)


def round_ratio(value: float) -> float:
    """Clamp a ratio into [0.0, 1.0] and round it to the nearest hundredth."""
    clamped = min(max(value, 0.0), 1.0)
    return round_half_up(clamped * 100) / 100
