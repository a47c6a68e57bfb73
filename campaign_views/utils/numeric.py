"""Safe arithmetic helpers shared by every view."""

import math
from collections.abc import Iterable

type Number = int | float


def to_number(value: object) -> float:
    """Coerce a loosely-typed JSON value to a finite float, defaulting to 0."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def total(values: Iterable[object]) -> float:
    return sum((to_number(v) for v in values), 0.0)


def safe_ratio(part: Number, whole: Number) -> float:
    """Return part / whole, or 0 when whole is not positive."""
    return part / whole if whole > 0 else 0.0


def safe_percent(num: Number, den: Number) -> float:
    return safe_ratio(num, den) * 100
