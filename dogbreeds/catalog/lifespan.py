from __future__ import annotations

import re

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def parse_lifespan_average(lifespan: str | int | float | None) -> float | None:
    """
    Average lifespan in years from a stored lifespan value.

    Handles "10-12 years", "10 – 12", "12" and bare numbers. A range gives the
    mean of its first two numbers. Returns ``None`` when nothing parses.
    """
    if lifespan is None or isinstance(lifespan, bool):
        return None
    if isinstance(lifespan, (int, float)):
        return float(lifespan)

    numbers = [float(n) for n in _NUMBER_RE.findall(str(lifespan))]
    if not numbers:
        return None
    if len(numbers) == 1:
        return numbers[0]
    return (numbers[0] + numbers[1]) / 2
