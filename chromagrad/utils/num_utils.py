def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Clamp a float into the inclusive range ``[lower, upper]``."""
    return max(lower, min(upper, value))


def remap(t: float, a: float, b: float, c: float, d: float) -> float:
    """Map ``t`` from the range ``[a, b]`` onto ``[c, d]``."""
    return (t - a) * ((d - c) / (b - a)) + c
