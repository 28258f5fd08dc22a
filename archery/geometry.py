"""Small numeric helpers shared by the game objects."""

_PI_APPROX = 3.14159


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians, using the game's approximation of pi."""
    return degrees * _PI_APPROX / 180.0