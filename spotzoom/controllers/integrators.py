def decay(value, dt: float, rate: float):
    """Exponential approach to zero: value -= value * dt * rate.

    The step is capped at the full value so a long frame (window drag, stall)
    settles the velocity instead of flipping its sign. Works on floats and numpy arrays.
    """
    return value - value * min(max(dt, 0.0) * rate, 1.0)


def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(max_val, value))
