# utils.py
"""
Small numeric helpers shared by the layout and the particle physics.
"""


def clamp(value: float, low: float, high: float) -> float:
    """Restricts value to the closed interval [low, high]."""
    return max(low, min(high, value))


def map_range(value: float, in_min: float, in_max: float,
              out_min: float, out_max: float, clamp_output: bool = False) -> float:
    """
    Linearly remaps value from [in_min, in_max] to [out_min, out_max].

    The result is extrapolated outside the input range unless clamp_output is
    set, in which case it is held within the output range.
    """
    if in_max == in_min:
        return out_min
    out = (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min
    if clamp_output:
        if out_min < out_max:
            out = clamp(out, out_min, out_max)
        else:
            out = clamp(out, out_max, out_min)
    return out


def quad_out(t: float) -> float:
    """Quadratic ease-out over t in [0, 1]."""
    return -t * (t - 2.0)
