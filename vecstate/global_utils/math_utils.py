from typing import Union

import numpy as np

Numeric = Union[float, np.ndarray]


def lerp(a: Numeric, b: Numeric, t: float) -> Numeric:
    """Linearly interpolate from ``a`` to ``b`` by ``t``.

    Args:
        a (float | np.ndarray): Start value(s).
        b (float | np.ndarray): End value(s), broadcast against ``a``.
        t (float): Interpolation amount. Not clamped, so values outside [0, 1] extrapolate.

    Returns:
        float | np.ndarray: ``a + (b - a) * t``, element-wise for arrays.
    """
    return a + (b - a) * t


def clamp(value: Numeric, lower: Numeric, upper: Numeric) -> Numeric:
    """Clamp ``value`` to the inclusive range [lower, upper].

    Evaluated as ``max(lower, min(upper, value))``, so when ``lower > upper`` the lower bound wins.
    Works element-wise on numpy arrays.
    """
    if isinstance(value, np.ndarray):
        return np.maximum(lower, np.minimum(upper, value))
    return max(lower, min(upper, value))
