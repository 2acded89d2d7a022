"""Sampling and inversion of normalized cubic Bezier curves.

All curves start at (0, 0) and end at (1, 1); only the two control points
vary. These helpers back curve visualization and any per-frame resampling
of eased segments.
"""

from typing import NamedTuple

NEWTON_ITERATIONS = 10
NEWTON_EPSILON = 0.0001
# Slopes flatter than this stop Newton-Raphson instead of dividing by them
DERIVATIVE_EPSILON = 1e-6
BISECTION_ITERATIONS = 50


class Point(NamedTuple):
    x: float
    y: float


def _bernstein(p1: float, p2: float, t: float) -> float:
    mt = 1 - t
    return 3 * mt * mt * t * p1 + 3 * mt * t * t * p2 + t * t * t


def _bernstein_derivative(p1: float, p2: float, t: float) -> float:
    mt = 1 - t
    return 3 * mt * mt * p1 + 6 * mt * t * (p2 - p1) + 3 * t * t * (1 - p2)


def sample_cubic_bezier(x1: float, y1: float, x2: float, y2: float, t: float) -> Point:
    """Evaluate the curve at parameter t in [0, 1].

    Returns:
        Point on the curve
    """
    return Point(_bernstein(x1, x2, t), _bernstein(y1, y2, t))


def generate_curve_points(x1: float, y1: float, x2: float, y2: float, num_points: int = 64) -> list[Point]:
    """Sample ``num_points + 1`` evenly spaced parameter values, endpoints included."""
    return [sample_cubic_bezier(x1, y1, x2, y2, i / num_points) for i in range(num_points + 1)]


def bezier_y_for_x(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    target_x: float,
    epsilon: float = NEWTON_EPSILON,
) -> float:
    """Find the curve's y at a given x (progress at a given time fraction).

    Newton-Raphson on the x parameterization, starting from t = target_x and
    clamping t to [0, 1] at every step. A near-zero slope ends the iteration
    early. If Newton has not converged, bisection finishes the job; x(t) is
    monotonic whenever x1 and x2 lie in [0, 1].

    Args:
        x1, y1, x2, y2: Control points
        target_x: x in [0, 1]
        epsilon: Accepted residual on x

    Returns:
        y at target_x
    """
    target_x = max(0.0, min(1.0, target_x))
    t = target_x

    for _ in range(NEWTON_ITERATIONS):
        dx = _bernstein(x1, x2, t) - target_x
        if abs(dx) < epsilon:
            return _bernstein(y1, y2, t)
        slope = _bernstein_derivative(x1, x2, t)
        if abs(slope) < DERIVATIVE_EPSILON:
            break
        t = max(0.0, min(1.0, t - dx / slope))

    if abs(_bernstein(x1, x2, t) - target_x) >= epsilon:
        t = _bisect(x1, x2, target_x, epsilon)

    return _bernstein(y1, y2, t)


def _bisect(x1: float, x2: float, target_x: float, epsilon: float) -> float:
    low, high = 0.0, 1.0
    t = target_x
    for _ in range(BISECTION_ITERATIONS):
        t = (low + high) / 2
        x = _bernstein(x1, x2, t)
        if abs(x - target_x) < epsilon:
            break
        if x < target_x:
            low = t
        else:
            high = t
    return t


def has_overshoot(y1: float, y2: float) -> bool:
    """True when a control point leaves the [0, 1] value band."""
    return y1 < 0 or y1 > 1 or y2 < 0 or y2 > 1


def get_y_range(x1: float, y1: float, x2: float, y2: float) -> tuple[float, float]:
    """Return (min, max) of the curve's y, always including 0 and 1."""
    low, high = 0.0, 1.0
    for point in generate_curve_points(x1, y1, x2, y2, 100):
        low = min(low, point.y)
        high = max(high, point.y)
    return low, high
