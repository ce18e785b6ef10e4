"""Special functions for significance testing.

This module implements, without any external math library:
- Log-gamma via the Lanczos approximation (g=7, 9 terms)
- The regularized incomplete beta function I_x(a, b), evaluated as a
  continued fraction with the modified Lentz method
- The two-tailed p-value of a Student t statistic

Accuracy target is double precision: ln_gamma agrees with tabulated values
to ~15 digits and incomplete_beta to ~1e-10 relative.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


# Lanczos coefficients for g=7, n=9
LANCZOS_G = 7
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)
HALF_LN_TWO_PI = 0.5 * math.log(2 * math.pi)

# Continued fraction controls
CF_MAX_ITERATIONS = 200  # even/odd term pairs
CF_EPSILON = 1e-10
CF_TINY = 1e-30


def ln_gamma(z: float) -> float:
    """Natural logarithm of the Gamma function.

    Uses the reflection formula for z < 0.5, which hands a value >= 0.5
    back to the Lanczos series, so recursion depth is at most one.

    Args:
        z: Positive real number

    Returns:
        ln Gamma(z)

    Example:
        >>> round(ln_gamma(5.0), 12) == round(math.log(24.0), 12)
        True
    """
    if z < 0.5:
        return math.log(math.pi / math.sin(math.pi * z)) - ln_gamma(1.0 - z)

    z -= 1.0
    series = LANCZOS_COEFFICIENTS[0]
    for i in range(1, len(LANCZOS_COEFFICIENTS)):
        series += LANCZOS_COEFFICIENTS[i] / (z + i)

    t = z + LANCZOS_G + 0.5
    return HALF_LN_TWO_PI + (z + 0.5) * math.log(t) - t + math.log(series)


def ln_beta(a: float, b: float) -> float:
    """Natural logarithm of the complete Beta function B(a, b)."""
    return ln_gamma(a) + ln_gamma(b) - ln_gamma(a + b)


def _floor_tiny(value: float) -> float:
    if abs(value) < CF_TINY:
        return CF_TINY
    return value


def beta_continued_fraction(x: float, a: float, b: float) -> float:
    """Evaluate the continued fraction for I_x(a, b) by Lentz's method.

    The fraction is 1 / (1 + d1 / (1 + d2 / (1 + ...))) with

        d(2m+1) = -(a+m)(a+b+m) x / ((a+2m)(a+2m+1))
        d(2m)   =  m(b-m) x / ((a+2m-1)(a+2m))

    Args:
        x: Evaluation point, expected in (0, (a+1)/(a+b+2))
        a: First shape parameter (> 0)
        b: Second shape parameter (> 0)

    Returns:
        Value of the continued fraction
    """
    c = 1.0
    d = 0.0
    f = 1.0

    for j in range(1, 2 * CF_MAX_ITERATIONS + 2):
        m = j // 2
        if j % 2:
            term = -(a + m) * (a + b + m) * x / ((a + 2 * m) * (a + 2 * m + 1))
        else:
            term = m * (b - m) * x / ((a + 2 * m - 1) * (a + 2 * m))

        d = 1.0 / _floor_tiny(1.0 + term * d)
        c = _floor_tiny(1.0 + term / c)
        delta = d * c
        f *= delta

        if abs(delta - 1.0) < CF_EPSILON:
            break
    else:
        logger.debug(
            f"Continued fraction did not converge for x={x}, a={a}, b={b}; "
            f"returning last estimate"
        )

    return 1.0 / f


def incomplete_beta(x: float, a: float, b: float) -> float:
    """Regularized incomplete beta function I_x(a, b).

    The continued fraction converges quickly only for
    x < (a+1)/(a+b+2); beyond that point the symmetry
    I_x(a, b) = 1 - I_{1-x}(b, a) is used, which always lands back in
    the fast region.

    Args:
        x: Upper integration limit in [0, 1]
        a: First shape parameter (> 0)
        b: Second shape parameter (> 0)

    Returns:
        I_x(a, b) in [0, 1]
    """
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    # Log space keeps the prefix finite for large a and b
    prefix = math.exp(a * math.log(x) + b * math.log(1.0 - x) - ln_beta(a, b))

    if x < (a + 1.0) / (a + b + 2.0):
        return prefix * beta_continued_fraction(x, a, b) / a

    return 1.0 - prefix * beta_continued_fraction(1.0 - x, b, a) / b


def t_two_tailed_p_value(t: float, df: float) -> float:
    """Two-tailed p-value for a Student t statistic.

    I_{df/(df+t^2)}(df/2, 1/2) is already the two-tailed probability
    P(|T| >= |t|), so the result is not doubled.

    Args:
        t: t statistic (may be infinite)
        df: Degrees of freedom (> 0)

    Returns:
        p-value in [0, 1]
    """
    if math.isinf(t):
        return 0.0
    if t == 0.0:
        return 1.0

    x = df / (df + t * t)
    p = incomplete_beta(x, df / 2.0, 0.5)
    return min(1.0, max(0.0, p))
