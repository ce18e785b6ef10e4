"""Pearson correlation and least-squares regression for survey responses.

The engine takes an ordered collection of (q1, q2) pairs and returns an
immutable CorrelationResult. It performs no I/O, holds no state, and never
raises for numeric input: degenerate cases map to well-defined values
(None for n < 3, r = 0 for zero variance, infinite t and p = 0 for a
perfect fit).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from anchorstat.core.interpretation import (
    INSUFFICIENT_DATA_MESSAGE,
    SIGNIFICANCE_LEVEL,
    describe,
)
from anchorstat.core.special import t_two_tailed_p_value

logger = logging.getLogger(__name__)


# Decimal places used when serializing results for display
R_DECIMALS = 6
P_VALUE_DECIMALS = 8
T_DECIMALS = 4
MEAN_DECIMALS = 2
COEFFICIENT_DECIMALS = 4
FITTED_Y_DECIMALS = 2
REGRESSION_R_DECIMALS = 4

MIN_OBSERVATIONS = 3


@dataclass(frozen=True)
class Observation:
    """A single survey response.

    Attributes:
        q1: Anchor answer (x)
        q2: Estimate (y)
    """

    q1: float
    q2: float

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {"q1": self.q1, "q2": self.q2}


ObservationLike = Union[Observation, Sequence[float], Mapping[str, Any]]


def coerce_observation(item: ObservationLike) -> Observation:
    """Convert a tuple, mapping or Observation into an Observation.

    Mappings may use either ``q1``/``q2`` or the storage column names
    ``q1_answer``/``q2_answer``.

    Raises:
        ValueError: If the item cannot be interpreted as a pair
    """
    if isinstance(item, Observation):
        return item

    if isinstance(item, Mapping):
        for x_key, y_key in (("q1", "q2"), ("q1_answer", "q2_answer")):
            if x_key in item and y_key in item:
                return Observation(q1=item[x_key], q2=item[y_key])
        raise ValueError(f"Observation mapping needs q1/q2 keys, got {sorted(item)}")

    if isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
        if len(item) != 2:
            raise ValueError(f"Observation must be a pair, got {len(item)} values")
        return Observation(q1=item[0], q2=item[1])

    raise ValueError(f"Cannot interpret {type(item).__name__} as an observation")


def coerce_observations(items: Iterable[ObservationLike]) -> list[Observation]:
    """Convert an iterable of observation-like items, preserving order."""
    return [coerce_observation(item) for item in items]


def _round(value: float | None, decimals: int) -> float | None:
    if value is None or math.isinf(value):
        return value
    return round(value, decimals)


def _json_number(value: float | None) -> float | str | None:
    """Map infinities to strings so the result stays JSON-safe."""
    if value is not None and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


@dataclass(frozen=True)
class RegressionLine:
    """Ordinary least-squares fit of q2 on q1.

    Attributes:
        slope: Fitted slope
        intercept: Fitted intercept
        x_min: Smallest observed q1
        x_max: Largest observed q1
        y_at_x_min: Fitted q2 at x_min
        y_at_x_max: Fitted q2 at x_max
        r: Pearson correlation coefficient of the same data
    """

    slope: float
    intercept: float
    x_min: float
    x_max: float
    y_at_x_min: float
    y_at_x_max: float
    r: float

    def predict(self, x: float) -> float:
        """Evaluate the fitted line at x."""
        return self.slope * x + self.intercept

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with display rounding."""
        return {
            "slope": _round(self.slope, COEFFICIENT_DECIMALS),
            "intercept": _round(self.intercept, COEFFICIENT_DECIMALS),
            "xMin": self.x_min,
            "xMax": self.x_max,
            "yAtXMin": _round(self.y_at_x_min, FITTED_Y_DECIMALS),
            "yAtXMax": _round(self.y_at_x_max, FITTED_Y_DECIMALS),
            "r": _round(self.r, REGRESSION_R_DECIMALS),
        }


@dataclass(frozen=True)
class CorrelationResult:
    """Result from correlation analysis.

    Values are kept at full precision; rounding is applied only by
    ``to_dict`` and ``format_for_display``.

    Attributes:
        r: Pearson correlation coefficient (None if n < 3)
        p_value: Two-tailed p-value (None if n < 3)
        t_statistic: t statistic, possibly infinite (None if n < 3)
        degrees_of_freedom: n - 2 (0 when n < 2)
        n: Number of observations
        mean_x: Mean q1
        mean_y: Mean q2
        interpretation: Human-readable interpretation
        regression: Least-squares line (None if n < 3)
    """

    r: float | None
    p_value: float | None
    t_statistic: float | None
    degrees_of_freedom: int
    n: int
    mean_x: float
    mean_y: float
    interpretation: str
    regression: RegressionLine | None = None

    @property
    def is_sufficient(self) -> bool:
        """Whether enough data was available to compute r."""
        return self.r is not None

    def is_significant(self, significance_level: float = SIGNIFICANCE_LEVEL) -> bool:
        """Check whether the correlation is significant."""
        return self.p_value is not None and self.p_value < significance_level

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire format consumed by the presentation layer."""
        return {
            "r": _round(self.r, R_DECIMALS),
            "pValue": _round(self.p_value, P_VALUE_DECIMALS),
            "tStatistic": _json_number(_round(self.t_statistic, T_DECIMALS)),
            "degreesOfFreedom": self.degrees_of_freedom,
            "n": self.n,
            "meanQ1": _round(self.mean_x, MEAN_DECIMALS),
            "meanQ2": _round(self.mean_y, MEAN_DECIMALS),
            "interpretation": self.interpretation,
            "regression": self.regression.to_dict() if self.regression else None,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        if not self.is_sufficient:
            return f"**Correlation** (n={self.n})\n  {self.interpretation}"

        lines = [
            f"**Correlation: Q1 vs Q2** (n={self.n})",
            f"  Pearson r = {self.r:.3f} (p = {self.p_value:.2e})",
            f"  t = {self.t_statistic:.4g} (df = {self.degrees_of_freedom})",
        ]
        if self.regression is not None:
            lines.append(
                f"  Fit: Q2 = {self.regression.slope:.4g} * Q1 "
                f"+ {self.regression.intercept:.4g}"
            )
        lines.append(f"  {self.interpretation}")
        return "\n".join(lines)


def pearson_r(n: int, sum_x: float, sum_y: float, sum_xy: float, sum_x2: float, sum_y2: float) -> float:
    """Pearson r from raw sums; 0.0 when either variable is constant."""
    numerator = n * sum_xy - sum_x * sum_y
    variance_product = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if variance_product <= 0:
        return 0.0

    r = numerator / math.sqrt(variance_product)
    return max(-1.0, min(1.0, r))


def t_statistic(r: float, df: int) -> float:
    """t statistic for H0: rho = 0; signed infinity when |r| = 1."""
    r_squared = r * r
    if r_squared >= 1.0:
        return math.copysign(math.inf, r)
    return r * math.sqrt(df) / math.sqrt(1.0 - r_squared)


def fit(
    observations: Iterable[ObservationLike],
    reference_value: float | None = None,
    significance_level: float = SIGNIFICANCE_LEVEL,
) -> CorrelationResult:
    """Fit Pearson correlation, t-test and least-squares line.

    Args:
        observations: Ordered (q1, q2) pairs
        reference_value: True answer to mention in the interpretation
        significance_level: Threshold used by the interpretation

    Returns:
        CorrelationResult
    """
    points = coerce_observations(observations)
    n = len(points)

    xs = [float(p.q1) for p in points]
    ys = [float(p.q2) for p in points]
    sum_x = math.fsum(xs)
    sum_y = math.fsum(ys)
    mean_x = sum_x / n if n else 0.0
    mean_y = sum_y / n if n else 0.0

    if n < MIN_OBSERVATIONS:
        logger.debug(f"Insufficient data for correlation: n={n}")
        return CorrelationResult(
            r=None,
            p_value=None,
            t_statistic=None,
            degrees_of_freedom=max(n - 2, 0),
            n=n,
            mean_x=mean_x,
            mean_y=mean_y,
            interpretation=INSUFFICIENT_DATA_MESSAGE,
            regression=None,
        )

    sum_xy = math.fsum(x * y for x, y in zip(xs, ys))
    sum_x2 = math.fsum(x * x for x in xs)
    sum_y2 = math.fsum(y * y for y in ys)

    # Raw sums leave a rounding residue for constant non-integer columns
    x_constant = min(xs) == max(xs)
    y_constant = min(ys) == max(ys)
    if x_constant or y_constant:
        r = 0.0
    else:
        r = pearson_r(n, sum_x, sum_y, sum_xy, sum_x2, sum_y2)

    df = n - 2
    t = t_statistic(r, df)
    p_value = t_two_tailed_p_value(t, df)

    slope_denominator = n * sum_x2 - sum_x * sum_x
    if x_constant or y_constant or slope_denominator <= 0:
        slope = 0.0
    else:
        slope = (n * sum_xy - sum_x * sum_y) / slope_denominator
    intercept = mean_y - slope * mean_x

    x_min = min(p.q1 for p in points)
    x_max = max(p.q1 for p in points)
    regression = RegressionLine(
        slope=slope,
        intercept=intercept,
        x_min=x_min,
        x_max=x_max,
        y_at_x_min=slope * x_min + intercept,
        y_at_x_max=slope * x_max + intercept,
        r=r,
    )

    logger.debug(f"Fitted n={n}: r={r:.6f}, t={t:.4f}, p={p_value:.3e}")

    return CorrelationResult(
        r=r,
        p_value=p_value,
        t_statistic=t,
        degrees_of_freedom=df,
        n=n,
        mean_x=mean_x,
        mean_y=mean_y,
        interpretation=describe(
            r,
            p_value,
            mean_x,
            mean_y,
            reference_value=reference_value,
            significance_level=significance_level,
        ),
        regression=regression,
    )


def analyze(
    observations: Iterable[ObservationLike],
    reference_value: float | None = None,
) -> CorrelationResult:
    """Analyze survey responses for an anchoring correlation.

    This is the engine's entry point.

    Example:
        >>> result = analyze([(1, 2), (2, 3), (3, 8)])
        >>> round(result.r, 4)
        0.9332
    """
    return fit(observations, reference_value=reference_value)
