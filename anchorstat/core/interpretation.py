"""Narrative interpretation of correlation results."""

from __future__ import annotations

from enum import Enum

SIGNIFICANCE_LEVEL = 0.05

INSUFFICIENT_DATA_MESSAGE = "Need at least 3 data points for correlation analysis."


class Strength(str, Enum):
    """Effect-size categories for |r|."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    NEGLIGIBLE = "negligible"


# Lower bounds on |r|, checked in order
STRENGTH_THRESHOLDS = (
    (0.7, Strength.STRONG),
    (0.4, Strength.MODERATE),
    (0.2, Strength.WEAK),
)


def classify_strength(r: float) -> Strength:
    """Classify the magnitude of a correlation coefficient."""
    abs_r = abs(r)
    for threshold, strength in STRENGTH_THRESHOLDS:
        if abs_r >= threshold:
            return strength
    return Strength.NEGLIGIBLE


def classify_direction(r: float) -> str:
    """Return "positive" for r >= 0, otherwise "negative"."""
    return "positive" if r >= 0 else "negative"


def is_significant(p_value: float, significance_level: float = SIGNIFICANCE_LEVEL) -> bool:
    """Check a two-tailed p-value against the significance level."""
    return p_value < significance_level


def describe(
    r: float,
    p_value: float,
    mean_x: float,
    mean_y: float,
    reference_value: float | None = None,
    significance_level: float = SIGNIFICANCE_LEVEL,
) -> str:
    """Compose the narrative summary for a correlation result.

    Args:
        r: Pearson correlation coefficient
        p_value: Two-tailed p-value
        mean_x: Mean anchor answer (Q1)
        mean_y: Mean estimate (Q2)
        reference_value: True answer to the estimation question, if the
            caller wants it mentioned
        significance_level: Threshold below which p is significant

    Returns:
        Human-readable interpretation

    Example:
        >>> describe(0.75, 0.001, 50.0, 60.0, reference_value=54)[:42]
        'There is a strong positive correlation (r '
    """
    strength = classify_strength(r)
    direction = classify_direction(r)

    parts = [
        f"There is a {strength.value} {direction} correlation (r = {r:.4f}) "
        f"between the anchor number (Q1) and the estimate (Q2)."
    ]

    if is_significant(p_value, significance_level):
        parts.append(
            f"This correlation IS statistically significant "
            f"(p = {p_value:.6f}, p < {significance_level:g}), "
            f"supporting the anchoring effect hypothesis."
        )
    else:
        parts.append(
            f"This correlation is NOT statistically significant "
            f"(p = {p_value:.6f}, p >= {significance_level:g}). "
            f"More data may be needed."
        )

    if reference_value is not None:
        parts.append(f"The actual answer is {reference_value:g}.")

    parts.append(f"Mean Q1 (anchor): {mean_x:.1f}, Mean Q2 (estimate): {mean_y:.1f}.")

    return " ".join(parts)
