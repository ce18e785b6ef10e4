"""Core functionality for anchorstat.

This module contains:
- Log-gamma and regularized incomplete beta evaluation
- Pearson correlation, t-test and least-squares fitting
- Narrative interpretation of results
- Observation validation
"""

from anchorstat.core.correlation import (
    CorrelationResult,
    Observation,
    RegressionLine,
    analyze,
    fit,
)
from anchorstat.core.interpretation import Strength, describe
from anchorstat.core.special import incomplete_beta, ln_gamma, t_two_tailed_p_value

__all__ = [
    "CorrelationResult",
    "Observation",
    "RegressionLine",
    "Strength",
    "analyze",
    "describe",
    "fit",
    "incomplete_beta",
    "ln_gamma",
    "t_two_tailed_p_value",
]


def __getattr__(name: str):
    """Lazy imports for validation helpers."""
    if name in ("ObservationValidator", "ValidationResult", "validate_observations"):
        from anchorstat.core import validation

        return getattr(validation, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
