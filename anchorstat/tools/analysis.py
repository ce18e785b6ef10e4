"""Tabular analysis helpers for survey responses.

This module adapts pandas DataFrames (e.g. CSV exports of a response
table) to the correlation engine:
- Summary statistics for answer columns
- Correlation analysis with input validation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from anchorstat.core.correlation import CorrelationResult, Observation, fit
from anchorstat.core.validation import (
    ObservationValidator,
    ValidationWarning,
    validate_observations,
)

logger = logging.getLogger(__name__)


@dataclass
class StatisticalSummary:
    """Summary statistics for an answer column.

    Attributes:
        parameter: Column name
        count: Number of non-null values
        mean: Arithmetic mean
        median: Median value
        std: Sample standard deviation
        min: Minimum value
        max: Maximum value
    """

    parameter: str
    count: int
    mean: float
    median: float
    std: float
    min: float
    max: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "parameter": self.parameter,
            "count": self.count,
            "mean": self.mean,
            "median": self.median,
            "std": self.std,
            "min": self.min,
            "max": self.max,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        lines = [
            f"**{self.parameter}** (n={self.count})",
            f"  Mean: {self.mean:.4g}",
            f"  Median: {self.median:.4g}",
            f"  Std Dev: {self.std:.4g}",
            f"  Range: [{self.min:.4g}, {self.max:.4g}]",
        ]
        return "\n".join(lines)


@dataclass
class AnalysisResult:
    """Complete result from a tabular analysis.

    Attributes:
        success: Whether analysis completed successfully
        correlation: Correlation result, if computed
        summaries: Summary statistics per answer column
        warnings: Validation warnings raised by the input
        error: Error message if failed
    """

    success: bool
    correlation: CorrelationResult | None = None
    summaries: list[StatisticalSummary] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "correlation": self.correlation.to_dict() if self.correlation else None,
            "summaries": [s.to_dict() for s in self.summaries],
            "warnings": [w.to_dict() for w in self.warnings],
            "error": self.error,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        if not self.success:
            return f"**Analysis Failed:** {self.error}"

        parts = [s.format_for_display() for s in self.summaries]
        if self.correlation is not None:
            parts.append(self.correlation.format_for_display())

        return "\n\n".join(parts) if parts else "No analysis results."


def observations_from_dataframe(
    df: pd.DataFrame,
    x_col: str = "q1",
    y_col: str = "q2",
) -> list[Observation]:
    """Extract (x, y) observations from two DataFrame columns.

    Rows with a missing value in either column are dropped; row order is
    preserved.

    Raises:
        ValueError: If either column is missing
    """
    for col in (x_col, y_col):
        if col not in df.columns:
            raise ValueError(f"Column {col} not found in data")

    clean_df = df[[x_col, y_col]].dropna()
    # tolist() yields native Python scalars
    return [
        Observation(q1=x, q2=y)
        for x, y in zip(clean_df[x_col].tolist(), clean_df[y_col].tolist())
    ]


def summary_statistics(
    df: pd.DataFrame,
    columns: list[str] | None = None,
) -> list[StatisticalSummary]:
    """Compute summary statistics for answer columns.

    Args:
        df: DataFrame of responses
        columns: Columns to summarize (None = all numeric)

    Returns:
        List of summaries, skipping absent columns and those with fewer
        than 2 values
    """
    if columns is None:
        columns = df.select_dtypes(include=[np.number]).columns.tolist()

    summaries = []
    for col in columns:
        if col not in df.columns:
            continue

        data = df[col].dropna()
        if len(data) < 2:
            continue

        summaries.append(StatisticalSummary(
            parameter=col,
            count=len(data),
            mean=float(data.mean()),
            median=float(data.median()),
            std=float(data.std()),
            min=float(data.min()),
            max=float(data.max()),
        ))

    return summaries


def correlation_analysis(
    df: pd.DataFrame,
    x_col: str = "q1",
    y_col: str = "q2",
    reference_value: float | None = None,
    validator: ObservationValidator | None = None,
) -> AnalysisResult:
    """Compute the anchoring correlation between two columns.

    Args:
        df: DataFrame of responses
        x_col: Anchor column
        y_col: Estimate column
        reference_value: True answer to mention in the interpretation
        validator: Validator for the answers (defaults to settings ranges)

    Returns:
        AnalysisResult with correlation and summaries

    Example:
        >>> df = pd.DataFrame({"q1": [10, 50, 90], "q2": [20, 54, 80]})
        >>> result = correlation_analysis(df, reference_value=54)
        >>> result.correlation.n
        3
    """
    try:
        observations = observations_from_dataframe(df, x_col, y_col)
    except ValueError as e:
        return AnalysisResult(success=False, error=str(e))

    validation = validate_observations(observations, validator)
    if not validation.is_valid:
        logger.info(
            f"Rejected {len(observations)} observations: "
            f"{len(validation.warnings)} validation warning(s)"
        )
        return AnalysisResult(
            success=False,
            warnings=validation.warnings,
            error="Observations failed validation",
        )

    result = fit(validation.observations, reference_value=reference_value)

    return AnalysisResult(
        success=True,
        correlation=result,
        summaries=summary_statistics(df, [x_col, y_col]),
        warnings=validation.warnings,
    )
