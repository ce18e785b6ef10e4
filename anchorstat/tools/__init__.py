"""Tabular analysis tools for anchorstat.

This module contains:
- correlation_analysis: Validate and analyze a response DataFrame
- summary_statistics: Compute per-column summaries
- observations_from_dataframe: Extract (q1, q2) pairs
"""

from anchorstat.tools.analysis import (
    AnalysisResult,
    StatisticalSummary,
    correlation_analysis,
    observations_from_dataframe,
    summary_statistics,
)

__all__ = [
    "AnalysisResult",
    "StatisticalSummary",
    "correlation_analysis",
    "observations_from_dataframe",
    "summary_statistics",
]
