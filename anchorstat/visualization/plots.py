"""Visualization of anchoring survey results.

This module provides the two charts shown alongside a correlation
analysis:
- Scatter plot of estimates against anchors with the fitted line
- Line plot of estimates ordered by anchor

All plots are generated using Plotly for interactivity.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
import plotly.graph_objects as go

from anchorstat.core.correlation import (
    CorrelationResult,
    ObservationLike,
    coerce_observations,
    fit,
)


@dataclass
class PlotResult:
    """Result from a plot generation function.

    Attributes:
        figure: Plotly figure object
        title: Plot title
        description: Description of what the plot shows
        data_summary: Summary of data used
    """

    figure: go.Figure
    title: str
    description: str
    data_summary: dict[str, Any]

    def to_html(self, include_plotlyjs: bool = True) -> str:
        """Convert figure to HTML string.

        Args:
            include_plotlyjs: Include Plotly.js library in HTML

        Returns:
            HTML string
        """
        return self.figure.to_html(
            include_plotlyjs="cdn" if include_plotlyjs else False,
            full_html=False,
        )

    def to_json(self) -> str:
        """Convert figure to JSON for frontend rendering."""
        return self.figure.to_json()


def _as_arrays(observations: Iterable[ObservationLike]) -> tuple[np.ndarray, np.ndarray]:
    points = coerce_observations(observations)
    if not points:
        raise ValueError("No observations to plot")

    x = np.array([p.q1 for p in points], dtype=float)
    y = np.array([p.q2 for p in points], dtype=float)
    return x, y


def create_scatter_plot(
    observations: Iterable[ObservationLike],
    result: CorrelationResult | None = None,
    reference_value: float | None = None,
    title: str = "Estimate vs Anchor",
) -> PlotResult:
    """Create a scatter plot of estimates against anchors.

    Args:
        observations: (q1, q2) pairs
        result: Precomputed correlation result (fitted if omitted)
        reference_value: Draw a horizontal line at the true answer
        title: Plot title

    Returns:
        PlotResult with scatter plot

    Raises:
        ValueError: If there are no observations
    """
    observations = coerce_observations(observations)
    x, y = _as_arrays(observations)

    if result is None:
        result = fit(observations)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x,
        y=y,
        mode="markers",
        marker=dict(size=8, opacity=0.7),
        hovertemplate="Q1 = %{x}<br>Q2 = %{y}<extra></extra>",
        name="Responses",
    ))

    if result.regression is not None:
        reg = result.regression
        fig.add_trace(go.Scatter(
            x=[reg.x_min, reg.x_max],
            y=[reg.y_at_x_min, reg.y_at_x_max],
            mode="lines",
            line=dict(color="red", dash="dash"),
            name=f"Fit (slope={reg.slope:.2f}, r={reg.r:.2f})",
        ))

    if reference_value is not None:
        fig.add_hline(
            y=reference_value,
            line=dict(color="green", dash="dot"),
            annotation_text=f"Actual answer ({reference_value:g})",
        )

    fig.update_layout(
        title=dict(text=title, x=0.5),
        xaxis_title="Q1 (anchor)",
        yaxis_title="Q2 (estimate)",
        template="plotly_white",
        hovermode="closest",
    )

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Scatter plot of {len(x)} estimates against their anchors",
        data_summary={
            "n_points": len(x),
            "r": result.r,
            "p_value": result.p_value,
        },
    )


def create_anchor_line_plot(
    observations: Iterable[ObservationLike],
    title: str = "Estimates Ordered by Anchor",
) -> PlotResult:
    """Create a line plot of estimates sorted by anchor value.

    Args:
        observations: (q1, q2) pairs
        title: Plot title

    Returns:
        PlotResult with line plot

    Raises:
        ValueError: If there are no observations
    """
    x, y = _as_arrays(observations)
    order = np.argsort(x, kind="stable")

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x[order],
        y=y[order],
        mode="lines+markers",
        name="Q2 (estimate)",
    ))

    fig.update_layout(
        title=dict(text=title, x=0.5),
        xaxis_title="Q1 (anchor)",
        yaxis_title="Q2 (estimate)",
        template="plotly_white",
    )

    return PlotResult(
        figure=fig,
        title=title,
        description=f"Line plot of {len(x)} estimates ordered by anchor",
        data_summary={
            "n_points": len(x),
            "anchor_range": [float(x.min()), float(x.max())],
        },
    )
