"""Visualization tools for anchorstat.

This module contains:
- Scatter plot with fitted regression line
- Anchor-ordered line plot
"""

from anchorstat.visualization.plots import (
    PlotResult,
    create_anchor_line_plot,
    create_scatter_plot,
)

__all__ = [
    "PlotResult",
    "create_anchor_line_plot",
    "create_scatter_plot",
]
