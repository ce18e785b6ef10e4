"""Tests for visualization plots module."""

import pytest

from anchorstat.core.correlation import fit
from anchorstat.data.generator import generate
from anchorstat.visualization.plots import (
    PlotResult,
    create_anchor_line_plot,
    create_scatter_plot,
)


@pytest.fixture
def responses() -> list:
    """Create synthetic responses for plotting."""
    return generate(50, anchor_strength=0.5, seed=42)


class TestPlotResult:
    """Tests for PlotResult dataclass."""

    def test_create_result(self, responses: list) -> None:
        """Test that PlotResult has expected attributes."""
        result = create_scatter_plot(responses)
        assert isinstance(result, PlotResult)
        assert hasattr(result, "figure")
        assert hasattr(result, "title")
        assert hasattr(result, "description")
        assert hasattr(result, "data_summary")

    def test_to_html(self, responses: list) -> None:
        """Test converting to HTML."""
        html = create_anchor_line_plot(responses).to_html()
        assert isinstance(html, str)
        assert len(html) > 0

    def test_to_json(self, responses: list) -> None:
        """Test converting to JSON."""
        json_str = create_anchor_line_plot(responses).to_json()
        assert isinstance(json_str, str)
        assert "data" in json_str


class TestScatterPlot:
    """Tests for create_scatter_plot."""

    def test_includes_regression(self, responses: list) -> None:
        """Test the fitted line is drawn between the x extremes."""
        result = create_scatter_plot(responses)
        assert len(result.figure.data) == 2

        line = result.figure.data[1]
        reg = fit(responses).regression
        assert list(line.x) == [reg.x_min, reg.x_max]
        assert list(line.y) == pytest.approx([reg.y_at_x_min, reg.y_at_x_max])

    def test_uses_given_result(self, responses: list) -> None:
        """Test a precomputed result is used for the summary."""
        result = fit(responses)
        plot = create_scatter_plot(responses, result=result)
        assert plot.data_summary["r"] == result.r
        assert plot.data_summary["n_points"] == 50

    def test_insufficient_data_has_no_line(self) -> None:
        """Test fewer than three points draws markers only."""
        result = create_scatter_plot([(10, 20), (30, 40)])
        assert len(result.figure.data) == 1
        assert result.data_summary["r"] is None

    def test_reference_line(self, responses: list) -> None:
        """Test the reference answer is drawn as a horizontal line."""
        result = create_scatter_plot(responses, reference_value=54)
        shapes = result.figure.layout.shapes
        assert len(shapes) == 1
        assert shapes[0].y0 == 54

    def test_empty_raises(self) -> None:
        """Test empty input raises ValueError."""
        with pytest.raises(ValueError, match="No observations"):
            create_scatter_plot([])


class TestAnchorLinePlot:
    """Tests for create_anchor_line_plot."""

    def test_sorted_by_anchor(self) -> None:
        """Test points are ordered by anchor value."""
        result = create_anchor_line_plot([(30, 1), (10, 2), (20, 3)])
        trace = result.figure.data[0]
        assert list(trace.x) == [10, 20, 30]
        assert list(trace.y) == [2, 3, 1]
        assert result.data_summary["anchor_range"] == [10.0, 30.0]

    def test_empty_raises(self) -> None:
        """Test empty input raises ValueError."""
        with pytest.raises(ValueError):
            create_anchor_line_plot([])
