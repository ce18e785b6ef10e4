"""Tests for the interpretation module."""

import pytest

from anchorstat.core.correlation import fit
from anchorstat.core.interpretation import (
    Strength,
    classify_direction,
    classify_strength,
    describe,
    is_significant,
)


class TestClassification:
    """Tests for strength, direction and significance classification."""

    @pytest.mark.parametrize(
        "r, expected",
        [
            (1.0, Strength.STRONG),
            (0.7, Strength.STRONG),
            (-0.85, Strength.STRONG),
            (0.69, Strength.MODERATE),
            (0.4, Strength.MODERATE),
            (-0.5, Strength.MODERATE),
            (0.39, Strength.WEAK),
            (0.2, Strength.WEAK),
            (-0.25, Strength.WEAK),
            (0.19, Strength.NEGLIGIBLE),
            (0.0, Strength.NEGLIGIBLE),
            (-0.1, Strength.NEGLIGIBLE),
        ],
    )
    def test_strength(self, r: float, expected: Strength) -> None:
        """Test strength thresholds on |r|."""
        assert classify_strength(r) == expected

    def test_direction(self) -> None:
        """Test zero counts as positive."""
        assert classify_direction(0.3) == "positive"
        assert classify_direction(0.0) == "positive"
        assert classify_direction(-0.01) == "negative"

    def test_significance_threshold(self) -> None:
        """Test p must be strictly below the level."""
        assert is_significant(0.049)
        assert not is_significant(0.05)
        assert is_significant(0.05, significance_level=0.1)


class TestDescribe:
    """Tests for the narrative composer."""

    def test_significant_narrative(self) -> None:
        """Test a strong significant result."""
        text = describe(0.82, 0.0004, 48.5, 55.31, reference_value=54)
        assert "strong positive correlation" in text
        assert "r = 0.8200" in text
        assert "IS statistically significant" in text
        assert "p = 0.000400" in text
        assert "The actual answer is 54." in text
        assert "Mean Q1 (anchor): 48.5" in text
        assert "Mean Q2 (estimate): 55.3" in text

    def test_not_significant_narrative(self) -> None:
        """Test a negligible non-significant result."""
        text = describe(-0.05, 0.81, 50.0, 54.0)
        assert "negligible negative correlation" in text
        assert "NOT statistically significant" in text
        assert "More data may be needed" in text
        assert "actual answer" not in text

    def test_deterministic(self) -> None:
        """Test identical inputs give identical text."""
        args = (0.45, 0.03, 40.0, 60.0)
        assert describe(*args, reference_value=54) == describe(*args, reference_value=54)

    def test_custom_reference(self) -> None:
        """Test the reference value comes from the caller."""
        text = describe(0.3, 0.2, 10.0, 20.0, reference_value=193)
        assert "The actual answer is 193." in text


class TestFitInterpretation:
    """Tests for narratives produced through fit."""

    def test_strong_positive_significant(self) -> None:
        """Test a clearly anchored dataset."""
        data = list(zip(range(1, 11), [2, 4, 5, 8, 9, 12, 14, 15, 18, 20]))
        result = fit(data)
        assert "strong" in result.interpretation
        assert "positive" in result.interpretation
        assert "IS statistically significant" in result.interpretation

    def test_weak_not_significant(self) -> None:
        """Test a noisy dataset."""
        result = fit(list(zip([1, 2, 3, 4, 5, 6], [3, 1, 4, 2, 5, 3])))
        assert result.p_value >= 0.05
        assert "NOT statistically significant" in result.interpretation
        if abs(result.r) < 0.2:
            assert "negligible" in result.interpretation
