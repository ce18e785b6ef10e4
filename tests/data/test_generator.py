"""Tests for the synthetic data generator."""

import pytest

from anchorstat.core.correlation import Observation, fit
from anchorstat.data.generator import GenerationMode, generate


class TestGenerate:
    """Tests for generate."""

    def test_count(self) -> None:
        """Test the requested number of responses is produced."""
        assert len(generate(25, seed=0)) == 25
        assert generate(0, seed=0) == []

    def test_types_and_ranges(self) -> None:
        """Test answers are integers inside the survey ranges."""
        for obs in generate(500, anchor_strength=0.9, seed=1):
            assert isinstance(obs, Observation)
            assert isinstance(obs.q1, int) and isinstance(obs.q2, int)
            assert 1 <= obs.q1 <= 100
            assert 0 <= obs.q2 <= 1000

    def test_seed_reproducible(self) -> None:
        """Test the same seed gives the same responses."""
        assert generate(40, seed=7) == generate(40, seed=7)
        assert generate(40, seed=7) != generate(40, seed=8)

    def test_strong_anchor_correlates(self) -> None:
        """Test a strong anchor yields a significant positive correlation."""
        result = fit(generate(200, anchor_strength=0.9, seed=3))
        assert result.r > 0.7
        assert result.p_value < 0.001

    def test_zero_anchor_uncorrelated(self) -> None:
        """Test anchor strength 0 yields a weak correlation."""
        result = fit(generate(300, anchor_strength=0.0, seed=4))
        assert abs(result.r) < 0.2

    def test_random_mode_uncorrelated(self) -> None:
        """Test random mode ignores the anchor."""
        result = fit(generate(300, mode="random", anchor_strength=1.0, seed=5))
        assert abs(result.r) < 0.2

    def test_random_mode_centred_on_reference(self) -> None:
        """Test random estimates centre on the reference answer."""
        result = fit(generate(400, mode=GenerationMode.RANDOM, seed=6, reference_answer=300))
        assert result.mean_y == pytest.approx(300, abs=5)

    def test_clamped_to_upper_range(self) -> None:
        """Test estimates above 1000 are clamped."""
        observations = generate(50, mode="random", seed=2, reference_answer=5000)
        assert all(obs.q2 == 1000 for obs in observations)

    @pytest.mark.parametrize("strength", [-0.1, 1.5])
    def test_invalid_strength(self, strength: float) -> None:
        """Test anchor strength outside [0, 1] is rejected."""
        with pytest.raises(ValueError, match="anchor_strength"):
            generate(10, anchor_strength=strength)

    def test_invalid_mode(self) -> None:
        """Test an unknown mode is rejected."""
        with pytest.raises(ValueError, match="Unknown mode"):
            generate(10, mode="biased")

    def test_negative_count(self) -> None:
        """Test a negative count is rejected."""
        with pytest.raises(ValueError, match="count"):
            generate(-1)
