"""Pytest configuration and fixtures for anchorstat tests."""

import math

import pytest


def make_observations(xs: list[float], ys: list[float]) -> list[tuple[float, float]]:
    """Pair up parallel lists of anchors and estimates."""
    return list(zip(xs, ys))


def _data_for_r(target_r: float, n: int) -> list[tuple[float, float]]:
    """Build n points whose Pearson r is exactly target_r.

    X is 1..n; Y combines the centred X direction with an alternating
    component made orthogonal to it.
    """
    xs = [float(i + 1) for i in range(n)]
    mean_x = (n + 1) / 2
    xc = [x - mean_x for x in xs]

    z = [1.0 if i % 2 == 0 else -1.0 for i in range(n)]
    mean_z = sum(z) / n
    z = [v - mean_z for v in z]
    dot_zx = sum(a * b for a, b in zip(z, xc))
    dot_xx = sum(a * a for a in xc)
    z_orth = [v - (dot_zx / dot_xx) * c for v, c in zip(z, xc)]

    norm_z = math.sqrt(sum(v * v for v in z_orth))
    norm_x = math.sqrt(dot_xx)
    scale = math.sqrt(1 - target_r * target_r)
    ys = [target_r * (c / norm_x) + scale * (v / norm_z) for c, v in zip(xc, z_orth)]

    return make_observations(xs, ys)


@pytest.fixture
def data_for_r():
    """Return a factory building points with an exact target Pearson r."""
    return _data_for_r


@pytest.fixture
def perfect_positive() -> list[tuple[float, float]]:
    """Return responses on the line Y = 2X."""
    return make_observations([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])


@pytest.fixture
def perfect_negative() -> list[tuple[float, float]]:
    """Return responses on a decreasing line."""
    return make_observations([1, 2, 3, 4, 5], [10, 8, 6, 4, 2])


@pytest.fixture
def survey_responses() -> list[dict]:
    """Return a small anchored survey in storage-row format."""
    return [
        {"q1_answer": 10, "q2_answer": 35},
        {"q1_answer": 25, "q2_answer": 42},
        {"q1_answer": 40, "q2_answer": 50},
        {"q1_answer": 55, "q2_answer": 48},
        {"q1_answer": 70, "q2_answer": 61},
        {"q1_answer": 85, "q2_answer": 66},
        {"q1_answer": 95, "q2_answer": 72},
    ]
