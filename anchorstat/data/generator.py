"""Synthetic survey responses with a controllable anchoring bias.

Q1 (the anchor) is drawn uniformly from 1-100. In "correlated" mode each
estimate Q2 is pulled toward its anchor:

    q2 = s * q1 + (1 - s) * N(reference, 20) + N(0, 8)

where s is the anchor strength. In "random" mode Q2 ignores the anchor.
Estimates are rounded and clamped to the valid Q2 range 0-1000.
"""

from __future__ import annotations

import logging
from enum import Enum

import numpy as np

from anchorstat.core.correlation import Observation

logger = logging.getLogger(__name__)


Q1_RANGE = (1, 100)
Q2_RANGE = (0, 1000)
ESTIMATE_SPREAD = 20.0
RESPONSE_NOISE = 8.0
DEFAULT_REFERENCE_ANSWER = 54.0


class GenerationMode(str, Enum):
    """How synthetic estimates relate to their anchors."""

    CORRELATED = "correlated"
    RANDOM = "random"


def generate(
    count: int = 30,
    mode: GenerationMode | str = GenerationMode.CORRELATED,
    anchor_strength: float = 0.4,
    seed: int | None = None,
    reference_answer: float = DEFAULT_REFERENCE_ANSWER,
) -> list[Observation]:
    """Generate synthetic survey responses.

    Args:
        count: Number of responses
        mode: "correlated" (anchored estimates) or "random" (independent)
        anchor_strength: Weight of the anchor in [0, 1]; ignored in random mode
        seed: Seed for reproducible output
        reference_answer: Centre of the unanchored estimate distribution

    Returns:
        List of Observations with integer answers

    Raises:
        ValueError: If count is negative, mode is unknown or
            anchor_strength is outside [0, 1]

    Example:
        >>> responses = generate(50, anchor_strength=0.8, seed=1)
        >>> len(responses)
        50
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if not 0.0 <= anchor_strength <= 1.0:
        raise ValueError(f"anchor_strength must be in [0, 1], got {anchor_strength}")
    try:
        mode = GenerationMode(mode)
    except ValueError:
        valid = ", ".join(m.value for m in GenerationMode)
        raise ValueError(f"Unknown mode {mode!r}. Valid modes: {valid}") from None

    rng = np.random.default_rng(seed)

    q1 = rng.integers(Q1_RANGE[0], Q1_RANGE[1] + 1, size=count)
    base_estimate = rng.normal(reference_answer, ESTIMATE_SPREAD, size=count)

    if mode == GenerationMode.CORRELATED:
        anchored = anchor_strength * q1 + (1.0 - anchor_strength) * base_estimate
        q2 = anchored + rng.normal(0.0, RESPONSE_NOISE, size=count)
    else:
        q2 = base_estimate

    q2 = np.clip(np.rint(q2), Q2_RANGE[0], Q2_RANGE[1]).astype(int)

    logger.debug(
        f"Generated {count} {mode.value} responses "
        f"(anchor_strength={anchor_strength}, seed={seed})"
    )

    return [Observation(q1=int(a), q2=int(b)) for a, b in zip(q1, q2)]
