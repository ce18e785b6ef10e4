"""Observation sources for anchorstat.

This module contains:
- Synthetic response generation with a tunable anchoring bias
"""

from anchorstat.data.generator import GenerationMode, generate

__all__ = [
    "GenerationMode",
    "generate",
]
