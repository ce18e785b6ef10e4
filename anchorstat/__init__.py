"""anchorstat: Correlation analysis for anchoring-effect surveys.

This package measures how strongly an arbitrary anchor number (Q1) pulls
people's numeric estimates (Q2), reporting Pearson's r, a two-tailed
t-test p-value, a least-squares line, and a plain-language summary.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports for main package exports."""
    if name in ("analyze", "CorrelationResult", "Observation"):
        from anchorstat.core import correlation

        return getattr(correlation, name)
    if name == "generate":
        from anchorstat.data.generator import generate

        return generate
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CorrelationResult",
    "Observation",
    "analyze",
    "generate",
    "__version__",
]
