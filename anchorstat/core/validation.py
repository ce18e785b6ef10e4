"""Input validation for survey observations.

The correlation engine accepts any real numbers and never raises, so
malformed responses must be caught here, before they reach it.

Features:
- Non-finite and non-integer answer detection
- Range checks against the survey's answer domain
- Sample size and zero-variance warnings
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from numbers import Real
from typing import Any

from anchorstat.config import get_settings
from anchorstat.core.correlation import (
    MIN_OBSERVATIONS,
    Observation,
    ObservationLike,
    coerce_observation,
)


class WarningType(str, Enum):
    """Types of warnings that can be generated."""

    MALFORMED = "malformed"
    NON_FINITE = "non_finite"
    NON_INTEGER = "non_integer"
    OUT_OF_RANGE = "out_of_range"
    INSUFFICIENT_DATA = "insufficient_data"
    ZERO_VARIANCE = "zero_variance"


class WarningSeverity(str, Enum):
    """Severity levels for warnings."""

    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass
class ValidationWarning:
    """A single validation warning.

    Attributes:
        type: Category of the warning
        severity: How serious the warning is
        message: Human-readable warning message
        field: Answer field involved ("q1" or "q2"), if any
        index: Position of the offending observation, if any
        details: Additional context
    """

    type: WarningType
    severity: WarningSeverity
    message: str
    field: str | None = None
    index: int | None = None
    details: dict[str, Any] = dataclass_field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "field": self.field,
            "index": self.index,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class ValidationResult:
    """Complete validation result for a set of observations.

    Attributes:
        observations: Observations that passed coercion, in input order
        warnings: List of warnings generated
    """

    observations: list[Observation] = dataclass_field(default_factory=list)
    warnings: list[ValidationWarning] = dataclass_field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Whether the observations are safe to hand to the engine."""
        return not self.has_critical_warnings()

    def has_critical_warnings(self) -> bool:
        """Check if there are any critical warnings."""
        return any(w.severity == WarningSeverity.CRITICAL for w in self.warnings)

    def get_warnings_by_type(self, warn_type: WarningType) -> list[ValidationWarning]:
        """Get all warnings of a specific type."""
        return [w for w in self.warnings if w.type == warn_type]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "is_valid": self.is_valid,
            "observation_count": len(self.observations),
            "warnings": [w.to_dict() for w in self.warnings],
            "critical_count": len(
                [w for w in self.warnings if w.severity == WarningSeverity.CRITICAL]
            ),
        }

    def format_for_display(self) -> str:
        """Format warnings as a bulleted list."""
        if not self.warnings:
            return ""

        lines = ["**Data Quality Notes:**"]
        for warning in self.warnings:
            lines.append(f"- [{warning.severity.value}] {warning.message}")
        return "\n".join(lines)


class ObservationValidator:
    """Validates survey observations before analysis.

    Example:
        >>> validator = ObservationValidator()
        >>> validation = validator.validate([(10, 40), (90, 70), (50, 55)])
        >>> validation.is_valid
        True
    """

    def __init__(
        self,
        q1_range: tuple[float, float] = (1, 100),
        q2_range: tuple[float, float] = (0, 1000),
        require_integers: bool = True,
    ) -> None:
        """Initialize the validator.

        Args:
            q1_range: Inclusive bounds for anchor answers
            q2_range: Inclusive bounds for estimates
            require_integers: Flag non-integral answers as critical
        """
        self.ranges = {"q1": q1_range, "q2": q2_range}
        self.require_integers = require_integers

    @classmethod
    def from_settings(cls) -> ObservationValidator:
        """Build a validator from the application settings."""
        settings = get_settings()
        return cls(
            q1_range=(settings.q1_min, settings.q1_max),
            q2_range=(settings.q2_min, settings.q2_max),
        )

    def validate(self, items: Iterable[ObservationLike]) -> ValidationResult:
        """Validate observations.

        Args:
            items: Observation-like records (pairs, mappings, Observations)

        Returns:
            ValidationResult with the coerced observations and warnings
        """
        result = ValidationResult()

        for index, item in enumerate(items):
            try:
                observation = coerce_observation(item)
            except ValueError as e:
                result.warnings.append(ValidationWarning(
                    type=WarningType.MALFORMED,
                    severity=WarningSeverity.CRITICAL,
                    message=f"Observation {index} is malformed: {e}",
                    index=index,
                ))
                continue

            answer_warnings = self._check_answers(observation, index)
            result.warnings.extend(answer_warnings)
            result.observations.append(observation)

        if result.has_critical_warnings():
            return result

        n = len(result.observations)
        if n < MIN_OBSERVATIONS:
            result.warnings.append(ValidationWarning(
                type=WarningType.INSUFFICIENT_DATA,
                severity=WarningSeverity.WARNING,
                message=(
                    f"Only {n} observation(s); at least {MIN_OBSERVATIONS} "
                    f"are needed for a correlation"
                ),
                details={"n": n},
            ))
        else:
            result.warnings.extend(self._check_variance(result.observations))

        return result

    def _check_answers(
        self, observation: Observation, index: int
    ) -> list[ValidationWarning]:
        """Check both answers of one observation."""
        warnings: list[ValidationWarning] = []

        for name in ("q1", "q2"):
            value = getattr(observation, name)

            if isinstance(value, bool) or not isinstance(value, Real):
                warnings.append(ValidationWarning(
                    type=WarningType.MALFORMED,
                    severity=WarningSeverity.CRITICAL,
                    message=f"Observation {index}: {name} is not a number ({value!r})",
                    field=name,
                    index=index,
                ))
                continue

            if not math.isfinite(value):
                warnings.append(ValidationWarning(
                    type=WarningType.NON_FINITE,
                    severity=WarningSeverity.CRITICAL,
                    message=f"Observation {index}: {name} is not finite ({value})",
                    field=name,
                    index=index,
                ))
                continue

            if self.require_integers and float(value) != int(value):
                warnings.append(ValidationWarning(
                    type=WarningType.NON_INTEGER,
                    severity=WarningSeverity.CRITICAL,
                    message=f"Observation {index}: {name} must be an integer ({value})",
                    field=name,
                    index=index,
                ))

            low, high = self.ranges[name]
            if not low <= value <= high:
                warnings.append(ValidationWarning(
                    type=WarningType.OUT_OF_RANGE,
                    severity=WarningSeverity.CRITICAL,
                    message=(
                        f"Observation {index}: {name} must be between "
                        f"{low:g} and {high:g} (got {value:g})"
                    ),
                    field=name,
                    index=index,
                    details={"min": low, "max": high, "value": value},
                ))

        return warnings

    def _check_variance(self, observations: list[Observation]) -> list[ValidationWarning]:
        """Flag answers that never vary, which force r = 0."""
        warnings: list[ValidationWarning] = []

        for name in ("q1", "q2"):
            values = {getattr(o, name) for o in observations}
            if len(values) == 1:
                warnings.append(ValidationWarning(
                    type=WarningType.ZERO_VARIANCE,
                    severity=WarningSeverity.INFO,
                    message=(
                        f"All {name} answers are identical; the correlation "
                        f"is reported as 0"
                    ),
                    field=name,
                ))

        return warnings


def validate_observations(
    items: Iterable[ObservationLike],
    validator: ObservationValidator | None = None,
) -> ValidationResult:
    """Validate observations with the given or default validator.

    Args:
        items: Observation-like records
        validator: Validator to use (defaults to one built from settings)

    Returns:
        ValidationResult
    """
    if validator is None:
        validator = ObservationValidator.from_settings()
    return validator.validate(items)
