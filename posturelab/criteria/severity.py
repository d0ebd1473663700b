from __future__ import annotations

import math
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..errors import ConfigurationError
from ..models import Severity
from .thresholds import SEVERITY_THRESHOLDS

Triple = Tuple[float, float, float]


def _validate_triple(name: str, raw: Sequence[float]) -> Triple:
    try:
        values = tuple(float(v) for v in raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Thresholds for '{name}' must be numbers, got {raw!r}") from exc
    if len(values) != 3:
        raise ConfigurationError(f"Thresholds for '{name}' must have exactly 3 values, got {len(values)}")
    if not all(math.isfinite(v) for v in values):
        raise ConfigurationError(f"Thresholds for '{name}' must be finite, got {values}")
    t1, t2, t3 = values
    if t1 < 0.0 or not (t1 < t2 < t3):
        raise ConfigurationError(f"Thresholds for '{name}' must satisfy 0 <= t1 < t2 < t3, got {values}")
    return (t1, t2, t3)


class SeverityClassifier:
    """Maps a measurement value to a severity band using its own thresholds.

    Band edges are inclusive on the milder side: a value exactly equal to t1
    is still ``normal``, exactly t2 is ``mild``, exactly t3 is ``moderate``.
    """

    def __init__(self, thresholds: Mapping[str, Sequence[float]]) -> None:
        self._thresholds: Dict[str, Triple] = {
            str(name): _validate_triple(str(name), raw) for name, raw in thresholds.items()
        }

    @classmethod
    def default(cls) -> "SeverityClassifier":
        return cls(SEVERITY_THRESHOLDS)

    def with_overrides(self, overrides: Mapping[str, Sequence[float]]) -> "SeverityClassifier":
        unknown = sorted(name for name in overrides if name not in self._thresholds)
        if unknown:
            raise ConfigurationError(f"Threshold overrides for unknown measurements: {unknown}")
        merged: Dict[str, Sequence[float]] = dict(self._thresholds)
        merged.update(overrides)
        return SeverityClassifier(merged)

    def has(self, name: str) -> bool:
        return name in self._thresholds

    def thresholds_for(self, name: str) -> Triple:
        try:
            return self._thresholds[name]
        except KeyError:
            raise ConfigurationError(f"No severity thresholds defined for measurement '{name}'") from None

    def classify(self, name: str, value: float) -> Severity:
        t1, t2, t3 = self.thresholds_for(name)
        magnitude = abs(float(value))
        if magnitude <= t1:
            return "normal"
        if magnitude <= t2:
            return "mild"
        if magnitude <= t3:
            return "moderate"
        return "severe"


_DEFAULT: Optional[SeverityClassifier] = None


def default_classifier() -> SeverityClassifier:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = SeverityClassifier.default()
    return _DEFAULT


def classify(measurement_name: str, value: float) -> Severity:
    return default_classifier().classify(measurement_name, value)
