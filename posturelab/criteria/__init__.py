from __future__ import annotations

from .severity import SeverityClassifier, classify, default_classifier
from .thresholds import SEVERITY_THRESHOLDS, get_thresholds

__all__ = ["SeverityClassifier", "classify", "default_classifier", "SEVERITY_THRESHOLDS", "get_thresholds"]
