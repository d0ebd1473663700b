from __future__ import annotations

from .criteria import SeverityClassifier, classify
from .errors import ConfigurationError, PostureError, ValidationError
from .metrics.aggregator import compute_measurements
from .metrics.registry import build_default_schema, default_schema
from .models import PHOTO_TYPES, LandmarkSet, MeasurementResult, Point
from .observations import Observation, group_by_photo_type
from .validation import parse_landmark_records

__all__ = [
    "SeverityClassifier",
    "classify",
    "ConfigurationError",
    "PostureError",
    "ValidationError",
    "compute_measurements",
    "build_default_schema",
    "default_schema",
    "PHOTO_TYPES",
    "LandmarkSet",
    "MeasurementResult",
    "Point",
    "Observation",
    "group_by_photo_type",
    "parse_landmark_records",
]
