from __future__ import annotations

import logging
from typing import List, Optional

from ..landmarks.schema import LandmarkSchema
from ..models import LandmarkSet, MeasurementResult
from .registry import default_schema

logger = logging.getLogger(__name__)


def compute_measurements(landmarks: LandmarkSet, schema: Optional[LandmarkSchema] = None) -> List[MeasurementResult]:
    """All measurements computable from ``landmarks``, each with its severity.

    Photos are visited in canonical order (front, back, side_left,
    side_right) and calculators in registration order, so the output order
    never depends on upload or marking order. Calculators whose labels are
    not all marked yet are skipped silently.
    """
    schema = schema or default_schema()
    results: List[MeasurementResult] = []
    for photo_type in landmarks.photo_types():
        points = landmarks.points_for(photo_type)
        if not points:
            continue
        for calculator in schema.iter_calculators(photo_type):
            result = calculator.compute(points, photo_type)
            if result is None:
                continue
            results.append(result.classified(schema.classifier.classify(result.name, result.value)))
    logger.debug(
        "Computed %d measurements from %d landmarks on %d photos",
        len(results),
        landmarks.point_count(),
        len(landmarks.photos),
    )
    return results
