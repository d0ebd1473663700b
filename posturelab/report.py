from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .config import EngineConfig
from .landmarks.schema import LandmarkSchema
from .landmarks.vocabulary import PHOTO_TYPE_LABELS
from .metrics.aggregator import compute_measurements
from .models import SEVERITIES, LandmarkSet, MeasurementResult
from .observations import Observation, group_by_photo_type

NO_MEASUREMENTS_MESSAGE = "No measurements yet: mark landmarks on at least one photo."

MEASUREMENT_LABELS: Dict[str, str] = {
    "head_horizontal_level": "Head horizontal level",
    "head_vertical_alignment": "Head vertical alignment",
    "head_forward_alignment": "Forward head alignment",
    "shoulders_horizontal_level": "Shoulders horizontal level",
    "scapular_horizontal_level": "Scapulae horizontal level",
    "trunk_vertical_alignment": "Trunk vertical alignment",
    "pelvis_horizontal_level": "Pelvis horizontal level",
    "femur_horizontal_level": "Femur (knee line) horizontal level",
    "tibia_horizontal_level": "Tibia (ankle line) horizontal level",
    "knees_valgus_varus_symmetry": "Knee valgus/varus symmetry",
    "shoulder_symmetry_offset": "Shoulder symmetry about the midline",
    "scapular_symmetry_offset": "Scapular symmetry about the spine",
    "pelvis_symmetry_offset": "Pelvis symmetry about the midline",
    "shoulder_plumb_alignment": "Shoulder position on the plumb line",
    "hip_plumb_alignment": "Hip position on the plumb line",
    "knee_plumb_alignment": "Knee position on the plumb line",
}

SEVERITY_LABELS: Dict[str, str] = {
    "normal": "Normal",
    "mild": "Mild",
    "moderate": "Moderate",
    "severe": "Severe",
}


def format_value(result: MeasurementResult, config: EngineConfig) -> str:
    if result.unit == "degrees":
        return f"{result.value:.{config.angle_decimals}f}°"
    return f"{result.value * 100.0:.{config.percent_decimals}f}%"


def measurement_record(result: MeasurementResult, config: EngineConfig) -> Dict[str, Any]:
    decimals = config.angle_decimals if result.unit == "degrees" else config.ratio_decimals
    return {
        "name": result.name,
        "display_name": MEASUREMENT_LABELS.get(result.name, result.name.replace("_", " ")),
        "photo_type": result.photo_type,
        "value": round(result.value, decimals),
        "display_value": format_value(result, config),
        "unit": result.unit,
        "severity": result.severity,
        "severity_label": SEVERITY_LABELS.get(result.severity or "", ""),
        "contributing_landmarks": sorted(result.contributing_landmarks),
        "details": {k: round(v, decimals) for k, v in result.details},
    }


def build_assessment_report(
    landmarks: LandmarkSet,
    observations: Iterable[Observation] = (),
    config: Optional[EngineConfig] = None,
    schema: Optional[LandmarkSchema] = None,
) -> Dict[str, Any]:
    """Serializable summary of one assessment: measurements plus observations.

    Rounding happens here and only here.
    """
    config = config or EngineConfig()
    schema = schema or config.build_schema()
    results = compute_measurements(landmarks, schema=schema)
    grouped = group_by_photo_type(observations)

    severity_counts = {sev: 0 for sev in SEVERITIES}
    for res in results:
        if res.severity is not None:
            severity_counts[res.severity] += 1

    photos: List[Dict[str, Any]] = []
    for pt in landmarks.photo_types():
        photos.append(
            {
                "photo_type": pt,
                "display_name": PHOTO_TYPE_LABELS[pt],
                "landmarks": len(landmarks.photos[pt]),
                "measurements": sum(1 for r in results if r.photo_type == pt),
                "observations": len(grouped.get(pt, [])),
            }
        )

    return {
        "measurements": [measurement_record(r, config) for r in results],
        "severity_counts": severity_counts,
        "photos": photos,
        "observations": {pt: [obs.to_dict() for obs in items] for pt, items in grouped.items()},
        "message": None if results else NO_MEASUREMENTS_MESSAGE,
    }
