from __future__ import annotations

from typing import Dict, Optional, Tuple


# Severity band edges (t1, t2, t3) per measurement, compared against |value|.
# Angles are in degrees, ratios are unitless fractions of the reference length.
# These are a reference design pending review by a clinician, not normative
# values.
SEVERITY_THRESHOLDS: Dict[str, Tuple[float, float, float]] = {
    # Frontal plane levels (degrees)
    "head_horizontal_level": (2.0, 4.0, 8.0),
    "shoulders_horizontal_level": (2.0, 5.0, 10.0),
    "scapular_horizontal_level": (2.0, 5.0, 10.0),
    "pelvis_horizontal_level": (1.0, 2.0, 5.0),
    "femur_horizontal_level": (1.0, 2.0, 5.0),
    "tibia_horizontal_level": (1.5, 3.0, 6.0),

    # Vertical alignment (degrees from vertical)
    "head_vertical_alignment": (3.0, 5.0, 10.0),
    "head_forward_alignment": (5.0, 10.0, 15.0),
    "trunk_vertical_alignment": (2.0, 5.0, 10.0),

    # Knee valgus / varus left-right difference (degrees)
    "knees_valgus_varus_symmetry": (2.0, 3.0, 6.0),

    # Symmetry offsets about the midline (fraction of body width)
    "shoulder_symmetry_offset": (0.03, 0.06, 0.10),
    "scapular_symmetry_offset": (0.03, 0.06, 0.10),
    "pelvis_symmetry_offset": (0.03, 0.06, 0.10),

    # Plumb-line offsets on side views (fraction of segment height)
    "shoulder_plumb_alignment": (0.05, 0.10, 0.15),
    "hip_plumb_alignment": (0.03, 0.06, 0.10),
    "knee_plumb_alignment": (0.03, 0.06, 0.10),
}


def get_thresholds(name: str) -> Optional[Tuple[float, float, float]]:
    return SEVERITY_THRESHOLDS.get(name)
