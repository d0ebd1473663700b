from __future__ import annotations

from typing import Dict, List, Tuple

from posturelab.models import LandmarkSet, Point

# Plausible fully marked assessment; every default calculator can run on it.
FULL_MARKUP: Dict[str, Dict[str, Tuple[float, float]]] = {
    "front": {
        "head_top": (0.50, 0.05),
        "chin": (0.50, 0.15),
        "ear_left": (0.56, 0.10),
        "ear_right": (0.44, 0.105),
        "shoulder_left": (0.62, 0.22),
        "shoulder_right": (0.38, 0.23),
        "neck_base": (0.50, 0.19),
        "pelvis_center": (0.505, 0.50),
        "iliac_crest_left": (0.60, 0.47),
        "iliac_crest_right": (0.40, 0.475),
        "hip_left": (0.57, 0.52),
        "hip_right": (0.43, 0.52),
        "knee_left": (0.56, 0.72),
        "knee_right": (0.44, 0.725),
        "ankle_left": (0.56, 0.92),
        "ankle_right": (0.44, 0.92),
    },
    "back": {
        "head_top": (0.50, 0.05),
        "c7": (0.50, 0.18),
        "shoulder_left": (0.38, 0.22),
        "shoulder_right": (0.62, 0.225),
        "scapula_left": (0.42, 0.32),
        "scapula_right": (0.58, 0.33),
        "sacrum": (0.50, 0.52),
        "iliac_crest_left": (0.40, 0.47),
        "iliac_crest_right": (0.60, 0.47),
        "knee_left": (0.44, 0.72),
        "knee_right": (0.56, 0.72),
        "ankle_left": (0.44, 0.92),
        "ankle_right": (0.56, 0.92),
    },
    "side_left": {
        "head_top": (0.50, 0.05),
        "chin": (0.45, 0.15),
        "ear_left": (0.50, 0.11),
        "c7": (0.52, 0.19),
        "shoulder_left": (0.50, 0.23),
        "pelvis_center": (0.50, 0.50),
        "hip_left": (0.50, 0.52),
        "knee_left": (0.49, 0.72),
        "ankle_left": (0.50, 0.92),
    },
    "side_right": {
        "head_top": (0.50, 0.05),
        "chin": (0.55, 0.15),
        "ear_right": (0.50, 0.11),
        "c7": (0.48, 0.19),
        "shoulder_right": (0.50, 0.23),
        "pelvis_center": (0.50, 0.50),
        "hip_right": (0.50, 0.52),
        "knee_right": (0.51, 0.72),
        "ankle_right": (0.50, 0.92),
    },
}

FRONT_MEASUREMENTS: List[str] = [
    "head_horizontal_level",
    "head_vertical_alignment",
    "shoulders_horizontal_level",
    "trunk_vertical_alignment",
    "pelvis_horizontal_level",
    "femur_horizontal_level",
    "tibia_horizontal_level",
    "knees_valgus_varus_symmetry",
    "shoulder_symmetry_offset",
    "pelvis_symmetry_offset",
]

BACK_MEASUREMENTS: List[str] = [
    "shoulders_horizontal_level",
    "scapular_horizontal_level",
    "trunk_vertical_alignment",
    "pelvis_horizontal_level",
    "femur_horizontal_level",
    "tibia_horizontal_level",
    "shoulder_symmetry_offset",
    "scapular_symmetry_offset",
    "pelvis_symmetry_offset",
]

SIDE_MEASUREMENTS: List[str] = [
    "head_vertical_alignment",
    "head_forward_alignment",
    "trunk_vertical_alignment",
    "shoulder_plumb_alignment",
    "hip_plumb_alignment",
    "knee_plumb_alignment",
]


def points(markup: Dict[str, Tuple[float, float]]) -> List[Point]:
    return [Point(label=label, x=x, y=y) for label, (x, y) in markup.items()]


def landmark_set(photo_types=None) -> LandmarkSet:
    photo_types = photo_types or list(FULL_MARKUP)
    return LandmarkSet.from_points({pt: points(FULL_MARKUP[pt]) for pt in photo_types})


def records(photo_types=None) -> List[dict]:
    photo_types = photo_types or list(FULL_MARKUP)
    return [
        {"photo_type": pt, "label": label, "x": x, "y": y}
        for pt in photo_types
        for label, (x, y) in FULL_MARKUP[pt].items()
    ]
