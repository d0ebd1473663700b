from __future__ import annotations

from typing import Dict, Tuple

from ..models import PhotoType


PHOTO_TYPE_LABELS: Dict[PhotoType, str] = {
    "front": "Front",
    "back": "Back",
    "side_left": "Left side",
    "side_right": "Right side",
}


# Display names for every anatomical landmark the annotator can place.
LANDMARK_LABELS: Dict[str, str] = {
    "head_top": "Top of head",
    "chin": "Chin",
    "ear_left": "Left ear",
    "ear_right": "Right ear",
    "neck_base": "Base of neck",
    "c7": "C7 vertebra",
    "shoulder_left": "Left shoulder",
    "shoulder_right": "Right shoulder",
    "scapula_left": "Left scapula (inferior angle)",
    "scapula_right": "Right scapula (inferior angle)",
    "pelvis_center": "Centre of pelvis",
    "sacrum": "Sacrum",
    "iliac_crest_left": "Left iliac crest",
    "iliac_crest_right": "Right iliac crest",
    "hip_left": "Left hip",
    "hip_right": "Right hip",
    "knee_left": "Left knee",
    "knee_right": "Right knee",
    "ankle_left": "Left ankle",
    "ankle_right": "Right ankle",
}


def _side_view(side: str) -> Tuple[str, ...]:
    return (
        "head_top",
        "chin",
        f"ear_{side}",
        "c7",
        f"shoulder_{side}",
        "pelvis_center",
        f"hip_{side}",
        f"knee_{side}",
        f"ankle_{side}",
    )


# Labels valid on each photo, in the order the annotator is walked through them.
PHOTO_VOCABULARIES: Dict[PhotoType, Tuple[str, ...]] = {
    "front": (
        "head_top",
        "chin",
        "ear_left",
        "ear_right",
        "shoulder_left",
        "shoulder_right",
        "neck_base",
        "pelvis_center",
        "iliac_crest_left",
        "iliac_crest_right",
        "hip_left",
        "hip_right",
        "knee_left",
        "knee_right",
        "ankle_left",
        "ankle_right",
    ),
    "back": (
        "head_top",
        "c7",
        "shoulder_left",
        "shoulder_right",
        "scapula_left",
        "scapula_right",
        "sacrum",
        "iliac_crest_left",
        "iliac_crest_right",
        "knee_left",
        "knee_right",
        "ankle_left",
        "ankle_right",
    ),
    "side_left": _side_view("left"),
    "side_right": _side_view("right"),
}


def landmark_display_name(label: str) -> str:
    return LANDMARK_LABELS.get(label, label.replace("_", " "))
