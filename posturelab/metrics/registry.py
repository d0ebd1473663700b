from __future__ import annotations

from typing import Optional

from ..criteria.severity import SeverityClassifier, default_classifier
from ..landmarks.schema import LandmarkSchema
from ..landmarks.vocabulary import PHOTO_VOCABULARIES
from .calculators import bilateral_tilt, joint_symmetry, plumb_line, symmetry_offset, vertical_alignment


def _register_front(schema: LandmarkSchema) -> None:
    pt = "front"
    schema.register(pt, bilateral_tilt("head_horizontal_level", "ear_left", "ear_right"))
    schema.register(pt, vertical_alignment("head_vertical_alignment", "head_top", "chin", pt))
    schema.register(pt, bilateral_tilt("shoulders_horizontal_level", "shoulder_left", "shoulder_right"))
    schema.register(pt, vertical_alignment("trunk_vertical_alignment", "neck_base", "pelvis_center", pt))
    schema.register(pt, bilateral_tilt("pelvis_horizontal_level", "iliac_crest_left", "iliac_crest_right"))
    schema.register(pt, bilateral_tilt("femur_horizontal_level", "knee_left", "knee_right"))
    schema.register(pt, bilateral_tilt("tibia_horizontal_level", "ankle_left", "ankle_right"))
    schema.register(
        pt,
        joint_symmetry(
            "knees_valgus_varus_symmetry",
            ("hip_left", "knee_left", "ankle_left"),
            ("hip_right", "knee_right", "ankle_right"),
        ),
    )
    schema.register(pt, symmetry_offset("shoulder_symmetry_offset", "shoulder_left", "shoulder_right", "neck_base"))
    schema.register(
        pt, symmetry_offset("pelvis_symmetry_offset", "iliac_crest_left", "iliac_crest_right", "pelvis_center")
    )


def _register_back(schema: LandmarkSchema) -> None:
    pt = "back"
    schema.register(pt, bilateral_tilt("shoulders_horizontal_level", "shoulder_left", "shoulder_right"))
    schema.register(pt, bilateral_tilt("scapular_horizontal_level", "scapula_left", "scapula_right"))
    schema.register(pt, vertical_alignment("trunk_vertical_alignment", "c7", "sacrum", pt))
    schema.register(pt, bilateral_tilt("pelvis_horizontal_level", "iliac_crest_left", "iliac_crest_right"))
    schema.register(pt, bilateral_tilt("femur_horizontal_level", "knee_left", "knee_right"))
    schema.register(pt, bilateral_tilt("tibia_horizontal_level", "ankle_left", "ankle_right"))
    schema.register(pt, symmetry_offset("shoulder_symmetry_offset", "shoulder_left", "shoulder_right", "c7"))
    schema.register(pt, symmetry_offset("scapular_symmetry_offset", "scapula_left", "scapula_right", "c7"))
    schema.register(pt, symmetry_offset("pelvis_symmetry_offset", "iliac_crest_left", "iliac_crest_right", "sacrum"))


def _register_side(schema: LandmarkSchema, pt: str, side: str) -> None:
    ear, shoulder, hip, knee, ankle = (f"{part}_{side}" for part in ("ear", "shoulder", "hip", "knee", "ankle"))
    schema.register(pt, vertical_alignment("head_vertical_alignment", "head_top", "chin", pt))
    schema.register(pt, vertical_alignment("head_forward_alignment", ear, shoulder, pt))
    schema.register(pt, vertical_alignment("trunk_vertical_alignment", "c7", "pelvis_center", pt))
    schema.register(pt, plumb_line("shoulder_plumb_alignment", ear, shoulder, hip, pt))
    schema.register(pt, plumb_line("hip_plumb_alignment", shoulder, hip, ankle, pt))
    schema.register(pt, plumb_line("knee_plumb_alignment", hip, knee, ankle, pt))


def build_default_schema(classifier: Optional[SeverityClassifier] = None) -> LandmarkSchema:
    """Standard four-photo schema. Registration order is the output order."""
    schema = LandmarkSchema(PHOTO_VOCABULARIES, classifier or default_classifier())
    _register_front(schema)
    _register_back(schema)
    _register_side(schema, "side_left", "left")
    _register_side(schema, "side_right", "right")
    return schema.freeze()


_DEFAULT_SCHEMA: Optional[LandmarkSchema] = None


def default_schema() -> LandmarkSchema:
    global _DEFAULT_SCHEMA
    if _DEFAULT_SCHEMA is None:
        _DEFAULT_SCHEMA = build_default_schema()
    return _DEFAULT_SCHEMA
