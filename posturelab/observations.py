from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import ValidationError
from .models import PHOTO_TYPES, SEVERITIES, PhotoType, Point, Severity, photo_order


JOINT_LABELS: Dict[str, str] = {
    "head": "Head",
    "neck": "Neck",
    "shoulder_left": "Left shoulder",
    "shoulder_right": "Right shoulder",
    "spine_cervical": "Cervical spine",
    "spine_thoracic": "Thoracic spine",
    "spine_lumbar": "Lumbar spine",
    "hip_left": "Left hip",
    "hip_right": "Right hip",
    "knee_left": "Left knee",
    "knee_right": "Right knee",
    "ankle_left": "Left ankle",
    "ankle_right": "Right ankle",
}

_SHOULDER = ("Dropped shoulder", "Elevated shoulder", "Anterior projection", "Internal rotation")
_HIP = ("Elevation", "Anterior tilt", "Posterior tilt", "Rotation")
_KNEE = ("Valgus", "Varus", "Hyperextension", "Flexion")
_ANKLE = ("Pronation", "Supination", "Limited dorsiflexion")

# Canned texts offered to the clinician per joint; anything else is custom.
PREDEFINED_OBSERVATIONS: Dict[str, Tuple[str, ...]] = {
    "head": ("Forward head", "Lateral tilt", "Excessive extension"),
    "neck": ("Cervical hyperlordosis", "Cervical flattening", "Lateral tilt"),
    "shoulder_left": _SHOULDER,
    "shoulder_right": _SHOULDER,
    "spine_cervical": ("Hyperlordosis", "Flattening", "Scoliosis"),
    "spine_thoracic": ("Hyperkyphosis", "Flattening", "Scoliosis"),
    "spine_lumbar": ("Hyperlordosis", "Flattening", "Scoliosis"),
    "hip_left": _HIP,
    "hip_right": _HIP,
    "knee_left": _KNEE,
    "knee_right": _KNEE,
    "ankle_left": _ANKLE,
    "ankle_right": _ANKLE,
}


@dataclass(frozen=True)
class Observation:
    joint: str
    text: str
    severity: Severity
    photo_type: PhotoType
    position: Optional[Point] = None

    @property
    def is_custom(self) -> bool:
        return self.text not in PREDEFINED_OBSERVATIONS.get(self.joint, ())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "joint": self.joint,
            "joint_name": JOINT_LABELS.get(self.joint, self.joint),
            "text": self.text,
            "severity": self.severity,
            "photo_type": self.photo_type,
            "position": None if self.position is None else {"x": self.position.x, "y": self.position.y},
            "is_custom": self.is_custom,
        }


def observation_problems(obs: Observation) -> List[str]:
    problems: List[str] = []
    if obs.joint not in JOINT_LABELS:
        problems.append(f"unknown joint '{obs.joint}'")
    if obs.severity not in SEVERITIES:
        problems.append(f"unknown severity '{obs.severity}'")
    if obs.photo_type not in PHOTO_TYPES:
        problems.append(f"unknown photo type '{obs.photo_type}'")
    if not obs.text.strip():
        problems.append("empty observation text")
    if obs.position is not None:
        for axis, value in (("x", obs.position.x), ("y", obs.position.y)):
            if not 0.0 <= value <= 1.0:
                problems.append(f"position {axis}={value} outside [0, 1]")
    return problems


def validate_observation(obs: Observation) -> Observation:
    problems = observation_problems(obs)
    if problems:
        raise ValidationError([f"{obs.joint}: {p}" for p in problems])
    return obs


def group_by_photo_type(observations: Iterable[Observation]) -> Dict[PhotoType, List[Observation]]:
    """Bucket observations per photo; buckets follow canonical photo order.

    Within a bucket the original insertion order is preserved.
    """
    groups: Dict[PhotoType, List[Observation]] = {}
    for obs in observations:
        groups.setdefault(obs.photo_type, []).append(obs)
    return {pt: groups[pt] for pt in sorted(groups, key=photo_order)}


def observations_from_dicts(records: Iterable[Mapping[str, Any]]) -> List[Observation]:
    out: List[Observation] = []
    errors: List[str] = []
    for idx, rec in enumerate(records):
        if not isinstance(rec, Mapping):
            errors.append(f"observation {idx}: expected a mapping, got {type(rec).__name__}")
            continue
        pos = rec.get("position")
        try:
            position = None if pos is None else Point(label=str(rec.get("joint", "")), x=float(pos["x"]), y=float(pos["y"]))
        except (KeyError, TypeError, ValueError):
            errors.append(f"observation {idx}: position must have numeric x and y")
            continue
        obs = Observation(
            joint=str(rec.get("joint", "")),
            text=str(rec.get("text", rec.get("observation", ""))),
            severity=str(rec.get("severity", "")),  # type: ignore[arg-type]
            photo_type=str(rec.get("photo_type", rec.get("photoType", ""))),  # type: ignore[arg-type]
            position=position,
        )
        problems = observation_problems(obs)
        if problems:
            errors.extend(f"observation {idx}: {p}" for p in problems)
            continue
        out.append(obs)
    if errors:
        raise ValidationError(errors)
    return out
