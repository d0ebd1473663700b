from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Dict, FrozenSet, Mapping, Optional, Tuple

from ..models import MeasurementResult, PhotoType, Point, Unit
from . import geometry

# A formula receives the points bound to the calculator's labels (in order)
# and returns (value, details) or None when the geometry is degenerate.
Formula = Callable[..., Optional[Tuple[float, Dict[str, float]]]]

IMAGE_MIDLINE_X = 0.5


@dataclass(frozen=True)
class Calculator:
    name: str
    unit: Unit
    labels: Tuple[str, ...]
    formula: Formula = field(compare=False)
    family: str = ""

    @property
    def required_labels(self) -> FrozenSet[str]:
        return frozenset(self.labels)

    def missing_labels(self, points: Mapping[str, Point]) -> Tuple[str, ...]:
        return tuple(label for label in self.labels if label not in points)

    def compute(self, points: Mapping[str, Point], photo_type: PhotoType) -> Optional[MeasurementResult]:
        """Unclassified result, or None if a label is missing or the geometry is degenerate."""
        if self.missing_labels(points):
            return None
        out = self.formula(*(points[label] for label in self.labels))
        if out is None:
            return None
        value, details = out
        return MeasurementResult(
            name=self.name,
            photo_type=photo_type,
            value=float(value),
            unit=self.unit,
            contributing_landmarks=self.required_labels,
            details=tuple(details.items()),
        )


def _tilt(left: Point, right: Point):
    tilt = geometry.bilateral_tilt_deg(left, right)
    if tilt is None:
        return None
    return tilt, {}


def _lean(superior: Point, inferior: Point, sign: float = 1.0):
    lean = geometry.vertical_lean_deg(superior, inferior)
    if lean is None:
        return None
    return sign * lean, {}


def _plumb(superior: Point, middle: Point, inferior: Point, sign: float = 1.0):
    offset = geometry.plumb_offset_ratio(superior, middle, inferior)
    if offset is None:
        return None
    return sign * offset, {}


def _symmetry(left: Point, right: Point, reference: Optional[Point] = None):
    ref_x = reference.x if reference is not None else IMAGE_MIDLINE_X
    offset = geometry.symmetry_offset_ratio(left, right, ref_x)
    if offset is None:
        return None
    return offset, {}


def _joint_symmetry(
    left_proximal: Point,
    left_joint: Point,
    left_distal: Point,
    right_proximal: Point,
    right_joint: Point,
    right_distal: Point,
):
    left = geometry.joint_deviation_deg(left_proximal, left_joint, left_distal)
    right = geometry.joint_deviation_deg(right_proximal, right_joint, right_distal)
    if left is None or right is None:
        return None
    return left - right, {"left": left, "right": right}


def _anterior_sign(photo_type: PhotoType) -> float:
    # side_left shows the subject facing image-left, side_right facing image-right.
    return -1.0 if photo_type == "side_left" else 1.0


def bilateral_tilt(name: str, left: str, right: str) -> Calculator:
    return Calculator(name=name, unit="degrees", labels=(left, right), formula=_tilt, family="bilateral_tilt")


def vertical_alignment(name: str, superior: str, inferior: str, photo_type: Optional[PhotoType] = None) -> Calculator:
    """Lean from vertical. On side views the sign is positive for a forward lean."""
    sign = _anterior_sign(photo_type) if photo_type in ("side_left", "side_right") else 1.0
    return Calculator(
        name=name,
        unit="degrees",
        labels=(superior, inferior),
        formula=partial(_lean, sign=sign),
        family="vertical_alignment",
    )


def plumb_line(name: str, superior: str, middle: str, inferior: str, photo_type: PhotoType) -> Calculator:
    """Offset of the middle landmark, positive when it sits anterior of the line."""
    return Calculator(
        name=name,
        unit="ratio",
        labels=(superior, middle, inferior),
        formula=partial(_plumb, sign=_anterior_sign(photo_type)),
        family="plumb_line",
    )


def symmetry_offset(name: str, left: str, right: str, reference: Optional[str] = None) -> Calculator:
    labels = (left, right) if reference is None else (left, right, reference)
    return Calculator(name=name, unit="ratio", labels=labels, formula=_symmetry, family="symmetry_offset")


def joint_symmetry(name: str, left_chain: Tuple[str, str, str], right_chain: Tuple[str, str, str]) -> Calculator:
    return Calculator(
        name=name,
        unit="degrees",
        labels=tuple(left_chain) + tuple(right_chain),
        formula=_joint_symmetry,
        family="joint_symmetry",
    )
