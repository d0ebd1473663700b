from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, List, Literal, Mapping, Optional, Sequence, Tuple

PhotoType = Literal["front", "back", "side_left", "side_right"]
Severity = Literal["normal", "mild", "moderate", "severe"]
Unit = Literal["degrees", "ratio"]

# Canonical photo order. Output ordering everywhere follows this tuple.
PHOTO_TYPES: Tuple[PhotoType, ...] = ("front", "back", "side_left", "side_right")
SEVERITIES: Tuple[Severity, ...] = ("normal", "mild", "moderate", "severe")


def photo_order(photo_type: str) -> int:
    try:
        return PHOTO_TYPES.index(photo_type)  # type: ignore[arg-type]
    except ValueError:
        return len(PHOTO_TYPES)


@dataclass(frozen=True)
class Point:
    # Normalised coords in [0,1], origin top-left of the displayed photo.
    label: str
    x: float
    y: float

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class LandmarkSet:
    """Marked points per photo. Photos without any entry are simply absent."""

    photos: Dict[PhotoType, Tuple[Point, ...]] = field(default_factory=dict)

    def photo_types(self) -> List[PhotoType]:
        return sorted(self.photos.keys(), key=photo_order)

    def points_for(self, photo_type: PhotoType) -> Dict[str, Point]:
        return {p.label: p for p in self.photos.get(photo_type, ())}

    def with_points(self, photo_type: PhotoType, points: Sequence[Point]) -> "LandmarkSet":
        photos = dict(self.photos)
        photos[photo_type] = tuple(points)
        return LandmarkSet(photos=photos)

    def without_label(self, photo_type: PhotoType, label: str) -> "LandmarkSet":
        kept = [p for p in self.photos.get(photo_type, ()) if p.label != label]
        return self.with_points(photo_type, kept)

    def point_count(self) -> int:
        return sum(len(points) for points in self.photos.values())

    def is_empty(self) -> bool:
        return self.point_count() == 0

    def fingerprint(self) -> Tuple[Tuple[str, Tuple[Tuple[str, float, float], ...]], ...]:
        """Hashable value-equality key, for callers that memoise results."""
        return tuple(
            (pt, tuple(sorted((p.label, p.x, p.y) for p in self.photos[pt])))
            for pt in self.photo_types()
        )

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {pt: [p.to_dict() for p in self.photos[pt]] for pt in self.photo_types()}

    @staticmethod
    def from_points(photos: Mapping[PhotoType, Iterable[Point]]) -> "LandmarkSet":
        return LandmarkSet(photos={pt: tuple(points) for pt, points in photos.items()})


@dataclass(frozen=True)
class MeasurementResult:
    name: str
    photo_type: PhotoType
    value: float
    unit: Unit
    contributing_landmarks: FrozenSet[str]
    severity: Optional[Severity] = None
    # Per-side components behind the value (e.g. left/right knee angles),
    # as (key, value) pairs so results stay hashable.
    details: Tuple[Tuple[str, float], ...] = ()

    def classified(self, severity: Severity) -> "MeasurementResult":
        return replace(self, severity=severity)

    def detail(self, key: str) -> float:
        return dict(self.details)[key]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "photo_type": self.photo_type,
            "value": self.value,
            "unit": self.unit,
            "severity": self.severity,
            "contributing_landmarks": sorted(self.contributing_landmarks),
            "details": dict(self.details),
        }
