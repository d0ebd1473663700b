from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.config import ConfigDict

from .errors import ValidationError
from .landmarks.schema import LandmarkSchema
from .metrics.registry import default_schema
from .models import LandmarkSet, PhotoType, Point

logger = logging.getLogger(__name__)


class LandmarkRecord(BaseModel):
    # Accept the annotation layer's camelCase key as well.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    photo_type: PhotoType = Field(alias="photoType")
    label: str = Field(min_length=1)
    x: float = Field(ge=0.0, le=1.0, strict=True, allow_inf_nan=False)
    y: float = Field(ge=0.0, le=1.0, strict=True, allow_inf_nan=False)


def _describe(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "record"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return ", ".join(parts)


def parse_landmark_records(
    records: Iterable[Mapping[str, Any]],
    schema: Optional[LandmarkSchema] = None,
) -> LandmarkSet:
    """Build a LandmarkSet from flat ``{photo_type, label, x, y}`` records.

    Nothing is coerced into range: any out-of-range coordinate, unknown photo
    type, label outside the photo's vocabulary or repeated label rejects the
    batch with a ``ValidationError`` naming every offending record.
    """
    schema = schema or default_schema()
    errors: List[str] = []
    photos: Dict[PhotoType, List[Point]] = {}
    seen: Dict[Tuple[str, str], int] = {}

    for idx, raw in enumerate(records):
        if not isinstance(raw, Mapping):
            errors.append(f"record {idx}: expected a mapping, got {type(raw).__name__}")
            continue
        try:
            rec = LandmarkRecord.model_validate(dict(raw))
        except PydanticValidationError as exc:
            errors.append(f"record {idx}: {_describe(exc)}")
            continue
        if not schema.is_known_label(rec.photo_type, rec.label):
            errors.append(f"record {idx}: label '{rec.label}' is not valid for {rec.photo_type} photos")
            continue
        key = (rec.photo_type, rec.label)
        if key in seen:
            errors.append(f"record {idx}: label '{rec.label}' already marked on {rec.photo_type} (record {seen[key]})")
            continue
        seen[key] = idx
        photos.setdefault(rec.photo_type, []).append(Point(label=rec.label, x=rec.x, y=rec.y))

    if errors:
        logger.debug("Rejected landmark batch with %d problems", len(errors))
        raise ValidationError(errors)
    return LandmarkSet.from_points(photos)


def parse_landmark_mapping(
    data: Mapping[str, Iterable[Mapping[str, Any]]],
    schema: Optional[LandmarkSchema] = None,
) -> LandmarkSet:
    """Same checks for the nested ``{photo_type: [{label, x, y}, ...]}`` form."""
    flat: List[Dict[str, Any]] = []
    shape_errors: List[str] = []
    for photo_type, points in data.items():
        if not isinstance(points, (list, tuple)):
            shape_errors.append(f"photo {photo_type}: expected a list of points, got {type(points).__name__}")
            continue
        for point in points:
            rec = dict(point) if isinstance(point, Mapping) else {"value": point}
            rec["photo_type"] = photo_type
            flat.append(rec)
    try:
        parsed = parse_landmark_records(flat, schema=schema)
    except ValidationError as exc:
        raise ValidationError(shape_errors + exc.errors) from None
    if shape_errors:
        raise ValidationError(shape_errors)
    return parsed
