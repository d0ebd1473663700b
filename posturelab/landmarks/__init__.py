from __future__ import annotations

from .schema import LandmarkSchema
from .vocabulary import LANDMARK_LABELS, PHOTO_TYPE_LABELS, PHOTO_VOCABULARIES, landmark_display_name

__all__ = [
    "LandmarkSchema",
    "LANDMARK_LABELS",
    "PHOTO_TYPE_LABELS",
    "PHOTO_VOCABULARIES",
    "landmark_display_name",
]
