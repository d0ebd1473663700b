from __future__ import annotations

from typing import Iterable, List


class PostureError(ValueError):
    """Base class for every failure raised by posturelab."""


class ValidationError(PostureError):
    """Landmark or observation input that cannot be accepted as-is.

    ``errors`` holds one human readable line per offending record so callers
    can reject the whole batch or pick out single records.
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = [str(e) for e in errors]
        summary = "; ".join(self.errors) if self.errors else "invalid input"
        super().__init__(summary)


class ConfigurationError(PostureError):
    """Schema, calculator or threshold definitions that are inconsistent."""
