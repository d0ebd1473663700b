from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.config import ConfigDict

from .criteria.severity import SeverityClassifier, default_classifier
from .errors import ConfigurationError
from .landmarks.schema import LandmarkSchema
from .metrics.registry import build_default_schema, default_schema


class EngineConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Per-measurement (t1, t2, t3) replacing the built-in severity bands.
    threshold_overrides: Dict[str, Tuple[float, float, float]] = Field(default_factory=dict)
    # Presentation only; computation always keeps full precision.
    angle_decimals: int = Field(default=1, ge=0, le=6)
    ratio_decimals: int = Field(default=3, ge=0, le=6)
    # Decimals of the percentage shown for ratio measurements.
    percent_decimals: int = Field(default=1, ge=0, le=4)
    log_level: str = "INFO"

    def build_classifier(self) -> SeverityClassifier:
        if not self.threshold_overrides:
            return default_classifier()
        return default_classifier().with_overrides(self.threshold_overrides)

    def build_schema(self) -> LandmarkSchema:
        if not self.threshold_overrides:
            return default_schema()
        return build_default_schema(self.build_classifier())


def load_config(path: Optional[Path] = None) -> EngineConfig:
    """Read an EngineConfig from YAML. No path or a missing file gives defaults."""
    if path is None or not Path(path).exists():
        return EngineConfig()
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Cannot parse config {path}: {exc}") from exc
    if data is None:
        return EngineConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config root must be a mapping: {path}")
    try:
        cfg = EngineConfig.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid config {path}: {exc}") from exc
    # Fail on bad thresholds at load time rather than on first use.
    cfg.build_classifier()
    return cfg
