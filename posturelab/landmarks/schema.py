from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Mapping, Sequence, Tuple

from ..criteria.severity import SeverityClassifier
from ..errors import ConfigurationError
from ..metrics.calculators import Calculator
from ..models import PHOTO_TYPES, PhotoType

logger = logging.getLogger(__name__)


class LandmarkSchema:
    """Landmark vocabulary per photo type and the calculators registered on it.

    Every registration is checked up front: unknown photo types, labels
    outside the photo's vocabulary, duplicate calculator names and
    measurements without severity thresholds raise ``ConfigurationError``
    here, never while computing.
    """

    def __init__(self, vocabularies: Mapping[str, Sequence[str]], classifier: SeverityClassifier) -> None:
        missing = [pt for pt in PHOTO_TYPES if pt not in vocabularies]
        extra = [pt for pt in vocabularies if pt not in PHOTO_TYPES]
        if missing:
            raise ConfigurationError(f"Missing vocabulary for photo types: {missing}")
        if extra:
            raise ConfigurationError(f"Unknown photo types in vocabulary: {extra}")
        self._vocab: Dict[PhotoType, Tuple[str, ...]] = {}
        for pt in PHOTO_TYPES:
            labels = tuple(str(label) for label in vocabularies[pt])
            if len(set(labels)) != len(labels):
                raise ConfigurationError(f"Duplicate labels in {pt} vocabulary")
            self._vocab[pt] = labels
        self.classifier = classifier
        self._calculators: Dict[PhotoType, Dict[str, Calculator]] = {pt: {} for pt in PHOTO_TYPES}
        self._frozen = False

    def _check_photo_type(self, photo_type: str) -> PhotoType:
        if photo_type not in self._vocab:
            raise ConfigurationError(f"Undefined photo type: {photo_type!r}")
        return photo_type  # type: ignore[return-value]

    def register(self, photo_type: str, calculator: Calculator) -> None:
        if self._frozen:
            raise ConfigurationError("Schema is frozen; build a new schema to add calculators")
        pt = self._check_photo_type(photo_type)
        if calculator.name in self._calculators[pt]:
            raise ConfigurationError(f"Calculator '{calculator.name}' already registered for {pt}")
        unknown = [label for label in calculator.labels if label not in self._vocab[pt]]
        if unknown:
            raise ConfigurationError(
                f"Calculator '{calculator.name}' references labels not in the {pt} vocabulary: {unknown}"
            )
        if len(set(calculator.labels)) != len(calculator.labels):
            raise ConfigurationError(f"Calculator '{calculator.name}' repeats a label: {list(calculator.labels)}")
        if not self.classifier.has(calculator.name):
            raise ConfigurationError(f"Calculator '{calculator.name}' has no severity thresholds")
        self._calculators[pt][calculator.name] = calculator
        logger.debug("Registered %s on %s (%s)", calculator.name, pt, ", ".join(calculator.labels))

    def freeze(self) -> "LandmarkSchema":
        self._frozen = True
        return self

    def vocabulary(self, photo_type: str) -> Tuple[str, ...]:
        return self._vocab[self._check_photo_type(photo_type)]

    def is_known_label(self, photo_type: str, label: str) -> bool:
        return label in self.vocabulary(photo_type)

    def calculators_for(self, photo_type: str) -> List[str]:
        return list(self._calculators[self._check_photo_type(photo_type)])

    def calculator(self, photo_type: str, calculator_name: str) -> Calculator:
        pt = self._check_photo_type(photo_type)
        try:
            return self._calculators[pt][calculator_name]
        except KeyError:
            raise ConfigurationError(f"No calculator '{calculator_name}' registered for {pt}") from None

    def iter_calculators(self, photo_type: str) -> List[Calculator]:
        return list(self._calculators[self._check_photo_type(photo_type)].values())

    def required_labels(self, photo_type: str, calculator_name: str) -> FrozenSet[str]:
        return self.calculator(photo_type, calculator_name).required_labels
