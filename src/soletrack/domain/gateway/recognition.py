"""Image-recognition gateway contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from soletrack.domain.model.value_objects import Money

MIN_CONFIDENCE = 0.2
NO_DETECTION = "None detected"


@dataclass(frozen=True)
class Detection:
    """Best guess for the shoe in a still frame."""

    color: str
    size: str
    wholesale_price: Money
    retailer_price: Money
    brand: str
    confidence: float
    notes: str = ""

    @property
    def is_match(self) -> bool:
        """Low confidence or an explicit "None detected" is an empty result, not an error."""
        return self.confidence >= MIN_CONFIDENCE and self.brand.strip() != NO_DETECTION


class RecognitionGateway(ABC):

    @abstractmethod
    def detect(self, image: bytes) -> Detection:
        """Identify the shoe in a JPEG frame.

        Raises RecognitionError on transport or parse failures.
        """
