"""Base classes and data types for receipt item parsers."""

from abc import ABC, abstractmethod
from typing import Optional, Any, Dict
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

DEFAULT_UNIT = "pcs"
DEFAULT_CATEGORY = "General"


@dataclass(frozen=True)
class ExtractedItem:
    """A single inventory item extracted from receipt text."""
    name: str
    quantity: float
    price: float
    unit: str = DEFAULT_UNIT
    min_stock: int = 1
    category: str = DEFAULT_CATEGORY
    confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the inventory API field names."""
        return {
            'name': self.name,
            'quantity': self.quantity,
            'price': self.price,
            'unit': self.unit,
            'minStock': self.min_stock,
            'category': self.category,
            'confidence': self.confidence,
        }


@dataclass(frozen=True)
class LineMatch:
    """Fields captured from one candidate line by a pattern rule."""
    name: str
    quantity: float
    price: float
    unit: str = DEFAULT_UNIT
    pattern: str = ""
    confidence: float = 0.0


class BaseLineParser(ABC):
    """Base class for parsers that work on a single receipt line."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def parse(self, line: str) -> Optional[LineMatch]:
        """
        Extract item fields from one candidate line.

        Args:
            line: Trimmed receipt line

        Returns:
            LineMatch with captured fields, or None if nothing matched
        """
        pass

    def _log_result(self, result: Optional[LineMatch], line: str):
        """Log parsing result for debugging."""
        if result:
            self.logger.debug(f"Matched '{line}' via {result.pattern}: "
                              f"{result.name} x{result.quantity} @ {result.price} "
                              f"(confidence: {result.confidence:.2f})")
        else:
            self.logger.debug(f"No pattern matched '{line}'")


def parse_number(value: Optional[str], default: float) -> float:
    """Parse a numeric token, falling back to ``default`` on bad input."""
    if value is None:
        return default
    try:
        return float(value.replace(',', '').strip())
    except (ValueError, AttributeError):
        return default
