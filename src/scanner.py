"""Glue between a text-recognition engine's output and the item parser."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .parse_items import ReceiptItemParser
from .parsers.base import ExtractedItem

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 0.6


class RecognitionOutputError(ValueError):
    """Raised when a recognition output file cannot be read."""


@dataclass
class ScanResult:
    """Items extracted from one recognized receipt."""
    text: str
    confidence: float
    items: List[ExtractedItem] = field(default_factory=list)
    low_confidence: bool = False
    source: Optional[str] = None

    @property
    def success(self) -> bool:
        return bool(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'success': self.success,
            'confidence': self.confidence,
            'low_confidence': self.low_confidence,
            'items': [item.to_dict() for item in self.items],
            'text': self.text,
        }


def normalize_confidence(confidence: Optional[float]) -> float:
    """
    Bring an engine confidence onto the 0-1 scale.

    Some engines report percentages (0-100), others fractions (0-1).
    """
    if confidence is None:
        return 0.0
    try:
        value = float(confidence)
    except (TypeError, ValueError):
        return 0.0
    if value > 1.0:
        value = value / 100.0
    return round(min(1.0, max(0.0, value)), 2)


class ReceiptScanner:
    """Run the item parser over recognized text and judge the result."""

    def __init__(self,
                 parser: Optional[ReceiptItemParser] = None,
                 confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD):
        """
        Initialize the scanner.

        Args:
            parser: Item parser to use; a default parser if omitted
            confidence_threshold: Minimum engine confidence before a scan is flagged
                (fraction or percentage)
        """
        self.parser = parser or ReceiptItemParser()
        self.confidence_threshold = normalize_confidence(confidence_threshold)

    def scan(self, text: Optional[str], confidence: float = 1.0,
             source: Optional[str] = None) -> ScanResult:
        """
        Extract items from one recognized text.

        Args:
            text: Text returned by the recognition engine
            confidence: Overall engine confidence (0-1 or 0-100)
            source: Optional label, usually the originating file

        Returns:
            ScanResult with items and confidence flags
        """
        text = text or ""
        normalized = normalize_confidence(confidence)
        low_confidence = normalized < self.confidence_threshold
        if low_confidence:
            logger.warning(f"Low OCR confidence: {normalized:.0%}"
                           f"{f' for {source}' if source else ''}")

        items = self.parser.parse(text)
        if not items:
            logger.info(f"No items extracted{f' from {source}' if source else ''}")

        return ScanResult(
            text=text,
            confidence=normalized,
            items=items,
            low_confidence=low_confidence,
            source=source,
        )

    def scan_file(self, path: Path) -> ScanResult:
        """Load a recognition output file and scan it."""
        text, confidence = load_recognition_output(path)
        return self.scan(text, confidence, source=str(path))


def load_recognition_output(path: Path) -> Tuple[str, float]:
    """
    Read text and confidence from a recognition output file.

    JSON files carry ``text`` or ``full_text`` and an optional ``confidence``;
    anything else is read as plain text with full confidence.

    Raises:
        RecognitionOutputError: if the file cannot be decoded or has no text
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise RecognitionOutputError(f"Cannot read {path}: {e}") from e

    if path.suffix.lower() != '.json':
        return raw, 1.0

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RecognitionOutputError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise RecognitionOutputError(f"Expected a JSON object in {path}")

    text = data.get('text', data.get('full_text'))
    if not isinstance(text, str):
        raise RecognitionOutputError(f"No 'text' or 'full_text' field in {path}")

    return text, data.get('confidence', 1.0)
