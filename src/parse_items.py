"""Receipt text to inventory item extraction."""

import logging
from pathlib import Path
from typing import List, Optional
from .parsers import (
    ExtractedItem,
    LineClassifier,
    ItemPatternMatcher,
    CategoryGuesser,
    clean_item_name,
    estimate_min_stock,
)
from .parsers.base import DEFAULT_UNIT

logger = logging.getLogger(__name__)

MAX_ITEMS = 20
NAME_ONLY_CONFIDENCE = 0.5
NAME_ONLY_MIN_LENGTH = 4
NAME_ONLY_MAX_LENGTH = 49


class ReceiptItemParser:
    """
    Turn raw recognized receipt text into a list of inventory items.

    Each line goes through the line classifier, then the pattern cascade,
    then name-only extraction as a last resort. The parser holds no
    per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, rules_path: Optional[Path] = None, max_items: int = MAX_ITEMS):
        """Initialize with line parsing components and category rules."""
        self.classifier = LineClassifier()
        self.matcher = ItemPatternMatcher()
        self.category_guesser = CategoryGuesser(rules_path)
        self.max_items = max_items

    def parse(self, text: Optional[str]) -> List[ExtractedItem]:
        """
        Extract items from receipt text.

        Args:
            text: Raw recognized text, one nominal item per line

        Returns:
            Items in source line order, deduplicated by name, at most max_items long
        """
        if not text or not isinstance(text, str):
            return []

        items: List[ExtractedItem] = []
        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line or self.classifier.should_skip(line):
                continue

            item = self._parse_line(line)
            if item:
                items.append(item)

        unique_items = self._remove_duplicates(items)
        if len(unique_items) > self.max_items:
            logger.warning(f"Extracted {len(unique_items)} items, keeping first {self.max_items}")

        result = unique_items[:self.max_items]
        logger.info(f"Extracted {len(result)} items from {len(text.splitlines())} lines")
        return result

    def _parse_line(self, line: str) -> Optional[ExtractedItem]:
        """Build an item from one candidate line, or None."""
        match = self.matcher.parse(line)
        if match:
            return ExtractedItem(
                name=match.name,
                quantity=match.quantity,
                price=match.price,
                unit=match.unit,
                min_stock=estimate_min_stock(match.quantity),
                category=self.category_guesser.guess(match.name),
                confidence=match.confidence,
            )

        return self._extract_name_only(line)

    def _extract_name_only(self, line: str) -> Optional[ExtractedItem]:
        """Treat a short unmatched line as a bare item name."""
        if not (NAME_ONLY_MIN_LENGTH <= len(line) <= NAME_ONLY_MAX_LENGTH):
            return None

        name = clean_item_name(line)
        if not name or self.classifier.is_likely_not_item(name):
            logger.debug(f"Rejected name-only candidate: '{line}'")
            return None

        return ExtractedItem(
            name=name,
            quantity=1.0,
            price=0.0,
            unit=DEFAULT_UNIT,
            min_stock=estimate_min_stock(1.0),
            category=self.category_guesser.guess(name),
            confidence=NAME_ONLY_CONFIDENCE,
        )

    def _remove_duplicates(self, items: List[ExtractedItem]) -> List[ExtractedItem]:
        """Keep the first item for each case-insensitive name."""
        seen = set()
        unique = []
        for item in items:
            key = item.name.lower().strip()
            if key in seen:
                continue
            seen.add(key)
            unique.append(item)
        return unique


def parse_receipt_items(text: Optional[str]) -> List[ExtractedItem]:
    """Convenience wrapper using the packaged category rules."""
    return ReceiptItemParser().parse(text)
