"""Review queue for scans that need a human look before saving."""

import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, asdict
from pathlib import Path

from .scanner import ScanResult

logger = logging.getLogger(__name__)


@dataclass
class ReviewItem:
    """Represents a scan that needs manual review."""
    source: str
    reason: str
    item_count: int = 0
    ocr_confidence: float = 0.0
    raw_snippet: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ReviewQueue:
    """Manages scans that need manual review."""

    def __init__(self, thresholds: Optional[Dict[str, float]] = None):
        """
        Initialize review queue.

        Args:
            thresholds: Minimum scores; 'ocr' is the engine confidence floor
        """
        self.items: List[ReviewItem] = []
        self.thresholds = thresholds or {
            'ocr': 0.6,
        }

    def should_review(self, result: ScanResult) -> List[str]:
        """
        Collect reasons why a scan should be reviewed.

        Args:
            result: Scan to check

        Returns:
            List of reasons; empty if the scan looks fine
        """
        reasons = []

        if not result.items:
            reasons.append("no items extracted")

        if result.low_confidence or result.confidence < self.thresholds['ocr']:
            reasons.append(f"low OCR confidence ({result.confidence:.2f})")

        unpriced = sum(1 for item in result.items if item.price == 0)
        if unpriced:
            reasons.append(f"{unpriced} item(s) without price")

        return reasons

    def add_item(self,
                 source: str,
                 reason: str,
                 item_count: int = 0,
                 ocr_confidence: float = 0.0,
                 raw_snippet: str = "") -> ReviewItem:
        """Add an item to the review queue."""
        item = ReviewItem(
            source=source,
            reason=reason,
            item_count=item_count,
            ocr_confidence=ocr_confidence,
            raw_snippet=raw_snippet,
        )
        self.items.append(item)
        logger.debug(f"Added to review queue: {Path(source).name} - {reason}")
        return item

    def add_from_scan(self, result: ScanResult) -> Optional[ReviewItem]:
        """Add a scan to the queue if it needs review."""
        reasons = self.should_review(result)
        if not reasons:
            return None

        source = result.source or "<text>"

        # First 200 chars of the text on one line
        snippet = ' '.join(result.text.split())[:200]
        if len(result.text) > 200:
            snippet += "..."

        logger.info(f"Sending {Path(source).name} to review: {'; '.join(reasons)}")
        return self.add_item(
            source=source,
            reason="; ".join(reasons),
            item_count=len(result.items),
            ocr_confidence=result.confidence,
            raw_snippet=snippet,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the review queue."""
        if not self.items:
            return {"total": 0}

        empty_scans = 0
        ocr_issues = 0
        unpriced = 0

        for item in self.items:
            reason = item.reason.lower()
            if 'no items' in reason:
                empty_scans += 1
            if 'ocr' in reason:
                ocr_issues += 1
            if 'without price' in reason:
                unpriced += 1

        return {
            "total": len(self.items),
            "empty_scans": empty_scans,
            "ocr_issues": ocr_issues,
            "unpriced_items": unpriced,
        }

    def clear(self):
        """Clear all items from the review queue."""
        self.items.clear()
        logger.info("Review queue cleared")
