"""Fast-reject filter for header, total and noise lines."""

import re
import logging
from typing import List, Pattern

logger = logging.getLogger(__name__)


class LineClassifier:
    """Decide whether a receipt line is a candidate item line."""

    def __init__(self):
        # Receipt sections that never carry items
        self.skip_prefixes = [
            'total', 'subtotal', 'tax', 'discount', 'amount', 'receipt',
            'bill', 'invoice', 'date', 'time', 'thank you', 'visit again',
        ]

        # Document titles such as "GROCERY RECEIPT"; lines with digits may be items
        self.title_words = ['receipt', 'invoice', 'bill']

        self.skip_patterns: List[Pattern] = [
            re.compile(r'^(?:' + '|'.join(re.escape(p) for p in self.skip_prefixes) + r')', re.IGNORECASE),
            re.compile(r'^(?!.*\d).*\b(?:' + '|'.join(self.title_words) + r')\b', re.IGNORECASE),
            re.compile(r'^[\d\s\-/:.]+$'),     # Numbers and punctuation only
            re.compile(r'^[^\w\s]*$'),          # Symbols only
            re.compile(r'^.{0,2}$'),            # Too short
            re.compile(r'^.{100,}$'),           # Too long
        ]

        # Store headers, staff lines, tax/ID lines and table headings
        self.not_item_patterns: List[Pattern] = [
            re.compile(r'^(?:item\s+name|description|qty|quantity|price)\b', re.IGNORECASE),
            re.compile(r'^(?:store|shop|market|supermarket|mall|address|phone|email|website|www)\b', re.IGNORECASE),
            re.compile(r'^(?:cashier|clerk|manager|staff)\b', re.IGNORECASE),
            re.compile(r'^(?:gst|vat|tax|id|no|number)\b', re.IGNORECASE),
        ]

    def should_skip(self, line: str) -> bool:
        """Return True for lines that cannot be item lines."""
        stripped = line.strip()
        for pattern in self.skip_patterns:
            if pattern.search(stripped):
                logger.debug(f"Skipping line: '{stripped}'")
                return True
        return False

    def is_likely_not_item(self, text: str) -> bool:
        """Return True for store, staff and tax/ID fragments."""
        return any(pattern.search(text.strip()) for pattern in self.not_item_patterns)
