"""Ordered pattern cascade for item lines."""

import re
import logging
from dataclasses import dataclass
from typing import Optional, List, Pattern
from .base import BaseLineParser, LineMatch, DEFAULT_UNIT, parse_number
from .name_cleaner import clean_item_name

logger = logging.getLogger(__name__)

NUMBER = r'(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?'
UNITS = (r'pcs?|pieces?|units?|kgs?|g|lbs?|oz|ml|l|bottles?|loaf|loaves'
         r'|packs?|tablets?|capsules?')
UNIT = rf'(?:(?P<unit>{UNITS})\b)?'
CURRENCY = r'(?:[$₹€£]\s*)?'
DASH = r'[-–—]'


@dataclass(frozen=True)
class PatternRule:
    """One entry of the pattern table.

    The regex uses named groups ``name``, ``qty``, ``unit`` and ``price``;
    a rule without a ``qty`` group implies a quantity of one.
    """
    name: str
    regex: Pattern
    confidence: float


class ItemPatternMatcher(BaseLineParser):
    """Extract name, quantity and price from a line, most specific pattern first."""

    def __init__(self, rules: Optional[List[PatternRule]] = None):
        super().__init__()

        # Patterns in priority order (first acceptable match wins)
        self.rules = rules if rules is not None else [
            PatternRule(
                'dash',         # Apple - 5 pcs - $2.50
                re.compile(rf'^(?P<name>.+?)\s*{DASH}\s*(?P<qty>{NUMBER})\s*{UNIT}'
                           rf'\s*{DASH}\s*{CURRENCY}(?P<price>{NUMBER})', re.IGNORECASE),
                0.9,
            ),
            PatternRule(
                'dash_unit',    # Rice 5kg - $12.00
                re.compile(rf'^(?P<name>.+?)\s+(?P<qty>{NUMBER})\s*(?P<unit>{UNITS})\b'
                           rf'\s*{DASH}\s*{CURRENCY}(?P<price>{NUMBER})', re.IGNORECASE),
                0.9,
            ),
            PatternRule(
                'multiply',     # Eggs 12 x $0.25
                re.compile(rf'^(?P<name>.+?)\s+(?P<qty>{NUMBER})\s*{UNIT}'
                           rf'\s*[x×]\s*{CURRENCY}(?P<price>{NUMBER})', re.IGNORECASE),
                0.85,
            ),
            PatternRule(
                'quantity_first',   # 2 kg Potatoes $3.10
                re.compile(rf'^(?P<qty>{NUMBER})\s*{UNIT}\s+(?P<name>.+?)'
                           rf'\s+(?:{DASH}\s*)?{CURRENCY}(?P<price>{NUMBER})', re.IGNORECASE),
                0.8,
            ),
            PatternRule(
                'colon',        # Milk: 2 bottles @ $1.20
                re.compile(rf'^(?P<name>.+?):\s*(?P<qty>{NUMBER})\s*{UNIT}'
                           rf'\s*@\s*{CURRENCY}(?P<price>{NUMBER})', re.IGNORECASE),
                0.85,
            ),
            PatternRule(
                'name_price',   # Bread $2.00
                re.compile(rf'^(?P<name>.+?)\s+(?:{DASH}\s*)?{CURRENCY}(?P<price>{NUMBER})\s*$',
                           re.IGNORECASE),
                0.7,
            ),
        ]

    def parse(self, line: str) -> Optional[LineMatch]:
        """
        Run the pattern cascade over one candidate line.

        A match whose name cleans down to nothing does not stop the search;
        the next pattern is tried instead.

        Args:
            line: Trimmed receipt line

        Returns:
            LineMatch with a cleaned name, or None if no pattern produced an item
        """
        for rule in self.rules:
            match = rule.regex.search(line)
            if not match:
                continue

            groups = match.groupdict()
            name = clean_item_name(groups.get('name') or '')
            if not name:
                continue

            quantity = parse_number(groups.get('qty'), 1.0)
            if quantity <= 0:
                quantity = 1.0
            price = max(0.0, parse_number(groups.get('price'), 0.0))
            unit = (groups.get('unit') or DEFAULT_UNIT).lower()

            result = LineMatch(
                name=name,
                quantity=quantity,
                price=price,
                unit=unit,
                pattern=rule.name,
                confidence=rule.confidence,
            )
            self._log_result(result, line)
            return result

        self._log_result(None, line)
        return None
