"""Keyword-based item category lookup."""

import yaml
import logging
from pathlib import Path
from typing import Dict, List, Optional
from .base import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent / 'rules' / 'categories.yml'


class CategoryGuesser:
    """Map item names to a coarse category using ordered keyword rules."""

    def __init__(self, rules_path: Optional[Path] = None):
        """
        Initialize guesser with category rules.

        Args:
            rules_path: Path to a categories.yml file; the packaged rules by default
        """
        self.rules_path = Path(rules_path) if rules_path else DEFAULT_RULES_PATH
        self.categories: Dict[str, List[str]] = {}
        self.load_rules()

    def load_rules(self):
        """Load category rules from YAML file, keeping file order."""
        try:
            with open(self.rules_path, 'r', encoding='utf-8') as f:
                rules = yaml.safe_load(f) or {}
        except Exception as e:
            logger.error(f"Failed to load category rules from {self.rules_path}: {e}")
            raise

        if not isinstance(rules, dict):
            raise ValueError(f"Category rules must be a mapping: {self.rules_path}")

        self.categories = {
            category: [str(keyword).lower() for keyword in (entry or {}).get('any', [])]
            for category, entry in rules.items()
        }
        logger.info(f"Loaded {len(self.categories)} category rules")

    def guess(self, item_name: str) -> str:
        """Return the first category whose keyword appears in the name."""
        name_lower = item_name.lower()

        for category, keywords in self.categories.items():
            if any(keyword in name_lower for keyword in keywords):
                return category

        return DEFAULT_CATEGORY
