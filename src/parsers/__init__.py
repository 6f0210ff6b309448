"""Receipt line parsing components - one concern per module."""

from .base import ExtractedItem, LineMatch
from .line_classifier import LineClassifier
from .item_patterns import ItemPatternMatcher, PatternRule
from .name_cleaner import clean_item_name
from .category_guesser import CategoryGuesser
from .stock_estimator import estimate_min_stock

__all__ = [
    'ExtractedItem',
    'LineMatch',
    'LineClassifier',
    'ItemPatternMatcher',
    'PatternRule',
    'clean_item_name',
    'CategoryGuesser',
    'estimate_min_stock',
]
