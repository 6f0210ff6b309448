"""Receipt Items - Extract inventory items from recognized receipt text."""

__version__ = "1.0.0"
__author__ = "Receipt Items Team"
__email__ = ""

from .parse_items import ReceiptItemParser, parse_receipt_items
from .parsers import ExtractedItem, CategoryGuesser
from .scanner import ReceiptScanner, ScanResult, RecognitionOutputError
from .review import ReviewQueue, ReviewItem

__all__ = [
    'ReceiptItemParser',
    'parse_receipt_items',
    'ExtractedItem',
    'CategoryGuesser',
    'ReceiptScanner',
    'ScanResult',
    'RecognitionOutputError',
    'ReviewQueue',
    'ReviewItem',
]
