from bolan_compare.extraction.engine import ExtractionEngine
from bolan_compare.extraction.models import ExtractionConfig, RowText
from bolan_compare.extraction.parsing import (
    RateCellParser,
    get_all_text,
    normalize_label,
    parse_discount_boundaries,
    parse_term,
)

__all__ = [
    "ExtractionEngine",
    "ExtractionConfig",
    "RowText",
    "RateCellParser",
    "get_all_text",
    "normalize_label",
    "parse_discount_boundaries",
    "parse_term",
]
