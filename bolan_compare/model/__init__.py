# 統一 import 各 domain model
from bolan_compare.model.models import (
    Bank,
    DANSKE_BANK,
    DUMMY_BANK,
    Term,
    RateType,
    RatioDiscountBoundary,
    InterestRateRecord,
    CANONICAL_BOUNDARIES,
    LTV_0_60,
    LTV_60_75,
    LTV_75_80,
    LTV_80_85,
    CrawlError,
    FetchError,
    StructuralError,
    ParseError,
    StoreError,
)

__all__ = [
    "Bank",
    "DANSKE_BANK",
    "DUMMY_BANK",
    "Term",
    "RateType",
    "RatioDiscountBoundary",
    "InterestRateRecord",
    "CANONICAL_BOUNDARIES",
    "LTV_0_60",
    "LTV_60_75",
    "LTV_75_80",
    "LTV_80_85",
    "CrawlError",
    "FetchError",
    "StructuralError",
    "ParseError",
    "StoreError",
]
