from __future__ import annotations
from typing import Optional, Tuple
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator

# 基礎型別定義
Bank = str  # 銀行名稱，例如 "Danske Bank"

DANSKE_BANK: Bank = "Danske Bank"
DUMMY_BANK: Bank = "Dummy Bank"


class CrawlError(Exception):
    """爬取利率時可能發生的錯誤的共同基底"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class FetchError(CrawlError):
    """網路請求失敗（連線、逾時、HTTP 狀態碼）"""

class StructuralError(CrawlError):
    """網頁結構與預期不符，代表解析器需要更新"""

class ParseError(CrawlError):
    """儲存格文字無法解析為利率數字"""

class StoreError(CrawlError):
    """寫入儲存層失敗"""


class Term(str, Enum):
    """固定期限（綁約期間）"""
    THREE_MONTHS = "3m"
    ONE_YEAR = "1y"
    TWO_YEARS = "2y"
    THREE_YEARS = "3y"
    FOUR_YEARS = "4y"
    FIVE_YEARS = "5y"
    SIX_YEARS = "6y"
    SEVEN_YEARS = "7y"
    EIGHT_YEARS = "8y"
    NINE_YEARS = "9y"
    TEN_YEARS = "10y"


class RateType(str, Enum):
    """利率種類，目前只有 RATIO_DISCOUNTED 會被實際產生"""
    LIST = "list"
    AVERAGE = "average"
    RATIO_DISCOUNTED = "ratioDiscounted"


class RatioDiscountBoundary(BaseModel):
    """貸款成數（belåningsgrad）區間 [min_ratio, max_ratio)"""
    model_config = ConfigDict(frozen=True)

    min_ratio: Decimal = Field(ge=0, le=1)
    max_ratio: Decimal = Field(ge=0, le=1)

    @model_validator(mode="after")
    def _check_order(self) -> "RatioDiscountBoundary":
        if self.min_ratio >= self.max_ratio:
            raise ValueError(f"min_ratio {self.min_ratio} 必須小於 max_ratio {self.max_ratio}")
        return self

    def contains(self, ratio: Decimal) -> bool:
        return self.min_ratio <= ratio < self.max_ratio


LTV_0_60 = RatioDiscountBoundary(min_ratio=Decimal("0"), max_ratio=Decimal("0.60"))
LTV_60_75 = RatioDiscountBoundary(min_ratio=Decimal("0.60"), max_ratio=Decimal("0.75"))
LTV_75_80 = RatioDiscountBoundary(min_ratio=Decimal("0.75"), max_ratio=Decimal("0.80"))
LTV_80_85 = RatioDiscountBoundary(min_ratio=Decimal("0.80"), max_ratio=Decimal("0.85"))

CANONICAL_BOUNDARIES: Tuple[RatioDiscountBoundary, ...] = (
    LTV_0_60,
    LTV_60_75,
    LTV_75_80,
    LTV_80_85,
)

RecordKey = Tuple[Bank, Term, RateType, Optional[RatioDiscountBoundary], bool]


class InterestRateRecord(BaseModel):
    """單筆房貸利率資料

    包含：
    - 名目利率與實質利率（百分比）
    - 期限與利率種類
    - 成數折扣區間（僅 RATIO_DISCOUNTED 才有）
    - 利率變更日與本次爬取時間
    """
    model_config = ConfigDict(frozen=True)

    bank: Bank
    nominal_rate: Decimal = Field(ge=0)  # 名目利率 (%)
    effective_rate: Decimal = Field(ge=0)  # 實質利率 (%)
    term: Term
    rate_type: RateType
    discount_boundary: Optional[RatioDiscountBoundary] = None
    union_discount: bool = False  # 工會會員優惠
    changed_on: date  # 銀行公告的利率變更日
    last_crawled_at: datetime  # 本次爬取時間，同一輪爬取共用

    @model_validator(mode="after")
    def _check_boundary(self) -> "InterestRateRecord":
        has_boundary = self.discount_boundary is not None
        if has_boundary != (self.rate_type == RateType.RATIO_DISCOUNTED):
            raise ValueError("discount_boundary 只能且必須出現在 ratioDiscounted 利率")
        return self

    def key(self) -> RecordKey:
        """儲存層 upsert 使用的語意鍵"""
        return (self.bank, self.term, self.rate_type, self.discount_boundary, self.union_discount)
