from types import MappingProxyType
from typing import Mapping, Optional

from bolan_compare.crawler.site_crawler import HtmlTableCrawler
from bolan_compare.extraction.models import ExtractionConfig
from bolan_compare.extraction.parsing import RateCellParser
from bolan_compare.model.models import (
    DANSKE_BANK,
    LTV_0_60,
    LTV_60_75,
    LTV_75_80,
    LTV_80_85,
    RatioDiscountBoundary,
    Term,
)

# 列標題 -> 期限
DANSKE_BANK_TERM_LABELS: Mapping[str, Term] = MappingProxyType({
    "3 mån": Term.THREE_MONTHS,
    "1 år": Term.ONE_YEAR,
    "2 år": Term.TWO_YEARS,
    "3 år": Term.THREE_YEARS,
    "4 år": Term.FOUR_YEARS,
    "5 år": Term.FIVE_YEARS,
    "6 år": Term.SIX_YEARS,
    "7 år": Term.SEVEN_YEARS,
    "8 år": Term.EIGHT_YEARS,
    "9 år": Term.NINE_YEARS,
    "10 år": Term.TEN_YEARS,
})

# 表頭欄位 -> 成數區間
DANSKE_BANK_BOUNDARY_LABELS: Mapping[str, RatioDiscountBoundary] = MappingProxyType({
    "60%": LTV_0_60,
    "61-74%": LTV_60_75,
    "75-79%": LTV_75_80,
    "80-85%": LTV_80_85,
})

DANSKE_BANK_CONFIG = ExtractionConfig(
    bank=DANSKE_BANK,
    anchor_selector='td b:-soup-contains("Belåningsgrad")',
    ltv_phrase="Belåningsgrad",
    # 一般利率表、工會會員優惠利率表
    union_discount_by_table=(False, True),
    term_labels=dict(DANSKE_BANK_TERM_LABELS),
    boundary_labels=dict(DANSKE_BANK_BOUNDARY_LABELS),
    cell_parser=RateCellParser(decimal_separator=",", strip_chars="%*()"),
)


class DanskeBankCrawler(HtmlTableCrawler):
    """Danske Bank（瑞典）房貸成數折扣利率爬蟲"""

    DEFAULT_URL = "https://danskebank.se/privat/produkter/bolan/relaterat/aktuella-bolanerantor"
    DEFAULT_CONFIG = DANSKE_BANK_CONFIG

    def __init__(
        self,
        url: Optional[str] = None,
        config: Optional[ExtractionConfig] = None,
        *,
        timeout: Optional[float] = None,
    ):
        super().__init__(
            url or self.DEFAULT_URL,
            config or self.DEFAULT_CONFIG,
            timeout=timeout,
            name="DanskeBankCrawler",
        )
