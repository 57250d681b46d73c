from typing import Optional
from datetime import datetime
from decimal import Decimal
import asyncio

from bolan_compare.utils.logger import get_logger
from bolan_compare.abc.crawler_abc import RecordSink, SiteCrawlerABC
from bolan_compare.model.models import DUMMY_BANK, InterestRateRecord, RateType, Term

logger = get_logger(logger_level="INFO")


class DummyCrawler(SiteCrawlerABC):
    """不連網的假爬蟲，以固定間隔送出合成資料，用來驗證 sink 流程"""

    DEFAULT_COUNT = 4
    DEFAULT_INTERVAL = 3.0  # 秒

    def __init__(self, count: Optional[int] = None, interval: Optional[float] = None):
        self.count = self.DEFAULT_COUNT if count is None else count
        self.interval = self.DEFAULT_INTERVAL if interval is None else interval

    async def produce(self, sink: RecordSink) -> None:
        crawled_at = datetime.now()
        terms = list(Term)
        for i in range(self.count):
            logger.info(f"🧪 dummy crawler 產生第 {i + 1} 筆")
            await sink.send(InterestRateRecord(
                bank=DUMMY_BANK,
                nominal_rate=Decimal(i + 1),
                effective_rate=Decimal(i + 1),
                term=terms[i % len(terms)],
                rate_type=RateType.LIST,
                changed_on=crawled_at.date(),
                last_crawled_at=crawled_at,
            ))
            if i < self.count - 1:
                await asyncio.sleep(self.interval)
