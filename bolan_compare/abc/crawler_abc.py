from abc import ABC, abstractmethod
from typing import Protocol

from bolan_compare.model.models import InterestRateRecord


class RecordSink(Protocol):
    """爬蟲輸出利率資料的目的地（通常是 CrawlService 的共用通道）"""
    async def send(self, record: InterestRateRecord) -> None: ...


class SiteCrawlerABC(ABC):
    """
    Crawler 層的抽象基底類，規範所有銀行網站爬蟲的標準介面。

    實作者只需提供 produce：抓取一次網站、解析後將每筆資料送進 sink。
    produce 不應向外拋出例外，失敗時記錄日誌後直接返回。
    """
    @abstractmethod
    async def produce(self, sink: RecordSink) -> None:
        pass
