from __future__ import annotations
from enum import IntEnum, auto
from typing import Iterable, List
import asyncio

from bolan_compare.utils.logger import get_logger
from bolan_compare.abc.crawler_abc import SiteCrawlerABC
from bolan_compare.abc.store_abc import StoreABC
from bolan_compare.service.channel import RecordChannel

logger = get_logger(logger_level="INFO")


class CrawlState(IntEnum):
    """單次爬取的狀態"""
    IDLE      = auto()
    RUNNING   = auto()  # 爬蟲與接收者皆在執行
    DRAINING  = auto()  # 爬蟲皆已結束，通道關閉中
    COMPLETE  = auto()


class CrawlService:
    """並行執行所有爬蟲，並由單一接收者依序寫入儲存層

    流程：
    1. 建立共用通道，啟動唯一的接收者
    2. 每個爬蟲一個 producer，同時執行
    3. 全部 producer 結束後關閉通道（僅此一處、僅一次）
    4. 等待接收者把通道內剩餘資料寫完

    爬蟲或儲存層的錯誤只會記錄日誌，crawl() 本身不會因此失敗。
    沒有重試與逾時：任何一個卡住的爬蟲都會讓整輪卡住。
    若呼叫端取消 crawl()（例如外層的 wait_for 逾時），接收者會一併取消，
    狀態回到 IDLE，之後可以重新執行。
    """

    def __init__(self, store: StoreABC, crawlers: Iterable[SiteCrawlerABC]):
        self.store = store
        self.crawlers: List[SiteCrawlerABC] = list(crawlers)
        self.state = CrawlState.IDLE

    def _set_state(self, state: CrawlState) -> None:
        logger.debug(f"🔄 狀態：{self.state.name} -> {state.name}")
        self.state = state

    async def crawl(self) -> None:
        if self.state in (CrawlState.RUNNING, CrawlState.DRAINING):
            raise RuntimeError("已有爬取正在進行中")

        self._set_state(CrawlState.RUNNING)
        channel = RecordChannel()
        consumer = asyncio.create_task(self._receive(channel))

        logger.info(f"🚀 啟動 {len(self.crawlers)} 個爬蟲")
        finished = False
        try:
            results = await asyncio.gather(
                *(crawler.produce(channel) for crawler in self.crawlers),
                return_exceptions=True,  # 單一爬蟲失敗不影響其他爬蟲
            )

            for crawler, result in zip(self.crawlers, results):
                if isinstance(result, BaseException):
                    logger.error(f"❌ {type(crawler).__name__} 異常結束：{result!r}")

            self._set_state(CrawlState.DRAINING)
            logger.info("🏁 所有爬蟲已結束，關閉通道")
            await channel.close()
            await consumer
            finished = True
        finally:
            if not consumer.done():
                consumer.cancel()
                await asyncio.gather(consumer, return_exceptions=True)
            if not finished:
                logger.warning("⚠️ 爬取被中斷，狀態重設")
                self._set_state(CrawlState.IDLE)

        self._set_state(CrawlState.COMPLETE)

    async def _receive(self, channel: RecordChannel) -> None:
        logger.info("📬 開始接收爬蟲資料")
        stored = 0
        failed = 0
        async for record in channel:
            try:
                await self.store.upsert(record)
            except Exception as e:
                failed += 1
                logger.error(
                    f"❌ 寫入失敗：{record.bank} {record.term.value} "
                    f"{record.rate_type.value}：{str(e)}"
                )
                continue
            stored += 1
            logger.debug(f"💾 已寫入：{record.bank} {record.term.value} {record.nominal_rate}%")
        logger.info(f"📦 接收結束：成功 {stored} 筆，失敗 {failed} 筆")
