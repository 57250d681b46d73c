from __future__ import annotations
"""房貸利率比較系統核心模組"""
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from bolan_compare.abc.crawler_abc import SiteCrawlerABC
    from bolan_compare.abc.store_abc import StoreABC


class BolanCompareCore:
    """房貸利率爬取功能的統一入口點

    此類別提供以下功能：
    1. 爬蟲相關操作
       - default_crawlers(): 取得預設的銀行爬蟲列表

    2. 爬取流程
       - crawl(): 並行執行所有爬蟲並寫入儲存層
    """

    def default_crawlers(self) -> List[SiteCrawlerABC]:
        """取得預設的銀行爬蟲列表

        Returns:
            List[SiteCrawlerABC]: 目前支援的所有銀行爬蟲
        """
        from bolan_compare.crawler.danske_bank import DanskeBankCrawler
        return [DanskeBankCrawler()]

    async def crawl(
        self,
        store: Optional[StoreABC] = None,
        crawlers: Optional[List[SiteCrawlerABC]] = None,
    ) -> StoreABC:
        """執行一輪爬取

        Args:
            store: 儲存層，預設為 MemoryStore
            crawlers: 爬蟲列表，預設為 default_crawlers()

        Returns:
            StoreABC: 寫入資料的儲存層
        """
        from bolan_compare.service.service import CrawlService
        from bolan_compare.store.memory import MemoryStore

        if store is None:
            store = MemoryStore()
        if crawlers is None:
            crawlers = self.default_crawlers()
        await CrawlService(store, crawlers).crawl()
        return store
