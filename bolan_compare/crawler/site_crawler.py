from __future__ import annotations
from typing import Dict, List, Optional
from datetime import datetime
import asyncio
import aiohttp
from aiohttp import client_exceptions
from bs4 import BeautifulSoup

from bolan_compare.utils.logger import get_logger
from bolan_compare.abc.crawler_abc import RecordSink, SiteCrawlerABC
from bolan_compare.extraction.engine import ExtractionEngine
from bolan_compare.extraction.models import ExtractionConfig
from bolan_compare.model.models import CrawlError, FetchError, InterestRateRecord

# 設定日誌
logger = get_logger(logger_level="INFO")


class HtmlTableCrawler(SiteCrawlerABC):
    """以 HTML 利率表格為來源的銀行網站爬蟲

    不同銀行之間只差在網址與 ExtractionConfig，
    兩者都由建構參數帶入。
    """

    def __init__(
        self,
        url: str,
        config: ExtractionConfig,
        *,
        timeout: Optional[float] = None,
        name: Optional[str] = None,
    ):
        """初始化爬蟲

        Args:
            url: 利率頁面網址
            config: 表格解析設定
            timeout: 請求逾時秒數，None 表示不設逾時
            name: 日誌中顯示的名稱，預設為銀行名稱
        """
        self.url = url
        self.config = config
        self.timeout = timeout
        self.name = name or config.bank
        self._engine = ExtractionEngine(config)

    def get_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": "Mozilla/5.0 (compatible; bolan-compare/0.1)",
            "Accept": "text/html,application/xhtml+xml",
        }

    async def fetch_raw(self) -> BeautifulSoup:
        """抓取利率頁面 HTML

        Raises:
            FetchError: 網路錯誤、HTTP 狀態碼錯誤或逾時
        """
        logger.debug(f"🌐 請求網址：{self.url}")
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.get(self.url, headers=self.get_headers()) as response:
                    response.raise_for_status()
                    content = await response.read()
                    encoding = response.charset
        except client_exceptions.ClientResponseError as e:
            raise FetchError(f"HTTP 狀態碼錯誤 {e.status}: {e.message}")
        except client_exceptions.ClientError as e:
            raise FetchError(f"網路請求錯誤：{str(e)}")
        except asyncio.TimeoutError:
            raise FetchError("請求超時")

        logger.debug(f"📥 收到回應：{len(content)} bytes")
        return BeautifulSoup(content, "html.parser", from_encoding=encoding)

    def parse(self, soup: BeautifulSoup, crawled_at: datetime) -> List[InterestRateRecord]:
        """解析頁面，壞掉的單一表格會被略過，定位失敗則整頁失敗"""
        return self._engine.extract(soup, crawled_at, skip_broken_tables=True)

    async def produce(self, sink: RecordSink) -> None:
        """抓取並解析一次，成功後依序送出所有資料

        任何錯誤都只記錄日誌，不會向外拋出；失敗時不會送出任何資料。
        """
        crawled_at = datetime.now()
        try:
            soup = await self.fetch_raw()
            records = self.parse(soup, crawled_at)
        except CrawlError as e:
            logger.error(f"❌ [{self.name}] {type(e).__name__}：{e.message}")
            return
        except Exception as e:
            logger.error(f"❌ [{self.name}] 未預期的錯誤：{str(e)}")
            return

        logger.info(f"✅ [{self.name}] 解析出 {len(records)} 筆利率")
        for record in records:
            await sink.send(record)
