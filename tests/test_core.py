import pytest

from bolan_compare import BolanCompareCore
from bolan_compare.crawler.danske_bank import DanskeBankCrawler
from bolan_compare.crawler.dummy import DummyCrawler
from bolan_compare.store.memory import MemoryStore


def test_default_crawlers():
    crawlers = BolanCompareCore().default_crawlers()
    assert len(crawlers) == 1
    assert isinstance(crawlers[0], DanskeBankCrawler)


@pytest.mark.asyncio
async def test_core_crawl_with_dummy_crawlers():
    core = BolanCompareCore()
    store = await core.crawl(crawlers=[DummyCrawler(count=3, interval=0)])
    assert isinstance(store, MemoryStore)
    assert len(store) == 3


@pytest.mark.asyncio
async def test_core_crawl_uses_given_store():
    store = MemoryStore()
    result = await BolanCompareCore().crawl(store=store, crawlers=[])
    assert result is store
    assert len(store) == 0
