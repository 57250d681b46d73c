async def crawl_dummy(count: int = 4, interval: float = 1.0):
    """用不連網的假爬蟲跑一輪，確認整個流程可以正常結束

    Args:
        count: 每個假爬蟲送出的筆數
        interval: 每筆之間的間隔秒數
    """
    from bolan_compare import BolanCompareCore
    from bolan_compare.crawler.dummy import DummyCrawler
    core = BolanCompareCore()

    store = await core.crawl(crawlers=[DummyCrawler(count, interval), DummyCrawler(count, interval)])
    print(f"🧪 依語意鍵保存 {len(store)} 筆")


if __name__ == "__main__":
    import asyncio
    asyncio.run(crawl_dummy())
