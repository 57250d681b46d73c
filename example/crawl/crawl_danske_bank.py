import time


async def crawl_danske_bank(path: str = "cache/interest_rates.json"):
    """爬取 Danske Bank 的房貸利率並寫入 JSON 檔

    Args:
        path: 儲存檔路徑，預設為 "cache/interest_rates.json"
    """

    # 初始化 core
    from bolan_compare import BolanCompareCore
    from bolan_compare.crawler.danske_bank import DanskeBankCrawler
    from bolan_compare.store.json_store import JsonFileStore
    core = BolanCompareCore()

    store = JsonFileStore(path)
    await core.crawl(store=store, crawlers=[DanskeBankCrawler()])

    records = await store.fetch_all()
    print(f"🏦 共 {len(records)} 筆利率")
    for record in records:
        boundary = record.discount_boundary
        print(
            f"{record.term.value:>4} | {boundary.min_ratio}-{boundary.max_ratio} | "
            f"{record.nominal_rate}% | 工會優惠: {record.union_discount}"
        )

if __name__ == "__main__":
    import asyncio
    start_time = time.time()
    asyncio.run(crawl_danske_bank())
    end_time = time.time()
    print(f"執行時間: {end_time - start_time:.2f} 秒")
