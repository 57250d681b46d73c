async def parse_saved_page(html_file: str = "aktuella-bolanerantor.html"):
    """解析事先存好的 Danske Bank 利率頁面

    Args:
        html_file: 本地 HTML 檔案路徑
    """
    from datetime import datetime
    from bs4 import BeautifulSoup
    from bolan_compare.crawler.danske_bank import DANSKE_BANK_CONFIG
    from bolan_compare.extraction.engine import ExtractionEngine

    with open(html_file, "r", encoding="utf-8") as f:
        soup = BeautifulSoup(f.read(), "html.parser")

    records = ExtractionEngine(DANSKE_BANK_CONFIG).extract(soup, datetime.now())
    for record in records:
        print(record.model_dump_json())


if __name__ == "__main__":
    import asyncio
    asyncio.run(parse_saved_page())
