from bolan_compare.crawler.site_crawler import HtmlTableCrawler
from bolan_compare.crawler.danske_bank import DanskeBankCrawler, DANSKE_BANK_CONFIG
from bolan_compare.crawler.dummy import DummyCrawler

__all__ = [
    "HtmlTableCrawler",
    "DanskeBankCrawler",
    "DANSKE_BANK_CONFIG",
    "DummyCrawler",
]
