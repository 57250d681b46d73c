from bolan_compare.service.channel import RecordChannel
from bolan_compare.service.service import CrawlService, CrawlState

__all__ = [
    "RecordChannel",
    "CrawlService",
    "CrawlState",
]
