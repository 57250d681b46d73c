from typing import Dict, List

from bolan_compare.abc.store_abc import StoreABC
from bolan_compare.model.models import InterestRateRecord, RecordKey


class MemoryStore(StoreABC):
    """記憶體儲存，以語意鍵覆寫（後寫入者為準）"""

    def __init__(self):
        self._records: Dict[RecordKey, InterestRateRecord] = {}

    async def upsert(self, record: InterestRateRecord) -> None:
        self._records[record.key()] = record

    def records(self) -> List[InterestRateRecord]:
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
