import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from bolan_compare.utils.logger import get_logger
from bolan_compare.abc.store_abc import StoreABC
from bolan_compare.model.models import InterestRateRecord, RecordKey, StoreError

logger = get_logger(logger_level="INFO")


class JsonFileStore(StoreABC):
    """以 JSON 檔案保存利率資料的儲存層

    檔案內容為 List[InterestRateRecord]，第一次寫入時才讀取既有檔案。
    以語意鍵覆寫，每次 upsert 都會整份重寫檔案。
    """

    def __init__(self, path: Union[str, Path] = "cache/interest_rates.json"):
        self._file = Path(path)
        self._records: Optional[Dict[RecordKey, InterestRateRecord]] = None

    def _load(self) -> Dict[RecordKey, InterestRateRecord]:
        if self._records is not None:
            return self._records

        records: Dict[RecordKey, InterestRateRecord] = {}
        if self._file.exists():
            try:
                with open(self._file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                for item in data:
                    record = InterestRateRecord.model_validate(item)
                    records[record.key()] = record
            except (OSError, json.JSONDecodeError, ValidationError) as e:
                raise StoreError(f"無法讀取儲存檔 {self._file}：{str(e)}")
            logger.debug(f"📂 從檔案載入 {len(records)} 筆：{self._file}")
        self._records = records
        return records

    def _save(self, records: Dict[RecordKey, InterestRateRecord]) -> None:
        json_data = [record.model_dump(mode="json") for record in records.values()]
        try:
            self._file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._file, "w", encoding="utf-8") as f:
                json.dump(json_data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StoreError(f"無法寫入儲存檔 {self._file}：{str(e)}")

    async def upsert(self, record: InterestRateRecord) -> None:
        records = dict(self._load())
        records[record.key()] = record
        self._save(records)
        self._records = records

    async def fetch_all(self) -> List[InterestRateRecord]:
        """取得目前所有資料"""
        return list(self._load().values())
