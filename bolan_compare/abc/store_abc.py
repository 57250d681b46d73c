from abc import ABC, abstractmethod

from bolan_compare.model.models import InterestRateRecord


class StoreABC(ABC):
    """
    儲存層的抽象基底類，唯一的契約是以語意鍵冪等寫入。
    """
    @abstractmethod
    async def upsert(self, record: InterestRateRecord) -> None:
        """寫入或更新一筆資料，失敗時拋出 StoreError"""
        pass
