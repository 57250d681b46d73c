import asyncio

from bolan_compare.model.models import InterestRateRecord

_CLOSED = object()  # 通道關閉標記


class RecordChannel:
    """多個爬蟲共用、單一接收者的資料通道

    以容量 1 的 asyncio.Queue 實作，送出端在接收者取走前會被擋住。
    只能關閉一次，關閉後再送出會拋出 RuntimeError；
    接收端把關閉前的資料取完後迭代即結束。
    """

    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        self._closed = False
        self._drained = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, record: InterestRateRecord) -> None:
        if self._closed:
            raise RuntimeError("無法寫入已關閉的通道")
        await self._queue.put(record)

    async def close(self) -> None:
        if self._closed:
            raise RuntimeError("通道已經關閉過")
        self._closed = True
        await self._queue.put(_CLOSED)

    def __aiter__(self) -> "RecordChannel":
        return self

    async def __anext__(self) -> InterestRateRecord:
        if self._drained:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            self._drained = True
            raise StopAsyncIteration
        return item
