from bolan_compare.store.memory import MemoryStore
from bolan_compare.store.json_store import JsonFileStore

__all__ = [
    "MemoryStore",
    "JsonFileStore",
]
