from funfacts.storage.base import KeyValueStore
from funfacts.storage.json_file import JsonFileStore
from funfacts.storage.memory import MemoryStore

__all__ = [
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
]
