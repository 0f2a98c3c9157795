from value_api.store import ValueStore, MemoryValueStore, RedisValueStore, StoreError
from value_api.config import Config, build_store
from value_api.server import create_app

__all__ = [
    "ValueStore", "MemoryValueStore", "RedisValueStore", "StoreError",
    "Config", "build_store", "create_app",
]
