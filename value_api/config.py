import os
from dataclasses import dataclass
from typing import Optional

from value_api.store import MemoryValueStore, RedisValueStore

USE_REDIS = "USE_REDIS_BACKEND"

@dataclass(frozen=True)
class Config:
    use_redis:      bool = False
    redis_host:     str  = "redis"
    redis_port:     int  = 6379
    redis_db:       int  = 0
    redis_password: Optional[str] = None
    port:           int  = 8080

    @classmethod
    def from_env(cls, environ=None):
        # presence of the toggle matters, not its content
        environ = os.environ if environ is None else environ
        return cls(use_redis=bool(environ.get(USE_REDIS)))

def build_store(config):
    if config.use_redis:
        return RedisValueStore.connect(
            host=config.redis_host,
            port=config.redis_port,
            db=config.redis_db,
            password=config.redis_password,
        )
    return MemoryValueStore()
