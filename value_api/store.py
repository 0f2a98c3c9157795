import re
import logging
import threading
from types import SimpleNamespace

import redis

log = logging.getLogger(__name__)

# the one slot the networked backend writes to
VALUE_KEY = "my-value"

# base-10, optional sign, nothing else (no whitespace, no underscores)
INT_RE  = re.compile(rb"[+-]?[0-9]+")
INT_MIN = -2**63
INT_MAX = 2**63 - 1

def parse_value(raw):
    """Strict decimal parse of bytes; None unless it is a signed 64-bit integer."""
    if not INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value

class StoreError(Exception):
    """A backend failed to read or write the stored value."""

class ValueStore:
    """Holds a single integer. Handlers only ever see this interface."""

    def get(self):
        raise NotImplementedError

    def set(self, value):
        raise NotImplementedError

class MemoryValueStore(ValueStore):
    def __init__(self, initial=0):
        self._lock = threading.Lock()
        self.state = SimpleNamespace()
        self.state.value = initial

    def get(self):
        with self._lock:
            return self.state.value

    def set(self, value):
        with self._lock:
            self.state.value = value

class RedisValueStore(ValueStore):
    """Keeps the value under a fixed key in Redis, with no expiry.

    Concurrent callers share the client's connection pool; single-key GET
    and SET are atomic on the server, so no local locking is needed.
    A missing key reads as 0, same as a fresh MemoryValueStore.
    """

    def __init__(self, client, key=VALUE_KEY):
        self.client = client
        self.key = key

    @classmethod
    def connect(cls, host="redis", port=6379, db=0, password=None):
        client = redis.Redis(host=host, port=port, db=db, password=password)
        log.info("using redis backend at %s:%s/%s", host, port, db)
        return cls(client)

    def get(self):
        try:
            raw = self.client.get(self.key)
        except redis.RedisError as e:
            raise StoreError(f"redis GET {self.key}: {e}") from e
        if raw is None:
            return 0
        if (value := parse_value(raw)) is None:
            raise StoreError(f"redis key {self.key} holds non-integer {raw!r}")
        return value

    def set(self, value):
        try:
            # ex=None: never expires
            self.client.set(self.key, int(value), ex=None)
        except redis.RedisError as e:
            raise StoreError(f"redis SET {self.key}: {e}") from e
