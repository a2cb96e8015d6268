# py
import time
import asyncio
from collections import OrderedDict
from typing import Optional
from loguru import logger
from app.core.config import get_settings


class TokenBucket:
    def __init__(self, capacity: int, refill_rate: float):
        self.capacity = capacity
        self.refill_rate = refill_rate
        self.tokens = capacity
        self.last = time.monotonic()
        self.lock = asyncio.Lock()

    def _refill(self, now: float):
        self.tokens = min(self.capacity, self.tokens + (now - self.last) * self.refill_rate)
        self.last = now

    def is_idle(self, now: float) -> bool:
        """True once the bucket would be back at full capacity, i.e. it carries no state worth keeping."""
        return self.tokens + (now - self.last) * self.refill_rate >= self.capacity

    async def consume(self, amount: int = 1) -> bool:
        async with self.lock:
            self._refill(time.monotonic())
            if self.tokens >= amount:
                self.tokens -= amount
                return True
            return False


class ClientRateLimiter:
    """Per-client token buckets, bounded to ``max_clients`` entries."""

    def __init__(self, capacity: int, refill_rate: float, max_clients: int):
        self.capacity = capacity
        self.refill_rate = refill_rate
        self.max_clients = max_clients
        self._buckets: "OrderedDict[str, TokenBucket]" = OrderedDict()

    def __len__(self):
        return len(self._buckets)

    def _evict(self):
        now = time.monotonic()
        for key in [k for k, b in self._buckets.items() if b.is_idle(now)]:
            del self._buckets[key]
        while len(self._buckets) >= self.max_clients:
            key, _ = self._buckets.popitem(last=False)
            logger.debug("Rate limiter full, dropped bucket for {}", key)

    def bucket_for(self, key: str) -> TokenBucket:
        bucket = self._buckets.get(key)
        if bucket is None:
            if len(self._buckets) >= self.max_clients:
                self._evict()
            bucket = TokenBucket(self.capacity, self.refill_rate)
            self._buckets[key] = bucket
        else:
            self._buckets.move_to_end(key)
        return bucket

    async def allow(self, key: str) -> bool:
        allowed = await self.bucket_for(key).consume(1)
        if not allowed:
            logger.warning("Rate limit exceeded for {}", key)
        return allowed


_limiter: Optional[ClientRateLimiter] = None


def get_limiter() -> ClientRateLimiter:
    global _limiter
    if _limiter is None:
        settings = get_settings()
        _limiter = ClientRateLimiter(settings.RATE_LIMIT_TOKENS, settings.RATE_LIMIT_RATE, settings.RATE_LIMIT_MAX_CLIENTS)
    return _limiter


def reset_limiter():
    global _limiter
    _limiter = None


async def allow_request(key: str) -> bool:
    return await get_limiter().allow(key)
