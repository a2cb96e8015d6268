# py
from types import SimpleNamespace

import pytest
from app.core import rate_limiter
from app.core.rate_limiter import ClientRateLimiter, TokenBucket


@pytest.mark.asyncio
async def test_bucket_refuses_when_empty():
    bucket = TokenBucket(capacity=2, refill_rate=0.0001)
    assert await bucket.consume()
    assert await bucket.consume()
    assert not await bucket.consume()


@pytest.mark.asyncio
async def test_store_is_bounded():
    limiter = ClientRateLimiter(capacity=5, refill_rate=0.0001, max_clients=3)
    for i in range(50):
        assert await limiter.allow(f"10.0.0.{i}")
    assert len(limiter) <= 3


@pytest.mark.asyncio
async def test_idle_buckets_are_evicted_first(monkeypatch):
    clock = {"now": 100.0}
    monkeypatch.setattr(rate_limiter, "time", SimpleNamespace(monotonic=lambda: clock["now"]))
    limiter = ClientRateLimiter(capacity=1, refill_rate=1.0, max_clients=2)
    await limiter.allow("a")
    await limiter.allow("b")
    clock["now"] += 10
    # both buckets are full again by now, so adding a third client clears them
    await limiter.allow("c")
    assert len(limiter) == 1


@pytest.mark.asyncio
async def test_least_recent_client_dropped_when_full():
    limiter = ClientRateLimiter(capacity=1, refill_rate=0.0001, max_clients=2)
    await limiter.allow("a")
    await limiter.allow("b")
    limiter.bucket_for("a")
    await limiter.allow("c")
    assert len(limiter) == 2
    # "b" was dropped, so it starts over with a full bucket
    assert await limiter.allow("b")
    assert not await limiter.allow("c")
