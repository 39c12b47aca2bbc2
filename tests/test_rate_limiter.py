import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from companion.engine.rate_limiter import CooldownRateLimiter


def test_first_message_is_allowed():
    limiter = CooldownRateLimiter(5000)
    assert limiter.try_acquire("0xabc", now_ms=1_000).allowed


@pytest.mark.parametrize("elapsed", [0, 1, 999, 1000, 1001, 2500, 4000, 4999])
def test_messages_inside_window_are_rejected(elapsed):
    limiter = CooldownRateLimiter(5000)
    limiter.try_acquire("0xabc", now_ms=10_000)

    decision = limiter.try_acquire("0xabc", now_ms=10_000 + elapsed)

    assert not decision.allowed
    assert decision.retry_after == math.ceil((5000 - elapsed) / 1000)
    assert 1 <= decision.retry_after <= 5


@pytest.mark.parametrize("elapsed", [5000, 5001, 60_000])
def test_messages_after_window_are_allowed(elapsed):
    limiter = CooldownRateLimiter(5000)
    limiter.try_acquire("0xabc", now_ms=10_000)

    assert limiter.try_acquire("0xabc", now_ms=10_000 + elapsed).allowed


def test_rejection_does_not_extend_window():
    limiter = CooldownRateLimiter(5000)
    limiter.try_acquire("0xabc", now_ms=0)

    assert not limiter.try_acquire("0xabc", now_ms=3000).allowed
    assert limiter.try_acquire("0xabc", now_ms=5000).allowed


def test_keys_are_independent():
    limiter = CooldownRateLimiter(5000)
    limiter.try_acquire("0xabc", now_ms=0)

    assert limiter.try_acquire("0xdef", now_ms=100).allowed
    assert not limiter.try_acquire("0xabc", now_ms=100).allowed
    assert len(limiter) == 2


def test_spaced_sequence_is_always_accepted():
    limiter = CooldownRateLimiter(5000)
    assert all(
        limiter.try_acquire("10.0.0.1", now_ms=t).allowed
        for t in range(0, 50_000, 5000)
    )


def test_concurrent_requests_accept_only_one():
    limiter = CooldownRateLimiter(5000)

    with ThreadPoolExecutor(max_workers=8) as pool:
        decisions = list(
            pool.map(lambda _: limiter.try_acquire("0xabc", now_ms=1_000), range(32))
        )

    assert sum(d.allowed for d in decisions) == 1


def test_defaults_to_wall_clock():
    limiter = CooldownRateLimiter(5000)
    assert limiter.try_acquire("0xabc").allowed
    assert not limiter.try_acquire("0xabc").allowed
