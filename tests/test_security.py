"""
Tests for rate limiting and client address resolution
"""

from app.core.config import settings
from app.utils.security import WINDOW_SECONDS, rate_limit_check, rate_limiter

def test_limit_blocks_until_window_elapses():
    assert rate_limit_check("10.0.0.1", limit=1, now=1000.0) == (True, 0)

    allowed, retry_after = rate_limit_check("10.0.0.1", limit=1, now=1010.0)
    assert not allowed
    assert retry_after == 50

    assert rate_limit_check("10.0.0.1", limit=1, now=1000.0 + WINDOW_SECONDS) == (True, 0)

def test_expired_windows_are_evicted():
    for i in range(10):
        rate_limit_check(f"10.0.0.{i}", limit=5, now=1000.0)
    assert len(rate_limiter) == 10

    rate_limit_check("10.0.1.1", limit=5, now=1000.0 + WINDOW_SECONDS)

    assert list(rate_limiter) == ["10.0.1.1"]

def test_forwarded_headers_ignored_by_default(client, monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_PER_MINUTE", 2)

    codes = [
        client.get("/api/activities", headers={"X-Forwarded-For": f"203.0.113.{i}"}).status_code
        for i in range(5)
    ]

    assert codes == [200, 200, 429, 429, 429]
    assert len(rate_limiter) == 1

def test_forwarded_headers_used_when_trusted(client, monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_PER_MINUTE", 1)
    monkeypatch.setattr(settings, "TRUST_FORWARDED_HEADERS", True)

    first = client.get("/api/activities", headers={"X-Forwarded-For": "203.0.113.1, 10.0.0.1"})
    second = client.get("/api/activities", headers={"X-Real-IP": "203.0.113.2"})

    assert (first.status_code, second.status_code) == (200, 200)
    assert set(rate_limiter) == {"203.0.113.1", "203.0.113.2"}
