import redis
from pyq.clients import redis_client
from pyq.clients.redis_client import build_cache_key, cache_get, cache_set
from pyq.config import Config

class FakeRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    def get(self, key):
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

class DownRedis:
    def get(self, key):
        raise redis.ConnectionError("down")

    def setex(self, key, ttl, value):
        raise redis.ConnectionError("down")

def test_build_cache_key():
    assert build_cache_key("pyq:filters", "PHYSICS", None) == "pyq:filters:PHYSICS:*"
    assert build_cache_key("pyq:filters", None, None) == "pyq:filters:*:*"

def test_round_trip_with_default_ttl(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(redis_client, "get_redis_client", lambda: fake)

    assert cache_set("k", {"years": [{"year": 2024, "count": 2}]})
    assert cache_get("k") == {"years": [{"year": 2024, "count": 2}]}
    assert fake.ttls["k"] == Config.CACHE_TTL

def test_errors_degrade_to_no_cache(monkeypatch):
    monkeypatch.setattr(redis_client, "get_redis_client", lambda: DownRedis())
    assert cache_get("k") is None
    assert cache_set("k", {}) is False

def test_disabled_redis(monkeypatch):
    monkeypatch.setattr(Config, "REDIS_ENABLED", False)
    assert redis_client.get_redis_client() is None
    assert cache_get("k") is None
