import redis
import json
from typing import Optional, Any
from pyq.config import config

_redis_client = None

def get_redis_client() -> Optional[redis.Redis]:
    """Get or create singleton Redis client; None when caching is off or Redis is down"""
    global _redis_client

    if not config.REDIS_ENABLED:
        return None

    if _redis_client is None:
        try:
            client = redis.Redis(
                host=config.REDIS_HOST,
                port=config.REDIS_PORT,
                password=config.REDIS_PASSWORD,
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2
            )
            client.ping()
            print(f"Connected to Redis at {config.REDIS_HOST}:{config.REDIS_PORT}")
            _redis_client = client
        except redis.RedisError as e:
            print(f"Failed to connect to Redis: {e}")
            return None

    return _redis_client

def build_cache_key(prefix: str, *parts: Optional[str]) -> str:
    """Join key parts, using '*' for absent values (e.g. pyq:filters:PHYSICS:*)"""
    return ":".join([prefix] + [part if part else "*" for part in parts])

def cache_get(key: str) -> Optional[Any]:
    """Get JSON value from cache"""
    try:
        client = get_redis_client()
        if not client:
            return None

        value = client.get(key)
        if value:
            return json.loads(value)
        return None
    except (redis.RedisError, ValueError) as e:
        print(f"Cache get error for {key}: {e}")
        return None

def cache_set(key: str, value: Any, ttl: int = None) -> bool:
    """Store JSON value with TTL (defaults to CACHE_TTL)"""
    try:
        client = get_redis_client()
        if not client:
            return False

        if ttl is None:
            ttl = config.CACHE_TTL

        client.setex(key, ttl, json.dumps(value))
        return True
    except redis.RedisError as e:
        print(f"Cache set error for {key}: {e}")
        return False
