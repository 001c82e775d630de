import json
from datetime import timedelta

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from domain.models.currency import RateSnapshot
from infrastructure.cache.base import RATES_CACHE_KEY


class RedisCacheService:
    def __init__(self, redis_client: redis.Redis, ttl_seconds: int = 3600):
        self.redis = redis_client
        self.rate_ttl = timedelta(seconds=ttl_seconds)

    async def get_rates(self) -> RateSnapshot | None:
        try:
            data = await self.redis.get(RATES_CACHE_KEY)
        except RedisError as e:
            raise CacheError(f"Redis read failed: {e.__class__.__name__}") from e

        if not data:
            return None

        try:
            return RateSnapshot.from_list(json.loads(data))
        except json.JSONDecodeError as e:
            raise CacheError(f"Invalid json data under {RATES_CACHE_KEY}") from e
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            raise CacheError(f"Malformed rate records under {RATES_CACHE_KEY}: {e}") from e

    async def set_rates(self, snapshot: RateSnapshot) -> None:
        try:
            await self.redis.setex(
                RATES_CACHE_KEY, self.rate_ttl, json.dumps(snapshot.to_list())
            )
        except RedisError as e:
            raise CacheError(f"Redis write failed: {e.__class__.__name__}") from e

    async def close(self) -> None:
        await self.redis.aclose()
