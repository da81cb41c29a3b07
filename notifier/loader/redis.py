from typing import Optional

from loguru import logger
from redis.asyncio import Redis

from notifier.config.settings import AppSettings


async def init_redis(settings: AppSettings) -> Optional[Redis]:
    if not settings.redis_dsn:
        logger.warning("REDIS_DSN is not set, type cache stays in memory")
        return None
    redis = Redis.from_url(settings.redis_dsn, decode_responses=True)
    try:
        await redis.ping()
        logger.info("Connected to Redis")
    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e!r}")
        await redis.aclose()
        return None
    return redis
