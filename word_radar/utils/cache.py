import hashlib
import json
import logging
from typing import Any, Dict, Optional

import redis

from word_radar.utils.config import (
    REDIS_HOST, REDIS_PORT, REDIS_DB, REDIS_PASSWORD,
    CACHE_ENABLED, CACHE_TTL_SECONDS, CACHE_KEY_PREFIX
)

logger = logging.getLogger(__name__)


def derive_cache_key(payload: Dict[str, Any], prompt_text: str) -> str:
    """Derive a deterministic cache key for a classification request.

    Only the top-level keys of ``payload`` are sorted; nested values are
    serialized as given. The prompt text is folded in so that a reworded
    prompt never returns an answer cached for an older wording.

    Args:
        payload: Request fields that identify the classification
        prompt_text: Exact prompt text sent to the LLM

    Returns:
        SHA-256 hex digest
    """
    ordered = {key: payload[key] for key in sorted(payload)}
    canonical = json.dumps(ordered, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256((canonical + prompt_text).encode("utf-8")).hexdigest()


class RadarCache:
    """Redis-backed store for classification results. Failures never reach the caller."""

    def __init__(
        self,
        host: str = REDIS_HOST,
        port: int = REDIS_PORT,
        db: int = REDIS_DB,
        password: Optional[str] = REDIS_PASSWORD,
        enabled: bool = CACHE_ENABLED,
        ttl_seconds: int = CACHE_TTL_SECONDS,
        key_prefix: str = CACHE_KEY_PREFIX,
        client: Optional[redis.Redis] = None
    ):
        """Initialize the cache.

        Args:
            host: Redis server hostname
            port: Redis server port
            db: Redis database number
            password: Redis password (if required)
            enabled: When False every lookup is a miss and nothing is stored
            ttl_seconds: Expiry for stored entries, 0 keeps them forever
            key_prefix: Namespace prepended to every key
            client: Pre-built Redis client, mainly for tests
        """
        self.enabled = enabled
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix
        self.redis_url = f"redis://{host}:{port}/{db}"
        self.redis = client if client is not None else redis.Redis(
            host=host,
            port=port,
            db=db,
            password=password,
            decode_responses=True
        )
        logger.info(f"Radar cache initialized: {self.redis_url} (enabled={enabled})")

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def get(self, key: str) -> Optional[Any]:
        """Fetch a cached JSON value.

        Returns:
            The decoded value, or None on a miss or any cache failure
        """
        if not self.enabled:
            return None

        try:
            raw = self.redis.get(self._key(key))
            if raw is None:
                return None
            return json.loads(raw)
        except Exception as e:
            logger.warning(f"Error reading cache key {key}: {str(e)}")
            return None

    def put(self, key: str, value: Any) -> bool:
        """Store a JSON-serializable value.

        Returns:
            True if the value was written
        """
        if not self.enabled:
            return False

        try:
            encoded = json.dumps(value, ensure_ascii=False)
            if self.ttl_seconds > 0:
                self.redis.setex(self._key(key), self.ttl_seconds, encoded)
            else:
                self.redis.set(self._key(key), encoded)
            return True
        except Exception as e:
            logger.warning(f"Error writing cache key {key}: {str(e)}")
            return False

    def ping(self) -> str:
        if not self.enabled:
            return "disabled"

        try:
            return "connected" if self.redis.ping() else "disconnected"
        except Exception as e:
            logger.error(f"Cache health check failed: {str(e)}")
            return "error"
