import json
from unittest.mock import MagicMock

import pytest
import redis

from word_radar.utils.cache import RadarCache, derive_cache_key


class TestDeriveCacheKey:
    def test_key_order_does_not_matter(self):
        assert derive_cache_key({"b": 2, "a": 1}, "p") == derive_cache_key({"a": 1, "b": 2}, "p")

    def test_prompt_changes_key(self):
        payload = {"word": "walk", "synonyms": ["stroll"]}
        assert derive_cache_key(payload, "prompt one") != derive_cache_key(payload, "prompt two")

    def test_payload_changes_key(self):
        assert derive_cache_key({"word": "walk"}, "p") != derive_cache_key({"word": "run"}, "p")

    def test_is_sha256_hex(self):
        key = derive_cache_key({"a": 1}, "p")
        assert len(key) == 64
        int(key, 16)

    def test_nested_values_keep_their_order(self):
        first = derive_cache_key({"synonyms": ["a", "b"]}, "p")
        second = derive_cache_key({"synonyms": ["b", "a"]}, "p")
        assert first != second

    def test_matches_compact_sorted_json(self):
        import hashlib
        expected = hashlib.sha256(('{"a":1,"b":[2,3]}' + "prompt").encode("utf-8")).hexdigest()
        assert derive_cache_key({"b": [2, 3], "a": 1}, "prompt") == expected


@pytest.fixture
def redis_client():
    return MagicMock(spec=redis.Redis)


class TestRadarCache:
    def test_get_hit_decodes_json(self, redis_client):
        redis_client.get.return_value = json.dumps({"hub_word": "walk"})
        cache = RadarCache(client=redis_client, key_prefix="test:")

        assert cache.get("abc") == {"hub_word": "walk"}
        redis_client.get.assert_called_once_with("test:abc")

    def test_get_miss(self, redis_client):
        redis_client.get.return_value = None
        assert RadarCache(client=redis_client).get("abc") is None

    def test_get_failure_is_a_miss(self, redis_client):
        redis_client.get.side_effect = redis.exceptions.ConnectionError("down")
        assert RadarCache(client=redis_client).get("abc") is None

    def test_get_corrupt_value_is_a_miss(self, redis_client):
        redis_client.get.return_value = "{not json"
        assert RadarCache(client=redis_client).get("abc") is None

    def test_put_without_ttl(self, redis_client):
        cache = RadarCache(client=redis_client, key_prefix="test:", ttl_seconds=0)

        assert cache.put("abc", {"words": []}) is True
        redis_client.set.assert_called_once_with("test:abc", json.dumps({"words": []}))
        redis_client.setex.assert_not_called()

    def test_put_with_ttl(self, redis_client):
        cache = RadarCache(client=redis_client, key_prefix="test:", ttl_seconds=60)

        assert cache.put("abc", {"words": []}) is True
        redis_client.setex.assert_called_once_with("test:abc", 60, json.dumps({"words": []}))

    def test_put_failure_is_swallowed(self, redis_client):
        redis_client.set.side_effect = redis.exceptions.ConnectionError("down")
        assert RadarCache(client=redis_client, ttl_seconds=0).put("abc", {"x": 1}) is False

    def test_disabled_cache_never_touches_redis(self, redis_client):
        cache = RadarCache(client=redis_client, enabled=False)

        assert cache.get("abc") is None
        assert cache.put("abc", {"x": 1}) is False
        assert cache.ping() == "disabled"
        redis_client.get.assert_not_called()
        redis_client.set.assert_not_called()

    def test_ping(self, redis_client):
        redis_client.ping.return_value = True
        assert RadarCache(client=redis_client).ping() == "connected"

        redis_client.ping.side_effect = redis.exceptions.ConnectionError("down")
        assert RadarCache(client=redis_client).ping() == "error"
