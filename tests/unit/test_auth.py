"""
Unit Tests for cached OAuth token acquisition
"""

import threading
import time
from unittest.mock import patch

import pytest
import requests

from mpesa import Mpesa, Operation, ServiceError, TransportError
from mpesa.auth import TokenCache, TokenRecord, token_cache
from mpesa.constants import AUTH_TOKEN_TTL_SECONDS
from mpesa.errors import CodecError

AUTH_ENDPOINT = "https://daraja.test/oauth/v1/generate?grant_type=client_credentials"


class TestTokenCache:

    def test_get_on_empty(self):
        assert TokenCache().get("key") is None

    def test_holds_a_single_entry(self):
        cache = TokenCache()
        cache.put("first", TokenRecord("tok-1", time.monotonic(), 3599))
        cache.put("second", TokenRecord("tok-2", time.monotonic(), 3599))

        assert len(cache) == 1
        assert cache.get("first") is None
        assert cache.get("second").access_token == "tok-2"

    def test_entry_expires_after_ttl(self):
        cache = TokenCache(ttl=60)
        with patch("mpesa.auth.time") as mock_time:
            mock_time.monotonic.return_value = 1000.0
            cache.put("key", TokenRecord("tok", 1000.0, 3599))

            mock_time.monotonic.return_value = 1059.0
            assert cache.get("key") is not None

            mock_time.monotonic.return_value = 1060.0
            assert cache.get("key") is None

    def test_expired_read_does_not_modify_cache(self):
        cache = TokenCache(ttl=60)
        cache.put("key", TokenRecord("stale", 0.0, 3599))
        fresh = TokenRecord("fresh", 1000.0, 3599)

        def store_fresh_during_read():
            # another thread refreshes between the expired reader's check and return
            cache.put("key", fresh)
            return 1000.0

        with patch("mpesa.auth.time") as mock_time:
            mock_time.monotonic.side_effect = store_fresh_during_read
            assert cache.get("key") is None

            mock_time.monotonic.side_effect = None
            mock_time.monotonic.return_value = 1001.0
            assert cache.get("key") is fresh
            assert len(cache) == 1

    def test_expired_entry_is_kept_until_replaced(self):
        cache = TokenCache(ttl=60)
        with patch("mpesa.auth.time") as mock_time:
            mock_time.monotonic.return_value = 1000.0
            cache.put("key", TokenRecord("stale", 900.0, 3599))

            assert cache.get("key") is None
            assert len(cache) == 1

            cache.put("key", TokenRecord("fresh", 1000.0, 3599))
            assert cache.get("key").access_token == "fresh"

    def test_record_repr_hides_token(self):
        assert "secret-token" not in repr(TokenRecord("secret-token", 0.0, 3599))


class TestAuth:

    def test_fetches_with_basic_auth(self, client, http_session):
        token = client.auth()

        assert token == "daraja_tok_abc"
        http_session.get.assert_called_once_with(
            AUTH_ENDPOINT,
            auth=("test_client_key", "test_client_secret"),
            timeout=30,
        )

    def test_token_is_cached(self, client, http_session):
        assert client.auth() == client.auth()
        assert http_session.get.call_count == 1
        assert len(token_cache) == 1

    def test_refetches_after_ttl(self, client, http_session):
        with patch("mpesa.auth.time") as mock_time:
            mock_time.monotonic.return_value = 500.0
            client.auth()

            mock_time.monotonic.return_value = 500.0 + AUTH_TOKEN_TTL_SECONDS - 1
            client.auth()
            assert http_session.get.call_count == 1

            mock_time.monotonic.return_value = 500.0 + AUTH_TOKEN_TTL_SECONDS
            client.auth()
            assert http_session.get.call_count == 2

    def test_new_client_key_misses(self, client, environment, http_session, make_response):
        client.auth()

        other = Mpesa("other_key", "other_secret", environment, session=http_session)
        http_session.get.return_value = make_response({"access_token": "other_tok", "expires_in": 3599})

        assert other.auth() == "other_tok"
        assert http_session.get.call_count == 2
        assert len(token_cache) == 1

    def test_concurrent_misses_collapse_to_one_request(self, client, http_session, make_response):
        token = make_response({"access_token": "daraja_tok_abc", "expires_in": "3599"})

        def slow_get(*args, **kwargs):
            time.sleep(0.05)
            return token

        http_session.get.side_effect = slow_get
        tokens = []
        threads = [threading.Thread(target=lambda: tokens.append(client.auth())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert tokens == ["daraja_tok_abc"] * 8
        assert http_session.get.call_count == 1

    def test_rejected_credentials(self, client, http_session, make_response):
        http_session.get.return_value = make_response({
            "requestId": "1234-5678",
            "errorCode": "400.008.01",
            "errorMessage": "Invalid Authentication passed",
        }, status_code=400)

        with pytest.raises(ServiceError) as exc_info:
            client.auth()

        error = exc_info.value
        assert error.operation is Operation.AUTH
        assert error.status_code == 400
        assert error.error_code == "400.008.01"
        assert "test_client_secret" not in str(error)

    def test_failure_is_not_cached(self, client, http_session, make_response):
        http_session.get.return_value = make_response({"errorCode": "500.001.1001"}, status_code=500)
        with pytest.raises(ServiceError):
            client.auth()
        assert len(token_cache) == 0

        http_session.get.return_value = make_response({"access_token": "fresh", "expires_in": "3599"})
        assert client.auth() == "fresh"
        assert http_session.get.call_count == 2

    def test_network_failure(self, client, http_session):
        http_session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(TransportError) as exc_info:
            client.auth()

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_malformed_token_body(self, client, http_session, make_response):
        http_session.get.return_value = make_response({"token": "abc"})

        with pytest.raises(CodecError):
            client.auth()
        assert len(token_cache) == 0

    def test_is_connected(self, client, http_session, make_response):
        assert client.is_connected() is True

        token_cache.clear()
        http_session.get.return_value = make_response({"errorCode": "400.008.01"}, status_code=400)
        assert client.is_connected() is False
