"""
OAuth access tokens

Tokens are fetched with HTTP Basic auth against ``oauth/v1/generate`` and kept
in a process-wide cache holding a single entry. The cache lock is held across
the network call, so concurrent misses for the same client key produce one
request.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

import requests

from mpesa.constants import AUTH_TOKEN_TTL_SECONDS, AUTH_URL, Operation
from mpesa.errors import ServiceError, TransportError
from mpesa.schemas import AuthenticationResponseSchema
from mpesa.utils import get_logger, is_success, load_error, load_response

logger = get_logger(__name__)

_auth_schema = AuthenticationResponseSchema()


@dataclass(frozen=True)
class TokenRecord:
    access_token: str = field(repr=False)
    acquired_at: float
    expires_in: int


class TokenCache:
    """Single-entry token cache keyed by client key, with a fixed TTL."""

    def __init__(self, ttl: float = AUTH_TOKEN_TTL_SECONDS):
        self.ttl = ttl
        self.lock = threading.Lock()
        self._entry: Optional[Tuple[str, TokenRecord]] = None

    def get(self, key: str) -> Optional[TokenRecord]:
        entry = self._entry
        if entry is None or entry[0] != key:
            return None

        record = entry[1]
        if time.monotonic() - record.acquired_at >= self.ttl:
            # stale entries stay until the next put, which runs under the lock
            return None
        return record

    def put(self, key: str, record: TokenRecord) -> None:
        self._entry = (key, record)

    def clear(self) -> None:
        self._entry = None

    def __len__(self):
        return 0 if self._entry is None else 1


token_cache = TokenCache()


def auth(client) -> str:
    """
    Return a bearer token for the client, fetching one on a cache miss

    Raises:
        TransportError: If the auth endpoint cannot be reached
        ServiceError: If Daraja rejects the credentials (tagged ``Auth``)
        CodecError: If the token body cannot be decoded
    """
    record = token_cache.get(client.client_key)
    if record is not None:
        logger.debug("Using cached access token")
        return record.access_token

    with token_cache.lock:
        record = token_cache.get(client.client_key)
        if record is not None:
            logger.debug("Using access token fetched by another thread")
            return record.access_token

        record = _fetch_token(client)
        token_cache.put(client.client_key, record)

    return record.access_token


def _fetch_token(client) -> TokenRecord:
    url = f"{client.environment.base_url()}/{AUTH_URL}"
    try:
        response = client.session.get(
            url,
            auth=(client.client_key, client._client_secret),
            timeout=client.timeout,
        )
    except requests.RequestException as exc:
        raise TransportError(f"could not reach the auth endpoint - {exc}") from exc

    if not is_success(response):
        payload = load_error(response)
        logger.warning(
            "Authentication failed with HTTP %s (error code: %s)",
            response.status_code, payload.error_code,
        )
        raise ServiceError(Operation.AUTH, payload, response.status_code)

    result = load_response(response, _auth_schema)
    logger.info("Access token refreshed (expires in %ss)", result.expires_in)
    return TokenRecord(
        access_token=result.access_token,
        acquired_at=time.monotonic(),
        expires_in=result.expires_in,
    )
