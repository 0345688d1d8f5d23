"""
Pytest Configuration and Fixtures
"""
import datetime
import json
from unittest.mock import Mock

import pytest
import requests
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from mpesa import Environment, Mpesa
from mpesa.auth import token_cache

BASE_URL = 'https://daraja.test'
ACCESS_TOKEN = 'daraja_tok_abc'


def mock_http_response(json_data=None, status_code: int = 200, text: str = None) -> Mock:
    """Return a mock requests.Response; json() raises when json_data is None."""
    resp = Mock()
    resp.ok = 200 <= status_code < 400
    resp.status_code = status_code
    if json_data is None:
        resp.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
        resp.text = text or ''
    else:
        resp.json.return_value = json_data
        resp.text = text if text is not None else json.dumps(json_data)
    resp.headers = {'Content-Type': 'application/json'}
    return resp


def token_response(access_token: str = ACCESS_TOKEN) -> Mock:
    """Valid Daraja OAuth token response (expires in ~1 hour)."""
    return mock_http_response({'access_token': access_token, 'expires_in': '3599'})


@pytest.fixture(autouse=True)
def clear_token_cache():
    """Every test starts without a cached token"""
    token_cache.clear()
    yield
    token_cache.clear()


@pytest.fixture(scope='session')
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope='session')
def certificate_pem(rsa_key):
    """Self-signed certificate standing in for Safaricom's"""
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, 'daraja.test')])
    now = datetime.datetime.now(datetime.timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(rsa_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(rsa_key, hashes.SHA256())
    )
    return certificate.public_bytes(serialization.Encoding.PEM).decode()


@pytest.fixture
def environment(certificate_pem):
    return Environment.custom(BASE_URL, certificate_pem)


@pytest.fixture
def http_session():
    """Mock requests.Session; the auth GET succeeds by default"""
    session = Mock(spec=requests.Session)
    session.get.return_value = token_response()
    return session


@pytest.fixture
def client(environment, http_session):
    return Mpesa('test_client_key', 'test_client_secret', environment, session=http_session)


@pytest.fixture
def make_response():
    """Factory for mock Daraja responses"""
    return mock_http_response
