"""
Unit Tests for Environment
"""

import base64
from unittest.mock import Mock

import pytest
import requests
from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from mpesa import Environment, Mpesa, ValidationError
from mpesa.utils import encrypt_initiator_password


class TestEnvironment:

    def test_sandbox_base_url(self):
        assert Environment.SANDBOX.base_url() == "https://sandbox.safaricom.co.ke"

    def test_production_base_url(self):
        assert Environment.PRODUCTION.base_url() == "https://api.safaricom.co.ke"

    @pytest.mark.parametrize("value, expected", [
        ("sandbox", Environment.SANDBOX),
        ("production", Environment.PRODUCTION),
    ])
    def test_parse(self, value, expected):
        assert Environment.parse(value) is expected

    @pytest.mark.parametrize("value", ["Sandbox", "PRODUCTION", "staging", "", " sandbox"])
    def test_parse_is_exact(self, value):
        with pytest.raises(ValidationError, match="Could not parse"):
            Environment.parse(value)

    def test_custom_strips_trailing_slash(self, certificate_pem):
        env = Environment.custom("http://localhost:8080/", certificate_pem)

        assert env.base_url() == "http://localhost:8080"
        assert env.certificate() == certificate_pem

    def test_repr_omits_certificate(self, certificate_pem):
        env = Environment.custom("http://localhost:8080", certificate_pem)

        assert "BEGIN CERTIFICATE" not in repr(env)


# ── Built-in certificates ─────────────────────────────────────────────────────

BUILT_IN = [
    pytest.param(Environment.SANDBOX, "apicrypt.safaricom.co.ke", id="sandbox"),
    pytest.param(Environment.PRODUCTION, "apigee.apicaller.safaricom.co.ke", id="production"),
]


class TestBuiltInCertificates:

    @pytest.mark.parametrize("env, common_name", BUILT_IN)
    def test_certificate_is_safaricom_rsa(self, env, common_name):
        certificate = x509.load_pem_x509_certificate(env.certificate().encode())
        subject = certificate.subject.get_attributes_for_oid(NameOID.COMMON_NAME)

        assert subject[0].value == common_name
        assert isinstance(certificate.public_key(), rsa.RSAPublicKey)
        assert certificate.public_key().key_size == 2048

    @pytest.mark.parametrize("env, common_name", BUILT_IN)
    def test_encrypts_initiator_password(self, env, common_name):
        credential = encrypt_initiator_password("Safcom496!", env.certificate())

        assert len(base64.b64decode(credential)) == 256

    @pytest.mark.parametrize("env, common_name", BUILT_IN)
    def test_client_security_credentials(self, env, common_name):
        client = Mpesa("key", "secret", env, session=Mock(spec=requests.Session))

        first = client.gen_security_credentials()
        second = client.gen_security_credentials()

        assert first != second
        assert len(base64.b64decode(second)) == 256

    def test_sandbox_b2c_builds(self):
        client = Mpesa("key", "secret", Environment.SANDBOX, session=Mock(spec=requests.Session))

        request = (
            client.b2c("testapi496")
            .parties("600496", "254708374149")
            .amount(1000)
            .urls("https://testdomain.com/err", "https://testdomain.com/ok")
            .build()
        )

        assert len(base64.b64decode(request.security_credential)) == 256
