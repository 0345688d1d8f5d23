"""
Unit Tests for the client handle and its send primitive
"""

from unittest.mock import patch

import pytest
import requests

from mpesa import (
    CodecError,
    Environment,
    Mpesa,
    Operation,
    Request,
    ServiceError,
    TransportError,
    ValidationError,
)
from mpesa.schemas import B2cResponseSchema

B2C_ACK = {
    "OriginatorConversationID": "29464-48063588-1",
    "ConversationID": "AG_20230206_201056794190723278ff",
    "ResponseDescription": "Accept the service request successfully.",
    "ResponseCode": "0",
}


class TestConstruction:

    def test_environment_name(self, http_session):
        client = Mpesa("key", "secret", "production", session=http_session)

        assert client.environment is Environment.PRODUCTION

    def test_default_initiator_password(self, client):
        assert client._get_initiator_password() == "Safcom496!"

    def test_set_initiator_password(self, client):
        client.set_initiator_password("S3cret!")

        assert client._get_initiator_password() == "S3cret!"

    def test_repr_hides_secrets(self, client):
        client.set_initiator_password("S3cret!")

        assert "test_client_secret" not in repr(client)
        assert "S3cret!" not in repr(client)
        assert "test_client_key" in repr(client)

    def test_owns_a_session_by_default(self):
        client = Mpesa("key", "secret", Environment.SANDBOX)

        assert isinstance(client.session, requests.Session)
        assert client.timeout == 30


class TestClose:

    def test_closes_owned_session(self):
        client = Mpesa("key", "secret", Environment.SANDBOX)

        with patch.object(client.session, "close") as mock_close:
            client.close()

        mock_close.assert_called_once_with()

    def test_leaves_caller_session_open(self, client, http_session):
        client.close()

        http_session.close.assert_not_called()

    def test_context_manager_closes_on_exit(self):
        client = Mpesa("key", "secret", Environment.SANDBOX)

        with patch.object(client.session, "close") as mock_close:
            with client as entered:
                assert entered is client
                mock_close.assert_not_called()

        mock_close.assert_called_once_with()

    def test_context_manager_closes_on_error(self):
        client = Mpesa("key", "secret", Environment.SANDBOX)

        with patch.object(client.session, "close") as mock_close:
            with pytest.raises(RuntimeError):
                with client:
                    raise RuntimeError("boom")

        mock_close.assert_called_once_with()


class TestSend:

    def test_posts_with_bearer_token(self, client, http_session, make_response):
        http_session.request.return_value = make_response(B2C_ACK)

        response = client.send(Request("POST", "mpesa/b2c/v1/paymentrequest", {"Amount": 10}), B2cResponseSchema())

        assert response.conversation_id == "AG_20230206_201056794190723278ff"
        http_session.request.assert_called_once_with(
            "POST",
            "https://daraja.test/mpesa/b2c/v1/paymentrequest",
            json={"Amount": 10},
            headers={"Authorization": "Bearer daraja_tok_abc"},
            timeout=30,
        )

    def test_exactly_one_slash(self, certificate_pem, http_session, make_response):
        client = Mpesa("key", "secret", Environment.custom("https://daraja.test/", certificate_pem), session=http_session)
        http_session.request.return_value = make_response(B2C_ACK)

        client.send(Request("POST", "/mpesa/b2c/v1/paymentrequest", {}), B2cResponseSchema())

        assert http_session.request.call_args.args[1] == "https://daraja.test/mpesa/b2c/v1/paymentrequest"

    def test_unknown_path(self, client, http_session):
        with pytest.raises(ValidationError):
            client.send(Request("POST", "mpesa/unknown/v1", {}), B2cResponseSchema())

        http_session.get.assert_not_called()
        http_session.request.assert_not_called()

    def test_service_error_is_tagged(self, client, http_session, make_response):
        http_session.request.return_value = make_response({
            "requestId": "11728-2929992-1",
            "errorCode": "401.002.01",
            "errorMessage": "Error Occurred - Invalid Access Token",
        }, status_code=401)

        with pytest.raises(ServiceError) as exc_info:
            client.send(Request("POST", "mpesa/b2c/v1/paymentrequest", {}), B2cResponseSchema())

        error = exc_info.value
        assert error.operation is Operation.B2C
        assert error.status_code == 401
        assert error.request_id == "11728-2929992-1"
        assert "B2c" in str(error)

    def test_non_json_error_body(self, client, http_session, make_response):
        http_session.request.return_value = make_response(status_code=502, text="<html>Bad Gateway</html>")

        with pytest.raises(ServiceError) as exc_info:
            client.send(Request("POST", "mpesa/b2c/v1/paymentrequest", {}), B2cResponseSchema())

        assert exc_info.value.status_code == 502
        assert exc_info.value.error_code is None
        assert "Bad Gateway" in exc_info.value.error_message

    def test_transport_error(self, client, http_session):
        http_session.request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(TransportError) as exc_info:
            client.send(Request("POST", "mpesa/b2c/v1/paymentrequest", {}), B2cResponseSchema())

        assert isinstance(exc_info.value.__cause__, requests.Timeout)

    def test_success_body_not_json(self, client, http_session, make_response):
        http_session.request.return_value = make_response(status_code=200, text="OK")

        with pytest.raises(CodecError):
            client.send(Request("POST", "mpesa/b2c/v1/paymentrequest", {}), B2cResponseSchema())

    def test_success_body_missing_fields(self, client, http_session, make_response):
        http_session.request.return_value = make_response({"ResponseCode": "0"})

        with pytest.raises(CodecError):
            client.send(Request("POST", "mpesa/b2c/v1/paymentrequest", {}), B2cResponseSchema())

    def test_token_failure_stops_the_request(self, client, http_session, make_response):
        http_session.get.return_value = make_response({"errorCode": "400.008.01"}, status_code=400)

        with pytest.raises(ServiceError) as exc_info:
            client.send(Request("POST", "mpesa/b2c/v1/paymentrequest", {}), B2cResponseSchema())

        assert exc_info.value.operation is Operation.AUTH
        http_session.request.assert_not_called()
