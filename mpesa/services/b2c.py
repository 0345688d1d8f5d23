"""
Business to Customer (B2C)

Pays out from a business short code to a customer's M-Pesa wallet. The
synchronous response only acknowledges the request; the outcome is posted to
the result URL.
"""

from typing import Union

from mpesa.constants import B2C_URL, NONE_LITERAL, CommandId
from mpesa.models import B2cRequest
from mpesa.schemas import B2cRequestSchema, B2cResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_phone_number, ensure_url


class B2cBuilder(OperationBuilder):
    path = B2C_URL
    request_schema = B2cRequestSchema
    response_schema = B2cResponseSchema

    def __init__(self, client, initiator_name: str = None):
        super().__init__(client)
        self._set('initiator_name', initiator_name)

    def initiator_name(self, value: str):
        return self._set('initiator_name', value)

    def command_id(self, value: Union[CommandId, str]):
        return self._set('command_id', CommandId.parse(value))

    def amount(self, value: float):
        return self._set('amount', value)

    def party_a(self, value: str):
        return self._set('party_a', str(value))

    def party_b(self, value: Union[str, int]):
        """Customer's phone number"""
        return self._set('party_b', ensure_phone_number(value))

    def parties(self, party_a: str, party_b: str):
        return self.party_a(party_a).party_b(party_b)

    def remarks(self, value: str):
        return self._set('remarks', value)

    def urls(self, timeout_url: str, result_url: str):
        return self.timeout_url(timeout_url).result_url(result_url)

    def timeout_url(self, value: str):
        return self._set('timeout_url', ensure_url(value))

    def result_url(self, value: str):
        return self._set('result_url', ensure_url(value))

    def occasion(self, value: str):
        return self._set('occasion', value)

    def build(self) -> B2cRequest:
        initiator_name = self._required('initiator_name')
        amount = self._required('amount')
        party_a = self._required('party_a')
        party_b = self._required('party_b')
        timeout_url = self._required('timeout_url')
        result_url = self._required('result_url')

        return B2cRequest(
            initiator_name=initiator_name,
            command_id=self._optional('command_id', CommandId.BUSINESS_PAYMENT),
            amount=amount,
            party_a=party_a,
            party_b=party_b,
            remarks=self._optional('remarks', NONE_LITERAL),
            queue_timeout_url=timeout_url,
            result_url=result_url,
            occasion=self._optional('occasion', NONE_LITERAL),
            security_credential=self._client.gen_security_credentials(),
        )
