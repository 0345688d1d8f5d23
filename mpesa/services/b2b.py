"""
Business to Business (B2B)

Moves funds between two business short codes. Callback URLs and the account
reference are optional here and left out of the body when unset.
"""

from typing import Union

from mpesa.constants import B2B_URL, NONE_LITERAL, CommandId, IdentifierType
from mpesa.models import B2bRequest
from mpesa.schemas import B2bRequestSchema, B2bResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_url


class B2bBuilder(OperationBuilder):
    path = B2B_URL
    request_schema = B2bRequestSchema
    response_schema = B2bResponseSchema

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

    def sender_id(self, value: Union[IdentifierType, str, int]):
        return self._set('sender_identifier_type', IdentifierType.parse(value))

    def party_b(self, value: str):
        return self._set('party_b', str(value))

    def receiver_id(self, value: Union[IdentifierType, str, int]):
        return self._set('receiver_identifier_type', IdentifierType.parse(value))

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

    def account_ref(self, value: str):
        return self._set('account_ref', value)

    def build(self) -> B2bRequest:
        initiator = self._required('initiator_name')
        amount = self._required('amount')
        party_a = self._required('party_a')
        party_b = self._required('party_b')

        return B2bRequest(
            initiator=initiator,
            command_id=self._optional('command_id', CommandId.BUSINESS_TO_BUSINESS_TRANSFER),
            amount=amount,
            party_a=party_a,
            sender_identifier_type=self._optional('sender_identifier_type', IdentifierType.SHORT_CODE),
            party_b=party_b,
            receiver_identifier_type=self._optional('receiver_identifier_type', IdentifierType.SHORT_CODE),
            remarks=self._optional('remarks', NONE_LITERAL),
            queue_timeout_url=self._optional('timeout_url'),
            result_url=self._optional('result_url'),
            account_reference=self._optional('account_ref'),
            security_credential=self._client.gen_security_credentials(),
        )
