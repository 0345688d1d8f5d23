from typing import Union

from mpesa.constants import ACCOUNT_BALANCE_URL, NONE_LITERAL, CommandId, IdentifierType
from mpesa.models import AccountBalanceRequest
from mpesa.schemas import AccountBalanceRequestSchema, AccountBalanceResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_url


class AccountBalanceBuilder(OperationBuilder):
    """Queries the balance of a short code; the balance arrives at the result URL."""

    path = ACCOUNT_BALANCE_URL
    request_schema = AccountBalanceRequestSchema
    response_schema = AccountBalanceResponseSchema

    def __init__(self, client, initiator_name: str = None):
        super().__init__(client)
        self._set('initiator_name', initiator_name)

    def initiator_name(self, value: str):
        return self._set('initiator_name', value)

    def party_a(self, value: str):
        return self._set('party_a', str(value))

    def identifier_type(self, value: Union[IdentifierType, str, int]):
        return self._set('identifier_type', IdentifierType.parse(value))

    def remarks(self, value: str):
        return self._set('remarks', value)

    def timeout_url(self, value: str):
        return self._set('timeout_url', ensure_url(value))

    def result_url(self, value: str):
        return self._set('result_url', ensure_url(value))

    def build(self) -> AccountBalanceRequest:
        initiator = self._required('initiator_name')
        party_a = self._required('party_a')
        timeout_url = self._required('timeout_url')
        result_url = self._required('result_url')

        return AccountBalanceRequest(
            initiator=initiator,
            command_id=CommandId.ACCOUNT_BALANCE,
            party_a=party_a,
            identifier_type=self._optional('identifier_type', IdentifierType.SHORT_CODE),
            remarks=self._optional('remarks', NONE_LITERAL),
            queue_timeout_url=timeout_url,
            result_url=result_url,
            security_credential=self._client.gen_security_credentials(),
        )
