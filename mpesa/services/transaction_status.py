from typing import Union

from mpesa.constants import NONE_LITERAL, TRANSACTION_STATUS_URL, CommandId, IdentifierType
from mpesa.models import TransactionStatusRequest
from mpesa.schemas import TransactionStatusRequestSchema, TransactionStatusResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_url


class TransactionStatusBuilder(OperationBuilder):
    """Queries the status of a transaction; the status arrives at the result URL."""

    path = TRANSACTION_STATUS_URL
    request_schema = TransactionStatusRequestSchema
    response_schema = TransactionStatusResponseSchema

    def __init__(self, client, initiator_name: str = None):
        super().__init__(client)
        self._set('initiator_name', initiator_name)

    def initiator_name(self, value: str):
        return self._set('initiator_name', value)

    def command_id(self, value: Union[CommandId, str]):
        return self._set('command_id', CommandId.parse(value))

    def transaction_id(self, value: str):
        return self._set('transaction_id', value)

    def party_a(self, value: str):
        return self._set('party_a', str(value))

    def identifier_type(self, value: Union[IdentifierType, str, int]):
        return self._set('identifier_type', IdentifierType.parse(value))

    def result_url(self, value: str):
        return self._set('result_url', ensure_url(value))

    def timeout_url(self, value: str):
        return self._set('timeout_url', ensure_url(value))

    def remarks(self, value: str):
        return self._set('remarks', value)

    def occasion(self, value: str):
        return self._set('occasion', value)

    def build(self) -> TransactionStatusRequest:
        initiator = self._required('initiator_name')
        transaction_id = self._required('transaction_id')
        party_a = self._required('party_a')
        result_url = self._required('result_url')
        timeout_url = self._required('timeout_url')

        return TransactionStatusRequest(
            initiator=initiator,
            command_id=self._optional('command_id', CommandId.TRANSACTION_STATUS_QUERY),
            transaction_id=transaction_id,
            party_a=party_a,
            identifier_type=self._optional('identifier_type', IdentifierType.SHORT_CODE),
            result_url=result_url,
            queue_timeout_url=timeout_url,
            remarks=self._optional('remarks', NONE_LITERAL),
            occasion=self._optional('occasion', NONE_LITERAL),
            security_credential=self._client.gen_security_credentials(),
        )
