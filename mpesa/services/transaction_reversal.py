from typing import Union

from mpesa.constants import NONE_LITERAL, TRANSACTION_REVERSAL_URL, CommandId, IdentifierType
from mpesa.models import TransactionReversalRequest
from mpesa.schemas import TransactionReversalRequestSchema, TransactionReversalResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_url


class TransactionReversalBuilder(OperationBuilder):
    """Reverses a completed M-Pesa transaction."""

    path = TRANSACTION_REVERSAL_URL
    request_schema = TransactionReversalRequestSchema
    response_schema = TransactionReversalResponseSchema

    def __init__(self, client, initiator_name: str = None):
        super().__init__(client)
        self._set('initiator_name', initiator_name)

    def initiator_name(self, value: str):
        return self._set('initiator_name', value)

    def command_id(self, value: Union[CommandId, str]):
        return self._set('command_id', CommandId.parse(value))

    def transaction_id(self, value: str):
        return self._set('transaction_id', value)

    def receiver_party(self, value: str):
        return self._set('receiver_party', str(value))

    def receiver_identifier_type(self, value: Union[IdentifierType, str, int]):
        return self._set('receiver_identifier_type', IdentifierType.parse(value))

    def result_url(self, value: str):
        return self._set('result_url', ensure_url(value))

    def timeout_url(self, value: str):
        return self._set('timeout_url', ensure_url(value))

    def remarks(self, value: str):
        return self._set('remarks', value)

    def occasion(self, value: str):
        return self._set('occasion', value)

    def amount(self, value: float):
        return self._set('amount', value)

    def build(self) -> TransactionReversalRequest:
        initiator = self._required('initiator_name')
        transaction_id = self._required('transaction_id')
        receiver_party = self._required('receiver_party')
        result_url = self._required('result_url')
        timeout_url = self._required('timeout_url')
        amount = self._required('amount')

        return TransactionReversalRequest(
            initiator=initiator,
            command_id=self._optional('command_id', CommandId.TRANSACTION_REVERSAL),
            transaction_id=transaction_id,
            receiver_party=receiver_party,
            receiver_identifier_type=self._optional('receiver_identifier_type', IdentifierType.SHORT_CODE),
            result_url=result_url,
            queue_timeout_url=timeout_url,
            remarks=self._optional('remarks', NONE_LITERAL),
            occasion=self._optional('occasion', NONE_LITERAL),
            amount=amount,
            security_credential=self._client.gen_security_credentials(),
        )
