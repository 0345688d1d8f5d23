from typing import Union

from mpesa.constants import C2B_SIMULATE_URL, NONE_LITERAL, CommandId
from mpesa.models import C2bSimulateRequest
from mpesa.schemas import C2bSimulateRequestSchema, C2bSimulateResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_phone_number


class C2bSimulateBuilder(OperationBuilder):
    """Simulates a customer payment to a short code (sandbox only)."""

    path = C2B_SIMULATE_URL
    request_schema = C2bSimulateRequestSchema
    response_schema = C2bSimulateResponseSchema

    def command_id(self, value: Union[CommandId, str]):
        return self._set('command_id', CommandId.parse(value))

    def amount(self, value: float):
        return self._set('amount', value)

    def msisdn(self, value: Union[str, int]):
        return self._set('msisdn', ensure_phone_number(value))

    def bill_ref_number(self, value: str):
        return self._set('bill_ref_number', value)

    def short_code(self, value: str):
        return self._set('short_code', str(value))

    def build(self) -> C2bSimulateRequest:
        return C2bSimulateRequest(
            amount=self._required('amount'),
            msisdn=self._required('msisdn'),
            short_code=self._required('short_code'),
            command_id=self._optional('command_id', CommandId.CUSTOMER_PAY_BILL_ONLINE),
            bill_ref_number=self._optional('bill_ref_number', NONE_LITERAL),
        )
