from datetime import datetime
from typing import Union

from mpesa.constants import RECONCILIATION_URL
from mpesa.models import ReconciliationRequest
from mpesa.schemas import ReconciliationRequestSchema, ReconciliationResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.services.bill_manager.single_invoice import parse_datetime
from mpesa.utils import ensure_phone_number


class ReconciliationBuilder(OperationBuilder):
    """Acknowledges a payment made against an invoice outside Bill Manager."""

    path = RECONCILIATION_URL
    request_schema = ReconciliationRequestSchema
    response_schema = ReconciliationResponseSchema

    def account_reference(self, value: str):
        return self._set('account_reference', value)

    def date_created(self, value: Union[datetime, str]):
        return self._set('date_created', parse_datetime(value, 'date_created'))

    def msisdn(self, value: Union[str, int]):
        return self._set('msisdn', ensure_phone_number(value))

    def paid_amount(self, value: float):
        return self._set('paid_amount', value)

    def short_code(self, value: str):
        return self._set('short_code', str(value))

    def transaction_id(self, value: str):
        return self._set('transaction_id', value)

    def build(self) -> ReconciliationRequest:
        return ReconciliationRequest(
            account_reference=self._required('account_reference'),
            date_created=self._required('date_created'),
            msisdn=self._required('msisdn'),
            paid_amount=self._required('paid_amount'),
            short_code=self._required('short_code'),
            transaction_id=self._required('transaction_id'),
        )
