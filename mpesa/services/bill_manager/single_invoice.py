from datetime import datetime
from typing import Iterable, List, Union

from mpesa.constants import SINGLE_INVOICE_URL
from mpesa.errors import ValidationError
from mpesa.models import Invoice, InvoiceItem
from mpesa.schemas import InvoiceResponseSchema, InvoiceSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_phone_number


def parse_datetime(value: Union[datetime, str], name: str) -> datetime:
    """Accept a datetime or an ISO-8601 string"""
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {name} '{value}', expected an ISO-8601 date") from None


class SingleInvoiceBuilder(OperationBuilder):
    """Sends one invoice to a customer."""

    path = SINGLE_INVOICE_URL
    request_schema = InvoiceSchema
    response_schema = InvoiceResponseSchema

    def amount(self, value: float):
        return self._set('amount', value)

    def account_reference(self, value: str):
        return self._set('account_reference', value)

    def billed_full_name(self, value: str):
        return self._set('billed_full_name', value)

    def billed_period(self, value: str):
        """Month and year, e.g. August 2021"""
        return self._set('billed_period', value)

    def billed_phone_number(self, value: Union[str, int]):
        return self._set('billed_phone_number', ensure_phone_number(value))

    def due_date(self, value: Union[datetime, str]):
        return self._set('due_date', parse_datetime(value, 'due_date'))

    def external_reference(self, value: str):
        return self._set('external_reference', value)

    def invoice_name(self, value: str):
        return self._set('invoice_name', value)

    def invoice_item(self, item_name: str, amount: float):
        items: List[InvoiceItem] = self._fields.setdefault('invoice_items', [])
        items.append(InvoiceItem(item_name=item_name, amount=amount))
        return self

    def invoice_items(self, items: Iterable[InvoiceItem]):
        return self._set('invoice_items', list(items))

    def build(self) -> Invoice:
        return Invoice(
            amount=self._required('amount'),
            account_reference=self._required('account_reference'),
            billed_full_name=self._required('billed_full_name'),
            billed_period=self._required('billed_period'),
            billed_phone_number=self._required('billed_phone_number'),
            due_date=self._required('due_date'),
            external_reference=self._required('external_reference'),
            invoice_name=self._required('invoice_name'),
            invoice_items=self._optional('invoice_items') or None,
        )
