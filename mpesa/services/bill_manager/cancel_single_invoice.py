from mpesa.constants import CANCEL_SINGLE_INVOICE_URL
from mpesa.models import CancelInvoice
from mpesa.schemas import CancelInvoiceSchema, InvoiceResponseSchema
from mpesa.services.base import OperationBuilder


class CancelSingleInvoiceBuilder(OperationBuilder):
    """Recalls an invoice that has not been paid."""

    path = CANCEL_SINGLE_INVOICE_URL
    request_schema = CancelInvoiceSchema
    response_schema = InvoiceResponseSchema

    def external_reference(self, value: str):
        return self._set('external_reference', value)

    def build(self) -> CancelInvoice:
        return CancelInvoice(external_reference=self._required('external_reference'))
