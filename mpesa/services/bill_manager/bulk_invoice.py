from typing import Iterable, List

from mpesa.constants import BULK_INVOICE_URL
from mpesa.errors import BuilderError
from mpesa.models import Invoice
from mpesa.schemas import InvoiceResponseSchema, InvoiceSchema
from mpesa.services.base import OperationBuilder


class BulkInvoiceBuilder(OperationBuilder):
    """Sends several invoices in one request."""

    path = BULK_INVOICE_URL
    request_schema = InvoiceSchema
    response_schema = InvoiceResponseSchema
    many = True

    def invoice(self, invoice: Invoice):
        invoices: List[Invoice] = self._fields.setdefault('invoices', [])
        invoices.append(invoice)
        return self

    def invoices(self, invoices: Iterable[Invoice]):
        return self._set('invoices', list(invoices))

    def build(self) -> List[Invoice]:
        invoices = self._optional('invoices')
        if not invoices:
            raise BuilderError('invoices')
        return list(invoices)
