from typing import Iterable, List

from mpesa.constants import CANCEL_BULK_INVOICES_URL
from mpesa.errors import BuilderError
from mpesa.models import CancelInvoice
from mpesa.schemas import CancelInvoiceSchema, InvoiceResponseSchema
from mpesa.services.base import OperationBuilder


class CancelBulkInvoicesBuilder(OperationBuilder):
    """Recalls several unpaid invoices by external reference."""

    path = CANCEL_BULK_INVOICES_URL
    request_schema = CancelInvoiceSchema
    response_schema = InvoiceResponseSchema
    many = True

    def external_reference(self, value: str):
        references: List[str] = self._fields.setdefault('external_references', [])
        references.append(value)
        return self

    def external_references(self, values: Iterable[str]):
        return self._set('external_references', list(values))

    def build(self) -> List[CancelInvoice]:
        references = self._optional('external_references')
        if not references:
            raise BuilderError('external_references')
        return [CancelInvoice(external_reference=reference) for reference in references]
