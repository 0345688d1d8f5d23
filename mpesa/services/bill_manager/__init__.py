"""
Bill Manager
Invoicing endpoints; bodies use camelCase keys
"""

from mpesa.services.bill_manager.bulk_invoice import BulkInvoiceBuilder
from mpesa.services.bill_manager.cancel_bulk_invoices import CancelBulkInvoicesBuilder
from mpesa.services.bill_manager.cancel_single_invoice import CancelSingleInvoiceBuilder
from mpesa.services.bill_manager.onboard import OnboardBuilder
from mpesa.services.bill_manager.onboard_modify import OnboardModifyBuilder
from mpesa.services.bill_manager.reconciliation import ReconciliationBuilder
from mpesa.services.bill_manager.single_invoice import SingleInvoiceBuilder

__all__ = [
    'BulkInvoiceBuilder',
    'CancelBulkInvoicesBuilder',
    'CancelSingleInvoiceBuilder',
    'OnboardBuilder',
    'OnboardModifyBuilder',
    'ReconciliationBuilder',
    'SingleInvoiceBuilder',
]
