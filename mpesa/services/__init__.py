"""
Services Package
One builder per Daraja operation
"""

from mpesa.services.account_balance import AccountBalanceBuilder
from mpesa.services.b2b import B2bBuilder
from mpesa.services.b2c import B2cBuilder
from mpesa.services.base import OperationBuilder
from mpesa.services.bill_manager import (
    BulkInvoiceBuilder,
    CancelBulkInvoicesBuilder,
    CancelSingleInvoiceBuilder,
    OnboardBuilder,
    OnboardModifyBuilder,
    ReconciliationBuilder,
    SingleInvoiceBuilder,
)
from mpesa.services.c2b_register import C2bRegisterBuilder
from mpesa.services.c2b_simulate import C2bSimulateBuilder
from mpesa.services.dynamic_qr import DynamicQrBuilder
from mpesa.services.express import ExpressQueryBuilder, ExpressRequestBuilder
from mpesa.services.transaction_reversal import TransactionReversalBuilder
from mpesa.services.transaction_status import TransactionStatusBuilder

__all__ = [
    'AccountBalanceBuilder',
    'B2bBuilder',
    'B2cBuilder',
    'BulkInvoiceBuilder',
    'C2bRegisterBuilder',
    'C2bSimulateBuilder',
    'CancelBulkInvoicesBuilder',
    'CancelSingleInvoiceBuilder',
    'DynamicQrBuilder',
    'ExpressQueryBuilder',
    'ExpressRequestBuilder',
    'OnboardBuilder',
    'OnboardModifyBuilder',
    'OperationBuilder',
    'ReconciliationBuilder',
    'SingleInvoiceBuilder',
    'TransactionReversalBuilder',
    'TransactionStatusBuilder',
]
