from mpesa.models.auth import AuthenticationResponse
from mpesa.models.bill_manager import (
    BulkInvoiceResponse,
    CancelBulkInvoicesResponse,
    CancelInvoice,
    CancelSingleInvoiceResponse,
    Invoice,
    InvoiceItem,
    InvoiceResponse,
    OnboardModifyRequest,
    OnboardModifyResponse,
    OnboardRequest,
    OnboardResponse,
    ReconciliationRequest,
    ReconciliationResponse,
    SingleInvoiceResponse,
)
from mpesa.models.collection import (
    C2bRegisterRequest,
    C2bRegisterResponse,
    C2bSimulateRequest,
    C2bSimulateResponse,
    DynamicQrRequest,
    DynamicQrResponse,
    ExpressQueryRequest,
    ExpressQueryResponse,
    ExpressRequest,
    ExpressResponse,
)
from mpesa.models.request import Request
from mpesa.models.disbursement import (
    AccountBalanceRequest,
    AccountBalanceResponse,
    B2bRequest,
    B2bResponse,
    B2cRequest,
    B2cResponse,
    TransactionReversalRequest,
    TransactionReversalResponse,
    TransactionStatusRequest,
    TransactionStatusResponse,
)

__all__ = [
    'AccountBalanceRequest',
    'AccountBalanceResponse',
    'AuthenticationResponse',
    'B2bRequest',
    'B2bResponse',
    'B2cRequest',
    'B2cResponse',
    'BulkInvoiceResponse',
    'C2bRegisterRequest',
    'C2bRegisterResponse',
    'C2bSimulateRequest',
    'C2bSimulateResponse',
    'CancelBulkInvoicesResponse',
    'CancelInvoice',
    'CancelSingleInvoiceResponse',
    'DynamicQrRequest',
    'DynamicQrResponse',
    'ExpressQueryRequest',
    'ExpressQueryResponse',
    'ExpressRequest',
    'ExpressResponse',
    'Invoice',
    'InvoiceItem',
    'InvoiceResponse',
    'OnboardModifyRequest',
    'OnboardModifyResponse',
    'OnboardRequest',
    'OnboardResponse',
    'ReconciliationRequest',
    'ReconciliationResponse',
    'Request',
    'SingleInvoiceResponse',
    'TransactionReversalRequest',
    'TransactionReversalResponse',
    'TransactionStatusRequest',
    'TransactionStatusResponse',
]
