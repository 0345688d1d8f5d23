"""
M-Pesa Daraja API client

    >>> from mpesa import Mpesa, Environment
    >>> client = Mpesa(client_key, client_secret, Environment.SANDBOX)
    >>> response = (
    ...     client.b2c("testapi496")
    ...     .party_a("600496")
    ...     .party_b("254708374149")
    ...     .amount(1000)
    ...     .result_url("https://example.com/ok")
    ...     .timeout_url("https://example.com/err")
    ...     .send()
    ... )
"""

from mpesa.client import Mpesa
from mpesa.config import MpesaConfig, load_config
from mpesa.constants import (
    CommandId,
    IdentifierType,
    Operation,
    ResponseType,
    SendRemindersType,
    TransactionType,
)
from mpesa.environment import Environment
from mpesa.errors import (
    BuilderError,
    CodecError,
    EncryptionError,
    EnvironmentVariableError,
    MpesaError,
    ResponseError,
    ServiceError,
    TransportError,
    ValidationError,
)
from mpesa.models import (
    AccountBalanceRequest,
    AccountBalanceResponse,
    AuthenticationResponse,
    B2bRequest,
    B2bResponse,
    B2cRequest,
    B2cResponse,
    BulkInvoiceResponse,
    C2bRegisterRequest,
    C2bRegisterResponse,
    C2bSimulateRequest,
    C2bSimulateResponse,
    CancelBulkInvoicesResponse,
    CancelInvoice,
    CancelSingleInvoiceResponse,
    DynamicQrRequest,
    DynamicQrResponse,
    ExpressQueryRequest,
    ExpressQueryResponse,
    ExpressRequest,
    ExpressResponse,
    Invoice,
    InvoiceItem,
    InvoiceResponse,
    OnboardModifyRequest,
    OnboardModifyResponse,
    OnboardRequest,
    OnboardResponse,
    ReconciliationRequest,
    ReconciliationResponse,
    Request,
    SingleInvoiceResponse,
    TransactionReversalRequest,
    TransactionReversalResponse,
    TransactionStatusRequest,
    TransactionStatusResponse,
)
from mpesa.utils import configure_logging

__version__ = '0.1.0'

__all__ = [
    'BuilderError',
    'CodecError',
    'CommandId',
    'EncryptionError',
    'Environment',
    'EnvironmentVariableError',
    'IdentifierType',
    'Mpesa',
    'MpesaConfig',
    'MpesaError',
    'Operation',
    'ResponseError',
    'ResponseType',
    'SendRemindersType',
    'ServiceError',
    'TransactionType',
    'TransportError',
    'ValidationError',
    'configure_logging',
    'load_config',
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
