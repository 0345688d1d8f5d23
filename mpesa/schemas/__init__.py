"""
Schemas Package
Marshmallow schemas mapping payload dataclasses to Daraja's wire casing
"""

from mpesa.schemas.common import ModelSchema, ResponseErrorSchema
from mpesa.schemas.auth import AuthenticationResponseSchema
from mpesa.schemas.disbursement import (
    AccountBalanceRequestSchema,
    AccountBalanceResponseSchema,
    B2bRequestSchema,
    B2bResponseSchema,
    B2cRequestSchema,
    B2cResponseSchema,
    TransactionReversalRequestSchema,
    TransactionReversalResponseSchema,
    TransactionStatusRequestSchema,
    TransactionStatusResponseSchema,
)
from mpesa.schemas.collection import (
    C2bRegisterRequestSchema,
    C2bRegisterResponseSchema,
    C2bSimulateRequestSchema,
    C2bSimulateResponseSchema,
    DynamicQrRequestSchema,
    DynamicQrResponseSchema,
    ExpressQueryRequestSchema,
    ExpressQueryResponseSchema,
    ExpressRequestSchema,
    ExpressResponseSchema,
)
from mpesa.schemas.bill_manager import (
    CancelInvoiceSchema,
    InvoiceItemSchema,
    InvoiceResponseSchema,
    InvoiceSchema,
    OnboardModifyRequestSchema,
    OnboardModifyResponseSchema,
    OnboardRequestSchema,
    OnboardResponseSchema,
    ReconciliationRequestSchema,
    ReconciliationResponseSchema,
)

__all__ = [
    'AccountBalanceRequestSchema',
    'AccountBalanceResponseSchema',
    'AuthenticationResponseSchema',
    'B2bRequestSchema',
    'B2bResponseSchema',
    'B2cRequestSchema',
    'B2cResponseSchema',
    'C2bRegisterRequestSchema',
    'C2bRegisterResponseSchema',
    'C2bSimulateRequestSchema',
    'C2bSimulateResponseSchema',
    'CancelInvoiceSchema',
    'DynamicQrRequestSchema',
    'DynamicQrResponseSchema',
    'ExpressQueryRequestSchema',
    'ExpressQueryResponseSchema',
    'ExpressRequestSchema',
    'ExpressResponseSchema',
    'InvoiceItemSchema',
    'InvoiceResponseSchema',
    'InvoiceSchema',
    'ModelSchema',
    'OnboardModifyRequestSchema',
    'OnboardModifyResponseSchema',
    'OnboardRequestSchema',
    'OnboardResponseSchema',
    'ReconciliationRequestSchema',
    'ReconciliationResponseSchema',
    'ResponseErrorSchema',
    'TransactionReversalRequestSchema',
    'TransactionReversalResponseSchema',
    'TransactionStatusRequestSchema',
    'TransactionStatusResponseSchema',
]
