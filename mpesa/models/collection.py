"""
Collection payloads: C2B register/simulate, STK push (express) and dynamic QR.
"""

from dataclasses import dataclass, field
from typing import Optional

from mpesa.constants import CommandId, ResponseType, TransactionType


@dataclass(frozen=True)
class C2bRegisterRequest:
    validation_url: str
    confirmation_url: str
    response_type: ResponseType
    short_code: str


@dataclass(frozen=True)
class C2bRegisterResponse:
    originator_conversation_id: str
    response_description: str
    conversation_id: Optional[str] = None
    response_code: Optional[str] = None


@dataclass(frozen=True)
class C2bSimulateRequest:
    command_id: CommandId
    amount: float
    msisdn: str
    bill_ref_number: str
    short_code: str


@dataclass(frozen=True)
class C2bSimulateResponse:
    originator_conversation_id: str
    response_description: str
    conversation_id: Optional[str] = None
    response_code: Optional[str] = None


@dataclass(frozen=True)
class ExpressRequest:
    business_short_code: str
    password: str = field(repr=False)
    timestamp: str
    transaction_type: CommandId
    amount: float
    party_a: str
    party_b: str
    phone_number: str
    callback_url: str
    account_reference: str
    transaction_desc: str


@dataclass(frozen=True)
class ExpressResponse:
    checkout_request_id: str
    merchant_request_id: str
    response_code: str
    response_description: str
    customer_message: str


@dataclass(frozen=True)
class ExpressQueryRequest:
    business_short_code: str
    password: str = field(repr=False)
    timestamp: str
    checkout_request_id: str


@dataclass(frozen=True)
class ExpressQueryResponse:
    checkout_request_id: str
    merchant_request_id: str
    response_code: str
    response_description: str
    result_code: str
    result_desc: str


@dataclass(frozen=True)
class DynamicQrRequest:
    merchant_name: str
    ref_no: str
    amount: float
    transaction_type: TransactionType
    credit_party_identifier: str
    size: str


@dataclass(frozen=True)
class DynamicQrResponse:
    qr_code: str
    response_code: str
    response_description: str
