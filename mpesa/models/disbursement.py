"""
Disbursement payloads: B2C, B2B, account balance, reversal and status.

Requests carry the security credential already encrypted; responses are the
synchronous acknowledgements, the final result arrives at the result URL.
"""

from dataclasses import dataclass, field
from typing import Optional

from mpesa.constants import CommandId, IdentifierType


@dataclass(frozen=True)
class B2cRequest:
    initiator_name: str
    security_credential: str = field(repr=False)
    command_id: CommandId
    amount: float
    party_a: str
    party_b: str
    remarks: str
    queue_timeout_url: str
    result_url: str
    occasion: str


@dataclass(frozen=True)
class B2cResponse:
    conversation_id: str
    originator_conversation_id: str
    response_code: str
    response_description: str


@dataclass(frozen=True)
class B2bRequest:
    initiator: str
    security_credential: str = field(repr=False)
    command_id: CommandId
    amount: float
    party_a: str
    sender_identifier_type: IdentifierType
    party_b: str
    receiver_identifier_type: IdentifierType
    remarks: str
    queue_timeout_url: Optional[str] = None
    result_url: Optional[str] = None
    account_reference: Optional[str] = None


@dataclass(frozen=True)
class B2bResponse:
    conversation_id: str
    originator_conversation_id: str
    response_code: str
    response_description: str


@dataclass(frozen=True)
class AccountBalanceRequest:
    initiator: str
    security_credential: str = field(repr=False)
    command_id: CommandId
    party_a: str
    identifier_type: IdentifierType
    remarks: str
    queue_timeout_url: str
    result_url: str


@dataclass(frozen=True)
class AccountBalanceResponse:
    conversation_id: str
    originator_conversation_id: str
    response_code: str
    response_description: str


@dataclass(frozen=True)
class TransactionReversalRequest:
    initiator: str
    security_credential: str = field(repr=False)
    command_id: CommandId
    transaction_id: str
    receiver_party: str
    receiver_identifier_type: IdentifierType
    result_url: str
    queue_timeout_url: str
    remarks: str
    occasion: str
    amount: float


@dataclass(frozen=True)
class TransactionReversalResponse:
    conversation_id: str
    originator_conversation_id: str
    response_description: str
    response_code: Optional[str] = None


@dataclass(frozen=True)
class TransactionStatusRequest:
    initiator: str
    security_credential: str = field(repr=False)
    command_id: CommandId
    transaction_id: str
    party_a: str
    identifier_type: IdentifierType
    result_url: str
    queue_timeout_url: str
    remarks: str
    occasion: str


@dataclass(frozen=True)
class TransactionStatusResponse:
    conversation_id: str
    originator_conversation_id: str
    response_description: str
    response_code: Optional[str] = None
