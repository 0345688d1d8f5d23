"""
Bill manager payloads. These endpoints use camelCase on the wire and reply
with ``rescode`` / ``resmsg`` acknowledgements.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from mpesa.constants import SendRemindersType


@dataclass(frozen=True)
class OnboardRequest:
    callback_url: str
    email: str
    logo: str
    official_contact: str
    send_reminders: SendRemindersType
    short_code: str


@dataclass(frozen=True)
class OnboardResponse:
    app_key: str
    response_code: str
    response_message: str


@dataclass(frozen=True)
class OnboardModifyRequest:
    callback_url: Optional[str] = None
    email: Optional[str] = None
    logo: Optional[str] = None
    official_contact: Optional[str] = None
    send_reminders: Optional[SendRemindersType] = None
    short_code: Optional[str] = None


@dataclass(frozen=True)
class OnboardModifyResponse:
    response_code: str
    response_message: str


@dataclass(frozen=True)
class InvoiceItem:
    item_name: str
    amount: float


@dataclass(frozen=True)
class Invoice:
    amount: float
    account_reference: str
    billed_full_name: str
    billed_period: str
    billed_phone_number: str
    due_date: datetime
    external_reference: str
    invoice_name: str
    invoice_items: Optional[List[InvoiceItem]] = None


@dataclass(frozen=True)
class InvoiceResponse:
    """Acknowledgement shared by the invoicing and cancellation endpoints."""
    response_code: str
    response_message: str
    status_message: Optional[str] = None


@dataclass(frozen=True)
class CancelInvoice:
    external_reference: str


@dataclass(frozen=True)
class ReconciliationRequest:
    account_reference: str
    date_created: datetime
    msisdn: str
    paid_amount: float
    short_code: str
    transaction_id: str


@dataclass(frozen=True)
class ReconciliationResponse:
    response_code: str
    response_message: str


# One acknowledgement shape, four endpoints
SingleInvoiceResponse = InvoiceResponse
BulkInvoiceResponse = InvoiceResponse
CancelSingleInvoiceResponse = InvoiceResponse
CancelBulkInvoicesResponse = InvoiceResponse
