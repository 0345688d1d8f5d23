"""
Daraja constants
Enumerations sent on the wire, operation tags and endpoint paths.
"""

from enum import Enum
from typing import Dict

from mpesa.errors import ValidationError

# Source: https://developer.safaricom.co.ke/test_credentials
DEFAULT_PASSKEY = "bfb279f9aa9bdbcf158e97dd71a467cd2e0c893059b10f78e6b72ada1ed2c919"
DEFAULT_INITIATOR_PASSWORD = "Safcom496!"

# Token lifetime enforced by the cache, regardless of the server's expires_in
AUTH_TOKEN_TTL_SECONDS = 3600
AUTH_URL = "oauth/v1/generate?grant_type=client_credentials"

# Literal sent by the classic endpoints for unset optional text fields
NONE_LITERAL = "None"


class _WireEnum(str, Enum):
    """String enum whose wire form is its value."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value):
        """
        Parse a wire form (or a member name) into a member.

        Raises:
            ValidationError: If the value does not name a member
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text == member.name:
                return member
        raise ValidationError(f"Invalid {cls.__name__}: '{value}'")


class CommandId(_WireEnum):
    TRANSACTION_REVERSAL = "TransactionReversal"
    SALARY_PAYMENT = "SalaryPayment"
    BUSINESS_PAYMENT = "BusinessPayment"
    PROMOTION_PAYMENT = "PromotionPayment"
    ACCOUNT_BALANCE = "AccountBalance"
    CUSTOMER_PAY_BILL_ONLINE = "CustomerPayBillOnline"
    TRANSACTION_STATUS_QUERY = "TransactionStatusQuery"
    CHECK_IDENTITY = "CheckIdentity"
    BUSINESS_PAY_BILL = "BusinessPayBill"
    BUSINESS_BUY_GOODS = "BusinessBuyGoods"
    DISBURSE_FUNDS_TO_BUSINESS = "DisburseFundsToBusiness"
    BUSINESS_TO_BUSINESS_TRANSFER = "BusinessToBusinessTransfer"
    BUSINESS_TRANSFER_FROM_MMF_TO_UTILITY = "BusinessTransferFromMMFToUtility"


class IdentifierType(_WireEnum):
    """Identifies a sending or receiving party; sent as the numeric code."""
    MSISDN = "1"
    TILL_NUMBER = "2"
    SHORT_CODE = "4"

    @classmethod
    def parse(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        aliases = {"MSISDN": cls.MSISDN, "TillNumber": cls.TILL_NUMBER, "ShortCode": cls.SHORT_CODE}
        if isinstance(value, str) and value.strip() in aliases:
            return aliases[value.strip()]
        return super().parse(value)


class ResponseType(_WireEnum):
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class SendRemindersType(_WireEnum):
    ENABLE = "Enable"
    DISABLE = "Disable"


class TransactionType(_WireEnum):
    """Dynamic QR transaction types."""
    BUY_GOODS = "BuyGoods"
    PAY_BILL = "PayBill"
    SEND_MONEY = "SendMoney"
    SEND_TO_BUSINESS = "SendToBusiness"

    @classmethod
    def parse(cls, value):
        if isinstance(value, str):
            code = _TRX_CODES.get(value.strip().upper())
            if code is not None:
                return cls(code)
        return super().parse(value)


# Daraja's two-letter QR codes, accepted when parsing
_TRX_CODES: Dict[str, str] = {
    "BG": "BuyGoods",
    "PB": "PayBill",
    "SM": "SendMoney",
    "SB": "SendToBusiness",
}

# Only these two command ids are valid for STK push
EXPRESS_TRANSACTION_TYPES = (CommandId.CUSTOMER_PAY_BILL_ONLINE, CommandId.BUSINESS_BUY_GOODS)


class Operation(_WireEnum):
    """Tag identifying the operation that produced a service error."""
    AUTH = "Auth"
    B2C = "B2c"
    B2B = "B2b"
    C2B_REGISTER = "C2bRegister"
    C2B_SIMULATE = "C2bSimulate"
    ACCOUNT_BALANCE = "AccountBalance"
    EXPRESS = "Express"
    EXPRESS_QUERY = "ExpressQuery"
    REVERSAL = "Reversal"
    STATUS = "Status"
    DYNAMIC_QR = "DynamicQr"
    ONBOARD = "Onboard"
    ONBOARD_MODIFY = "OnboardModify"
    BULK_INVOICE = "BulkInvoice"
    SINGLE_INVOICE = "SingleInvoice"
    CANCEL_SINGLE_INVOICE = "CancelSingleInvoice"
    CANCEL_BULK_INVOICES = "CancelBulkInvoices"
    RECONCILIATION = "Reconciliation"

    @classmethod
    def from_path(cls, path: str) -> "Operation":
        """
        Resolve the operation tag for an endpoint path.

        Raises:
            ValidationError: If the path is not a known Daraja endpoint
        """
        key = path.strip("/").split("?", 1)[0]
        try:
            return _OPERATION_BY_PATH[key]
        except KeyError:
            raise ValidationError(f"Unknown endpoint path: '{path}'") from None


# Endpoint paths, relative to the environment base url
B2C_URL = "mpesa/b2c/v1/paymentrequest"
B2B_URL = "mpesa/b2b/v1/paymentrequest"
C2B_REGISTER_URL = "mpesa/c2b/v1/registerurl"
C2B_SIMULATE_URL = "mpesa/c2b/v1/simulate"
ACCOUNT_BALANCE_URL = "mpesa/accountbalance/v1/query"
EXPRESS_REQUEST_URL = "mpesa/stkpush/v1/processrequest"
EXPRESS_QUERY_URL = "mpesa/stkpushquery/v1/query"
TRANSACTION_REVERSAL_URL = "mpesa/reversal/v1/request"
TRANSACTION_STATUS_URL = "mpesa/transactionstatus/v1/query"
DYNAMIC_QR_URL = "mpesa/qrcode/v1/generate"
ONBOARD_URL = "v1/billmanager-invoice/optin"
ONBOARD_MODIFY_URL = "v1/billmanager-invoice/change-optin-details"
BULK_INVOICE_URL = "v1/billmanager-invoice/bulk-invoicing"
SINGLE_INVOICE_URL = "v1/billmanager-invoice/single-invoicing"
CANCEL_SINGLE_INVOICE_URL = "v1/billmanager-invoice/cancel-single-invoice"
CANCEL_BULK_INVOICES_URL = "v1/billmanager-invoice/cancel-bulk-invoices"
RECONCILIATION_URL = "v1/billmanager-invoice/reconciliation"

_OPERATION_BY_PATH: Dict[str, Operation] = {
    "oauth/v1/generate":      Operation.AUTH,
    B2C_URL:                  Operation.B2C,
    B2B_URL:                  Operation.B2B,
    C2B_REGISTER_URL:         Operation.C2B_REGISTER,
    C2B_SIMULATE_URL:         Operation.C2B_SIMULATE,
    ACCOUNT_BALANCE_URL:      Operation.ACCOUNT_BALANCE,
    EXPRESS_REQUEST_URL:      Operation.EXPRESS,
    EXPRESS_QUERY_URL:        Operation.EXPRESS_QUERY,
    TRANSACTION_REVERSAL_URL: Operation.REVERSAL,
    TRANSACTION_STATUS_URL:   Operation.STATUS,
    DYNAMIC_QR_URL:           Operation.DYNAMIC_QR,
    ONBOARD_URL:              Operation.ONBOARD,
    ONBOARD_MODIFY_URL:       Operation.ONBOARD_MODIFY,
    BULK_INVOICE_URL:         Operation.BULK_INVOICE,
    SINGLE_INVOICE_URL:       Operation.SINGLE_INVOICE,
    CANCEL_SINGLE_INVOICE_URL: Operation.CANCEL_SINGLE_INVOICE,
    CANCEL_BULK_INVOICES_URL: Operation.CANCEL_BULK_INVOICES,
    RECONCILIATION_URL:       Operation.RECONCILIATION,
}
