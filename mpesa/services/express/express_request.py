from typing import Union

from mpesa.constants import (
    DEFAULT_PASSKEY,
    EXPRESS_REQUEST_URL,
    EXPRESS_TRANSACTION_TYPES,
    NONE_LITERAL,
    CommandId,
)
from mpesa.errors import ValidationError
from mpesa.models import ExpressRequest
from mpesa.schemas import ExpressRequestSchema, ExpressResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.services.express.password import encode_password, generate_password
from mpesa.utils import ensure_phone_number, ensure_url


class ExpressRequestBuilder(OperationBuilder):
    """
    Initiates an STK push: the customer's handset prompts for their PIN to
    authorize a payment to the business short code.

    ``party_a`` defaults to the phone number and ``party_b`` to the business
    short code. The password and timestamp are derived when the request is
    built, from a single clock reading.
    """

    path = EXPRESS_REQUEST_URL
    request_schema = ExpressRequestSchema
    response_schema = ExpressResponseSchema

    encode_password = staticmethod(encode_password)

    def __init__(self, client, business_short_code: str = None):
        super().__init__(client)
        self._set('business_short_code', business_short_code)

    def business_short_code(self, value: str):
        return self._set('business_short_code', str(value))

    def pass_key(self, value: str):
        return self._set('pass_key', value)

    def transaction_type(self, value: Union[CommandId, str]):
        """CustomerPayBillOnline (default) or BusinessBuyGoods"""
        return self._set('transaction_type', CommandId.parse(value))

    def amount(self, value: float):
        return self._set('amount', value)

    def party_a(self, value: Union[str, int]):
        return self._set('party_a', ensure_phone_number(value))

    def party_b(self, value: str):
        return self._set('party_b', str(value))

    def phone_number(self, value: Union[str, int]):
        return self._set('phone_number', ensure_phone_number(value))

    def callback_url(self, value: str):
        return self._set('callback_url', ensure_url(value))

    def account_ref(self, value: str):
        return self._set('account_ref', value)

    def transaction_desc(self, value: str):
        return self._set('transaction_desc', value)

    def build(self) -> ExpressRequest:
        transaction_type = self._optional('transaction_type', CommandId.CUSTOMER_PAY_BILL_ONLINE)
        if transaction_type not in EXPRESS_TRANSACTION_TYPES:
            raise ValidationError("Invalid transaction type. Expected BusinessBuyGoods or CustomerPayBillOnline")

        business_short_code = self._required('business_short_code')
        amount = self._required('amount')
        phone_number = self._required('phone_number')
        callback_url = self._required('callback_url')

        timestamp, password = generate_password(
            business_short_code, self._optional('pass_key', DEFAULT_PASSKEY)
        )

        return ExpressRequest(
            business_short_code=business_short_code,
            password=password,
            timestamp=timestamp,
            transaction_type=transaction_type,
            amount=amount,
            party_a=self._optional('party_a', phone_number),
            party_b=self._optional('party_b', business_short_code),
            phone_number=phone_number,
            callback_url=callback_url,
            account_reference=self._optional('account_ref', NONE_LITERAL),
            transaction_desc=self._optional('transaction_desc', NONE_LITERAL),
        )
