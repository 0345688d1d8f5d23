"""
Dynamic QR

Generates a QR code customers scan from the M-Pesa app to pay a merchant.
The response carries the image as a base64 PNG.
"""

from typing import Union

from mpesa.constants import DYNAMIC_QR_URL, TransactionType
from mpesa.models import DynamicQrRequest
from mpesa.schemas import DynamicQrRequestSchema, DynamicQrResponseSchema
from mpesa.services.base import OperationBuilder

DEFAULT_QR_SIZE = '300'


class DynamicQrBuilder(OperationBuilder):
    path = DYNAMIC_QR_URL
    request_schema = DynamicQrRequestSchema
    response_schema = DynamicQrResponseSchema

    def merchant_name(self, value: str):
        return self._set('merchant_name', value)

    def ref_no(self, value: str):
        return self._set('ref_no', value)

    def amount(self, value: float):
        return self._set('amount', value)

    def transaction_type(self, value: Union[TransactionType, str]):
        return self._set('transaction_type', TransactionType.parse(value))

    def credit_party_identifier(self, value: str):
        """Till, paybill, phone number or business number receiving the payment"""
        return self._set('credit_party_identifier', str(value))

    def size(self, value: Union[str, int]):
        """Width of the square image in pixels"""
        return self._set('size', str(value))

    def build(self) -> DynamicQrRequest:
        return DynamicQrRequest(
            merchant_name=self._required('merchant_name'),
            ref_no=self._required('ref_no'),
            amount=self._required('amount'),
            transaction_type=self._required('transaction_type'),
            credit_party_identifier=self._required('credit_party_identifier'),
            size=self._optional('size', DEFAULT_QR_SIZE),
        )
