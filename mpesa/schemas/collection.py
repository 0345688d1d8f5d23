from marshmallow import fields, pre_load

from mpesa.constants import CommandId, ResponseType, TransactionType
from mpesa.models import (
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
from mpesa.schemas.common import Amount, ModelSchema, Text

# Spellings of OriginatorConversationID seen on C2B responses
_ORIGINATOR_ALIASES = ('OriginatorCoversationID', 'OriginatorConverstionID')


class _C2bAcknowledgementSchema(ModelSchema):
    originator_conversation_id = Text(data_key='OriginatorConversationID', required=True)
    response_description = Text(data_key='ResponseDescription', required=True)
    conversation_id = Text(data_key='ConversationID', allow_none=True, load_default=None)
    response_code = Text(data_key='ResponseCode', allow_none=True, load_default=None)

    @pre_load
    def normalize_originator(self, data, **kwargs):
        if not isinstance(data, dict) or 'OriginatorConversationID' in data:
            return data
        for alias in _ORIGINATOR_ALIASES:
            if alias in data:
                data = dict(data)
                data['OriginatorConversationID'] = data.pop(alias)
                break
        return data


class C2bRegisterRequestSchema(ModelSchema):
    __model__ = C2bRegisterRequest

    validation_url = Text(data_key='ValidationURL', required=True)
    confirmation_url = Text(data_key='ConfirmationURL', required=True)
    response_type = fields.Enum(ResponseType, by_value=True, data_key='ResponseType', required=True)
    short_code = Text(data_key='ShortCode', required=True)


class C2bRegisterResponseSchema(_C2bAcknowledgementSchema):
    __model__ = C2bRegisterResponse


class C2bSimulateRequestSchema(ModelSchema):
    __model__ = C2bSimulateRequest

    command_id = fields.Enum(CommandId, by_value=True, data_key='CommandID', required=True)
    amount = Amount(data_key='Amount', required=True)
    msisdn = Text(data_key='Msisdn', required=True)
    bill_ref_number = Text(data_key='BillRefNumber', required=True)
    short_code = Text(data_key='ShortCode', required=True)


class C2bSimulateResponseSchema(_C2bAcknowledgementSchema):
    __model__ = C2bSimulateResponse


class ExpressRequestSchema(ModelSchema):
    __model__ = ExpressRequest

    business_short_code = Text(data_key='BusinessShortCode', required=True)
    password = Text(data_key='Password', required=True)
    timestamp = Text(data_key='Timestamp', required=True)
    transaction_type = fields.Enum(CommandId, by_value=True, data_key='TransactionType', required=True)
    amount = Amount(data_key='Amount', required=True)
    party_a = Text(data_key='PartyA', required=True)
    party_b = Text(data_key='PartyB', required=True)
    phone_number = Text(data_key='PhoneNumber', required=True)
    callback_url = Text(data_key='CallBackURL', required=True)
    account_reference = Text(data_key='AccountReference', required=True)
    transaction_desc = Text(data_key='TransactionDesc', required=True)


class ExpressResponseSchema(ModelSchema):
    __model__ = ExpressResponse

    checkout_request_id = Text(data_key='CheckoutRequestID', required=True)
    merchant_request_id = Text(data_key='MerchantRequestID', required=True)
    response_code = Text(data_key='ResponseCode', required=True)
    response_description = Text(data_key='ResponseDescription', required=True)
    customer_message = Text(data_key='CustomerMessage', required=True)


class ExpressQueryRequestSchema(ModelSchema):
    __model__ = ExpressQueryRequest

    business_short_code = Text(data_key='BusinessShortCode', required=True)
    password = Text(data_key='Password', required=True)
    timestamp = Text(data_key='Timestamp', required=True)
    checkout_request_id = Text(data_key='CheckoutRequestID', required=True)


class ExpressQueryResponseSchema(ModelSchema):
    __model__ = ExpressQueryResponse

    checkout_request_id = Text(data_key='CheckoutRequestID', required=True)
    merchant_request_id = Text(data_key='MerchantRequestID', required=True)
    response_code = Text(data_key='ResponseCode', required=True)
    response_description = Text(data_key='ResponseDescription', required=True)
    result_code = Text(data_key='ResultCode', required=True)
    result_desc = Text(data_key='ResultDesc', required=True)


class DynamicQrRequestSchema(ModelSchema):
    __model__ = DynamicQrRequest

    merchant_name = Text(data_key='MerchantName', required=True)
    ref_no = Text(data_key='RefNo', required=True)
    amount = Amount(data_key='Amount', required=True)
    transaction_type = fields.Enum(TransactionType, by_value=True, data_key='TrxCode', required=True)
    credit_party_identifier = Text(data_key='CPI', required=True)
    size = Text(data_key='Size', required=True)


class DynamicQrResponseSchema(ModelSchema):
    __model__ = DynamicQrResponse

    qr_code = Text(data_key='QRCode', required=True)
    response_code = Text(data_key='ResponseCode', required=True)
    response_description = Text(data_key='ResponseDescription', required=True)
