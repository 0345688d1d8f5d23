from marshmallow import fields

from mpesa.constants import SendRemindersType
from mpesa.models import (
    CancelInvoice,
    Invoice,
    InvoiceItem,
    InvoiceResponse,
    OnboardModifyRequest,
    OnboardModifyResponse,
    OnboardRequest,
    OnboardResponse,
    ReconciliationRequest,
    ReconciliationResponse,
)
from mpesa.schemas.common import Amount, ModelSchema, Text


class OnboardRequestSchema(ModelSchema):
    __model__ = OnboardRequest

    callback_url = Text(data_key='callbackUrl', required=True)
    email = Text(data_key='email', required=True)
    logo = Text(data_key='logo', required=True)
    official_contact = Text(data_key='officialContact', required=True)
    send_reminders = fields.Enum(SendRemindersType, by_value=True, data_key='sendReminders', required=True)
    short_code = Text(data_key='shortcode', required=True)


class OnboardResponseSchema(ModelSchema):
    __model__ = OnboardResponse

    app_key = Text(data_key='app_key', required=True)
    response_code = Text(data_key='rescode', required=True)
    response_message = Text(data_key='resmsg', required=True)


class OnboardModifyRequestSchema(ModelSchema):
    __model__ = OnboardModifyRequest
    __skip_none__ = True

    callback_url = Text(data_key='callbackUrl', allow_none=True, load_default=None)
    email = Text(data_key='email', allow_none=True, load_default=None)
    logo = Text(data_key='logo', allow_none=True, load_default=None)
    official_contact = Text(data_key='officialContact', allow_none=True, load_default=None)
    send_reminders = fields.Enum(
        SendRemindersType, by_value=True, data_key='sendReminders', allow_none=True, load_default=None
    )
    short_code = Text(data_key='shortcode', allow_none=True, load_default=None)


class OnboardModifyResponseSchema(ModelSchema):
    __model__ = OnboardModifyResponse

    response_code = Text(data_key='rescode', required=True)
    response_message = Text(data_key='resmsg', required=True)


class InvoiceItemSchema(ModelSchema):
    __model__ = InvoiceItem

    item_name = Text(data_key='itemName', required=True)
    amount = Amount(data_key='amount', required=True)


class InvoiceSchema(ModelSchema):
    __model__ = Invoice
    __skip_none__ = True

    amount = Amount(data_key='amount', required=True)
    account_reference = Text(data_key='accountReference', required=True)
    billed_full_name = Text(data_key='billedFullName', required=True)
    billed_period = Text(data_key='billedPeriod', required=True)
    billed_phone_number = Text(data_key='billedPhoneNumber', required=True)
    due_date = fields.DateTime(format='iso', data_key='dueDate', required=True)
    external_reference = Text(data_key='externalReference', required=True)
    invoice_name = Text(data_key='invoiceName', required=True)
    invoice_items = fields.List(
        fields.Nested(InvoiceItemSchema), data_key='invoiceItems', allow_none=True, load_default=None
    )


class InvoiceResponseSchema(ModelSchema):
    __model__ = InvoiceResponse

    response_code = Text(data_key='rescode', required=True)
    response_message = Text(data_key='resmsg', required=True)
    status_message = Text(data_key='Status_Message', allow_none=True, load_default=None)


class CancelInvoiceSchema(ModelSchema):
    __model__ = CancelInvoice

    external_reference = Text(data_key='externalReference', required=True)


class ReconciliationRequestSchema(ModelSchema):
    __model__ = ReconciliationRequest

    account_reference = Text(data_key='accountReference', required=True)
    date_created = fields.DateTime(format='iso', data_key='dateCreated', required=True)
    msisdn = Text(data_key='msisdn', required=True)
    paid_amount = Amount(data_key='paidAmount', required=True)
    short_code = Text(data_key='shortCode', required=True)
    transaction_id = Text(data_key='transactionId', required=True)


class ReconciliationResponseSchema(ModelSchema):
    __model__ = ReconciliationResponse

    response_code = Text(data_key='rescode', required=True)
    response_message = Text(data_key='resmsg', required=True)
