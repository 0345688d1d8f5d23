from marshmallow import fields

from mpesa.constants import CommandId, IdentifierType
from mpesa.models import (
    AccountBalanceRequest,
    AccountBalanceResponse,
    B2bRequest,
    B2bResponse,
    B2cRequest,
    B2cResponse,
    TransactionReversalRequest,
    TransactionReversalResponse,
    TransactionStatusRequest,
    TransactionStatusResponse,
)
from mpesa.schemas.common import Amount, ModelSchema, Text


class _AcknowledgementSchema(ModelSchema):
    conversation_id = Text(data_key='ConversationID', required=True)
    originator_conversation_id = Text(data_key='OriginatorConversationID', required=True)
    response_code = Text(data_key='ResponseCode', required=True)
    response_description = Text(data_key='ResponseDescription', required=True)


class B2cRequestSchema(ModelSchema):
    __model__ = B2cRequest

    initiator_name = Text(data_key='InitiatorName', required=True)
    security_credential = Text(data_key='SecurityCredential', required=True)
    command_id = fields.Enum(CommandId, by_value=True, data_key='CommandID', required=True)
    amount = Amount(data_key='Amount', required=True)
    party_a = Text(data_key='PartyA', required=True)
    party_b = Text(data_key='PartyB', required=True)
    remarks = Text(data_key='Remarks', required=True)
    queue_timeout_url = Text(data_key='QueueTimeOutURL', required=True)
    result_url = Text(data_key='ResultURL', required=True)
    occasion = Text(data_key='Occasion', required=True)


class B2cResponseSchema(_AcknowledgementSchema):
    __model__ = B2cResponse


class B2bRequestSchema(ModelSchema):
    __model__ = B2bRequest
    __skip_none__ = True

    initiator = Text(data_key='Initiator', required=True)
    security_credential = Text(data_key='SecurityCredential', required=True)
    command_id = fields.Enum(CommandId, by_value=True, data_key='CommandID', required=True)
    amount = Amount(data_key='Amount', required=True)
    party_a = Text(data_key='PartyA', required=True)
    sender_identifier_type = fields.Enum(
        IdentifierType, by_value=True, data_key='SenderIdentifierType', required=True
    )
    party_b = Text(data_key='PartyB', required=True)
    # Daraja's spelling
    receiver_identifier_type = fields.Enum(
        IdentifierType, by_value=True, data_key='RecieverIdentifierType', required=True
    )
    remarks = Text(data_key='Remarks', required=True)
    queue_timeout_url = Text(data_key='QueueTimeOutURL', allow_none=True, load_default=None)
    result_url = Text(data_key='ResultURL', allow_none=True, load_default=None)
    account_reference = Text(data_key='AccountReference', allow_none=True, load_default=None)


class B2bResponseSchema(_AcknowledgementSchema):
    __model__ = B2bResponse


class AccountBalanceRequestSchema(ModelSchema):
    __model__ = AccountBalanceRequest

    initiator = Text(data_key='Initiator', required=True)
    security_credential = Text(data_key='SecurityCredential', required=True)
    command_id = fields.Enum(CommandId, by_value=True, data_key='CommandID', required=True)
    party_a = Text(data_key='PartyA', required=True)
    identifier_type = fields.Enum(IdentifierType, by_value=True, data_key='IdentifierType', required=True)
    remarks = Text(data_key='Remarks', required=True)
    queue_timeout_url = Text(data_key='QueueTimeOutURL', required=True)
    result_url = Text(data_key='ResultURL', required=True)


class AccountBalanceResponseSchema(_AcknowledgementSchema):
    __model__ = AccountBalanceResponse


class TransactionReversalRequestSchema(ModelSchema):
    __model__ = TransactionReversalRequest

    initiator = Text(data_key='Initiator', required=True)
    security_credential = Text(data_key='SecurityCredential', required=True)
    command_id = fields.Enum(CommandId, by_value=True, data_key='CommandID', required=True)
    transaction_id = Text(data_key='TransactionID', required=True)
    receiver_party = Text(data_key='ReceiverParty', required=True)
    receiver_identifier_type = fields.Enum(
        IdentifierType, by_value=True, data_key='RecieverIdentifierType', required=True
    )
    result_url = Text(data_key='ResultURL', required=True)
    queue_timeout_url = Text(data_key='QueueTimeOutURL', required=True)
    remarks = Text(data_key='Remarks', required=True)
    occasion = Text(data_key='Occasion', required=True)
    amount = Amount(data_key='Amount', required=True)


class TransactionReversalResponseSchema(ModelSchema):
    __model__ = TransactionReversalResponse

    conversation_id = Text(data_key='ConversationID', required=True)
    originator_conversation_id = Text(data_key='OriginatorConversationID', required=True)
    response_description = Text(data_key='ResponseDescription', required=True)
    response_code = Text(data_key='ResponseCode', allow_none=True, load_default=None)


class TransactionStatusRequestSchema(ModelSchema):
    __model__ = TransactionStatusRequest

    initiator = Text(data_key='Initiator', required=True)
    security_credential = Text(data_key='SecurityCredential', required=True)
    command_id = fields.Enum(CommandId, by_value=True, data_key='CommandID', required=True)
    transaction_id = Text(data_key='TransactionID', required=True)
    party_a = Text(data_key='PartyA', required=True)
    identifier_type = fields.Enum(IdentifierType, by_value=True, data_key='IdentifierType', required=True)
    result_url = Text(data_key='ResultURL', required=True)
    queue_timeout_url = Text(data_key='QueueTimeOutURL', required=True)
    remarks = Text(data_key='Remarks', required=True)
    occasion = Text(data_key='Occasion', required=True)


class TransactionStatusResponseSchema(ModelSchema):
    __model__ = TransactionStatusResponse

    conversation_id = Text(data_key='ConversationID', required=True)
    originator_conversation_id = Text(data_key='OriginatorConversationID', required=True)
    response_description = Text(data_key='ResponseDescription', required=True)
    response_code = Text(data_key='ResponseCode', allow_none=True, load_default=None)
