from marshmallow import fields

from mpesa.models import AuthenticationResponse
from mpesa.schemas.common import ModelSchema, Text


class AuthenticationResponseSchema(ModelSchema):
    __model__ = AuthenticationResponse

    access_token = Text(required=True)
    # Daraja sends "3599" as a string; Integer coerces it
    expires_in = fields.Integer(required=True, strict=False)
