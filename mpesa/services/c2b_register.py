from typing import Union

from mpesa.constants import C2B_REGISTER_URL, ResponseType
from mpesa.models import C2bRegisterRequest
from mpesa.schemas import C2bRegisterRequestSchema, C2bRegisterResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_url


class C2bRegisterBuilder(OperationBuilder):
    """Registers the validation and confirmation URLs for a short code."""

    path = C2B_REGISTER_URL
    request_schema = C2bRegisterRequestSchema
    response_schema = C2bRegisterResponseSchema

    def short_code(self, value: str):
        return self._set('short_code', str(value))

    def response_type(self, value: Union[ResponseType, str]):
        """What Daraja does when the validation URL cannot be reached"""
        return self._set('response_type', ResponseType.parse(value))

    def confirmation_url(self, value: str):
        return self._set('confirmation_url', ensure_url(value))

    def validation_url(self, value: str):
        return self._set('validation_url', ensure_url(value))

    def build(self) -> C2bRegisterRequest:
        return C2bRegisterRequest(
            short_code=self._required('short_code'),
            confirmation_url=self._required('confirmation_url'),
            validation_url=self._required('validation_url'),
            response_type=self._optional('response_type', ResponseType.COMPLETED),
        )
