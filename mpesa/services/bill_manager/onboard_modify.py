from mpesa.constants import ONBOARD_MODIFY_URL
from mpesa.models import OnboardModifyRequest
from mpesa.schemas import OnboardModifyRequestSchema, OnboardModifyResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.services.bill_manager.onboard import OnboardFieldsMixin


class OnboardModifyBuilder(OnboardFieldsMixin, OperationBuilder):
    """Changes opt-in details; only the fields that were set are sent."""

    path = ONBOARD_MODIFY_URL
    request_schema = OnboardModifyRequestSchema
    response_schema = OnboardModifyResponseSchema

    def build(self) -> OnboardModifyRequest:
        return OnboardModifyRequest(
            callback_url=self._optional('callback_url'),
            email=self._optional('email'),
            logo=self._optional('logo'),
            official_contact=self._optional('official_contact'),
            send_reminders=self._optional('send_reminders'),
            short_code=self._optional('short_code'),
        )
