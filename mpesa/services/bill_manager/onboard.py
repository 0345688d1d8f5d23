from typing import Union

from mpesa.constants import ONBOARD_URL, SendRemindersType
from mpesa.models import OnboardRequest
from mpesa.schemas import OnboardRequestSchema, OnboardResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.utils import ensure_url


class OnboardFieldsMixin:
    """Setters shared by the opt-in and change-opt-in-details builders."""

    def callback_url(self, value: str):
        """URL that receives payment notifications for invoices"""
        return self._set('callback_url', ensure_url(value))

    def email(self, value: str):
        return self._set('email', value)

    def logo(self, value: str):
        """Image embedded in invoices and receipts"""
        return self._set('logo', value)

    def official_contact(self, value: str):
        return self._set('official_contact', str(value))

    def send_reminders(self, value: Union[SendRemindersType, str]):
        return self._set('send_reminders', SendRemindersType.parse(value))

    def short_code(self, value: str):
        return self._set('short_code', str(value))


class OnboardBuilder(OnboardFieldsMixin, OperationBuilder):
    """Opts a short code in to Bill Manager."""

    path = ONBOARD_URL
    request_schema = OnboardRequestSchema
    response_schema = OnboardResponseSchema

    def build(self) -> OnboardRequest:
        return OnboardRequest(
            callback_url=self._required('callback_url'),
            email=self._required('email'),
            logo=self._required('logo'),
            official_contact=self._required('official_contact'),
            short_code=self._required('short_code'),
            send_reminders=self._optional('send_reminders', SendRemindersType.DISABLE),
        )
