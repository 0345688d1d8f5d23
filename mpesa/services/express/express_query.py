from mpesa.constants import DEFAULT_PASSKEY, EXPRESS_QUERY_URL
from mpesa.models import ExpressQueryRequest
from mpesa.schemas import ExpressQueryRequestSchema, ExpressQueryResponseSchema
from mpesa.services.base import OperationBuilder
from mpesa.services.express.password import encode_password, generate_password


class ExpressQueryBuilder(OperationBuilder):
    """Polls the status of an STK push by its checkout request id."""

    path = EXPRESS_QUERY_URL
    request_schema = ExpressQueryRequestSchema
    response_schema = ExpressQueryResponseSchema

    encode_password = staticmethod(encode_password)

    def __init__(self, client, business_short_code: str = None):
        super().__init__(client)
        self._set('business_short_code', business_short_code)

    def business_short_code(self, value: str):
        return self._set('business_short_code', str(value))

    def pass_key(self, value: str):
        return self._set('pass_key', value)

    def checkout_request_id(self, value: str):
        return self._set('checkout_request_id', value)

    def build(self) -> ExpressQueryRequest:
        business_short_code = self._required('business_short_code')
        checkout_request_id = self._required('checkout_request_id')

        timestamp, password = generate_password(
            business_short_code, self._optional('pass_key', DEFAULT_PASSKEY)
        )

        return ExpressQueryRequest(
            business_short_code=business_short_code,
            password=password,
            timestamp=timestamp,
            checkout_request_id=checkout_request_id,
        )
