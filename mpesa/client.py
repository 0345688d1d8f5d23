"""
M-Pesa client
Owns the app credentials, the target environment and the HTTP session.

Each operation has a factory returning a builder; builders send through
:meth:`Mpesa.send`, which attaches a cached bearer token and decodes the
response or raises a :class:`ServiceError` tagged with the operation.
"""

import threading
from typing import Any, Optional, Union

import requests
from marshmallow import Schema

from mpesa.auth import auth as cached_auth
from mpesa.config import DEFAULT_TIMEOUT, load_config
from mpesa.constants import DEFAULT_INITIATOR_PASSWORD, Operation
from mpesa.environment import Environment
from mpesa.errors import MpesaError, ServiceError, TransportError
from mpesa.models import Request
from mpesa.services import (
    AccountBalanceBuilder,
    B2bBuilder,
    B2cBuilder,
    BulkInvoiceBuilder,
    C2bRegisterBuilder,
    C2bSimulateBuilder,
    CancelBulkInvoicesBuilder,
    CancelSingleInvoiceBuilder,
    DynamicQrBuilder,
    ExpressQueryBuilder,
    ExpressRequestBuilder,
    OnboardBuilder,
    OnboardModifyBuilder,
    ReconciliationBuilder,
    SingleInvoiceBuilder,
    TransactionReversalBuilder,
    TransactionStatusBuilder,
)
from mpesa.utils import encrypt_initiator_password, get_logger, is_success, load_error, load_response

logger = get_logger(__name__)


class Mpesa:
    """Daraja API client."""

    def __init__(
        self,
        client_key: str,
        client_secret: str,
        environment: Union[Environment, str],
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Args:
            client_key: Consumer key of the Daraja app
            client_secret: Consumer secret of the Daraja app
            environment: An Environment, or "production" / "sandbox"
            session: HTTP session to reuse; one is created when omitted
            timeout: Seconds to wait on each HTTP request
        """
        if isinstance(environment, str):
            environment = Environment.parse(environment)

        self._client_key = client_key
        self._client_secret = client_secret
        self._environment = environment
        self.timeout = timeout

        self._initiator_lock = threading.Lock()
        self._initiator_password = DEFAULT_INITIATOR_PASSWORD

        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers.update({"Content-Type": "application/json"})
        self.session = session

    @classmethod
    def from_env(cls, env_file: str = ".env", environ=None, *, session: Optional[requests.Session] = None):
        """
        Build a client from CLIENT_KEY, CLIENT_SECRET, MPESA_ENVIRONMENT,
        INITIATOR_PASSWORD and MPESA_TIMEOUT

        Raises:
            EnvironmentVariableError: If a required variable is missing
        """
        config = load_config(env_file, environ)
        client = cls(
            config.client_key,
            config.client_secret,
            Environment.parse(config.environment),
            session=session,
            timeout=config.timeout,
        )
        if config.initiator_password:
            client.set_initiator_password(config.initiator_password)
        return client

    @property
    def client_key(self) -> str:
        return self._client_key

    @property
    def environment(self) -> Environment:
        return self._environment

    def set_initiator_password(self, initiator_password: str) -> None:
        """Replace the initiator password used for security credentials"""
        with self._initiator_lock:
            self._initiator_password = initiator_password

    def _get_initiator_password(self) -> str:
        with self._initiator_lock:
            return self._initiator_password

    def auth(self) -> str:
        """Return a bearer token, served from the process-wide cache when fresh"""
        return cached_auth(self)

    def is_connected(self) -> bool:
        """True when the credentials authenticate against the environment"""
        try:
            self.auth()
        except MpesaError as exc:
            logger.debug("Connectivity check failed: %s", exc.error)
            return False
        return True

    def gen_security_credentials(self) -> str:
        """
        Encrypt the initiator password with the environment's certificate

        A fresh value is produced on every call.

        Raises:
            EncryptionError: If the certificate or encryption is unusable
        """
        return encrypt_initiator_password(self._get_initiator_password(), self._environment.certificate())

    def send(self, request: Request, response_schema: Schema) -> Any:
        """
        Send a request to Daraja and decode the response

        Args:
            request: Method, endpoint path and JSON body
            response_schema: Schema instance the 2xx body is loaded with

        Raises:
            ValidationError: If the path is not a Daraja endpoint
            TransportError: On connection failures and timeouts
            ServiceError: If Daraja answers with a non-2xx status
            CodecError: If the body cannot be decoded
        """
        operation = Operation.from_path(request.path)
        url = f"{self._environment.base_url().rstrip('/')}/{request.path.lstrip('/')}"
        token = self.auth()

        logger.debug("%s %s", request.method, request.path)
        try:
            response = self.session.request(
                request.method,
                url,
                json=request.body,
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{operation} request could not be completed - {exc}") from exc

        if not is_success(response):
            payload = load_error(response)
            logger.warning(
                "%s request failed with HTTP %s (error code: %s)",
                operation, response.status_code, payload.error_code,
            )
            raise ServiceError(operation, payload, response.status_code)

        return load_response(response, response_schema)

    def close(self) -> None:
        """Release the connection pool of a session this client created"""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    # Operations

    def b2c(self, initiator_name: Optional[str] = None) -> B2cBuilder:
        return B2cBuilder(self, initiator_name)

    def b2b(self, initiator_name: Optional[str] = None) -> B2bBuilder:
        return B2bBuilder(self, initiator_name)

    def c2b_register(self) -> C2bRegisterBuilder:
        return C2bRegisterBuilder(self)

    def c2b_simulate(self) -> C2bSimulateBuilder:
        return C2bSimulateBuilder(self)

    def account_balance(self, initiator_name: Optional[str] = None) -> AccountBalanceBuilder:
        return AccountBalanceBuilder(self, initiator_name)

    def express_request(self, business_short_code: Optional[str] = None) -> ExpressRequestBuilder:
        return ExpressRequestBuilder(self, business_short_code)

    def express_query(self, business_short_code: Optional[str] = None) -> ExpressQueryBuilder:
        return ExpressQueryBuilder(self, business_short_code)

    def transaction_reversal(self, initiator_name: Optional[str] = None) -> TransactionReversalBuilder:
        return TransactionReversalBuilder(self, initiator_name)

    def transaction_status(self, initiator_name: Optional[str] = None) -> TransactionStatusBuilder:
        return TransactionStatusBuilder(self, initiator_name)

    def dynamic_qr(self) -> DynamicQrBuilder:
        return DynamicQrBuilder(self)

    def onboard(self) -> OnboardBuilder:
        return OnboardBuilder(self)

    def onboard_modify(self) -> OnboardModifyBuilder:
        return OnboardModifyBuilder(self)

    def bulk_invoice(self) -> BulkInvoiceBuilder:
        return BulkInvoiceBuilder(self)

    def single_invoice(self) -> SingleInvoiceBuilder:
        return SingleInvoiceBuilder(self)

    def cancel_single_invoice(self) -> CancelSingleInvoiceBuilder:
        return CancelSingleInvoiceBuilder(self)

    def cancel_bulk_invoices(self) -> CancelBulkInvoicesBuilder:
        return CancelBulkInvoicesBuilder(self)

    def reconciliation(self) -> ReconciliationBuilder:
        return ReconciliationBuilder(self)

    def __repr__(self):
        return f"Mpesa(client_key='{self._client_key}', environment='{self._environment.name}')"
