import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from mpesa.errors import EnvironmentVariableError, ValidationError

DEFAULT_ENVIRONMENT = 'sandbox'
DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class MpesaConfig:
    """Client settings read from the process environment"""
    client_key: str
    client_secret: str = field(repr=False)
    environment: str = DEFAULT_ENVIRONMENT
    initiator_password: Optional[str] = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT


def load_config(env_file: str = '.env', environ: Optional[Mapping[str, str]] = None) -> MpesaConfig:
    """
    Read client settings from environment variables

    When ``environ`` is None the ``.env`` file is loaded first; variables
    already set in the process take precedence over the file.

    Variables:
        CLIENT_KEY, CLIENT_SECRET (required), MPESA_ENVIRONMENT,
        INITIATOR_PASSWORD, MPESA_TIMEOUT

    Raises:
        EnvironmentVariableError: If a required variable is missing
        ValidationError: If MPESA_TIMEOUT is not a number
    """
    if environ is None:
        load_dotenv(env_file)
        environ = os.environ

    timeout = environ.get('MPESA_TIMEOUT')
    if timeout:
        try:
            timeout = float(timeout)
        except ValueError:
            raise ValidationError(f"MPESA_TIMEOUT must be a number of seconds, got '{timeout}'") from None
    else:
        timeout = DEFAULT_TIMEOUT

    return MpesaConfig(
        client_key=_required(environ, 'CLIENT_KEY'),
        client_secret=_required(environ, 'CLIENT_SECRET'),
        environment=environ.get('MPESA_ENVIRONMENT') or DEFAULT_ENVIRONMENT,
        initiator_password=environ.get('INITIATOR_PASSWORD') or None,
        timeout=timeout,
    )


def _required(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise EnvironmentVariableError(name)
    return value
