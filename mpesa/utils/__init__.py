"""
Utils Package
Utility functions and helpers
"""

from mpesa.utils.encryption import encrypt_initiator_password
from mpesa.utils.logger import get_logger, configure_logging
from mpesa.utils.responses import is_success, load_error, load_response
from mpesa.utils.validators import (
    validate_phone_number,
    validate_url,
    ensure_phone_number,
    ensure_url,
)

__all__ = [
    'encrypt_initiator_password',
    'get_logger',
    'configure_logging',
    'is_success',
    'load_error',
    'load_response',
    'validate_phone_number',
    'validate_url',
    'ensure_phone_number',
    'ensure_url',
]
