"""
Custom Validators
Validation functions for phone numbers and callback URLs
"""

import re
from typing import Optional, Union

from marshmallow import ValidationError as SchemaValidationError
from marshmallow.validate import URL

from mpesa.errors import ValidationError

# 2547XXXXXXXX, 07XXXXXXXX, 011XXXXXXX, 7XXXXXXXX, 1XXXXXXXX
_PHONE_PATTERNS = (
    re.compile(r'254\d{9}'),
    re.compile(r'07\d{8}'),
    re.compile(r'011\d{7}'),
    re.compile(r'7\d{8}'),
    re.compile(r'1\d{8}'),
)

_absolute_url = URL(relative=False, require_tld=False)


def validate_phone_number(phone: Union[str, int, None]) -> tuple[bool, Optional[str]]:
    """
    Validate a Safaricom phone number

    Args:
        phone: Phone number as a string or a number

    Returns:
        Tuple of (is_valid, error_message)
    """
    if phone is None or isinstance(phone, bool):
        return False, "Phone number is required"

    phone_str = str(phone)
    if any(pattern.fullmatch(phone_str) for pattern in _PHONE_PATTERNS):
        return True, None

    return False, f"Invalid phone number '{phone_str}', must be in the format 2547XXXXXXXX"


def validate_url(url: Optional[str]) -> tuple[bool, Optional[str]]:
    """
    Validate that a value is an absolute URL

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url:
        return False, "URL is required"

    try:
        _absolute_url(str(url))
    except SchemaValidationError:
        return False, f"Invalid URL '{url}'"

    return True, None


def ensure_phone_number(phone: Union[str, int]) -> str:
    """Return the phone number as a string or raise ValidationError."""
    is_valid, error = validate_phone_number(phone)
    if not is_valid:
        raise ValidationError(error)
    return str(phone)


def ensure_url(url: str) -> str:
    """Return the URL unchanged or raise ValidationError."""
    is_valid, error = validate_url(url)
    if not is_valid:
        raise ValidationError(error)
    return str(url)
