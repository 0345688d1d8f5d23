import base64
from datetime import datetime
from typing import Optional, Tuple

from mpesa.constants import DEFAULT_PASSKEY

TIMESTAMP_FORMAT = '%Y%m%d%H%M%S'


def encode_password(business_short_code: str, pass_key: str, timestamp: str) -> str:
    """
    Password = Base64(BusinessShortCode + Passkey + Timestamp)

    The timestamp must be the one sent in the same request.
    """
    raw = f"{business_short_code}{pass_key}{timestamp}"
    return base64.b64encode(raw.encode('utf-8')).decode('utf-8')


def generate_password(business_short_code: str, pass_key: Optional[str] = None) -> Tuple[str, str]:
    """
    Generate the STK push password and timestamp from a single clock reading

    Returns:
        Tuple of (timestamp, password)
    """
    timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
    password = encode_password(business_short_code, pass_key or DEFAULT_PASSKEY, timestamp)
    return timestamp, password
