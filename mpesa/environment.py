"""
Daraja environments.

An environment resolves to a base url and the X.509 certificate used to
encrypt initiator passwords. Sandbox and production credentials are not
interchangeable, so a client is bound to exactly one environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict

from mpesa.certificates import PRODUCTION_CERTIFICATE, SANDBOX_CERTIFICATE
from mpesa.errors import ValidationError

__all__ = ["Environment"]

_BASE_URLS: Dict[str, str] = {
    "sandbox":    "https://sandbox.safaricom.co.ke",
    "production": "https://api.safaricom.co.ke",
}


@dataclass(frozen=True)
class Environment:
    """
    Target deployment for a client.

    Use :attr:`Environment.PRODUCTION`, :attr:`Environment.SANDBOX`, or
    :meth:`Environment.custom` to point at another server (a mock server in
    tests, for example).
    """

    name: str
    url: str
    certificate_pem: str = field(repr=False)

    PRODUCTION: ClassVar["Environment"]
    SANDBOX: ClassVar["Environment"]

    def base_url(self) -> str:
        return self.url

    def certificate(self) -> str:
        return self.certificate_pem

    @classmethod
    def custom(cls, base_url: str, certificate: str) -> "Environment":
        return cls(name="custom", url=base_url.rstrip("/"), certificate_pem=certificate)

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """
        Parse ``"production"`` or ``"sandbox"``; matching is case-sensitive.

        Raises:
            ValidationError: For any other string
        """
        if value == "production":
            return cls.PRODUCTION
        if value == "sandbox":
            return cls.SANDBOX
        raise ValidationError(f"Could not parse the provided environment name: '{value}'")


Environment.PRODUCTION = Environment("production", _BASE_URLS["production"], PRODUCTION_CERTIFICATE)
Environment.SANDBOX = Environment("sandbox", _BASE_URLS["sandbox"], SANDBOX_CERTIFICATE)
