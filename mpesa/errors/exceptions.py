from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ResponseError:
    """Error body returned by Daraja on a non-2xx response."""
    request_id: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def __str__(self):
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}]")
        if self.error_message:
            parts.append(self.error_message)
        if self.request_id:
            parts.append(f"(request id: {self.request_id})")
        return " ".join(parts) or "no error details returned"


class MpesaError(Exception):
    error = "M-Pesa error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.error}: {self.message}"


class TransportError(MpesaError):
    error = "Network error"


class CodecError(MpesaError):
    error = "Error parsing JSON data"


class EncryptionError(MpesaError):
    error = "Error generating security credentials"


class EnvironmentVariableError(MpesaError):
    error = "Missing environment variable"

    def __init__(self, variable):
        super().__init__(variable)
        self.variable = variable


class BuilderError(MpesaError):
    error = "Missing required field"

    def __init__(self, field_name):
        super().__init__(field_name)
        self.field_name = field_name


class ValidationError(MpesaError):
    error = "Validation error"


class ServiceError(MpesaError):
    error = "Service error"

    def __init__(self, operation, payload: ResponseError, status_code: Optional[int] = None):
        super().__init__(str(payload))
        self.operation = operation
        self.payload = payload
        self.status_code = status_code

    @property
    def request_id(self):
        return self.payload.request_id

    @property
    def error_code(self):
        return self.payload.error_code

    @property
    def error_message(self):
        return self.payload.error_message

    def __str__(self):
        status = f" (HTTP {self.status_code})" if self.status_code is not None else ""
        return f"{self.operation} request failed{status}: {self.payload}"
