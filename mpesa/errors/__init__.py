from mpesa.errors.exceptions import (
    BuilderError,
    CodecError,
    EncryptionError,
    EnvironmentVariableError,
    MpesaError,
    ResponseError,
    ServiceError,
    TransportError,
    ValidationError,
)

__all__ = [
    'BuilderError',
    'CodecError',
    'EncryptionError',
    'EnvironmentVariableError',
    'MpesaError',
    'ResponseError',
    'ServiceError',
    'TransportError',
    'ValidationError',
]
