"""
Response decoding helpers shared by the auth call and the send primitive
"""

from typing import Any

import requests
from marshmallow import Schema
from marshmallow import ValidationError as SchemaValidationError

from mpesa.errors import CodecError, ResponseError
from mpesa.schemas import ResponseErrorSchema

# Longest body excerpt kept when an error body is not JSON
_SNIPPET_LENGTH = 300

_error_schema = ResponseErrorSchema()


def is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def load_response(response: requests.Response, schema: Schema) -> Any:
    """
    Decode a 2xx body into the schema's model

    Raises:
        CodecError: If the body is not JSON or does not match the schema
    """
    try:
        data = response.json()
    except ValueError as exc:
        raise CodecError(f"response body is not valid JSON - {exc}") from exc

    try:
        return schema.load(data)
    except SchemaValidationError as exc:
        raise CodecError(f"unexpected response body - {exc.messages}") from exc


def load_error(response: requests.Response) -> ResponseError:
    """
    Decode a non-2xx body into a ResponseError

    Bodies that are not Daraja's error record (an HTML gateway page, say)
    still produce a payload carrying a snippet of the raw text.
    """
    try:
        data = response.json()
    except ValueError:
        return _snippet(response)

    if not isinstance(data, dict):
        return _snippet(response)

    try:
        return _error_schema.load(data)
    except SchemaValidationError:
        return _snippet(response)


def _snippet(response: requests.Response) -> ResponseError:
    text = (response.text or '').strip()
    return ResponseError(error_message=text[:_SNIPPET_LENGTH] or None)
