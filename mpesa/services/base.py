from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from marshmallow import Schema

from mpesa.errors import BuilderError, CodecError
from mpesa.models import Request


class OperationBuilder(ABC):
    """
    Accumulates the fields of one Daraja operation and sends it

    Subclasses declare the endpoint ``path`` and the schemas for the request
    and response bodies, expose one chaining setter per field and implement
    :meth:`build`, which materializes the request payload. Required fields
    left unset make :meth:`build` raise :class:`BuilderError` before any
    network call.
    """

    method = 'POST'
    path: str = None
    request_schema: Type[Schema] = None
    response_schema: Type[Schema] = None
    # Bulk endpoints send a JSON array of payloads
    many = False

    def __init__(self, client):
        self._client = client
        self._fields: Dict[str, Any] = {}
        self._request = None

    @classmethod
    def from_request(cls, client, request):
        """
        Create a builder that sends an already materialized payload

        Args:
            client: Client to send through
            request: Payload of the type :meth:`build` returns
        """
        builder = cls(client)
        builder._request = request
        return builder

    def _set(self, name: str, value: Any):
        self._fields[name] = value
        return self

    def _required(self, name: str) -> Any:
        value = self._fields.get(name)
        if value is None:
            raise BuilderError(name)
        return value

    def _optional(self, name: str, default: Optional[Any] = None) -> Any:
        value = self._fields.get(name)
        return default if value is None else value

    @abstractmethod
    def build(self):
        """
        Materialize the request payload

        Raises:
            BuilderError: If a required field is unset
        """
        pass

    def to_request(self) -> Request:
        payload = self._request if self._request is not None else self.build()
        try:
            body = self.request_schema(many=self.many).dump(payload)
        except (AttributeError, TypeError, ValueError) as exc:
            raise CodecError(f"could not serialize {type(self).__name__} payload - {exc}") from exc
        return Request(self.method, self.path, body)

    def send(self):
        """
        Build the payload and send it

        Returns:
            The operation's response record
        """
        return self._client.send(self.to_request(), self.response_schema())
