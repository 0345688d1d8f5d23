from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Request:
    """A serialized call to one Daraja endpoint."""
    method: str
    path: str
    body: Any = None
