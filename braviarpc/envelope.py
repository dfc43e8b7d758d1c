"""Wire envelopes of the BRAVIA JSON-RPC protocol.

Request:
    {"id": 50, "method": "getPowerStatus", "version": "1.0", "params": []}

Response (success):
    {"result": [{"status": "standby"}], "id": 50}

Response (failure), either form is sent by devices in the field:
    {"error": [7, "Illegal State"], "id": 50}
    {"error": {"code": 7, "message": "Illegal State"}}
"""
from dataclasses import dataclass, field
from typing import Any

from .const import DEFAULT_VERSION
from .exceptions import BraviaDeserializeError, BraviaMissingValue


@dataclass(frozen=True)
class RequestEnvelope:
    """A single JSON-RPC request body."""

    id: int
    method: str
    version: str = DEFAULT_VERSION
    params: list[Any] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        id: int,
        method: str,
        version: str | None = None,
        params: Any = None,
    ) -> "RequestEnvelope":
        """Create an envelope, wrapping ``params`` as the device expects.

        The device wants the parameter object inside a one-element array,
        and an empty array when there is nothing to send.
        """
        return cls(
            id=id,
            method=method,
            version=version or DEFAULT_VERSION,
            params=[] if params is None else [params],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "method": self.method,
            "version": self.version,
            "params": list(self.params),
        }


@dataclass(frozen=True)
class DeviceError:
    """Error reported by the device in place of a result."""

    code: int
    message: str

    @classmethod
    def from_payload(cls, payload: Any) -> "DeviceError":
        if isinstance(payload, dict):
            code, message = payload.get("code"), payload.get("message", "")
        elif isinstance(payload, list) and payload:
            code = payload[0]
            message = payload[1] if len(payload) > 1 else ""
        else:
            raise BraviaDeserializeError(f"Unrecognised error payload: {payload!r}")

        if not isinstance(code, int) or isinstance(code, bool):
            raise BraviaDeserializeError(f"Error code is not an integer: {payload!r}")
        return cls(code=code, message=str(message))


@dataclass(frozen=True)
class ResultPath:
    """Where to find the wanted value inside a ``result`` array.

    Either a position in the array or a field of the object at
    position 0.
    """

    position: int = 0
    name: str | None = None

    @classmethod
    def index(cls, position: int) -> "ResultPath":
        if position < 0:
            raise ValueError(f"result position must not be negative: {position}")
        return cls(position=position)

    @classmethod
    def field(cls, name: str) -> "ResultPath":
        return cls(position=0, name=name)

    def __str__(self) -> str:
        if self.name is not None:
            return f"result[0].{self.name}"
        return f"result[{self.position}]"


def extract_result(result: list[Any], path: ResultPath) -> Any:
    """Return the value ``path`` points at, or raise BraviaMissingValue."""
    try:
        element = result[path.position]
    except IndexError:
        raise BraviaMissingValue(f"{path} is missing from {result!r}") from None

    if path.name is None:
        return element
    if not isinstance(element, dict) or path.name not in element:
        raise BraviaMissingValue(f"{path} is missing from {result!r}")
    return element[path.name]
