"""Guide service: lists the services and APIs the device supports."""
from dataclasses import dataclass, field
from typing import Any

from ..capabilities import version_key
from ..const import DISCOVERY_METHOD, GUIDE
from ..exceptions import BraviaMissingValue
from .base import BraviaService, expect, parse_list


@dataclass(frozen=True)
class ApiVersion:
    version: str
    # Transports, when they differ from the owning service's
    protocols: list[str] | None = None
    auth_level: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiVersion":
        return cls(
            version=expect(str, data["version"]),
            protocols=data.get("protocols"),
            auth_level=data.get("authLevel"),
        )


@dataclass(frozen=True)
class ApiInfo:
    name: str
    versions: list[ApiVersion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiInfo":
        return cls(
            name=expect(str, data["name"]),
            versions=parse_list(ApiVersion.from_dict, data["versions"]),
        )

    @property
    def latest(self) -> ApiVersion | None:
        """Highest version of this API, None if it lists no version."""
        if not self.versions:
            return None
        return max(self.versions, key=lambda v: version_key(v.version))


@dataclass(frozen=True)
class ServiceInfo:
    service: str
    protocols: list[str] = field(default_factory=list)
    apis: list[ApiInfo] = field(default_factory=list)
    notifications: list[ApiInfo] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServiceInfo":
        notifications = data.get("notifications")
        return cls(
            service=expect(str, data["service"]),
            protocols=list(data.get("protocols", [])),
            apis=parse_list(ApiInfo.from_dict, data["apis"]),
            notifications=(
                parse_list(ApiInfo.from_dict, notifications)
                if notifications is not None else None
            ),
        )

    def api(self, name: str) -> ApiInfo | None:
        return next((api for api in self.apis if api.name == name), None)


class GuideService(BraviaService):
    """APIs of the ``guide`` endpoint."""

    endpoint = GUIDE

    async def get_supported_api_info(
        self, services: list[str] | None = None
    ) -> list[ServiceInfo]:
        """Return the supported services and their APIs.

        This is what populates the client's capability cache. ``None`` or an
        empty list asks for every service.
        """
        params = {} if services is None else {"services": list(services)}
        result = await self._call(5, DISCOVERY_METHOD, params, expects_result=True)
        parsed = parse_list(ServiceInfo.from_dict, result)
        if not parsed:
            raise BraviaMissingValue("getSupportedApiInfo returned no service")
        return parsed
