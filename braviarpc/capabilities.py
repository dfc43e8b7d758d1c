"""Cache of the services, APIs and versions a device advertises."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from .exceptions import (
    BraviaMethodNotFound,
    BraviaMissingValue,
    BraviaServiceNotFound,
    BraviaVersionUnsupported,
)

if TYPE_CHECKING:
    from .services.guide import ServiceInfo

_LOGGER = logging.getLogger(__name__)


def version_key(version: str) -> tuple:
    """Sort key for "X.Y" version strings ("1.10" sorts after "1.9")."""
    parts = []
    for part in version.split("."):
        parts.append((0, int(part), "") if part.isdigit() else (1, 0, part))
    return tuple(parts)


class CapabilityCache:
    """Read-only map of service -> API name -> supported versions.

    Built once from the discovery result and never changed afterwards;
    a fresh discovery means a fresh cache.
    """

    __slots__ = ("_services",)

    def __init__(self, services: Mapping[str, Mapping[str, Iterable[str]]]) -> None:
        self._services = MappingProxyType({
            service: MappingProxyType({
                api: frozenset(versions) for api, versions in apis.items()
            })
            for service, apis in services.items()
        })

    @classmethod
    def from_services(cls, services: Iterable[ServiceInfo]) -> CapabilityCache:
        """Build the cache from ``getSupportedApiInfo`` results."""
        table: dict[str, dict[str, set[str]]] = {}
        for service in services:
            apis = table.setdefault(service.service, {})
            for api in service.apis:
                apis.setdefault(api.name, set()).update(v.version for v in api.versions)

        if not table:
            raise BraviaMissingValue("The device did not advertise any service")

        _LOGGER.debug(
            "Bravia capabilities: %d services, %d APIs",
            len(table), sum(len(apis) for apis in table.values()),
        )
        return cls(table)

    @property
    def services(self) -> frozenset[str]:
        return frozenset(self._services)

    def __contains__(self, service: object) -> bool:
        return service in self._services

    def __len__(self) -> int:
        return len(self._services)

    def __repr__(self) -> str:
        return f"CapabilityCache(services={sorted(self._services)})"

    def check(self, service: str, method: str, version: str) -> None:
        """Raise unless ``method`` at ``version`` is available on ``service``."""
        apis = self._services.get(service)
        if apis is None:
            raise BraviaServiceNotFound(
                f"Service {service!r} is not available on this device", service,
                method, version,
            )
        versions = apis.get(method)
        if versions is None:
            raise BraviaMethodNotFound(
                f"API {service}.{method} is not available on this device", service,
                method, version,
            )
        if version not in versions:
            raise BraviaVersionUnsupported(
                f"API {service}.{method} does not support version {version} "
                f"(supported: {', '.join(sorted(versions, key=version_key))})",
                service, method, version,
            )

    def supports(self, service: str, method: str, version: str) -> bool:
        try:
            self.check(service, method, version)
        except (BraviaServiceNotFound, BraviaMethodNotFound, BraviaVersionUnsupported):
            return False
        return True

    def versions(self, service: str, method: str) -> frozenset[str]:
        """Return the versions of ``method``, empty if it is not available."""
        return self._services.get(service, {}).get(method, frozenset())

    def latest_version(self, service: str, method: str) -> str | None:
        versions = self.versions(service, method)
        if not versions:
            return None
        return max(versions, key=version_key)
