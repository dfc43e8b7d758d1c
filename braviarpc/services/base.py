"""Shared plumbing for the per-service API wrappers."""
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ..dispatch import DEFAULT_PATH, Dispatcher
from ..envelope import RequestEnvelope, ResultPath
from ..exceptions import BraviaDeserializeError, BraviaVersionUnsupported

T = TypeVar("T")


def parse(factory: Callable[[Any], T], payload: Any) -> T:
    """Run ``factory`` on a result payload, reporting shape errors uniformly."""
    try:
        return factory(payload)
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as err:
        raise BraviaDeserializeError(
            f"Unexpected payload for {getattr(factory, '__qualname__', factory)}: "
            f"{payload!r} ({err})"
        ) from err


def parse_list(factory: Callable[[Any], T], payload: Any) -> list[T]:
    if not isinstance(payload, list):
        raise BraviaDeserializeError(f"Expected a list, got {payload!r}")
    return [parse(factory, item) for item in payload]


def expect(kind: type | tuple[type, ...], payload: Any) -> Any:
    """Return ``payload`` if it is a ``kind``, else raise BraviaDeserializeError."""
    # bool is an int subclass; only accept it where a bool is asked for.
    if not isinstance(payload, kind) or (isinstance(payload, bool) and kind is not bool):
        raise BraviaDeserializeError(f"Expected {kind}, got {payload!r}")
    return payload


def compact(**params: Any) -> dict[str, Any]:
    """Build a parameter object, dropping arguments that were not given."""
    return {key: value for key, value in params.items() if value is not None}


class VersionedShape:
    """Table of supported versions -> parameter builder for one API.

    The version tag sent on the wire is always the key of the builder that
    produced the parameters.
    """

    def __init__(self, method: str, default: str,
                 builders: Mapping[str, Callable[..., Any]]) -> None:
        if default not in builders:
            raise ValueError(f"default version {default} has no builder")
        self.method = method
        self.default = default
        self._builders = dict(builders)

    @property
    def versions(self) -> frozenset[str]:
        return frozenset(self._builders)

    def select(self, endpoint: str, version: str | None) -> tuple[str, Callable[..., Any]]:
        """Return the effective version and its builder."""
        version = version or self.default
        if version not in self._builders:
            raise BraviaVersionUnsupported(
                f"{endpoint}.{self.method} has no shape for version {version} "
                f"(known: {', '.join(sorted(self._builders))})",
                endpoint, self.method, version,
            )
        return version, self._builders[version]

    def build(self, endpoint: str, version: str | None, **kwargs: Any) -> tuple[str, Any]:
        version, builder = self.select(endpoint, version)
        return version, builder(**kwargs)


class BraviaService:
    """Base class of the service wrappers (one per device endpoint)."""

    endpoint: str = ""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    async def _call(
        self,
        id: int,
        method: str,
        params: Any = None,
        *,
        version: str | None = None,
        protected: bool = False,
        expects_result: bool = False,
        path: ResultPath = DEFAULT_PATH,
    ) -> Any:
        envelope = RequestEnvelope.build(id, method, version, params)
        return await self._dispatcher.dispatch(
            self.endpoint,
            envelope,
            protected=protected,
            expects_result=expects_result,
            path=path,
        )
