"""Single choke point for every call made to a BRAVIA device."""
import json
import logging
from typing import Any

import aiohttp

from .capabilities import CapabilityCache
from .const import CONTENT_TYPE_JSON, DISCOVERY_METHOD, PSK_HEADER
from .envelope import DeviceError, RequestEnvelope, ResultPath, extract_result
from .exceptions import (
    BraviaAuthLevelError,
    BraviaBadStatus,
    BraviaError,
    BraviaInvalidResponse,
    BraviaNetworkError,
    BraviaServiceNotFound,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_PATH = ResultPath.index(0)


class Dispatcher:
    """Validate, send and decode one JSON-RPC call at a time.

    Holds nothing but read-only state (capabilities and pre-shared key),
    so concurrent dispatches are safe.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        capabilities: CapabilityCache | None = None,
        psk: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._capabilities = capabilities
        self._psk = psk
        self._timeout = timeout

    @property
    def capabilities(self) -> CapabilityCache | None:
        return self._capabilities

    @property
    def has_psk(self) -> bool:
        return bool(self._psk)

    def with_capabilities(self, capabilities: CapabilityCache) -> "Dispatcher":
        """Return a dispatcher sharing this one's transport, gated by ``capabilities``."""
        return Dispatcher(
            self._session, self._base_url, capabilities, self._psk, self._timeout
        )

    def _check_capability(self, endpoint: str, envelope: RequestEnvelope) -> None:
        if envelope.method == DISCOVERY_METHOD:
            return
        if self._capabilities is None:
            raise BraviaServiceNotFound(
                "Capabilities have not been discovered yet", endpoint,
                envelope.method, envelope.version,
            )
        self._capabilities.check(endpoint, envelope.method, envelope.version)

    def _credential(self, envelope: RequestEnvelope, protected: bool) -> str:
        if not protected:
            return ""
        if not self._psk:
            raise BraviaAuthLevelError(
                f"A pre-shared key is required to call {envelope.method}"
            )
        return self._psk

    async def dispatch(
        self,
        endpoint: str,
        envelope: RequestEnvelope,
        *,
        protected: bool = False,
        expects_result: bool = False,
        path: ResultPath = DEFAULT_PATH,
    ) -> Any:
        """Send ``envelope`` to ``endpoint`` and return the extracted value.

        Returns None when ``expects_result`` is False, whatever the device
        answered with.
        """
        self._check_capability(endpoint, envelope)
        psk = self._credential(envelope, protected)

        url = f"{self._base_url}/{endpoint}"
        headers = {PSK_HEADER: psk, "Content-Type": CONTENT_TYPE_JSON}
        body = json.dumps(envelope.to_dict())
        kwargs: dict[str, Any] = {}
        if self._timeout:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self._timeout)

        _LOGGER.debug(
            "Bravia API request: POST %s %s v%s (id %d)",
            url, envelope.method, envelope.version, envelope.id,
        )
        try:
            async with self._session.post(
                url, data=body, headers=headers, **kwargs
            ) as resp:
                _LOGGER.debug("Bravia API response: %s %s", resp.status, url)
                if not 200 <= resp.status < 300:
                    raise BraviaBadStatus(resp.status, url)
                raw = await resp.read()
        except (aiohttp.ClientError, TimeoutError, OSError) as err:
            raise BraviaNetworkError(
                f"Cannot connect to Bravia API at {url}: {err}"
            ) from err

        _LOGGER.debug(
            "Bravia API raw response: %s", raw[:500].decode(errors="replace")
        )
        return self._parse(envelope, raw, expects_result, path)

    @staticmethod
    def _parse(
        envelope: RequestEnvelope,
        raw: bytes,
        expects_result: bool,
        path: ResultPath,
    ) -> Any:
        try:
            # UnicodeDecodeError is a ValueError too
            data = json.loads(raw)
        except ValueError as err:
            raise BraviaInvalidResponse(
                f"{envelope.method} returned invalid JSON: {raw[:200]!r}"
            ) from err
        if not isinstance(data, dict):
            raise BraviaInvalidResponse(
                f"{envelope.method} returned a non-object body: {raw[:200]!r}"
            )

        if "error" in data:
            error = DeviceError.from_payload(data["error"])
            _LOGGER.debug("Bravia API error for %s: %s", envelope.method, error)
            raise BraviaError(error.code, error.message)

        if "result" not in data:
            raise BraviaInvalidResponse(
                f"{envelope.method} response has neither result nor error"
            )

        if not expects_result:
            return None

        result = data["result"]
        if not isinstance(result, list):
            raise BraviaInvalidResponse(
                f"{envelope.method} result is not an array: {result!r}"
            )
        return extract_result(result, path)
