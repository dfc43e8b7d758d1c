"""API client for Sony BRAVIA displays.

Talks the BRAVIA REST API: JSON-RPC bodies POSTed to one path per
service under ``http://<host>/sony/``.

    POST /sony/guide   getSupportedApiInfo  -> services, APIs and versions
    POST /sony/system  getPowerStatus       -> {"status": "active"}
    POST /sony/audio   setAudioVolume       -> []

Calls whose authentication level is not "none" carry the pre-shared key
configured on the display in the ``X-Auth-PSK`` header.
"""
import logging
from types import TracebackType

import aiohttp

from .capabilities import CapabilityCache
from .const import API_PATH
from .dispatch import Dispatcher
from .exceptions import BraviaConstructionError, BraviaException
from .services import (
    AppControlService,
    AudioService,
    AvContentService,
    EncryptionService,
    GuideService,
    SystemService,
    VideoScreenService,
    VideoService,
)

_LOGGER = logging.getLogger(__name__)


def normalize_host(address: str) -> str:
    """Add a scheme when missing and strip trailing slashes."""
    address = address.strip().rstrip("/")
    if not address.startswith(("http://", "https://")):
        address = f"http://{address}"
    return address


class BraviaClient:
    """Client for one BRAVIA display.

    Create it with :meth:`connect`, which discovers the APIs the display
    supports. Every call is checked against them before it is sent.

    Example:
        async with await BraviaClient.connect("192.168.1.20", psk="0000") as tv:
            if await tv.system.get_power_status() == "standby":
                await tv.system.set_power_status(True)
    """

    def __init__(
        self,
        host: str,
        dispatcher: Dispatcher,
        session: aiohttp.ClientSession,
        owns_session: bool,
    ) -> None:
        self._host = host
        self._dispatcher = dispatcher
        self._session = session
        self._owns_session = owns_session

        self.guide = GuideService(dispatcher)
        self.system = SystemService(dispatcher)
        self.audio = AudioService(dispatcher)
        self.av_content = AvContentService(dispatcher)
        self.app_control = AppControlService(dispatcher)
        self.video = VideoService(dispatcher)
        self.video_screen = VideoScreenService(dispatcher)
        self.encryption = EncryptionService(dispatcher)

    @classmethod
    async def connect(
        cls,
        address: str,
        psk: str | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ) -> "BraviaClient":
        """Discover the display's APIs and return a ready client.

        ``session`` is used as-is and left open by :meth:`close`; without one
        the client opens its own. ``timeout`` (seconds) bounds each request,
        otherwise the session's own timeout applies.

        Raises BraviaConstructionError when discovery fails.
        """
        host = normalize_host(address)
        owns_session = session is None
        if session is None:
            session = aiohttp.ClientSession()

        bootstrap = Dispatcher(session, f"{host}{API_PATH}", psk=psk, timeout=timeout)
        try:
            services = await GuideService(bootstrap).get_supported_api_info()
            capabilities = CapabilityCache.from_services(services)
        except BraviaException as err:
            if owns_session:
                await session.close()
            raise BraviaConstructionError(
                f"Cannot set up Bravia client for {host}: {err}"
            ) from err
        except BaseException:
            # cancellation included
            if owns_session:
                await session.close()
            raise

        _LOGGER.debug(
            "Bravia client ready for %s (services: %s)", host, sorted(capabilities.services)
        )
        return cls(host, bootstrap.with_capabilities(capabilities), session, owns_session)

    @property
    def host(self) -> str:
        return self._host

    @property
    def capabilities(self) -> CapabilityCache:
        return self._dispatcher.capabilities

    @property
    def has_psk(self) -> bool:
        """Return True if a pre-shared key is configured for protected APIs."""
        return self._dispatcher.has_psk

    async def close(self) -> None:
        if self._owns_session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "BraviaClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
