import logging
from typing import Any

from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import (
    DataUpdateCoordinator,
    UpdateFailed,
)

from braviarpc import BraviaClient, BraviaError, BraviaException
from braviarpc.const import POWER_STATUS_ACTIVE

from .const import DOMAIN, SCAN_INTERVAL

_LOGGER = logging.getLogger(__name__)

# Error code for "Illegal State", e.g. nothing is playing
_ILLEGAL_STATE = 7


async def async_fetch_snapshot(client: BraviaClient) -> dict[str, Any]:
    """Poll the display and flatten what the sensors show."""
    snapshot: dict[str, Any] = {
        "power_status": await client.system.get_power_status(),
        "volume": None,
        "muted": None,
        "input": None,
    }
    if snapshot["power_status"] != POWER_STATUS_ACTIVE:
        return snapshot

    for info in await client.audio.get_volume_information():
        if info.target == "speaker":
            snapshot["volume"] = info.volume
            snapshot["muted"] = info.mute
            break

    if client.has_psk:
        try:
            playing = await client.av_content.get_playing_content_info()
        except BraviaError as err:
            if err.code != _ILLEGAL_STATE:
                raise
            _LOGGER.debug("Bravia %s: no playing content (%s)", client.host, err)
        else:
            snapshot["input"] = playing.title or playing.uri

    return snapshot


class BraviaCoordinator(DataUpdateCoordinator):
    def __init__(self, hass: HomeAssistant, client: BraviaClient) -> None:
        super().__init__(hass, _LOGGER, name=DOMAIN, update_interval=SCAN_INTERVAL)
        self.client = client

    async def _async_update_data(self):
        try:
            return await async_fetch_snapshot(self.client)
        except BraviaException as e:
            _LOGGER.warning("Bravia %s update failed: %s", self.client.host, e)
            raise UpdateFailed(str(e)) from e
