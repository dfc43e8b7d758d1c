import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from braviarpc import BraviaClient, BraviaConstructionError

from .const import CONF_HOST, CONF_PSK, DOMAIN, PLATFORMS
from .coordinator import BraviaCoordinator

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry):
    host = entry.data[CONF_HOST]

    try:
        client = await BraviaClient.connect(
            host,
            entry.data.get(CONF_PSK) or None,
            session=async_get_clientsession(hass),
        )
    except BraviaConstructionError as err:
        raise ConfigEntryNotReady(f"Cannot connect to Bravia at {host}: {err}") from err

    coordinator = BraviaCoordinator(hass, client)
    await coordinator.async_config_entry_first_refresh()

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {
        "bravia_client": client,
        "coordinator": coordinator,
    }

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry):
    unloaded = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unloaded:
        data = hass.data[DOMAIN].pop(entry.entry_id)
        await data["bravia_client"].close()
    return unloaded
