import logging

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from braviarpc import BraviaClient, BraviaConstructionError

from .const import CONF_HOST, CONF_PSK, DOMAIN

_LOGGER = logging.getLogger(__name__)


class BraviaConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    VERSION = 1

    async def async_step_user(self, user_input=None):
        errors = {}
        if user_input is not None:
            host = user_input[CONF_HOST].strip()
            await self.async_set_unique_id(host)
            self._abort_if_unique_id_configured()

            try:
                client = await BraviaClient.connect(
                    host,
                    user_input.get(CONF_PSK) or None,
                    session=async_get_clientsession(self.hass),
                )
            except BraviaConstructionError as err:
                _LOGGER.debug("Cannot connect to Bravia at %s: %s", host, err)
                errors["base"] = "cannot_connect"
            else:
                await client.close()
                return self.async_create_entry(
                    title=host,
                    data={CONF_HOST: host, CONF_PSK: user_input.get(CONF_PSK, "")},
                )

        data_schema = vol.Schema({
            vol.Required(CONF_HOST): str,
            vol.Optional(CONF_PSK, default=""): str,
        })

        return self.async_show_form(step_id="user", data_schema=data_schema, errors=errors)
