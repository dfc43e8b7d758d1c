import logging

from homeassistant.components.sensor import SensorEntity
from homeassistant.core import callback
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import BraviaCoordinator
from .enum import SENSOR_DESCRIPTIONS, BraviaSensorDescription

_LOGGER: logging.Logger = logging.getLogger(__package__)


async def async_setup_entry(hass, entry, async_add_entities):
    data = hass.data[DOMAIN][entry.entry_id]

    coordinator: BraviaCoordinator = data["coordinator"]

    sensors = []

    for sensor in SENSOR_DESCRIPTIONS:
        if sensor.requires_psk and not coordinator.client.has_psk:
            continue
        sensors.append(BraviaSensor(sensor, entry, coordinator))

    async_add_entities(sensors, True)


class BraviaSensor(CoordinatorEntity, SensorEntity):
    entity_description: BraviaSensorDescription

    def __init__(self, sensor: BraviaSensorDescription, entry, coordinator: BraviaCoordinator):
        super().__init__(coordinator)
        self.entity_description = sensor
        self._key = sensor.key
        self._attr_unique_id = f"{entry.entry_id}_{sensor.key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry.entry_id)},
            name=entry.title,
            manufacturer="Sony",
        )
        self._state = (coordinator.data or {}).get(sensor.key)

    @callback
    def _handle_coordinator_update(self):
        try:
            self._state = self.coordinator.data[self._key]
        except (KeyError, TypeError) as e:
            _LOGGER.error(f"Error accessing data for key '{self._key}': {e}: Defaulting to None")
            self._state = None
        self.async_write_ha_state()

    @property
    def native_value(self):
        return self._state
