from dataclasses import dataclass
from typing import List

from homeassistant.components.sensor import SensorEntityDescription, SensorStateClass


@dataclass(frozen=True, kw_only=True)
class BraviaSensorDescription(SensorEntityDescription):
    # Protected APIs are only polled when a pre-shared key is configured
    requires_psk: bool = False


SENSOR_DESCRIPTIONS: List[BraviaSensorDescription] = [
    BraviaSensorDescription(
        key="power_status",
        name="Power Status",
        icon="mdi:television",
    ),
    BraviaSensorDescription(
        key="volume",
        name="Volume",
        icon="mdi:volume-high",
        state_class=SensorStateClass.MEASUREMENT,
    ),
    BraviaSensorDescription(
        key="muted",
        name="Muted",
        icon="mdi:volume-mute",
    ),
    BraviaSensorDescription(
        key="input",
        name="Input",
        icon="mdi:video-input-hdmi",
        requires_psk=True,
    ),
]
