from datetime import timedelta
from homeassistant.const import Platform

SCAN_INTERVAL = timedelta(seconds=30)
PLATFORMS = [Platform.SENSOR]
DOMAIN = "bravia"

CONF_HOST = "host"
CONF_PSK = "psk"
