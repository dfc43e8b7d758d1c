"""Protocol constants for the BRAVIA REST API."""

API_PATH = "/sony"
DEFAULT_VERSION = "1.0"

PSK_HEADER = "X-Auth-PSK"
CONTENT_TYPE_JSON = "application/json"

DISCOVERY_ENDPOINT = "guide"
DISCOVERY_METHOD = "getSupportedApiInfo"

# Service endpoints
APP_CONTROL = "appControl"
AUDIO = "audio"
AV_CONTENT = "avContent"
ENCRYPTION = "encryption"
GUIDE = DISCOVERY_ENDPOINT
SYSTEM = "system"
VIDEO = "video"
VIDEO_SCREEN = "videoScreen"

# getPowerStatus value of a switched-on display ("standby" otherwise)
POWER_STATUS_ACTIVE = "active"
