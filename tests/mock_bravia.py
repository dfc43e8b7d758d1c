"""
Fake BRAVIA display for local testing.

Serves the ``/sony/<service>`` JSON-RPC endpoints with canned payloads and
records every request it receives, so tests can assert on exact wire
bodies (or on the absence of any request).

Usage:
    pip install aiohttp
    python mock_bravia.py [port] [psk]

Default port is 8080.  Then point the client or the HA integration at
127.0.0.1:<port>.
"""
import asyncio
import json
import sys
from dataclasses import dataclass, field
from typing import Any

from aiohttp import web

API_TABLE: dict[str, dict[str, list[str]]] = {
    "guide": {
        "getSupportedApiInfo": ["1.0"],
    },
    "system": {
        "getCurrentTime": ["1.0", "1.1"],
        "getInterfaceInformation": ["1.0"],
        "getLEDIndicatorStatus": ["1.0"],
        "getNetworkSettings": ["1.0"],
        "getPowerSavingMode": ["1.0"],
        "getPowerStatus": ["1.0"],
        "getRemoteControllerInfo": ["1.0"],
        "getRemoteDeviceSettings": ["1.0"],
        "getSystemInformation": ["1.0"],
        "getSystemSupportedFunction": ["1.0"],
        "getWolMode": ["1.0"],
        "requestReboot": ["1.0"],
        "setLEDIndicatorStatus": ["1.1"],
        "setLanguage": ["1.0"],
        "setPowerSavingMode": ["1.0"],
        "setPowerStatus": ["1.0"],
        "setWolMode": ["1.0"],
    },
    "audio": {
        "getSoundSettings": ["1.1"],
        "getSpeakerSettings": ["1.0"],
        "getVolumeInformation": ["1.0"],
        "setAudioMute": ["1.0"],
        "setAudioVolume": ["1.0", "1.2"],
        "setSoundSettings": ["1.1"],
        "setSpeakerSettings": ["1.0"],
    },
    "avContent": {
        "getContentCount": ["1.0", "1.1"],
        "getContentList": ["1.5"],
        "getCurrentExternalInputsStatus": ["1.0", "1.1"],
        "getPlayingContentInfo": ["1.0"],
        "getSchemeList": ["1.0"],
        "getSourceList": ["1.0"],
        "setPlayContent": ["1.0"],
    },
    "appControl": {
        "getApplicationList": ["1.0"],
        "getApplicationStatusList": ["1.0"],
        "getTextForm": ["1.1"],
        "getWebAppStatus": ["1.0"],
        "setActiveApp": ["1.0"],
        "setTextForm": ["1.0", "1.1"],
        "terminateApps": ["1.0"],
    },
    "video": {
        "getPictureQualitySettings": ["1.0"],
        "setPictureQualitySettings": ["1.0"],
    },
    "videoScreen": {
        "setSceneSetting": ["1.0"],
    },
    "encryption": {
        "getPublicKey": ["1.0"],
    },
}


def make_services(table: dict[str, dict[str, list[str]]]) -> list[dict[str, Any]]:
    """Render an API table the way getSupportedApiInfo reports it."""
    return [
        {
            "service": service,
            "protocols": ["xhrpost:jsonizer"],
            "apis": [
                {
                    "name": name,
                    "versions": [
                        {"version": version, "authLevel": "none"} for version in versions
                    ],
                }
                for name, versions in apis.items()
            ],
            "notifications": [],
        }
        for service, apis in table.items()
    ]


def ok(*values: Any) -> dict[str, Any]:
    return {"result": list(values), "id": 1}


RESPONSES: dict[tuple, Any] = {
    ("system", "getPowerStatus"): ok({"status": "active"}),
    ("system", "getCurrentTime", "1.0"): ok("2018-10-03T13:03:04+0100"),
    ("system", "getCurrentTime", "1.1"): ok({
        "dateTime": "2018-10-03T13:03:59+0100",
        "timeZoneOffsetMinute": 60,
        "dstOffsetMinute": 0,
    }),
    ("system", "getInterfaceInformation"): ok({
        "productCategory": "tv",
        "productName": "BRAVIA",
        "modelName": "FW-55BZ35F",
        "serverName": "",
        "interfaceVersion": "5.0.1",
    }),
    ("system", "getLEDIndicatorStatus"): ok({"mode": "AutoBrightnessAdjust", "status": None}),
    ("system", "getNetworkSettings"): ok([{
        "netif": "eth0",
        "hwAddr": "00:11:22:33:44:55",
        "ipAddrV4": "192.168.1.20",
        "ipAddrV6": "",
        "netmask": "255.255.255.0",
        "gateway": "192.168.1.1",
        "dns": ["192.168.1.1"],
    }]),
    ("system", "getPowerSavingMode"): ok({"mode": "low"}),
    ("system", "getRemoteControllerInfo"): ok(
        {"bundled": True, "type": "IR_REMOTE_BUNDLE_TYPE_AEP_N"},
        [
            {"name": "PowerOff", "value": "AAAAAQAAAAEAAAAvAw=="},
            {"name": "Input", "value": "AAAAAQAAAAEAAAAlAw=="},
        ],
    ),
    ("system", "getRemoteDeviceSettings"): ok([{"target": "accessPermission", "currentValue": "on"}]),
    ("system", "getSystemInformation"): ok({
        "product": "TV",
        "region": "XEU",
        "language": "ita",
        "model": "FW-55BZ35F",
        "serial": "1234567",
        "macAddr": "00:11:22:33:44:55",
        "name": "BRAVIA",
        "generation": "5.0.1",
    }),
    ("system", "getSystemSupportedFunction"): ok([{"option": "WOL", "value": "00:11:22:33:44:55"}]),
    ("system", "getWolMode"): ok({"enabled": True}),
    ("audio", "getSoundSettings"): ok([{"target": "outputTerminal", "currentValue": "speaker"}]),
    ("audio", "getSpeakerSettings"): ok([{"target": "tvPosition", "currentValue": "tableTop"}]),
    ("audio", "getVolumeInformation"): ok([
        {"target": "speaker", "volume": 18, "mute": False, "maxVolume": 100, "minVolume": 0},
        {"target": "headphone", "volume": 15, "mute": False, "maxVolume": 100, "minVolume": 0},
    ]),
    ("avContent", "getContentCount"): ok({"count": 4}),
    ("avContent", "getContentList"): ok([
        {"uri": "extInput:hdmi?port=1", "title": "HDMI 1", "index": 0},
        {"uri": "extInput:hdmi?port=2", "title": "HDMI 2", "index": 1},
    ]),
    ("avContent", "getCurrentExternalInputsStatus", "1.0"): ok([{
        "uri": "extInput:hdmi?port=1", "title": "HDMI 1", "label": "",
        "icon": "meta:hdmi", "connection": True,
    }]),
    ("avContent", "getCurrentExternalInputsStatus", "1.1"): ok([{
        "uri": "extInput:hdmi?port=1", "title": "HDMI 1", "label": "Console",
        "icon": "meta:game", "connection": True, "status": "true",
    }]),
    ("avContent", "getPlayingContentInfo"): ok({
        "source": "extInput:hdmi", "title": "HDMI 2", "uri": "extInput:hdmi?port=2",
    }),
    ("avContent", "getSchemeList"): ok([{"scheme": "extInput"}, {"scheme": "fav"}]),
    ("avContent", "getSourceList"): ok([{"source": "extInput:hdmi"}, {"source": "extInput:cec"}]),
    ("appControl", "getApplicationList"): ok([
        {"title": "YouTube", "uri": "com.sony.dtv.youtube", "icon": "http://tv/icon.png"},
        {"title": "Settings", "uri": "com.sony.dtv.settings"},
    ]),
    ("appControl", "getApplicationStatusList"): ok([
        {"name": "textInput", "status": "off"},
        {"name": "webBrowse", "status": "on"},
    ]),
    ("appControl", "getTextForm"): ok({"text": "hello"}),
    ("appControl", "getWebAppStatus"): ok({"active": True, "url": "http://example.com/"}),
    ("video", "getPictureQualitySettings"): ok([
        {
            "target": "brightness",
            "currentValue": "30",
            "isAvailable": True,
            "candidate": [{"max": 50, "min": 0, "step": 1}],
        },
        {
            "target": "pictureMode",
            "currentValue": "standard",
            "candidate": [{"value": "vivid"}, {"value": "standard"}],
        },
    ]),
    ("encryption", "getPublicKey"): ok({"publicKey": "MIIBIjANBgkqhkiG9w0BAQEFAAOC"}),
}


@dataclass
class RecordedRequest:
    endpoint: str
    psk: str | None
    content_type: str | None
    body: dict[str, Any]


@dataclass
class FakeBravia:
    """Canned BRAVIA device.

    ``responses`` maps ``(endpoint, method[, version])`` to a JSON body or a
    raw str/bytes body; methods without a canned answer get an empty result.
    A canned ``getSupportedApiInfo`` answer replaces the one built from
    ``services``. While ``gate`` is set and not released, requests are
    recorded and then held.
    """

    services: list[dict[str, Any]] = field(default_factory=lambda: make_services(API_TABLE))
    responses: dict[tuple, Any] = field(default_factory=lambda: dict(RESPONSES))
    psk: str | None = None
    status: int = 200
    requests: list[RecordedRequest] = field(default_factory=list)
    gate: asyncio.Event | None = None

    def calls(self, method: str | None = None) -> list[RecordedRequest]:
        """Requests received, discovery excluded unless asked for."""
        if method is None:
            return [r for r in self.requests if r.body.get("method") != "getSupportedApiInfo"]
        return [r for r in self.requests if r.body.get("method") == method]

    def _discovery(self, body: dict[str, Any]) -> dict[str, Any]:
        params = body.get("params") or [{}]
        wanted = params[0].get("services") if params else None
        services = self.services
        if wanted:
            services = [s for s in services if s["service"] in wanted]
        return {"result": [services], "id": body.get("id")}

    async def handle(self, request: web.Request) -> web.Response:
        endpoint = request.match_info["endpoint"]
        body = json.loads(await request.text())
        self.requests.append(RecordedRequest(
            endpoint=endpoint,
            psk=request.headers.get("X-Auth-PSK"),
            content_type=request.headers.get("Content-Type"),
            body=body,
        ))
        print(f"[API] /sony/{endpoint} {body.get('method')} v{body.get('version')}")
        if self.gate is not None:
            await self.gate.wait()

        if self.status != 200:
            return web.Response(status=self.status)
        if self.psk and request.headers.get("X-Auth-PSK") not in ("", self.psk):
            return web.Response(status=403)

        method, version = body.get("method"), body.get("version")
        if (endpoint == "guide" and method == "getSupportedApiInfo"
                and (endpoint, method) not in self.responses):
            return web.json_response(self._discovery(body))

        answer = self.responses.get((endpoint, method, version))
        if answer is None:
            answer = self.responses.get((endpoint, method), {"result": [], "id": body.get("id")})
        if isinstance(answer, str):
            return web.Response(text=answer, content_type="application/json")
        if isinstance(answer, bytes):
            return web.Response(body=answer, content_type="application/json", charset="utf-8")
        return web.json_response(answer)


def build_app(fake: FakeBravia) -> web.Application:
    app = web.Application()
    app.router.add_post("/sony/{endpoint}", fake.handle)
    return app


def main():
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8080
    psk = sys.argv[2] if len(sys.argv) > 2 else None
    app = build_app(FakeBravia(psk=psk))

    print("=" * 55)
    print("  Fake BRAVIA display")
    print("=" * 55)
    print()
    print(f"  Listening on http://127.0.0.1:{port}/sony/<service>")
    print(f"  Pre-shared key: {psk or '(none)'}")
    print()
    print("=" * 55)
    print()

    web.run_app(app, host="127.0.0.1", port=port, print=None)


if __name__ == "__main__":
    main()
