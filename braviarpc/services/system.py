"""System service: power, clock, LEDs, network and other device basics."""
from dataclasses import dataclass
from typing import Any

from ..const import SYSTEM
from ..envelope import ResultPath
from .base import BraviaService, VersionedShape, compact, expect, parse, parse_list


@dataclass(frozen=True)
class CurrentTime:
    """Device clock. Offsets (minutes) are only reported from version 1.1."""

    date_time: str
    time_zone_offset_minute: int | None = None
    dst_offset_minute: int | None = None

    @classmethod
    def from_string(cls, data: Any) -> "CurrentTime":
        return cls(date_time=expect(str, data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CurrentTime":
        return cls(
            date_time=expect(str, data["dateTime"]),
            time_zone_offset_minute=data.get("timeZoneOffsetMinute"),
            dst_offset_minute=data.get("dstOffsetMinute"),
        )


@dataclass(frozen=True)
class InterfaceInfo:
    product_category: str
    product_name: str
    model_name: str
    server_name: str
    # "[X].[Y].[Z]" where X tracks significant device differences and Y the API set
    interface_version: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InterfaceInfo":
        return cls(
            product_category=data["productCategory"],
            product_name=data["productName"],
            model_name=data["modelName"],
            server_name=data.get("serverName", ""),
            interface_version=data["interfaceVersion"],
        )


@dataclass(frozen=True)
class LedIndicatorStatus:
    """LED mode ("Demo", "AutoBrightnessAdjust", "Dark", "SimpleResponse",
    "Off") and, for setLEDIndicatorStatus, an optional "true"/"false" status."""

    mode: str
    status: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LedIndicatorStatus":
        return cls(mode=expect(str, data["mode"]), status=data.get("status"))

    def to_dict(self) -> dict[str, Any]:
        return compact(mode=self.mode, status=self.status)


@dataclass(frozen=True)
class NetworkSettings:
    netif: str
    hw_addr: str
    ip_addr_v4: str
    ip_addr_v6: str
    netmask: str
    gateway: str
    dns: list[str]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NetworkSettings":
        return cls(
            netif=data["netif"],
            hw_addr=data["hwAddr"],
            ip_addr_v4=data.get("ipAddrV4", ""),
            ip_addr_v6=data.get("ipAddrV6", ""),
            netmask=data.get("netmask", ""),
            gateway=data.get("gateway", ""),
            dns=list(data.get("dns", [])),
        )


@dataclass(frozen=True)
class RemoteControllerCode:
    """IRCC code of a remote controller button."""

    name: str
    value: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RemoteControllerCode":
        return cls(name=data["name"], value=data["value"])


@dataclass(frozen=True)
class RemoteDeviceSetting:
    target: str
    current_value: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RemoteDeviceSetting":
        return cls(target=data["target"], current_value=data["currentValue"])


@dataclass(frozen=True)
class SystemInformation:
    product: str
    model: str
    name: str
    language: str = ""
    serial: str = ""
    mac_addr: str = ""
    generation: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SystemInformation":
        return cls(
            product=data["product"],
            model=data["model"],
            name=data["name"],
            language=data.get("language", ""),
            serial=data.get("serial", ""),
            mac_addr=data.get("macAddr", ""),
            generation=data.get("generation", ""),
        )


@dataclass(frozen=True)
class SupportedFunction:
    option: str
    value: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SupportedFunction":
        return cls(option=data["option"], value=data["value"])


_CURRENT_TIME = VersionedShape("getCurrentTime", "1.0", {
    "1.0": CurrentTime.from_string,
    "1.1": CurrentTime.from_dict,
})


class SystemService(BraviaService):
    """APIs of the ``system`` endpoint."""

    endpoint = SYSTEM

    async def get_current_time(self, version: str | None = None) -> CurrentTime:
        """Return the device clock; version 1.1 adds the timezone and DST offsets."""
        version, factory = _CURRENT_TIME.select(self.endpoint, version)
        result = await self._call(
            51, "getCurrentTime", version=version, expects_result=True
        )
        return parse(factory, result)

    async def get_interface_information(self) -> InterfaceInfo:
        result = await self._call(33, "getInterfaceInformation", expects_result=True)
        return parse(InterfaceInfo.from_dict, result)

    async def get_led_indicator_status(self) -> LedIndicatorStatus:
        result = await self._call(
            45, "getLEDIndicatorStatus", protected=True, expects_result=True
        )
        return parse(LedIndicatorStatus.from_dict, result)

    async def get_network_settings(self, netif: str | None = None) -> list[NetworkSettings]:
        """Return settings of ``netif`` ("eth0", "wlan0", ...), or of every interface."""
        result = await self._call(
            2, "getNetworkSettings", compact(netif=netif),
            protected=True, expects_result=True,
        )
        return parse_list(NetworkSettings.from_dict, result)

    async def get_power_saving_mode(self) -> str:
        """Return "off", "low", "high" or "pictureOff"."""
        result = await self._call(
            51, "getPowerSavingMode", expects_result=True, path=ResultPath.field("mode")
        )
        return expect(str, result)

    async def get_power_status(self) -> str:
        """Return "standby" or "active"."""
        result = await self._call(
            50, "getPowerStatus", expects_result=True, path=ResultPath.field("status")
        )
        return expect(str, result)

    async def get_remote_controller_info(self) -> list[RemoteControllerCode]:
        result = await self._call(
            54, "getRemoteControllerInfo", expects_result=True, path=ResultPath.index(1)
        )
        return parse_list(RemoteControllerCode.from_dict, result)

    async def get_remote_device_settings(
        self, target: str | None = None
    ) -> list[RemoteDeviceSetting]:
        """Return remote access settings; ``target`` defaults to all of them."""
        result = await self._call(
            44, "getRemoteDeviceSettings", compact(target=target), expects_result=True
        )
        return parse_list(RemoteDeviceSetting.from_dict, result)

    async def get_system_information(self) -> SystemInformation:
        result = await self._call(
            33, "getSystemInformation", protected=True, expects_result=True
        )
        return parse(SystemInformation.from_dict, result)

    async def get_system_supported_function(self) -> list[SupportedFunction]:
        result = await self._call(55, "getSystemSupportedFunction", expects_result=True)
        return parse_list(SupportedFunction.from_dict, result)

    async def get_wol_mode(self) -> bool:
        result = await self._call(
            50, "getWolMode", protected=True, expects_result=True,
            path=ResultPath.field("enabled"),
        )
        return expect(bool, result)

    async def request_reboot(self) -> None:
        await self._call(10, "requestReboot", protected=True)

    async def set_led_indicator_status(self, status: LedIndicatorStatus) -> None:
        await self._call(
            53, "setLEDIndicatorStatus", status.to_dict(), version="1.1", protected=True
        )

    async def set_language(self, language: str) -> None:
        """Set the UI language (ISO-639 alpha-3, e.g. "eng")."""
        await self._call(55, "setLanguage", {"language": language}, protected=True)

    async def set_power_saving_mode(self, mode: str) -> None:
        await self._call(52, "setPowerSavingMode", {"mode": mode}, protected=True)

    async def set_power_status(self, status: bool) -> None:
        """Turn the display on (True) or put it in standby (False)."""
        await self._call(55, "setPowerStatus", {"status": status}, protected=True)

    async def set_wol_mode(self, enabled: bool) -> None:
        await self._call(55, "setWolMode", {"enabled": enabled}, protected=True)
