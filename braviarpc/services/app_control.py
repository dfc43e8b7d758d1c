"""App control service: application launch, status and the software keyboard.

Text sent to or read from the software keyboard may be encrypted by the
caller; ``enc_key`` is then the caller's common key encrypted with the
device public key (see ``EncryptionService.get_public_key``). Both are
forwarded as-is.
"""
from dataclasses import dataclass
from typing import Any

from ..const import APP_CONTROL
from ..envelope import ResultPath
from .base import BraviaService, VersionedShape, compact, expect, parse, parse_list


@dataclass(frozen=True)
class Application:
    title: str
    uri: str
    # empty when the application has no icon
    icon: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Application":
        return cls(
            title=expect(str, data["title"]),
            uri=expect(str, data["uri"]),
            icon=data.get("icon") or "",
        )


@dataclass(frozen=True)
class ApplicationStatus:
    """Status ("on"/"off") of "textInput", "cursorDisplay" or "webBrowse"."""

    name: str
    status: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApplicationStatus":
        return cls(name=data["name"], status=data["status"])


@dataclass(frozen=True)
class WebAppStatus:
    active: bool
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WebAppStatus":
        return cls(active=expect(bool, data["active"]), url=data.get("url") or "")


def _text_form_v1_0(text: str, enc_key: str | None) -> str:
    return text


def _text_form_v1_1(text: str, enc_key: str | None) -> dict[str, Any]:
    return compact(encKey=enc_key, text=text)


_SET_TEXT_FORM = VersionedShape("setTextForm", "1.0", {
    "1.0": _text_form_v1_0,
    "1.1": _text_form_v1_1,
})


class AppControlService(BraviaService):
    """APIs of the ``appControl`` endpoint."""

    endpoint = APP_CONTROL

    async def get_application_list(self) -> list[Application]:
        """Return the applications ``set_active_app`` can launch."""
        result = await self._call(
            60, "getApplicationList", protected=True, expects_result=True
        )
        return parse_list(Application.from_dict, result)

    async def get_application_status_list(self) -> list[ApplicationStatus]:
        result = await self._call(55, "getApplicationStatusList", expects_result=True)
        return parse_list(ApplicationStatus.from_dict, result)

    async def get_text_form(self, enc_key: str | None = None) -> str:
        """Return the software keyboard text, encrypted when ``enc_key`` is given."""
        result = await self._call(
            60, "getTextForm", compact(encKey=enc_key), version="1.1",
            protected=True, expects_result=True, path=ResultPath.field("text"),
        )
        return expect(str, result)

    async def get_web_app_status(self) -> WebAppStatus:
        result = await self._call(
            1, "getWebAppStatus", protected=True, expects_result=True
        )
        return parse(WebAppStatus.from_dict, result)

    async def set_active_app(self, uri: str) -> None:
        """Launch the application at ``uri``.

        Besides URIs from ``get_application_list``, WebAppRuntime accepts
        ``localapp://webappruntime?url=<url>``, ``?manifest=<url>`` and
        ``?auid=<id>`` (application on USB storage).
        """
        await self._call(601, "setActiveApp", {"uri": uri}, protected=True)

    async def set_text_form(
        self, text: str, enc_key: str | None = None, version: str | None = None
    ) -> None:
        """Type ``text`` into the software keyboard.

        Version 1.0 sends the bare string. Version 1.1 sends an object and
        is the only one that carries ``enc_key``.
        """
        version, params = _SET_TEXT_FORM.build(
            self.endpoint, version, text=text, enc_key=enc_key
        )
        await self._call(601, "setTextForm", params, version=version, protected=True)

    async def terminate_apps(self) -> None:
        await self._call(55, "terminateApps", protected=True)
