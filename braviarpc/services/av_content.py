"""AV content service: inputs, sources and content playback.

Content is browsed in three steps: ``get_scheme_list`` gives the schemes
("extInput", "tv", ...), ``get_source_list(scheme)`` the source URIs of a
scheme ("extInput:hdmi", ...), and ``get_content_list(uri)`` the content
found under a source.
"""
from dataclasses import dataclass
from typing import Any

from ..const import AV_CONTENT
from ..envelope import ResultPath
from .base import BraviaService, VersionedShape, compact, expect, parse, parse_list


@dataclass(frozen=True)
class Content:
    uri: str
    title: str | None = None
    # -1 when the request URI itself designates the content
    index: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Content":
        return cls(
            uri=expect(str, data["uri"]),
            title=data.get("title"),
            index=data.get("index", 0),
        )


@dataclass(frozen=True)
class ExternalInputStatus:
    uri: str
    title: str
    label: str
    # meta URI hinting at the icon to show ("meta:hdmi", "meta:game", ...)
    icon: str
    connection: bool
    # "true"/"false" signal detection, None before version 1.1
    status: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExternalInputStatus":
        return cls(
            uri=expect(str, data["uri"]),
            title=data["title"],
            label=data.get("label", ""),
            icon=data.get("icon", ""),
            connection=expect(bool, data["connection"]),
            status=data.get("status"),
        )


@dataclass(frozen=True)
class PlayingContentInfo:
    uri: str
    source: str
    title: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayingContentInfo":
        return cls(
            uri=expect(str, data["uri"]),
            source=data.get("source", ""),
            title=data.get("title", ""),
        )


def _values(data: dict[str, Any]) -> list[str]:
    return [expect(str, value) for value in data.values()]


def _count_v1_0(source: str, content_type: str | None, target: str | None) -> dict[str, Any]:
    return compact(source=source, type=content_type)


def _count_v1_1(source: str, content_type: str | None, target: str | None) -> dict[str, Any]:
    return compact(source=source, type=content_type, target=target)


_CONTENT_COUNT = VersionedShape("getContentCount", "1.0", {
    "1.0": _count_v1_0,
    "1.1": _count_v1_1,
})


def _no_params() -> None:
    return None


# Same request at both versions; "status" is only filled in from 1.1
_EXTERNAL_INPUTS_STATUS = VersionedShape("getCurrentExternalInputsStatus", "1.0", {
    "1.0": _no_params,
    "1.1": _no_params,
})


class AvContentService(BraviaService):
    """APIs of the ``avContent`` endpoint."""

    endpoint = AV_CONTENT

    async def get_content_count(
        self,
        source: str,
        content_type: str | None = None,
        target: str | None = None,
        version: str | None = None,
    ) -> int:
        """Return how many contents ``source`` holds; ``target`` needs version 1.1."""
        version, params = _CONTENT_COUNT.build(
            self.endpoint, version, source=source, content_type=content_type, target=target
        )
        result = await self._call(
            11, "getContentCount", params, version=version,
            protected=True, expects_result=True, path=ResultPath.field("count"),
        )
        return expect(int, result)

    async def get_content_list(
        self,
        uri: str | None = None,
        st_idx: int | None = None,
        cnt: int | None = None,
    ) -> list[Content]:
        """Return a page of contents under ``uri``.

        The device caps the page size; page through long lists with
        ``st_idx`` (default 0) and ``cnt`` (default 50).
        """
        result = await self._call(
            88, "getContentList", compact(uri=uri, stIdx=st_idx, cnt=cnt),
            version="1.5", protected=True, expects_result=True,
        )
        return parse_list(Content.from_dict, result)

    async def get_current_external_inputs_status(
        self, version: str | None = None
    ) -> list[ExternalInputStatus]:
        version, params = _EXTERNAL_INPUTS_STATUS.build(self.endpoint, version)
        result = await self._call(
            105, "getCurrentExternalInputsStatus", params,
            version=version, expects_result=True,
        )
        return parse_list(ExternalInputStatus.from_dict, result)

    async def get_scheme_list(self) -> list[str]:
        result = await self._call(1, "getSchemeList", expects_result=True)
        return [value for values in parse_list(_values, result) for value in values]

    async def get_source_list(self, scheme: str) -> list[str]:
        result = await self._call(
            1, "getSourceList", {"scheme": scheme}, expects_result=True
        )
        return [value for values in parse_list(_values, result) for value in values]

    async def get_playing_content_info(self) -> PlayingContentInfo:
        """Return what is on screen; the device reports error 7 in standby."""
        result = await self._call(
            103, "getPlayingContentInfo", protected=True, expects_result=True
        )
        return parse(PlayingContentInfo.from_dict, result)

    async def set_play_content(self, uri: str) -> None:
        """Show the content at ``uri`` (e.g. "extInput:hdmi?port=2")."""
        await self._call(101, "setPlayContent", {"uri": uri}, protected=True)
