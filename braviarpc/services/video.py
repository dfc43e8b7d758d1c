"""Video and video screen services: picture quality and scene settings."""
from dataclasses import dataclass, field
from typing import Any

from ..const import VIDEO, VIDEO_SCREEN
from .base import BraviaService, compact, expect, parse_list


@dataclass(frozen=True)
class Candidate:
    """Allowed value(s) of a picture setting.

    Numeric settings describe their range with ``min``/``max``/``step`` and
    leave ``value`` empty; the others list values and set the range to -1.
    """

    value: str = ""
    max: float = -1.0
    min: float = -1.0
    step: float = -1.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Candidate":
        return cls(
            value=data.get("value", ""),
            max=float(data.get("max", -1)),
            min=float(data.get("min", -1)),
            step=float(data.get("step", -1)),
        )


@dataclass(frozen=True)
class PictureQualitySetting:
    # "brightness", "color", "pictureMode", "hdrMode", ...
    target: str
    current_value: str
    is_available: bool = True
    candidate: list[Candidate] | None = field(default=None)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PictureQualitySetting":
        candidate = data.get("candidate")
        return cls(
            target=expect(str, data["target"]),
            current_value=data["currentValue"],
            is_available=data.get("isAvailable", True),
            candidate=parse_list(Candidate.from_dict, candidate) if candidate is not None else None,
        )


@dataclass(frozen=True)
class PictureQualityChange:
    target: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"target": self.target, "value": self.value}


class VideoService(BraviaService):
    """APIs of the ``video`` endpoint."""

    endpoint = VIDEO

    async def get_picture_quality_settings(
        self, target: str | None = None
    ) -> list[PictureQualitySetting]:
        """Return current values and candidates of ``target``, or of every setting."""
        result = await self._call(
            52, "getPictureQualitySettings", compact(target=target), expects_result=True
        )
        return parse_list(PictureQualitySetting.from_dict, result)

    async def set_picture_quality_settings(self, settings: list[PictureQualityChange]) -> None:
        await self._call(
            12, "setPictureQualitySettings", {"settings": [s.to_dict() for s in settings]},
            protected=True,
        )


class VideoScreenService(BraviaService):
    """APIs of the ``videoScreen`` endpoint.

    Values apply to the current input source at call time.
    """

    endpoint = VIDEO_SCREEN

    async def set_scene_setting(self, value: str) -> None:
        """Set the scene: "auto", "auto24pSync" or "general"."""
        await self._call(40, "setSceneSetting", {"value": value}, protected=True)
