"""Audio service: volume, mute, sound and speaker settings."""
from dataclasses import dataclass
from typing import Any

from ..const import AUDIO
from .base import BraviaService, VersionedShape, expect, parse_list


@dataclass(frozen=True)
class AudioSetting:
    """A sound or speaker setting.

    Getters report the value as ``currentValue``, setters send it as
    ``value``; both end up in :attr:`value`.
    """

    target: str
    value: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AudioSetting":
        value = data["currentValue"] if "currentValue" in data else data["value"]
        return cls(target=expect(str, data["target"]), value=value)

    def to_dict(self) -> dict[str, Any]:
        return {"target": self.target, "value": self.value}


# Sound settings targets: "outputTerminal", "soundMode", ...
SoundSetting = AudioSetting
# Speaker settings targets: "tvPosition", "subwooferLevel", ...
SpeakerSetting = AudioSetting


@dataclass(frozen=True)
class VolumeInformation:
    target: str
    volume: int
    mute: bool
    max_volume: int
    min_volume: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VolumeInformation":
        return cls(
            target=expect(str, data["target"]),
            volume=expect(int, data["volume"]),
            mute=expect(bool, data["mute"]),
            max_volume=expect(int, data["maxVolume"]),
            min_volume=expect(int, data["minVolume"]),
        )


def _volume_v1_0(target: str | None, volume: str, ui: str | None) -> dict[str, Any]:
    return {"target": target or "", "volume": volume}


def _volume_v1_2(target: str | None, volume: str, ui: str | None) -> dict[str, Any]:
    params = _volume_v1_0(target, volume, ui)
    if ui is not None:
        params["ui"] = ui
    return params


_SET_AUDIO_VOLUME = VersionedShape("setAudioVolume", "1.0", {
    "1.0": _volume_v1_0,
    "1.2": _volume_v1_2,
})


class AudioService(BraviaService):
    """APIs of the ``audio`` endpoint."""

    endpoint = AUDIO

    async def get_sound_settings(self, target: str | None = None) -> list[SoundSetting]:
        result = await self._call(
            73, "getSoundSettings", {"target": target or ""},
            version="1.1", expects_result=True,
        )
        return parse_list(AudioSetting.from_dict, result)

    async def get_speaker_settings(self, target: str | None = None) -> list[SpeakerSetting]:
        result = await self._call(
            67, "getSpeakerSettings", {"target": target or ""}, expects_result=True
        )
        return parse_list(AudioSetting.from_dict, result)

    async def get_volume_information(self) -> list[VolumeInformation]:
        """Return volume and mute state of each output ("speaker", "headphone")."""
        result = await self._call(33, "getVolumeInformation", expects_result=True)
        return parse_list(VolumeInformation.from_dict, result)

    async def set_audio_mute(self, status: bool) -> None:
        await self._call(601, "setAudioMute", {"status": status}, protected=True)

    async def set_audio_volume(
        self,
        volume: str,
        target: str | None = None,
        ui: str | None = None,
        version: str | None = None,
    ) -> None:
        """Set the volume.

        ``volume`` is an absolute level ("25") or a relative step ("+1", "-2").
        ``target`` is "speaker" or "headphone", all outputs when omitted.
        ``ui`` ("on"/"off") toggles the on-screen volume bar and is only
        sent with version 1.2.
        """
        version, params = _SET_AUDIO_VOLUME.build(
            self.endpoint, version, target=target, volume=volume, ui=ui
        )
        await self._call(98, "setAudioVolume", params, version=version, protected=True)

    async def set_sound_settings(self, settings: list[SoundSetting]) -> None:
        await self._call(
            5, "setSoundSettings", {"settings": [s.to_dict() for s in settings]},
            version="1.1", protected=True,
        )

    async def set_speaker_settings(self, settings: list[SpeakerSetting]) -> None:
        await self._call(
            62, "setSpeakerSettings", {"settings": [s.to_dict() for s in settings]},
            protected=True,
        )

