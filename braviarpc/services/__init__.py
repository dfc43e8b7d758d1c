"""Typed wrappers around the device endpoints."""
from .app_control import AppControlService, Application, ApplicationStatus, WebAppStatus
from .audio import AudioService, AudioSetting, SoundSetting, SpeakerSetting, VolumeInformation
from .av_content import AvContentService, Content, ExternalInputStatus, PlayingContentInfo
from .base import BraviaService
from .encryption import EncryptionService
from .guide import ApiInfo, ApiVersion, GuideService, ServiceInfo
from .system import (
    CurrentTime,
    InterfaceInfo,
    LedIndicatorStatus,
    NetworkSettings,
    RemoteControllerCode,
    RemoteDeviceSetting,
    SupportedFunction,
    SystemInformation,
    SystemService,
)
from .video import (
    Candidate,
    PictureQualityChange,
    PictureQualitySetting,
    VideoScreenService,
    VideoService,
)
