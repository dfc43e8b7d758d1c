"""Asyncio client for the Sony BRAVIA REST API."""
from .capabilities import CapabilityCache
from .client import BraviaClient
from .dispatch import Dispatcher
from .envelope import DeviceError, RequestEnvelope, ResultPath, extract_result
from .exceptions import (
    BraviaAuthLevelError,
    BraviaBadStatus,
    BraviaCapabilityError,
    BraviaConstructionError,
    BraviaDeserializeError,
    BraviaError,
    BraviaException,
    BraviaInvalidResponse,
    BraviaMethodNotFound,
    BraviaMissingValue,
    BraviaNetworkError,
    BraviaServiceNotFound,
    BraviaVersionUnsupported,
)

__version__ = "0.1.0"
