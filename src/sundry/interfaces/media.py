"""Interfaces for media-device enumeration and permission queries."""

import abc
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

# pylint: disable=too-few-public-methods


class MediaDeviceKind(str, Enum):
    """Kind tag reported for each media device."""

    AUDIO_INPUT = "audioinput"
    VIDEO_INPUT = "videoinput"
    AUDIO_OUTPUT = "audiooutput"


class PermissionName(str, Enum):
    """Permissions that can be queried."""

    CAMERA = "camera"
    MICROPHONE = "microphone"


class PermissionState(str, Enum):
    """State reported by a permission query."""

    GRANTED = "granted"
    DENIED = "denied"
    PROMPT = "prompt"


@dataclass(frozen=True, slots=True)
class MediaDeviceInfo:
    """Descriptor of a single media device."""

    device_id: str
    kind: MediaDeviceKind
    label: str = ""
    group_id: str = ""


class MediaDevices(abc.ABC):
    """Contract for a host capability that lists media devices."""

    @abc.abstractmethod
    async def enumerate_devices(self) -> Sequence[MediaDeviceInfo]:
        """Return the media devices currently available to the host."""


class Permissions(abc.ABC):
    """Contract for a host capability that reports permission states."""

    @abc.abstractmethod
    async def query(self, name: PermissionName) -> PermissionState:
        """Return the state of permission ``name``.

        Implementations may raise if the host cannot answer; callers treat
        any failure as "not denied".
        """
