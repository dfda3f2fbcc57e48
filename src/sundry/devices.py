"""Media-device and permission queries against host capabilities.

Both queries take the capability as an argument. Passing ``None`` means the
host does not offer it, and the query degrades to an empty or negative
answer instead of raising.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from sundry.interfaces.media import (
    MediaDeviceInfo,
    MediaDeviceKind,
    MediaDevices,
    PermissionName,
    Permissions,
    PermissionState,
)

logger = logging.getLogger(__name__)

_MOBILE = re.compile(r"Mobile")


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """Media devices grouped by kind."""

    audio_input_devices: list[MediaDeviceInfo] = field(default_factory=list)
    video_input_devices: list[MediaDeviceInfo] = field(default_factory=list)
    audio_output_devices: list[MediaDeviceInfo] = field(default_factory=list)

    @property
    def has_audio_input_devices(self) -> bool:
        """True when at least one microphone is present."""
        return bool(self.audio_input_devices)

    @property
    def has_video_input_devices(self) -> bool:
        """True when at least one camera is present."""
        return bool(self.video_input_devices)


async def get_device_info(media_devices: MediaDevices | None) -> DeviceInfo:
    """Enumerate media devices once and group them by kind.

    Args:
        media_devices: Host capability, or ``None`` when unavailable.

    Returns:
        DeviceInfo: Devices grouped by kind; empty without a capability.
    """
    if media_devices is None:
        logger.debug("No media-device capability; reporting no devices")
        return DeviceInfo()

    devices = list(await media_devices.enumerate_devices())
    logger.debug("Enumerated %d media devices", len(devices))

    def of_kind(kind: MediaDeviceKind) -> list[MediaDeviceInfo]:
        return [device for device in devices if device.kind == kind]

    return DeviceInfo(
        audio_input_devices=of_kind(MediaDeviceKind.AUDIO_INPUT),
        video_input_devices=of_kind(MediaDeviceKind.VIDEO_INPUT),
        audio_output_devices=of_kind(MediaDeviceKind.AUDIO_OUTPUT),
    )


async def is_permission_denied(
    name: PermissionName | str, permissions: Permissions | None
) -> bool:
    """Return True only when the user has denied permission ``name``.

    A missing capability, or a query that fails, yields False.
    """
    if permissions is None:
        return False
    try:
        state = await permissions.query(PermissionName(name))
    except Exception:  # pylint: disable=broad-exception-caught
        logger.debug("Permission query for %r failed", name, exc_info=True)
        return False
    return state == PermissionState.DENIED


def is_mobile(user_agent: str | None) -> bool:
    """Return True if ``user_agent`` identifies a mobile browser."""
    if not isinstance(user_agent, str):
        return False
    return bool(_MOBILE.search(user_agent))
