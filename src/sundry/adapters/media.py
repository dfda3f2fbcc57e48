"""In-memory media adapters.

Useful for tests and for hosts without real media hardware: the device list
and permission states are fixed at construction time.
"""

from collections.abc import Iterable, Mapping

from sundry.interfaces import media
from sundry.interfaces.media import MediaDeviceInfo, PermissionName, PermissionState

# pylint: disable=too-few-public-methods


class StaticMediaDevices(media.MediaDevices):
    """Media-device capability returning a fixed device list."""

    def __init__(self, devices: Iterable[MediaDeviceInfo] = ()) -> None:
        self._devices = tuple(devices)

    async def enumerate_devices(self) -> tuple[MediaDeviceInfo, ...]:
        return self._devices


class StaticPermissions(media.Permissions):
    """Permission capability backed by a fixed mapping.

    Permissions missing from the mapping report ``default``.
    """

    def __init__(
        self,
        states: Mapping[PermissionName, PermissionState] | None = None,
        default: PermissionState = PermissionState.PROMPT,
    ) -> None:
        self._states = dict(states or {})
        self._default = default

    async def query(self, name: PermissionName) -> PermissionState:
        return self._states.get(PermissionName(name), self._default)
