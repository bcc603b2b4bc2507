# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
Device context provider

The tester only needs a device name plus opaque context and queue handles.
Any object with an open(platform_id, device_id) method returning a
DeviceContext can stand in for HostDeviceProvider.
"""

import logging
import platform
from typing import Any, Callable, Optional

from .exceptions import DeviceError

logger = logging.getLogger(__name__)


class DeviceContext:
    """An opened device together with its context and command queue."""

    def __init__(self, name: str, context: Any = None, queue: Any = None,
                 release: Optional[Callable[[], None]] = None):
        self.name = name
        self.context = context
        self.queue = queue
        self._release = release
        self.released = False

    def release(self) -> None:
        """Release the context and queue. Safe to call more than once."""
        if self.released:
            return
        self.released = True
        logger.debug(f"Releasing device '{self.name}'")
        if self._release is not None:
            self._release()

    def __repr__(self) -> str:
        return f"DeviceContext(name={self.name!r}, released={self.released})"


class HostDeviceProvider:
    """Exposes the host CPU as platform 0, device 0.

    Lets the tester run against host-side candidate routines when no GPU
    runtime is installed.
    """

    def open(self, platform_id: int, device_id: int) -> DeviceContext:
        if platform_id != 0:
            raise DeviceError(
                f"Invalid platform index {platform_id}: only platform 0 is available",
                platform_id, device_id,
            )
        if device_id != 0:
            raise DeviceError(
                f"Invalid device index {device_id}: platform 0 has a single device",
                platform_id, device_id,
            )

        name = platform.processor() or platform.machine() or "host"
        logger.debug(f"Opened host device '{name}'")
        return DeviceContext(name)
