# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""Exceptions raised while setting up a test session."""


class TesterError(Exception):
    """Base exception for all tester errors."""

    pass


class DeviceError(TesterError, RuntimeError):
    """Raised when the requested platform or device cannot be opened."""

    def __init__(self, message: str, platform_id: int = None, device_id: int = None):
        super().__init__(message)
        self.platform_id = platform_id
        self.device_id = device_id


class ReferenceSetupError(TesterError, RuntimeError):
    """Raised when the reference library fails to initialise."""

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status
