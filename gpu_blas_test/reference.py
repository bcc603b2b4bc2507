# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
Reference library lifecycle

The reference routines themselves are plain callables owned by the caller.
The tester only sets the library up when a session starts and tears it down
when the session ends.
"""

import logging

import numpy as np

from .status import StatusCode

logger = logging.getLogger(__name__)


class NumpyReference:
    """NumPy as the trusted reference implementation."""

    name = "NumPy"

    def __init__(self):
        self.initialized = False

    def setup(self) -> StatusCode:
        self.initialized = True
        logger.debug(f"Reference library {self.name} {np.__version__} initialized")
        return StatusCode.SUCCESS

    def teardown(self) -> None:
        if self.initialized:
            logger.debug(f"Reference library {self.name} torn down")
        self.initialized = False
