# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""Result classes for test groups and sessions."""

from dataclasses import dataclass, field
from typing import Tuple

from .arguments import ErrorLogEntry


@dataclass(frozen=True)
class GroupSummary:
    """Outcome of one test group (the sub-tests between test_start and test_end).

    Args:
        test_name: Name of the group
        test_configuration: Configuration description given at test_start
        passed: Number of passed sub-tests
        skipped: Number of skipped sub-tests
        errored: Number of failed sub-tests
        errors: Error log of the group, in report order
    """

    test_name: str
    test_configuration: str
    passed: int
    skipped: int
    errored: int
    errors: Tuple[ErrorLogEntry, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return self.passed + self.skipped + self.errored

    @property
    def pass_rate(self) -> float:
        """Percentage of sub-tests that passed; 0.0 for an empty group."""
        if self.total == 0:
            return 0.0
        return 100.0 * self.passed / self.total

    @property
    def failed(self) -> bool:
        return len(self.errors) != 0


@dataclass(frozen=True)
class SessionSummary:
    """Whole-run tally of test groups."""

    routine_name: str
    tests_passed: int
    tests_failed: int

    @property
    def success(self) -> bool:
        return self.tests_failed == 0
