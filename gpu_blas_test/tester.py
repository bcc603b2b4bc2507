# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
GPU BLAS Correctness Tester

This module runs the bookkeeping side of a correctness test: a sweep driver
invokes a reference and a candidate routine for many argument combinations
and hands the outcome of every sub-test to a Tester, which classifies it as
passed, skipped or failed, prints a progress symbol, and reports the failures
at the end of each test group.

A session looks like this:

    with Tester(name="AXPY", options=[ARG_N, ARG_X_INC, ARG_Y_INC]) as tester:
        tester.test_start("regular behaviour", "default")
        for args in sweep:
            ...
            tester.test_buffers(reference_result, candidate_result, args)
        tester.test_end()

Sub-test outcomes:
- Numeric comparison: pass when every element is similar, else fail with the
  share of mismatching elements
- Status comparison: pass when both routines return the same status code,
  skip when the candidate reports an unsupported precision or a kernel that
  could not be compiled or is not implemented, else fail
"""

import logging
from typing import Iterable, List, Optional, TextIO, Union

import numpy as np

from .arguments import STATUS_ERROR, Arguments, ErrorLogEntry
from .device import HostDeviceProvider
from .exceptions import ReferenceSetupError
from .precision import Precision, default_margin, example_scalars, layouts, transposes
from .printer import RESULTS_PER_LINE, ReportPrinter, Symbol
from .reference import NumpyReference
from .results import GroupSummary, SessionSummary
from .similarity import count_errors, is_similar
from .status import StatusCode, as_status, is_skipped_compilation, is_unsupported_precision


class Tester:
    """Test session for one routine.

    Construction opens the device and sets up the reference library; close()
    (or leaving the with-block) prints the whole-run summary and releases
    both. Groups of sub-tests are delimited by test_start() and test_end().
    """

    def __init__(self, platform_id: int = 0, device_id: int = 0, name: str = "",
                 options: Iterable[str] = (), precision: Precision = Precision.REAL32,
                 verbose: bool = False, stream: Optional[TextIO] = None,
                 color: Optional[bool] = None, results_per_line: int = RESULTS_PER_LINE,
                 device_provider=None, reference=None):
        """Initialize the tester.

        Args:
            platform_id: Index of the compute platform
            device_id: Index of the device on that platform
            name: Name of the routine under test
            options: Argument names printed for every failure (e.g. ARG_M, ARG_N)
            precision: Numeric type of the routine under test
            verbose: Enable debug logging
            stream: Output stream for progress and reports (default: sys.stdout)
            color: Use ANSI styles (None: only when stream is a terminal)
            results_per_line: Maximum number of result symbols per line
            device_provider: Object with open(platform_id, device_id) (default: host)
            reference: Reference library with setup() and teardown() (default: NumPy)

        Raises:
            DeviceError: If the platform or device cannot be opened
            ReferenceSetupError: If the reference library fails to initialize
        """
        self.name = name
        self.options = list(options)
        self.precision = precision
        self.verbose = verbose

        # Setup logging
        level = logging.DEBUG if verbose else logging.INFO
        logging.basicConfig(
            level=level, format="%(asctime)s - %(levelname)s - %(message)s"
        )
        self.logger = logging.getLogger(__name__)

        self.printer = ReportPrinter(stream, color=color, results_per_line=results_per_line)
        self.reference = reference if reference is not None else NumpyReference()
        device_provider = device_provider if device_provider is not None else HostDeviceProvider()

        # Per-group state
        self.error_log: List[ErrorLogEntry] = []
        self.num_passed = 0
        self.num_skipped = 0
        self.num_errors = 0
        self.test_name: Optional[str] = None
        self.test_configuration: Optional[str] = None
        self._in_group = False

        # Whole-run state
        self.tests_passed = 0
        self.tests_failed = 0
        self.closed = False

        self.device = device_provider.open(platform_id, device_id)
        self.logger.debug(f"Opened platform {platform_id}, device {device_id}: {self.device.name}")

        try:
            self.printer.print_header(self.device.name, name)
            status = as_status(self.reference.setup())
        except BaseException:
            self.device.release()
            raise
        if status != StatusCode.SUCCESS:
            self.device.release()
            raise ReferenceSetupError(f"Reference library setup error: {int(status)}", int(status))

    def __enter__(self) -> "Tester":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def in_group(self) -> bool:
        return self._in_group

    @property
    def example_scalars(self) -> tuple:
        """Example alpha/beta values for this precision."""
        return example_scalars(self.precision)

    @property
    def layouts(self) -> tuple:
        return layouts(self.precision)

    @property
    def transposes(self) -> tuple:
        return transposes(self.precision)

    @property
    def margin(self) -> float:
        """Default relative error margin for this precision."""
        return default_margin(self.precision)

    def test_start(self, test_name: str, test_configuration: str) -> None:
        """Start a test group: print its header and clear all per-group state."""
        if self.closed:
            raise RuntimeError("Tester is closed")
        self.printer.print_test_start(test_name, test_configuration)

        self.error_log = []
        self.num_passed = 0
        self.num_skipped = 0
        self.num_errors = 0
        self.test_name = test_name
        self.test_configuration = test_configuration
        self._in_group = True
        self.logger.debug(f"Started test '{test_name}' for '{test_configuration}'")

    def test_end(self) -> GroupSummary:
        """End a test group: print its failures and pass rate.

        Returns:
            Summary of the group
        """
        if not self._in_group:
            raise RuntimeError("test_end() called without a matching test_start()")
        self._in_group = False

        summary = GroupSummary(
            test_name=self.test_name,
            test_configuration=self.test_configuration,
            passed=self.num_passed,
            skipped=self.num_skipped,
            errored=self.num_errors,
            errors=tuple(self.error_log),
        )
        if summary.failed:
            self.tests_failed += 1
        else:
            self.tests_passed += 1

        self.printer.print_test_end(summary, self.options)
        self.logger.debug(
            f"Finished test '{summary.test_name}': {summary.passed} passed, "
            f"{summary.skipped} skipped, {summary.errored} failed"
        )
        return summary

    def close(self) -> SessionSummary:
        """Print the whole-run summary and release the reference library and device.

        Safe to call more than once; only the first call prints.
        """
        summary = SessionSummary(self.name, self.tests_passed, self.tests_failed)
        if self.closed:
            return summary
        self.closed = True
        if self._in_group:
            self.logger.warning(f"Closing tester with test '{self.test_name}' still running")
            self._in_group = False

        try:
            self.printer.print_session_end(summary)
        finally:
            try:
                self.reference.teardown()
            finally:
                self.device.release()
        return summary

    @staticmethod
    def test_similarity(val1, val2, margin: float) -> bool:
        """Whether two values are within an acceptable error margin."""
        return is_similar(val1, val2, margin)

    def test_error_count(self, errors: int, size: int, args: Arguments) -> None:
        """Report a pass when errors is zero, else a failure with the error percentage.

        Raises:
            ValueError: If errors is negative or exceeds size
        """
        self._check_in_group()
        if errors < 0 or errors > size:
            raise ValueError(f"Error count {errors} out of range for a result of size {size}")
        if errors == 0:
            self.printer.print_symbol(Symbol.SUCCESS_DATA)
            self.report_pass()
        else:
            percentage = 100.0 * errors / size
            self.printer.print_symbol(Symbol.ERROR_DATA)
            self.report_error(ErrorLogEntry(StatusCode.SUCCESS, StatusCode.SUCCESS, percentage, args))

    def test_error_codes(self, reference_status: Union[StatusCode, int],
                         candidate_status: Union[StatusCode, int], args: Arguments) -> None:
        """Compare the status codes returned by the reference and the candidate."""
        self._check_in_group()
        reference_status = as_status(reference_status)
        candidate_status = as_status(candidate_status)

        if reference_status == candidate_status:
            self.printer.print_symbol(Symbol.SUCCESS_STATUS)
            self.report_pass()
        elif is_unsupported_precision(candidate_status):
            self.printer.print_symbol(Symbol.UNSUPPORTED_PRECISION)
            self.report_skipped()
        elif is_skipped_compilation(candidate_status):
            self.printer.print_symbol(Symbol.SKIPPED_COMPILATION)
            self.report_skipped()
        else:
            self.printer.print_symbol(Symbol.ERROR_STATUS)
            self.report_error(ErrorLogEntry(reference_status, candidate_status, STATUS_ERROR, args))

    def test_buffers(self, reference: np.ndarray, candidate: np.ndarray, args: Arguments,
                     margin: Optional[float] = None) -> int:
        """Compare two result buffers element by element and report the outcome.

        Returns:
            Number of mismatching elements
        """
        reference = np.asarray(reference)
        if margin is None:
            margin = self.margin
        errors = count_errors(reference, candidate, margin)
        self.test_error_count(errors, reference.size, args)
        return errors

    def report_pass(self) -> None:
        self._check_in_group()
        self.num_passed += 1

    def report_skipped(self) -> None:
        self._check_in_group()
        self.num_skipped += 1

    def report_error(self, error_log_entry: ErrorLogEntry) -> None:
        self._check_in_group()
        self.error_log.append(error_log_entry)
        self.num_errors += 1

    def _check_in_group(self) -> None:
        if not self._in_group:
            raise RuntimeError("Sub-test reported outside of a test_start()/test_end() pair")
