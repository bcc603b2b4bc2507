# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
Console rendering of test progress and results

The tester decides what to report; ReportPrinter decides how it looks. Every
sub-test prints one short symbol, RESULTS_PER_LINE symbols to a line, and
each symbol is flushed right away so progress stays visible even if the
process aborts later on.
"""

import sys
from enum import Enum
from typing import Iterable, Optional, TextIO

from .arguments import format_argument
from .results import GroupSummary, SessionSummary

# ANSI styles
PRINT_ERROR = "\x1b[31m"
PRINT_SUCCESS = "\x1b[32m"
PRINT_WARNING = "\x1b[35m"
PRINT_MESSAGE = "\x1b[1m"
PRINT_END = "\x1b[0m"

RESULTS_PER_LINE = 64

INDENT = "   "


class Symbol(Enum):
    """Result symbols, in legend order: (text, style, legend description)."""

    SUCCESS_DATA = (":", PRINT_SUCCESS, "Test produced correct results")
    SUCCESS_STATUS = (".", PRINT_SUCCESS, "Test returned the correct error code")
    ERROR_DATA = ("X", PRINT_ERROR, "Test produced incorrect results")
    ERROR_STATUS = ("/", PRINT_ERROR, "Test returned an incorrect error code")
    SKIPPED_COMPILATION = ("\\", PRINT_WARNING, "Test not executed: kernel compilation error")
    UNSUPPORTED_PRECISION = ("o", PRINT_WARNING, "Test not executed: Unsupported precision")

    @property
    def text(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def description(self) -> str:
        return self.value[2]


class ReportPrinter:
    """Writes tester output to a text stream.

    Args:
        stream: Output stream (default: sys.stdout)
        color: Use ANSI styles; None enables them when the stream is a terminal
        results_per_line: Maximum number of result symbols on one line
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None,
                 results_per_line: int = RESULTS_PER_LINE):
        if results_per_line <= 0:
            raise ValueError(f"results_per_line must be positive, got {results_per_line}")
        self.stream = stream if stream is not None else sys.stdout
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        self.results_per_line = results_per_line
        self.print_count = 0

    def _style(self, text: str, style: str) -> str:
        if not self.color:
            return text
        return f"{style}{text}{PRINT_END}"

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def _flush(self) -> None:
        self.stream.flush()

    def symbol(self, symbol: Symbol) -> str:
        """Rendered form of a result symbol."""
        return self._style(symbol.text, symbol.style)

    def print_header(self, device_name: str, routine_name: str) -> None:
        """Device line followed by the legend of result symbols."""
        self._write(f"* Running on device '{device_name}'.\n")
        self._write(f"* Starting tests for the {self._style(repr_name(routine_name), PRINT_MESSAGE)} "
                    f"routine. Legend:\n")
        for symbol in Symbol:
            self._write(f"{INDENT}{self.symbol(symbol)} -> {symbol.description}\n")
        self._flush()

    def print_test_start(self, test_name: str, test_configuration: str) -> None:
        self._write(f"* Testing {self._style(repr_name(test_name), PRINT_MESSAGE)} for "
                    f"{self._style(repr_name(test_configuration), PRINT_MESSAGE)}:\n")
        self._write(INDENT)
        self._flush()
        self.print_count = 0

    def print_symbol(self, symbol: Symbol) -> None:
        """Print one result symbol, wrapping the line when it is full."""
        if self.print_count == self.results_per_line:
            self.print_count = 0
            self._write(f"\n{INDENT}")
        self._write(self.symbol(symbol))
        self._flush()
        self.print_count += 1

    def print_test_end(self, summary: GroupSummary, options: Iterable[str]) -> None:
        """Details of every failure in the group, then the group's pass rate."""
        options = list(options)
        self._write("\n")

        for entry in summary.errors:
            if entry.is_status_error:
                line = (f"{INDENT}Status code {int(entry.status_found)} "
                        f"(expected {int(entry.status_expect)}): ")
            else:
                line = f"{INDENT}Error rate {entry.error_percentage:.1f}%: "
            for name, value in entry.args.selected(options):
                line += f"{name}={format_argument(value)} "
            self._write(line + "\n")

        pass_rate = self._style(f"{summary.pass_rate:5.1f}%", PRINT_MESSAGE)
        skipped = f"{summary.skipped} skipped"
        if summary.skipped != 0:
            skipped = self._style(skipped, PRINT_WARNING)
        failed = f"{summary.errored} failed"
        if summary.errored != 0:
            failed = self._style(failed, PRINT_ERROR)
        self._write(f"{INDENT}Pass rate {pass_rate}: {summary.passed} passed / {skipped} / {failed}\n")
        self._flush()

    def print_session_end(self, summary: SessionSummary) -> None:
        self._write("* Completed all test-cases for this routine. Results:\n")
        self._write(f"{INDENT}{summary.tests_passed} test(s) succeeded\n")
        failed = f"{summary.tests_failed} test(s) failed"
        if summary.tests_failed != 0:
            failed = self._style(failed, PRINT_ERROR)
        self._write(f"{INDENT}{failed}\n")
        self._write("\n")
        self._flush()


def repr_name(name: str) -> str:
    """Quote a routine, test or configuration name."""
    return f"'{name}'"
