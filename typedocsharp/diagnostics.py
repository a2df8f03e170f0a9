"""
Diagnostics side channel for the converter.

Conditions are reported as single lines with a severity prefix. The type
resolver only ever reports warnings; errors are reserved for the callers
that drive it.
"""

import sys
from typing import List, Tuple

WARNING = 'Warning'
ERROR = 'Error'


class Diagnostics:
    """ Base sink. Subclasses decide where the messages go. """

    def report(self, severity: str, message: str) -> None:
        raise NotImplementedError

    def warning(self, message: str) -> None:
        self.report(WARNING, message)

    def error(self, message: str) -> None:
        self.report(ERROR, message)


def format_diagnostic(severity: str, message: str) -> str:
    """ Formats a diagnostic as '[Severity] message' """
    return f"[{severity}] {message}"


class ConsoleDiagnostics(Diagnostics):
    """ Writes diagnostics to stderr, one line each """

    def __init__(self, stream=None) -> None:
        self.stream = stream

    def report(self, severity: str, message: str) -> None:
        print(format_diagnostic(severity, message), file=self.stream or sys.stderr)


class CollectingDiagnostics(Diagnostics):
    """ Keeps diagnostics in memory """

    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def report(self, severity: str, message: str) -> None:
        self.records.append((severity, message))

    @property
    def warnings(self) -> List[str]:
        return [message for severity, message in self.records if severity == WARNING]

    @property
    def errors(self) -> List[str]:
        return [message for severity, message in self.records if severity == ERROR]
