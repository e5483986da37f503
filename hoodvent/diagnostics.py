"""Exceptions and the non-fatal diagnostic records that accompany
every calculation result of the package.

Most input problems in a kitchen exhaust calculation are not fatal: a missing
dimension, an unknown duct material or a gas consumption entered in the wrong
unit are replaced by a safe default and the calculation continues. Instead of
silently dropping such contributions, each calculation collects `Diagnostic`
objects that the caller can show next to the numeric result.
"""
from typing import List
from enum import IntEnum
from dataclasses import dataclass
from logging import Logger


class HoodventError(Exception):
    """Base class of the exceptions raised by the package."""
    pass


class CSVImportError(HoodventError):
    """Raised when a CSV-file with appliance data cannot be parsed: no header
    row was recognized or no data rows were found.
    """
    pass


class Severity(IntEnum):
    INFO = 20
    WARNING = 30
    ERROR = 40


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal message produced during a calculation.

    Attributes
    ----------
    severity:
        INFO, WARNING or ERROR.
    code:
        Short machine-readable identifier, e.g. 'unit_mismatch',
        'unknown_material', 'invalid_area'.
    message:
        Human-readable description.
    source:
        Identifier of the appliance or duct element the message refers to
        (empty if it refers to the calculation as a whole).
    """
    severity: Severity
    code: str
    message: str
    source: str = ''

    def __str__(self) -> str:
        src = f" ({self.source})" if self.source else ''
        return f"{self.severity.name}{src}: {self.message}"


class DiagnosticList(List[Diagnostic]):
    """List of `Diagnostic` objects that also forwards each new diagnostic to
    a logger.
    """

    def __init__(self, logger: Logger | None = None):
        super().__init__()
        self._logger = logger

    def report(
        self,
        severity: Severity,
        code: str,
        message: str,
        source: str = ''
    ) -> Diagnostic:
        """Creates a new `Diagnostic`, appends it to the list and logs it."""
        diagnostic = Diagnostic(severity, code, message, source)
        self.append(diagnostic)
        if self._logger is not None:
            self._logger.log(int(severity), str(diagnostic))
        return diagnostic

    def info(self, code: str, message: str, source: str = '') -> Diagnostic:
        return self.report(Severity.INFO, code, message, source)

    def warning(self, code: str, message: str, source: str = '') -> Diagnostic:
        return self.report(Severity.WARNING, code, message, source)

    def error(self, code: str, message: str, source: str = '') -> Diagnostic:
        return self.report(Severity.ERROR, code, message, source)

    def with_code(self, code: str) -> list[Diagnostic]:
        return [d for d in self if d.code == code]

    @property
    def has_warnings(self) -> bool:
        return any(d.severity >= Severity.WARNING for d in self)
