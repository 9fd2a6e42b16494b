"""Bounded diagnostics reporting.

A batch of malformed schema files must not flood the host with
notifications. The sink delivers at most ``limit`` diagnostics, then a single
"suppressed" notice, then nothing until ``reset()``.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from jsoncmp.codes import DiagnosticCode

logger = logging.getLogger(__name__)

# Maximum number of diagnostics delivered per reload
DEFAULT_LIMIT = 10

SUPPRESSED_MESSAGE = "Maximum error limit reached. Additional errors suppressed."

Notify = Callable[[str, int], None]


@dataclass(frozen=True)
class Diagnostic:
    """A human-readable problem found while loading schema files."""
    code: DiagnosticCode
    message: str
    severity: int = logging.WARNING  # a logging level
    path: Optional[str] = None


class DiagnosticsSink:
    """Delivers diagnostics to the log and to an optional host callback."""

    def __init__(self, limit: int = DEFAULT_LIMIT, notify: Optional[Notify] = None):
        if limit < 1:
            raise ValueError(f"Diagnostic limit must be positive, got {limit}")
        self.limit = limit
        self.notify = notify
        self.count = 0
        self.suppressed = 0
        self.emitted: List[Diagnostic] = []

    @property
    def exhausted(self) -> bool:
        return self.count >= self.limit

    def reset(self) -> None:
        """Start a fresh budget (called at the start of every reload)."""
        self.count = 0
        self.suppressed = 0
        self.emitted = []

    def report(self, diagnostic: Diagnostic) -> bool:
        """Deliver ``diagnostic`` unless the budget is spent.

        Returns:
            True if the diagnostic was delivered, False if it was dropped
        """
        if self.exhausted:
            self.suppressed += 1
            return False

        self._deliver(diagnostic)
        self.count += 1
        if self.count == self.limit:
            self._deliver(Diagnostic(
                code=DiagnosticCode.DIAGNOSTICS_SUPPRESSED,
                message=SUPPRESSED_MESSAGE,
                severity=logging.WARNING,
            ))
        return True

    def report_message(
        self,
        message: str,
        code: DiagnosticCode,
        severity: int = logging.WARNING,
        path: Optional[str] = None,
    ) -> bool:
        return self.report(Diagnostic(code=code, message=message, severity=severity, path=path))

    def _deliver(self, diagnostic: Diagnostic) -> None:
        self.emitted.append(diagnostic)
        logger.log(diagnostic.severity, "[%s] %s", diagnostic.code.value, diagnostic.message)
        if self.notify is not None:
            self.notify(diagnostic.message, diagnostic.severity)
