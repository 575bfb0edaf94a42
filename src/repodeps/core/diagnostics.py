"""Diagnostics sinks for human-readable resolution messages.

Resolution reports problems and notes through a sink rather than raising to
the caller, so a failed resolution can still explain itself. Any object with
``log_warning(text)`` and ``log_info(text)`` methods is a sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Receiver of warnings and informational notes emitted during resolution."""

    def log_warning(self, text: str) -> None: ...

    def log_info(self, text: str) -> None: ...


class LoggingDiagnostics:
    """Forward diagnostics to a standard library logger.

    Used when the caller does not supply a sink.

    Args:
        target: Logger to write to. Defaults to this module's logger.
    """

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def log_warning(self, text: str) -> None:
        self._logger.warning(text)

    def log_info(self, text: str) -> None:
        self._logger.info(text)


@dataclass
class RecordingDiagnostics:
    """Collect diagnostics in memory, in emission order.

    Attributes:
        warnings: Warning texts.
        infos: Informational texts.
    """

    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    def log_warning(self, text: str) -> None:
        self.warnings.append(text)

    def log_info(self, text: str) -> None:
        self.infos.append(text)


class TeeDiagnostics:
    """Fan each message out to several sinks, in the order given."""

    def __init__(self, *sinks: DiagnosticsSink) -> None:
        self._sinks = sinks

    def log_warning(self, text: str) -> None:
        for sink in self._sinks:
            sink.log_warning(text)

    def log_info(self, text: str) -> None:
        for sink in self._sinks:
            sink.log_info(text)
