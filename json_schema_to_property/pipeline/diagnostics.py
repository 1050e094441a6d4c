"""
Diagnostics for non-fatal mapping anomalies.

The mapper never prints or raises on a recoverable anomaly. It reports a
Diagnostic to a sink, which is any callable taking one Diagnostic. The
default sink, DiagnosticCollector, keeps them in order and forwards each
one to the standard logging module.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger("json_schema_to_property")


class DiagnosticCode(StrEnum):
    DUPLICATE_TYPE = "duplicate-type"
    INVALID_TYPE = "invalid-type"
    UNMAPPED_LEAF = "unmapped-leaf"
    ARRAY_QUIRK = "array-quirk"
    INVALID_XML = "invalid-xml"
    INVALID_DEFINITIONS = "invalid-definitions"


@dataclass(frozen=True)
class Diagnostic:
    """A warning about one schema node."""

    code: DiagnosticCode
    message: str
    path: str = ""

    def __str__(self) -> str:
        return f"{self.path}: [{self.code}] {self.message}"


type DiagnosticSink = Callable[[Diagnostic], None]


class DiagnosticCollector:
    """Sink that records diagnostics and logs them as warnings."""

    def __init__(self, log: logging.Logger | None = logger):
        self.log = log
        self.diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        if self.log is not None:
            self.log.warning("%s", diagnostic)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def codes(self) -> list[DiagnosticCode]:
        return [d.code for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()
