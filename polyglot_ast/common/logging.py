"""
Logging module - diagnostics collected while building polyglot trees.

Problems found in the analysed program (unknown target language, unreadable
file, malformed interop call, ...) never abort construction. Each one becomes
a Diagnostic recorded in a DiagnosticCollector that travels with the tree,
and is also forwarded to the standard logging module.

Diagnostic kinds:
- unrecognized_language / unrecognized_argument / unrecognized_call: content
  of an interop call that cannot be interpreted
- missing_argument: an interop call without a language or payload
- io_error / parse_error: a payload that could not be read or parsed
- depth_limit / cycle: a payload refused by the recursion guards
- subtree_failed: summary entry for a call site that produced no subtree
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any

__all__ = [
    "DiagnosticKind",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticHandler",
    "configure_logging",
    "setup_logging_bridge",
    "teardown_logging_bridge",
]

logger = logging.getLogger("polyglot_ast")


class DiagnosticKind(str, Enum):
    """Categories of soft failures."""

    UNRECOGNIZED_LANGUAGE = "unrecognized_language"
    UNRECOGNIZED_ARGUMENT = "unrecognized_argument"
    UNRECOGNIZED_CALL = "unrecognized_call"
    MISSING_ARGUMENT = "missing_argument"
    IO_ERROR = "io_error"
    PARSE_ERROR = "parse_error"
    DEPTH_LIMIT = "depth_limit"
    CYCLE = "cycle"
    SUBTREE_FAILED = "subtree_failed"
    LOG = "log"


@dataclass
class Diagnostic:
    """A single soft failure."""

    kind: DiagnosticKind
    message: str
    position: tuple[int, int] | None = None
    path: str | None = None
    language: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        data["kind"] = self.kind.value
        if self.position is not None:
            data["position"] = list(self.position)
        return data

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())

    def __str__(self) -> str:
        location = ""
        if self.path:
            location = self.path
        if self.position is not None:
            row, column = self.position
            location = f"{location}:{row + 1}:{column + 1}" if location else f"{row + 1}:{column + 1}"
        prefix = f"{location}: " if location else ""
        return f"{prefix}[{self.kind.value}] {self.message}"


class DiagnosticCollector:
    """
    Ordered collection of diagnostics for one construction.

    A single collector is shared by a top-level tree and every subtree built
    from it, so the caller sees all omitted links in one place.
    """

    def __init__(self, emit: bool = True):
        """
        Initialize the collector.

        Args:
            emit: Also log each diagnostic through the standard logging module
        """
        self.emit = emit
        self._entries: list[Diagnostic] = []

    def record(
        self,
        kind: DiagnosticKind,
        message: str,
        position: tuple[int, int] | None = None,
        path: str | Path | None = None,
        language: str | None = None,
    ) -> Diagnostic:
        """Record a diagnostic and return it."""
        entry = Diagnostic(
            kind=kind,
            message=message,
            position=tuple(position) if position is not None else None,
            path=str(path) if path is not None else None,
            language=language,
        )
        self._entries.append(entry)
        if self.emit:
            logger.warning("%s", entry, extra={"polyglot_diagnostic": True})
        return entry

    def add(self, entry: Diagnostic) -> None:
        """Append an already built diagnostic without logging it."""
        self._entries.append(entry)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [entry for entry in self._entries if entry.kind == kind]

    def clear(self) -> None:
        self._entries.clear()

    def to_jsonl(self) -> str:
        """Serialize all diagnostics as JSON Lines."""
        return "".join(entry.to_json() + "\n" for entry in self._entries)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"DiagnosticCollector({len(self._entries)} entries)"


# =============================================================================
# Standard Logging Bridge
# =============================================================================


class DiagnosticHandler(logging.Handler):
    """
    A logging.Handler that forwards standard Python logging to a collector.

    Records produced by the collector itself are skipped, so bridging the
    package logger never duplicates diagnostics.

    Usage:
        collector = DiagnosticCollector()
        handler = setup_logging_bridge(collector)
        ...
        teardown_logging_bridge(handler)
    """

    def __init__(self, collector: DiagnosticCollector, min_level: int = logging.WARNING):
        super().__init__(level=min_level)
        self.collector = collector

    def emit(self, record: logging.LogRecord) -> None:
        """Forward a log record to the collector as a LOG diagnostic."""
        if getattr(record, "polyglot_diagnostic", False):
            return
        try:
            self.collector.add(Diagnostic(kind=DiagnosticKind.LOG, message=self.format(record)))
        except Exception:
            self.handleError(record)


def setup_logging_bridge(
    collector: DiagnosticCollector,
    min_level: int = logging.WARNING,
    logger_names: list[str] | None = None,
) -> DiagnosticHandler:
    """
    Set up a bridge from standard Python logging to a DiagnosticCollector.

    Args:
        collector: The collector to forward messages to
        min_level: Minimum level to forward (default: WARNING)
        logger_names: Specific logger names to bridge (default: "polyglot_ast")

    Returns:
        The handler (for later removal)
    """
    handler = DiagnosticHandler(collector, min_level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    for name in logger_names or ["polyglot_ast"]:
        logging.getLogger(name).addHandler(handler)

    return handler


def teardown_logging_bridge(
    handler: DiagnosticHandler, logger_names: list[str] | None = None
) -> None:
    """
    Remove a previously set up logging bridge.

    Args:
        handler: The handler returned by setup_logging_bridge
        logger_names: Same logger names used in setup
    """
    for name in logger_names or ["polyglot_ast"]:
        logging.getLogger(name).removeHandler(handler)


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure root logging for command line use."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
