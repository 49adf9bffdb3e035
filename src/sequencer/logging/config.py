"""Logging configuration for the sequencer.

Usage:
    import structlog

    from sequencer.logging import configure_logging

    configure_logging(level="DEBUG")
    log = structlog.get_logger()
    log.info("sequences_computed", sequence_count=3)
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from typing import TYPE_CHECKING

import structlog

from sequencer.logging.colors import (
    ANSI_CORAL,
    ANSI_DIM,
    ANSI_ELECTRIC_PURPLE,
    ANSI_RESET,
    LEVEL_COLORS,
)

if TYPE_CHECKING:
    from structlog.typing import EventDict, WrappedLogger


class SequencerRenderer:
    """Render events as ``service | HH:MM:SS | level | event key=value...``."""

    def __init__(self, service_name: str = "sequencer", colors: bool | None = None) -> None:
        self.service_name = service_name
        if colors is None:
            force_color = os.environ.get("FORCE_COLOR", "")
            self.colors = sys.stderr.isatty() or force_color not in ("", "0", "false")
        else:
            self.colors = colors

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        timestamp = event_dict.pop("timestamp", datetime.now().strftime("%H:%M:%S"))
        level = str(event_dict.pop("level", method_name)).lower()
        event = str(event_dict.pop("event", ""))
        pairs = [
            self._format_pair(key, value)
            for key, value in event_dict.items()
            if not key.startswith("_")
        ]

        if self.colors:
            service = f"{ANSI_ELECTRIC_PURPLE}{self.service_name}{ANSI_RESET}"
            ts = f"{ANSI_DIM}{timestamp}{ANSI_RESET}"
            lvl = f"{LEVEL_COLORS.get(level, LEVEL_COLORS['info'])}{level:<7}{ANSI_RESET}"
        else:
            service, ts, lvl = self.service_name, timestamp, f"{level:<7}"

        line = f"{service} | {ts} | {lvl} | {event}"
        if pairs:
            line += " " + " ".join(pairs)
        return line

    def _format_pair(self, key: str, value: object) -> str:
        if self.colors and isinstance(value, (int, float)) and not isinstance(value, bool):
            return f"{key}={ANSI_CORAL}{value}{ANSI_RESET}"
        return f"{key}={value}"


def configure_logging(
    *,
    service_name: str = "sequencer",
    level: str = "WARNING",
    colors: bool | None = None,
    json_output: bool = False,
) -> None:
    """Configure stdlib logging and structlog.

    Call once at application startup.

    Args:
        service_name: Prefix shown on each line
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        colors: Enable colors (auto-detect TTY/FORCE_COLOR if None)
        json_output: Emit JSON lines instead of the themed format
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(format="%(message)s", level=log_level, stream=sys.stderr)

    if json_output:
        renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = SequencerRenderer(service_name=service_name, colors=colors)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    # Looked up per logger so redirected streams are honored
    return structlog.PrintLogger(file=sys.stderr)

