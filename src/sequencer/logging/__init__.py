"""Structured logging for the sequencer."""

from sequencer.logging.config import SequencerRenderer, configure_logging

__all__ = ["SequencerRenderer", "configure_logging"]
