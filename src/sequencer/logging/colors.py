"""Sequencer color palette, shared by the CLI and the log renderer."""

from __future__ import annotations

# Hex colors (rich)
ELECTRIC_PURPLE = "#e135ff"
NEON_CYAN = "#80ffea"
CORAL = "#ff6ac1"
ELECTRIC_YELLOW = "#f1fa8c"
SUCCESS_GREEN = "#50fa7b"
ERROR_RED = "#ff6363"

# ANSI 24-bit escape codes (log lines)
ANSI_NEON_CYAN = "\033[38;2;128;255;234m"
ANSI_CORAL = "\033[38;2;255;106;193m"
ANSI_ELECTRIC_PURPLE = "\033[38;2;225;53;255m"
ANSI_ELECTRIC_YELLOW = "\033[38;2;241;250;140m"
ANSI_ERROR_RED = "\033[38;2;255;99;99m"
ANSI_DIM = "\033[38;2;85;85;102m"
ANSI_RESET = "\033[0m"

LEVEL_COLORS: dict[str, str] = {
    "debug": ANSI_DIM,
    "info": ANSI_NEON_CYAN,
    "warning": ANSI_ELECTRIC_YELLOW,
    "error": ANSI_ERROR_RED,
    "critical": ANSI_ELECTRIC_PURPLE,
}
