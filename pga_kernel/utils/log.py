"""PGA kernel logging system.

Provides structured logging under the ``pga_kernel`` hierarchy. The kernel
itself never logs; the verification harness reports through
:func:`get_logger`.

Environment variables:
    PGA_KERNEL_LOG_LEVEL  (DEBUG / INFO / WARNING (default) / ERROR)
    PGA_KERNEL_LOG_FILE   optional path; appends plain-text log lines
"""

import logging
import os
import sys

from ..core.constants import ENV_LOG_LEVEL, ENV_LOG_FILE

_CONFIGURED = False

# ANSI colour codes (used only when stderr is a TTY)
_COLORS = {
    logging.DEBUG: "\033[36m",     # cyan
    logging.INFO: "\033[32m",      # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[35m",  # magenta
}
_RESET = "\033[0m"


class _ColorFormatter(logging.Formatter):
    """Adds ANSI colour to level names when writing to a TTY."""

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if self.use_color:
            color = _COLORS.get(record.levelno, "")
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(record)


def _configure_once() -> None:
    """One-time lazy init of the ``pga_kernel`` root logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger("pga_kernel")
    level_name = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    # Console handler on stderr; the harness report goes to stdout
    fmt = "%(levelname)s %(name)s: %(message)s"
    use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_ColorFormatter(fmt, use_color=use_color))
    root.addHandler(console)

    log_file = os.environ.get(ENV_LOG_FILE)
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        root.addHandler(fh)


def set_level(level_name: str) -> None:
    """Override the level of the ``pga_kernel`` logger.

    Args:
        level_name: DEBUG, INFO, WARNING or ERROR (case-insensitive).

    Raises:
        ValueError: If the name is not a logging level.
    """
    _configure_once()
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logging.getLogger("pga_kernel").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``pga_kernel`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance.
    """
    _configure_once()
    if name == "pga_kernel" or name.startswith("pga_kernel."):
        return logging.getLogger(name)
    return logging.getLogger(f"pga_kernel.{name}")
