"""Logging setup for the sunburst CLI.

Records from the sunburst_chart package (layout data-integrity warnings,
click tracing) go to stderr through a single handler owned by the package
logger, so calling configure_logging() again replaces it instead of
stacking duplicates.
"""

import logging
import os
import sys

import colorlog

PACKAGE_LOGGER = "sunburst_chart"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "bold_yellow",
    "ERROR": "bold_red",
}

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _use_color(stream) -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    return stream.isatty()


def _formatter(stream) -> logging.Formatter:
    if _use_color(stream):
        return colorlog.ColoredFormatter(
            fmt=f"%(log_color)s{LOG_FORMAT}%(reset)s",
            log_colors=LOG_COLORS,
        )
    return logging.Formatter(LOG_FORMAT)


def configure_logging(verbose: bool, stream=None) -> logging.Handler:
    """Route sunburst_chart log records to stderr.

    Args:
        verbose: Log DEBUG records too (default is WARNING and above, which
            covers skipped children).
        stream: Output stream, stderr by default.

    Returns:
        The installed handler.
    """
    stream = stream if stream is not None else sys.stderr
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_sunburst_cli", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(_formatter(stream))
    handler._sunburst_cli = True
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
