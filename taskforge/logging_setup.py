"""Console logging for taskforge."""

import logging
import sys

PACKAGE_LOGGER = "taskforge"


def setup_logging(verbose: bool = False) -> None:
    """Send taskforge log records to stderr.

    Only WARNING and above are shown unless verbose is set. Calling this
    again replaces the handler installed by an earlier call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s")

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
