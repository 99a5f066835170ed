"""Package-wide logger."""
import logging
import sys

LOGGER_NAME = "mini_calculator"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    # stderr is shared with "Error:" lines, so only warnings and above are shown by default
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(logging.WARNING)
