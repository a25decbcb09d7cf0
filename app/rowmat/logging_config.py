"""Console logging for the smoke script and the Streamlit playground."""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Send 'rowmat' records at ``level`` and above to stdout.

    Safe to call on every Streamlit rerun: the handler is replaced, not stacked.
    """
    logger = logging.getLogger("rowmat")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", "%H:%M:%S"))
    logger.addHandler(handler)
    return logger
