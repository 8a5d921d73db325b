"""Console logging setup. Call setup_logging() once at app startup."""
import logging

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_configured = False


def setup_logging(level: str = "INFO"):
    """Attach a console handler to the package logger.

    Safe to call more than once; only the first call installs the handler,
    later calls just adjust the level.
    """
    global _configured
    logger = logging.getLogger("inventory_catalog")
    logger.setLevel(level.upper())
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    _configured = True
