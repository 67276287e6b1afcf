"""Package-wide logger factory."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a named logger configured for gridprops diagnostics.

    The level is fixed the first time a name is configured; later calls for the
    same name return the logger unchanged.

    Parameters
    ----------
    name : str
        Logger name, usually ``f"{__name__}.{self.__class__.__name__}"``.
    verbose : bool, optional
        If True, the logger emits DEBUG records; otherwise only WARNING and above.

    Returns
    -------
    logging.Logger
        Logger with a single stream handler attached.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
