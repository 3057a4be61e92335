"""
Logging setup shared by every module of the package.

Modules get their logger with ``logger = setup_logger(__name__)``. Library
code only logs at DEBUG, so nothing shows up until the level is lowered with
:func:`set_package_log_level`.
"""
import logging

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%m-%d %H:%M:%S"

PACKAGE_NAME = __name__.split('.', maxsplit=1)[0]


def setup_logger(name: str,
                 level: int = logging.INFO,
                 formatter: logging.Formatter = None,
                 force: bool = False,
                 propagate: bool = False) -> logging.Logger:
    """Return the named logger with a single console handler attached.

    Parameters
    ----------
    name : str
        Logger name, usually ``__name__`` of the calling module.
    level : int
        Level of both the logger and its handler.
    formatter : logging.Formatter, optional
        Defaults to ``DEFAULT_LOG_FORMAT``.
    force : bool, optional
        Replace handlers that are already attached.
    propagate : bool, optional
        Pass records on to the parent logger.

    Returns
    -------
    logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if force:
        logger.handlers.clear()

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(formatter or logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    logger.propagate = propagate
    return logger

def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    # getLevelName maps known names to ints and anything else to a "Level x" string
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING

def set_package_log_level(level='WARNING'):
    """Set the level of every package logger and its handlers.

    ``level`` is a level number or name; unknown names fall back to WARNING.
    """
    level = _resolve_level(level)
    for logger_name, logger_instance in logging.root.manager.loggerDict.items():
        if logger_name.startswith(PACKAGE_NAME) and isinstance(logger_instance, logging.Logger):
            logger_instance.setLevel(level)
            for handler in logger_instance.handlers:
                handler.setLevel(level)
