"""
DTOs logging.

The package logs under the 'dtos' logger and only attaches a NullHandler,
so nothing is printed unless the application configures logging:

    from dtos.logging import logger

    logger.debug('Resolved options for UserDto')   # option registry
    logger.warning("Ignoring unknown Dto option 'frozen'")

What gets logged:
    DEBUG    option resolution per class, factory key filtering and
             construction summaries
    WARNING  unknown keys passed to Dto.set_options()

Policy errors absorbed in silent mode are never logged.

To watch the factory from a script or a REPL:
    import dtos
    dtos.enable_console_logging()
    dtos.set_log_level('DEBUG')
"""

import logging

logger = logging.getLogger('dtos')
logger.addHandler(logging.NullHandler())

_console_handler: logging.Handler | None = None


def enable_console_logging(fmt: str = '[%(levelname)s] dtos: %(message)s') -> logging.Handler:
    """
    Print dtos records to stderr.

    Calling it again returns the handler already installed.

    Args:
        fmt: logging.Formatter format string

    Returns:
        The StreamHandler attached to the dtos logger
    """
    global _console_handler
    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_console_handler)
    return _console_handler


def disable_console_logging() -> None:
    global _console_handler
    if _console_handler is not None:
        logger.removeHandler(_console_handler)
        _console_handler = None


def set_log_level(level: str | int) -> None:
    """
    Set the level of the dtos logger.

    Args:
        level: 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'SILENT',
               or numeric level (logging.DEBUG, etc.)

    Examples:
        dtos.set_log_level('DEBUG')    # Option resolution and factory details
        dtos.set_log_level('SILENT')   # Not even unknown-option warnings
    """
    if isinstance(level, str):
        level = level.upper()
        if level == 'SILENT':
            logger.setLevel(logging.CRITICAL + 1)
        else:
            logger.setLevel(getattr(logging, level))
    else:
        logger.setLevel(level)
