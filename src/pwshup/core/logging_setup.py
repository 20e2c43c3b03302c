"""Console logging setup."""

import logging


_LOGGER_NAME = "pwshup"
_HANDLER_TAG = "_pwshup_console_handler"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    A handler installed by an earlier call is replaced, so repeated calls
    never duplicate output and always write to the current ``sys.stderr``.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    reset_logging()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)
    return logger


def reset_logging() -> None:
    """Remove handlers installed by ``configure_logging``."""
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()
