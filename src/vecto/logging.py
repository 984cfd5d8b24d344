from __future__ import annotations

import logging
import warnings
from typing import Any, List

LOGGER_ID = "vecto"
LOG_FORMAT = "%(asctime)-24s|%(levelname)-9s|%(name)-30s|%(message)s"
vecto_logger = logging.getLogger(LOGGER_ID)
vecto_handlers = list()


class VectoError(Exception):
    """
    Generic vecto error.
    """

    pass


class VectoValueError(VectoError, ValueError):
    """
    Value error specific to vecto.
    """

    pass


class InvalidLengthError(VectoValueError):
    """
    Raised when a sequence cannot be converted to a vector because it does not
    hold exactly two elements.
    """

    def __init__(self) -> None:
        super().__init__("invalid length")


class CapabilityError(VectoError, TypeError):
    """
    Raised when a vector operation needs a capability (for example ``sqrt`` or
    ``ceil``) that the component type does not provide.
    """

    pass


def create_warning(msg: str, category: Any = None) -> None:
    """
    Helper function for vecto modules to create warnings.

    Args:
        msg: message to be displayed
        category: Category of warning to be issued. See `warnings` documentation for more details. Defaults to None.
    """
    warnings.warn(msg, category=category, stacklevel=2)


def config_logging(
    handlers: List[logging.Handler],
    replace: bool = True,
    level: int = logging.DEBUG,
    redirect_warnings: bool = True,
) -> None:
    """
    Function to configure logging.

    Args:
        handlers: list of already configured logging.Handler objects
        replace: whether to replace existing list of handlers with new ones or whether to add them, optional
        level: log level of the vecto logger object, optional. Defaults to ``logging.DEBUG``.
        redirect_warnings: whether to redirect warnings to the logger. Beware that this modifies the warnings settings.
    """
    global vecto_handlers
    root_logger = logging.getLogger()
    if replace and vecto_handlers:
        for h in vecto_handlers:
            root_logger.removeHandler(h)
    for h in handlers:
        root_logger.addHandler(h)
    vecto_handlers = handlers

    vecto_logger.setLevel(level)

    if redirect_warnings:
        logging.captureWarnings(redirect_warnings)
        warn_log = logging.getLogger("py.warnings")
        warnings.simplefilter("once")
        for h in handlers:
            warn_log.addHandler(h)
    vecto_logger.info("Started vecto logging.")


def set_up_simple_logging(
    log_file: str | None = None,
    redirect_warnings: bool = True,
    level: int = logging.INFO,
) -> None:
    """
    Helper function that provides high-level control
    over vecto logging. For low-level control over the
    logging system use :func:`config_logging`.
    Sets up logging to ``sys.stderr`` and optionally to a given file,
    which is overwritten.

    Args:
        log_file: log filename, optional
        redirect_warnings: Whether to redirect warnings to the logger. Beware that this modifies the warnings settings.
        level: log level of the created handlers. Defaults to ``logging.INFO``.
    """
    sh = logging.StreamHandler()
    sh.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)
    sh.setFormatter(formatter)
    handlers: List[logging.Handler] = [sh]
    if log_file:
        fh = logging.FileHandler(log_file, "w", "utf-8")
        fh.setFormatter(formatter)
        fh.setLevel(level)
        handlers.append(fh)
    config_logging(handlers, level=level, redirect_warnings=redirect_warnings)
