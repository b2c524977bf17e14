"""Logging helpers shared by every xsdgen module.

Library modules only ask for a logger; handlers are installed by the
application through :func:`setup_logging`.
"""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "xsdgen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` (normally the caller's ``__name__``)."""
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.INFO, use_rich: bool = True) -> None:
    """Attach a handler to the package logger.

    Args:
        level: Logging level for the package logger.
        use_rich: Use rich's console handler instead of a plain stream handler.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if _configured:
        return

    if use_rich:
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s:%(name)s:%(message)s")
        )

    logger.addHandler(handler)
    _configured = True
