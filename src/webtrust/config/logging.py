"""Root logger setup for the webtrust CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Third-party loggers that log every request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpx_retries")


def level_for(*, verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger through ``logging.basicConfig``.

    Below DEBUG the per-request records of the HTTP stack are raised to WARNING,
    so INFO output only shows reconciliation steps. ``force=True`` replaces
    handlers installed by an earlier call.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    chatty_level = logging.NOTSET if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)
