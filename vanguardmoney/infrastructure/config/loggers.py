import logging.config
from copy import deepcopy
from typing import Any
from typing import Final

from vanguardmoney.infrastructure.types import LogHandler
from vanguardmoney.infrastructure.types import LogLevel

LOGGER_VANGUARDMONEY: Final[str] = "vanguardmoney"

default_conf: Final[dict[str, Any]] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "message": {
            "format": "%(message)s",
        },
        "rich": {
            # RichHandler only honours 'datefmt'
            "format": "%(message)s",
            "datefmt": "[%X]",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
        "cli": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "message",
            "stream": "ext://sys.stdout",
        },
        "cli_alert": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
        "rich": {
            "class": "rich.logging.RichHandler",
            "formatter": "rich",
            "level": "NOTSET",
            "markup": False,
            "rich_tracebacks": True,
            "show_path": True,
        },
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "loggers": {
        LOGGER_VANGUARDMONEY: {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        "uvicorn": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"],
    },
}


def configure_loggers(level: LogLevel, handlers: list[LogHandler], propagate: bool = False) -> None:
    """Configures the application's loggers with the given level and handlers.

    Only the level of the application logger is changed, while every declared
    logger (root included) is switched to the same handlers.

    Args:
        level: The minimum logging level of the application logger (e.g. "INFO").
        handlers: The handler names to use (e.g. ["console"], ["rich"]).
        propagate: Whether application records should reach ancestor loggers.
    """
    conf = deepcopy(default_conf)

    conf["loggers"][LOGGER_VANGUARDMONEY]["level"] = level
    conf["loggers"][LOGGER_VANGUARDMONEY]["propagate"] = propagate

    for logger in conf["loggers"]:
        conf["loggers"][logger]["handlers"] = handlers
    conf["root"]["handlers"] = handlers

    logging.config.dictConfig(conf)
