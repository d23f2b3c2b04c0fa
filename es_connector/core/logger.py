import logging
from logging import config as logging_config

LOG_FORMAT = "[%(asctime)s | %(levelname)s]: %(message)s"
LOG_DATEFMT = "%m.%d.%Y %H:%M:%S"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": LOG_FORMAT, "datefmt": LOG_DATEFMT},
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "es_connector": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}

logger = logging.getLogger("es_connector")


def setup_logging() -> None:
    logging_config.dictConfig(LOGGING)
