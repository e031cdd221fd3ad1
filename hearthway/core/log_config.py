from logging.config import dictConfig

from hearthway.core.config import settings


def configure_logging(level: str | None = None):
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "hearthway": {
                "handlers": ["console"],
                "level": (level or settings.LOG_LEVEL).upper(),
                "propagate": False,
            },
        },
    })
