from logging.config import dictConfig


def setup_logging(level: str = "INFO") -> None:
    """Настройка логирования приложения"""
    dictConfig(
        {
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
                "documents_api": {"level": level, "handlers": ["console"], "propagate": True},
                "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            },
        }
    )
