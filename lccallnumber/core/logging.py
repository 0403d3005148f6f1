import logging
import logging.config

MAX_LOGGED_VALUE_LENGTH = 64


class CallNumberTruncationFilter(logging.Filter):
    def _shorten(self, value: object) -> object:
        if not isinstance(value, str) or len(value) <= MAX_LOGGED_VALUE_LENGTH:
            return value
        return f"{value[:MAX_LOGGED_VALUE_LENGTH]}...[{len(value)} chars]"

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, tuple):
            record.args = tuple(self._shorten(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._shorten(value) for key, value in record.args.items()}

        return True


def setup_logging() -> None:
    from lccallnumber.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "truncate_values": {
                    "()": "lccallnumber.core.logging.CallNumberTruncationFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["truncate_values"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
            },
        }
    )
