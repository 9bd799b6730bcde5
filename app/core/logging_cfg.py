"""
Logs del endpoint /dialogflow/session/ por stdout, una línea por evento.

Los servicios loguean con extra={"session": ..., "intent": ...}; esos campos
se agregan al final de la línea como JSON compacto para poder seguir un
request (intent detectado, fallback al LLM, error devuelto).
El ruido de los clientes HTTP y gRPC de Google queda en WARNING.
"""

import json
import logging
from logging.config import dictConfig

from app.settings import settings


class DetailedFormatter(logging.Formatter):
    """
    Formatter que agrega los campos de `extra={...}` como JSON
    después del mensaje principal.
    """

    # Atributos estándar de LogRecord que no son "extra"
    STANDARD_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "exc_info",
        "exc_text", "stack_info", "asctime", "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        base_message = super().format(record)

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.STANDARD_ATTRS and not key.startswith("_")
        }
        if not extra_fields:
            return base_message

        try:
            extra_json = json.dumps(extra_fields, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            return base_message
        return f"{base_message} {extra_json}"


def configure_logging(debug: bool | None = None) -> None:
    level = "DEBUG" if (settings.DEBUG if debug is None else debug) else "INFO"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "()": DetailedFormatter,
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["stdout"],
            },
            "loggers": {
                "urllib3": {"level": "WARNING"},
                "requests": {"level": "WARNING"},
                "google": {"level": "WARNING"},
                "grpc": {"level": "WARNING"},
            },
        }
    )

    logging.getLogger(__name__).debug("Chatbot logging ready at %s", level)
