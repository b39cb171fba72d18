"""Log Output — one JSON object per line, carrying person-service context fields.

Invariants:
    - Every line has timestamp, level, logger and message
    - person_id, operation, error_code and path appear only when a caller passed them via extra=
    - setup_logging is idempotent: re-running it (e.g. a second lifespan) replaces
      the handler it installed instead of stacking another one

Design Decisions:
    - stdlib logging with a custom Formatter: callers keep using logging.getLogger(__name__)
    - log_format="text" for local runs, anything else is "json"
"""

import logging
import json
from datetime import datetime, timezone

_HANDLER_NAME = "person-service"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    context_fields = ("person_id", "operation", "error_code", "path")

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self._payload(record), ensure_ascii=False)

    def _payload(self, record: logging.LogRecord) -> dict:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            name: getattr(record, name)
            for name in self.context_fields
            if getattr(record, name, None) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return payload


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service's root handler and set the root level."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        if fmt == "text" else JSONFormatter()
    )
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
