from __future__ import annotations

import json
import logging

from sidebar_nav.core.config import settings


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format="%(message)s")


def build_log_payload(event: str, **fields: object) -> dict:
    payload = {"event": event, "app": settings.APP_NAME}
    payload.update(fields)
    return payload


def log_json(logger: logging.Logger, payload: dict, level: int = logging.INFO) -> None:
    if not logger.isEnabledFor(level):
        return
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
