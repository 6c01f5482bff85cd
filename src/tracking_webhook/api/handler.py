# src/tracking_webhook/api/handler.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional
import json
import logging

from tracking_webhook.models import EnvCfg
from tracking_webhook.parsing import parse_csv

from .errors import InternalError, InvalidBody, MethodNotAllowed, NotFound, WebhookError
from .normalize import normalize_row
from .sheet import SheetCsvClient, SheetSource
from .transport import RequestsTransport

logger = logging.getLogger("tracking_webhook.api.handler")

JSON_HEADERS = {"Content-Type": "application/json"}


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body),
    }


def validate_request(event: Dict[str, Any]) -> str:
    """
    Return the requested tracking number or raise.

    MethodNotAllowed unless httpMethod is exactly "POST". InvalidBody when the
    body is not a JSON object with a non-empty string `tracking_number`.
    """
    method = event.get("httpMethod")
    if method != "POST":
        raise MethodNotAllowed(method)

    raw = event.get("body")
    if raw is None:
        raise InvalidBody("empty body")
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise InvalidBody(f"body is not JSON: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidBody("body is not a JSON object")

    tracking_number = payload.get("tracking_number")
    if not isinstance(tracking_number, str) or not tracking_number:
        raise InvalidBody("tracking_number missing or empty")
    return tracking_number


def lookup_tracking(
    tracking_number: str,
    source: SheetSource,
    *,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Fetch the sheet, find the row for `tracking_number` and return the 200 payload."""
    logger.info("Looking for tracking number: %s", tracking_number)

    sheet = parse_csv(source.fetch_csv())
    logger.debug("CSV headers: %s", list(sheet.headers))

    row = sheet.find_row(tracking_number)
    if row is None:
        logger.info("Tracking number not found: %s", tracking_number)
        raise NotFound(tracking_number)
    logger.debug("Found tracking data: %s", row)

    return normalize_row(row, tracking_number=tracking_number, now=now).to_payload()


def _default_source(cfg: EnvCfg) -> SheetCsvClient:
    return SheetCsvClient(
        cfg.SHEET_CSV_URL,
        RequestsTransport(timeout=cfg.SHEET_FETCH_TIMEOUT),
    )


def handler(
    event: Dict[str, Any],
    *,
    cfg: Optional[EnvCfg] = None,
    source: Optional[SheetSource] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Serverless-style entry point: {httpMethod, body} in, {statusCode, headers, body} out.

    Every failure is rendered as a JSON error response; nothing is raised.
    """
    try:
        tracking_number = validate_request(event)

        if source is None:
            if cfg is None:
                # Lazy import keeps dotenv discovery out of module import
                from tracking_webhook.config.env import get_app_env
                cfg = get_app_env(dotenv_path=None, strict=False)
            source = _default_source(cfg)

        payload = lookup_tracking(tracking_number, source, now=now)
    except WebhookError as e:
        if e.status_code >= 500:
            logger.error("Lookup failed: %s", e.message)
        else:
            logger.info("Rejected request (%s): %s", e.status_code, e.message)
        return _response(e.status_code, e.to_body())
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        err = InternalError(e)
        return _response(err.status_code, err.to_body())

    logger.debug("Sending response: %s", payload)
    return _response(200, payload)


__all__ = ["handler", "lookup_tracking", "validate_request", "JSON_HEADERS"]
