# src/tracking_webhook/api/errors.py
from __future__ import annotations

from typing import Any, Dict


class WebhookError(RuntimeError):
    """Base for every failure the handler turns into a JSON error response."""

    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"meta": {"code": self.status_code, "message": self.message}}


class MethodNotAllowed(WebhookError):
    status_code = 405

    def __init__(self, method: str | None = None) -> None:
        super().__init__("Method Not Allowed")
        self.method = method

    def to_body(self) -> Dict[str, Any]:
        # Aggregator expects a bare error key here, not the meta envelope.
        return {"error": self.message}


class InvalidBody(WebhookError):
    status_code = 400

    def __init__(self, reason: str = "") -> None:
        super().__init__("Missing tracking_number")
        self.reason = reason


class NotFound(WebhookError):
    status_code = 404

    def __init__(self, tracking_number: str = "") -> None:
        super().__init__("Tracking not found")
        self.tracking_number = tracking_number


class InternalError(WebhookError):
    status_code = 500

    def __init__(self, cause: object = "") -> None:
        super().__init__(f"Internal Server Error: {cause}")
        self.cause = cause


class UpstreamFetchError(InternalError):
    """The sheet export could not be fetched (network error or non-2xx)."""


__all__ = [
    "WebhookError",
    "MethodNotAllowed",
    "InvalidBody",
    "NotFound",
    "InternalError",
    "UpstreamFetchError",
]
