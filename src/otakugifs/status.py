"""HTTP status classification."""

from __future__ import annotations

from enum import Enum


class StatusClass(str, Enum):
    success = "success"
    client_error = "client_error"
    server_error = "server_error"
    unclassified = "unclassified"


def classify_status(status_code: int) -> StatusClass:
    """Map an HTTP status code to the outcome the SDK reports for it."""
    if 200 <= status_code < 300:
        return StatusClass.success
    if 400 <= status_code < 500:
        return StatusClass.client_error
    if status_code >= 500:
        return StatusClass.server_error
    return StatusClass.unclassified
