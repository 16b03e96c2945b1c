"""Error taxonomy surfaced by the question pipeline."""

from __future__ import annotations


class WyrError(Exception):
    """Base class for failures that end a request without a question pair."""

    status_code = 500
    message = "Unexpected server error."


class RequestShapeError(WyrError):
    """The inbound call was rejected before any processing (e.g. not a POST)."""

    status_code = 405
    message = "Method Not Allowed"

    def __init__(self, method: str) -> None:
        super().__init__(f"Method {method} is not allowed.")
        self.method = method


class ConfigurationError(WyrError):
    """A required setting such as the API key is missing."""

    status_code = 500
    message = "Server configuration error: API key not set."


class ServiceError(WyrError):
    """The generation service failed or replied without usable content."""

    status_code = 502
    message = "Error generating question from AI."

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
