"""Error taxonomy for the gateway. Every error renders as a JSON ``{error, details?}`` body."""

from typing import Any


class ChatGatewayError(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(ChatGatewayError):
    """A required setting (usually the API key) is missing or invalid."""

    status_code = 500


class SessionNotFoundError(ChatGatewayError):
    status_code = 404

    def __init__(self, session_id: int):
        super().__init__("Session not found")
        self.session_id = session_id


class UpstreamError(ChatGatewayError):
    """The completion API failed (network, quota, malformed response)."""

    status_code = 500

    def __init__(self, details: str):
        super().__init__("Internal server error", details=details)
