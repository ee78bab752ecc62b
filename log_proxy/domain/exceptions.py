"""Domain errors raised while ingesting log messages."""

USAGE_HINT = (
    'Send JSON with "message" field and optional "level" field '
    "(INFO, WARN, ERROR, DEBUG)"
)


class LogProxyError(Exception):
    """Base class for log proxy errors."""


class MessageRequiredError(LogProxyError):
    """Raised when a request carries no usable message."""

    def __init__(self, usage: str = USAGE_HINT):
        super().__init__("Message is required")
        self.usage = usage


class PayloadTooLargeError(LogProxyError):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, limit: int):
        super().__init__(f"Request body exceeds {limit} bytes")
        self.limit = limit
