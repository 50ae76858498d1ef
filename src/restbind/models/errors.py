from typing import Any


class RestBindError(Exception):
    """Base class for errors raised while building requests."""


class InvalidBaseURIError(RestBindError, ValueError):
    def __init__(self, base_url: str, message: str | None = None):
        self.base_url = base_url
        self.message = (
            message
            or f"Invalid base URI {base_url!r}: an absolute URI with a scheme and host is required."
        )
        super().__init__(self.message)


class UnsupportedMethodError(RestBindError, ValueError):
    def __init__(self, method: Any, message: str | None = None):
        self.method = method
        self.message = message or f"Unsupported HTTP method: {method!r}"
        super().__init__(self.message)
