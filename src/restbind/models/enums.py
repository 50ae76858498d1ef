"""HTTP method and URL-combination enums."""

from enum import Enum
from typing import Any

from .errors import UnsupportedMethodError


class Method(str, Enum):
    """HTTP methods supported by the request builder.

    The member value is the canonical wire name sent on the request line.
    """

    GET = "GET"
    POST = "POST"
    HEAD = "HEAD"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "Method":
        """Convert a member, wire name or legacy ordinal into a Method.

        Ordinals follow declaration order (0 is GET, 5 is PATCH).

        Raises:
            UnsupportedMethodError: If the value names no known method.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                raise UnsupportedMethodError(value) from None
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        raise UnsupportedMethodError(value)


class PathPolicy(str, Enum):
    """How a resource path is combined with the base URI path."""

    REPLACE = "replace"
    JOIN = "join"
