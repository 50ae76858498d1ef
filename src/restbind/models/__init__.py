from .enums import Method, PathPolicy
from .errors import InvalidBaseURIError, RestBindError, UnsupportedMethodError

__all__ = [
    "InvalidBaseURIError",
    "Method",
    "PathPolicy",
    "RestBindError",
    "UnsupportedMethodError",
]
