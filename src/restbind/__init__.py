"""Build ready-to-send HTTP requests against a fixed base URI.

Rather than composing URLs, query strings and form bodies by hand, create a
:class:`Service` for the API and let it build each request::

    svc = Service("http://example.com")
    spec = svc.request(Method.GET, "/categories/1", {"filter": "1", "price": "200"})

    with httpx.Client() as client:
        response = client.send(spec.to_httpx())
"""

from ._config import ServiceConfig
from ._services import Service
from ._utils import RequestSpec, encode_args
from .models import (
    InvalidBaseURIError,
    Method,
    PathPolicy,
    RestBindError,
    UnsupportedMethodError,
)

__all__ = [
    "InvalidBaseURIError",
    "Method",
    "PathPolicy",
    "RequestSpec",
    "RestBindError",
    "Service",
    "ServiceConfig",
    "UnsupportedMethodError",
    "encode_args",
]
