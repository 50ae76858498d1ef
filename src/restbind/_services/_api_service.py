from logging import getLogger
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from httpx import URL, Headers, InvalidURL

from .._config import ServiceConfig
from .._utils import Args, RequestSpec, encode_args, resolve_url
from .._utils.constants import (
    CONTENT_TYPE_FORM_URLENCODED,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    LOGGER_NAME,
)
from ..models.enums import Method, PathPolicy
from ..models.errors import InvalidBaseURIError, UnsupportedMethodError

HeaderTypes = Union[Headers, Mapping[str, str], Sequence[Tuple[str, str]]]


class Service:
    """Builds HTTP requests against a fixed base URI.

    ``headers`` is a public, mutable ``httpx.Headers`` set. Every built
    request takes its own snapshot of it, so the caller may change it
    between calls. No locking is done: do not mutate it while another
    thread is building a request from the same Service.

    Examples:
        ```python
        from restbind import Method, Service

        svc = Service("http://example.com")
        svc.headers["Authorization"] = "Bearer token"

        spec = svc.request(Method.GET, "/categories/1", {"filter": "1", "price": "200"})
        # spec.url == "http://example.com/categories/1?filter=1&price=200"

        spec = svc.request(Method.POST, "/categories/1", {"filter": "1", "price": "200"})
        # spec.content == b"filter=1&price=200"
        ```
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: Optional[HeaderTypes] = None,
        path_policy: Union[PathPolicy, str] = PathPolicy.REPLACE,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)

        try:
            url = URL(base_url)
        except InvalidURL as e:
            raise InvalidBaseURIError(base_url) from e
        if not url.is_absolute_url:
            raise InvalidBaseURIError(base_url)

        self.base_url = url
        self.headers = Headers(headers)
        self.path_policy = PathPolicy(path_policy)

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "Service":
        headers: list[tuple[str, str]] = []
        for name, value in config.headers.items():
            values = value if isinstance(value, list) else [value]
            headers.extend((name, item) for item in values)

        return cls(config.base_url, headers=headers, path_policy=config.path_policy)

    def request(
        self,
        method: Union[Method, str, int],
        resource: str,
        args: Args = None,
    ) -> RequestSpec:
        """Build a request for ``resource`` with ``args`` encoded for ``method``.

        For POST the arguments become a form-urlencoded body and the
        ``Content-Type`` and ``Content-Length`` headers are set. For every
        other supported method they become the URL query and no body is
        attached.

        Args:
            method: A Method member, its wire name or its legacy ordinal.
            resource: Resource path, combined with the base URI according
                to ``path_policy``. It is not re-escaped.
            args: Argument set; ``None`` is the same as empty.

        Returns:
            RequestSpec: The built request.

        Raises:
            UnsupportedMethodError: If ``method`` is not a supported method.
        """
        http_method = Method.parse(method)
        encoded = encode_args(args)
        headers = Headers(self.headers)

        if http_method in (
            Method.GET,
            Method.HEAD,
            Method.PUT,
            Method.DELETE,
            Method.PATCH,
        ):
            url = resolve_url(self.base_url, resource, self.path_policy, encoded)
            content = None
        elif http_method is Method.POST:
            url = resolve_url(self.base_url, resource, self.path_policy)
            content = encoded.encode("ascii")
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_FORM_URLENCODED
            headers[HEADER_CONTENT_LENGTH] = str(len(content))
        else:
            raise UnsupportedMethodError(method)

        spec = RequestSpec(
            method=http_method.value, url=url, headers=headers, content=content
        )
        self._log_spec(spec)
        return spec

    def request_with_body(
        self,
        method: Any,
        resource: str,
        content_type: str,
        data: Union[bytes, bytearray, memoryview, str],
    ) -> RequestSpec:
        """Build a request whose body is ``data`` verbatim.

        The method is not validated here; a value that is not a Method
        member is passed on as ``str(method)`` and left for the transport
        to accept or reject.
        """
        wire_method = method.value if isinstance(method, Method) else str(method)
        if isinstance(data, str):
            content = data.encode("utf-8")
        elif isinstance(data, (bytes, bytearray, memoryview)):
            content = bytes(data)
        else:
            raise TypeError(
                f"data must be bytes or str, not {type(data).__name__}"
            )

        headers = Headers(self.headers)
        headers[HEADER_CONTENT_TYPE] = content_type
        headers[HEADER_CONTENT_LENGTH] = str(len(content))

        spec = RequestSpec(
            method=wire_method,
            url=resolve_url(self.base_url, resource, self.path_policy),
            headers=headers,
            content=content,
        )
        self._log_spec(spec)
        return spec

    def _log_spec(self, spec: RequestSpec) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {dict(spec.headers)}")
