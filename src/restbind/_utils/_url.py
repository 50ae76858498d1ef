import re
from typing import Optional

from httpx import URL

from ..models.enums import PathPolicy

_SEPARATOR_RUN = re.compile(r"/{2,}")


def join_path(base_path: str, resource: str) -> str:
    """Append ``resource`` to ``base_path`` as a segment, collapsing repeated slashes."""
    if not resource:
        return base_path or "/"
    return _SEPARATOR_RUN.sub("/", f"/{base_path}/{resource}")


def replace_path(resource: str) -> str:
    """Use ``resource`` as the whole path, ignoring any base prefix."""
    if not resource.startswith("/"):
        resource = f"/{resource}"
    return resource


def _raw_base_path(base_url: URL) -> str:
    # httpx decodes URL.path; the joined path must keep the escapes as written
    return base_url.raw_path.decode("ascii").partition("?")[0]


def resolve_url(
    base_url: URL,
    resource: str,
    policy: PathPolicy,
    query: Optional[str] = None,
) -> URL:
    """Combine the base URI with a resource path and an encoded query.

    The resource path is used as given, it is not re-escaped. The base
    URI's own query and fragment never carry over. An empty ``query``
    leaves ``URL.query`` empty without rendering a trailing ``?``.
    """
    if policy is PathPolicy.JOIN:
        path = join_path(_raw_base_path(base_url), resource)
    else:
        path = replace_path(resource)

    return base_url.copy_with(
        path=path,
        query=query.encode("ascii") if query else None,
        fragment=None,
    )
