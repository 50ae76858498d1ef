from ._encoding import Args, encode_args
from ._request_spec import RequestSpec
from ._url import join_path, replace_path, resolve_url

__all__ = [
    "Args",
    "RequestSpec",
    "encode_args",
    "join_path",
    "replace_path",
    "resolve_url",
]
