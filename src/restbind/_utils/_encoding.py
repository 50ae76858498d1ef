from typing import Any, Iterable, Mapping, Sequence, Tuple, Union
from urllib.parse import urlencode

from httpx import QueryParams

ArgValue = Union[str, Sequence[str]]
Args = Union[Mapping[str, ArgValue], Sequence[Tuple[str, str]], QueryParams, None]


def _iter_pairs(args: Args) -> Iterable[Tuple[str, Any]]:
    if args is None:
        return []
    if isinstance(args, QueryParams):
        return args.multi_items()
    if isinstance(args, Mapping):
        pairs = []
        for key, value in args.items():
            if isinstance(value, (list, tuple)):
                pairs.extend((key, item) for item in value)
            else:
                pairs.append((key, value))
        return pairs
    return list(args)


def encode_args(args: Args) -> str:
    """Serialize an argument set as application/x-www-form-urlencoded.

    Pairs are ordered by key; values sharing a key keep their insertion
    order. ``None`` encodes the same as an empty argument set.

    Args:
        args: Mapping of key to one or many values, a sequence of
            ``(key, value)`` pairs, or ``httpx.QueryParams``.

    Returns:
        str: The encoded string, e.g. ``filter=1&price=200``.
    """
    grouped: dict[str, list[str]] = {}
    for key, value in _iter_pairs(args):
        grouped.setdefault(str(key), []).append(str(value))

    pairs = [(key, value) for key in sorted(grouped) for value in grouped[key]]
    return urlencode(pairs)
