"""Query-string construction for the /records endpoint."""
from typing import Iterable, Sequence, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

QueryValue = Union[str, int, Sequence[Union[str, int]]]


def encode_query(params: Iterable[tuple[str, QueryValue]]) -> str:
    """Encode scalar and repeated keys, keeping insertion order.

    A sequence value emits the key once per element. Square brackets are
    left unescaped so array keys read as ``color[]=red``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params:
        if isinstance(value, (list, tuple)):
            pairs.extend((key, str(v)) for v in value)
        else:
            pairs.append((key, str(value)))
    return urlencode(pairs, safe="[]")


def add_query(url: str, params: Iterable[tuple[str, QueryValue]]) -> str:
    """Append params to url, after any query the url already carries."""
    scheme, netloc, path, query, fragment = urlsplit(url)
    existing = parse_qsl(query, keep_blank_values=True)
    merged = encode_query([*existing, *params])
    return urlunsplit((scheme, netloc, path, merged, fragment))
