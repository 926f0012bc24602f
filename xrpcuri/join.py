"""Building an XRPC-URI from its parts."""

from .authority import normalize_authority
from .nsid import normalize
from .resolve import _escape_authority, _escape_id, _escape_query


def _to_ascii(authority: str) -> str:
    """Punycode-encode each non-ASCII label of *authority*."""
    labels = []
    for label in authority.split("."):
        if label.isascii():
            labels.append(label)
            continue
        try:
            labels.append("xn--" + label.encode("punycode").decode("ascii"))
        except UnicodeError:
            return authority
    return ".".join(labels)


def join(scheme: str, authority: str, identifier: str, query: str, fragment: str) -> str:
    """Build a normalized URI of *scheme* from its parts."""
    authority = normalize_authority(authority)
    identifier = normalize(identifier)

    result = scheme + "://"
    if authority:
        result += _escape_authority(_to_ascii(authority))
    if identifier:
        result += "/" + _escape_id(identifier)
    if query:
        result += "?" + _escape_query(query)
    if fragment:
        result += "#" + fragment
    return result