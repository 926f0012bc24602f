"""Resolving XRPC-URIs into HTTP(S) or WebSocket URLs."""

from typing import Callable, Optional, Tuple

from .errors import XRPCURIError
from .nsid import normalize

_ESCAPES = {"%": "%25", "#": "%23", "?": "%3F", "/": "%2F", "@": "%40"}


def _escape_table(chars: str) -> dict:
    return {ord(ch): _ESCAPES[ch] for ch in chars}


_AUTHORITY_TABLE = _escape_table("%#?/@")
_ID_TABLE = _escape_table("%#?/")
_QUERY_TABLE = _escape_table("%#")


def _escape_authority(text: str) -> str:
    return text.translate(_AUTHORITY_TABLE)


def _escape_id(text: str) -> str:
    return text.translate(_ID_TABLE)


def _escape_query(text: str) -> str:
    return text.translate(_QUERY_TABLE)


def resolve_id(identifier: str) -> str:
    """Turn an NSID into the HTTP path that serves it, or "" for an empty id."""
    if not identifier:
        return ""
    return "/xrpc/" + _escape_id(normalize(identifier))


Splitter = Callable[[str], Tuple[str, str, str, str]]


def resolve(uri: str, splitter: Optional[Splitter], scheme: str) -> str:
    """Split *uri* with *splitter* and rebuild it as a *scheme* URL."""
    if splitter is None:
        raise XRPCURIError("xrpcuri: nil func")

    authority, identifier, query, fragment = splitter(uri)

    result = f"{scheme}://{_escape_authority(authority)}{resolve_id(identifier)}"
    if query:
        result += "?" + _escape_query(query)
    if fragment:
        result += "#" + fragment
    return result