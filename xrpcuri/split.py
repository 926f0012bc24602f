"""Splitting an XRPC-URI into its authority, id, query and fragment."""

import re
from typing import NamedTuple
from urllib.parse import unquote_plus

from .errors import KIND, KIND_UNENCRYPTED, SCHEME_UNENCRYPTED, EmptyURIError, XRPCURIError, _quote

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class URIParts(NamedTuple):
    """The parts of an XRPC-URI, none of them normalized."""

    authority: str = ""
    identifier: str = ""
    query: str = ""
    fragment: str = ""


def _boundary(text: str) -> int:
    """Index of the first '/', or failing that '?', or failing that '#'."""
    for separator in "/?#":
        index = text.find(separator)
        if index >= 0:
            return index
    return -1


def _query_unescape(text: str, uri: str) -> str:
    bad = _BAD_ESCAPE.search(text)
    if bad:
        escape = text[bad.start():bad.start() + 3]
        raise XRPCURIError(
            f"xrpcuri: problem hex-decoding URI {_quote(uri)}: invalid URL escape {_quote(escape)}"
        )
    return unquote_plus(text)


def split(uri: str, scheme: str) -> URIParts:
    """Split *uri*, whose scheme must be *scheme* in any case, into its parts."""
    if not uri:
        raise EmptyURIError()

    kind = KIND_UNENCRYPTED if scheme == SCHEME_UNENCRYPTED else KIND

    prefix = scheme + ":"
    if len(uri) < len(prefix) or uri[: len(prefix)].lower() != prefix:
        raise XRPCURIError(
            f"xrpcuri: URI {_quote(uri)} is not an {kind} because it does not begin with {_quote(prefix)}"
        )
    rest = uri[len(prefix):]

    if not rest:
        return URIParts()

    if len(rest) < 2:
        raise XRPCURIError(
            f'xrpcuri: {kind} {_quote(uri)} is not valid because it does not have "//" after "at:" — too short'
        )
    if not rest.startswith("//"):
        raise XRPCURIError(
            f'xrpcuri: {kind} {_quote(uri)} is not valid because it does not have "//" after "at:"'
        )
    rest = rest[2:]

    index = _boundary(rest)
    if index < 0:
        authority, rest = rest, ""
    else:
        authority, rest = rest[:index], rest[index:]
    authority = _query_unescape(authority, uri)

    if rest in ("", "/", "?", "#"):
        return URIParts(authority)

    identifier = ""
    if rest.startswith("/"):
        rest = rest[1:]
        index = _boundary(rest)
        if index < 0:
            identifier, rest = rest, ""
        else:
            identifier, rest = rest[:index], rest[index:]

    if rest in ("", "/", "?", "#"):
        return URIParts(authority, identifier)

    query = ""
    if rest.startswith("?"):
        rest = rest[1:]
        query, hash_sign, after = rest.partition("#")
        rest = hash_sign + after

    if rest in ("", "#"):
        return URIParts(authority, identifier, query)

    fragment = rest[1:] if rest.startswith("#") else ""
    return URIParts(authority, identifier, query, fragment)