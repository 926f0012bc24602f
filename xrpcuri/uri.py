"""Top-level helpers for building and normalizing XRPC-URIs and their parts."""

from . import enc
from .authority import normalize_authority as _normalize_authority
from .nsid import normalize as _normalize_nsid


def join(authority: str, identifier: str, query: str, fragment: str) -> str:
    """Build a normalized XRPC-URI ("xrpc://...") from its parts."""
    return enc.join(authority, identifier, query, fragment)


def normalize_authority(authority: str) -> str:
    """Return the normalized form of an XRPC-URI 'authority'.

    The host is lower-cased; any 'userinfo' is left as is.
    """
    return _normalize_authority(authority)


def normalize_id(identifier: str) -> str:
    """Return the normalized form of an XRPC-URI 'id' (an NSID)."""
    return _normalize_nsid(identifier)