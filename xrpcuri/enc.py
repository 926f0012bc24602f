"""Building, splitting, normalizing and validating XRPC-URIs ("xrpc://...")."""

from . import join as _join
from . import split as _split
from .authority import normalize_authority, validate_authority_pretty
from .errors import PREFIX_SCHEME, SCHEME, EmptyURIError, XRPCURIError, _quote
from .nsid import normalize as normalize_id
from .nsid import validate_id_pretty
from .split import URIParts

LEN_PREFIX_SCHEME = len(PREFIX_SCHEME)

__all__ = [
    "SCHEME",
    "PREFIX_SCHEME",
    "LEN_PREFIX_SCHEME",
    "join",
    "normalize",
    "split",
    "validate",
    "validate_prefix",
    "validate_scheme",
]


def join(authority: str, identifier: str, query: str, fragment: str) -> str:
    """Build a normalized XRPC-URI from its parts."""
    return _join.join(SCHEME, authority, identifier, query, fragment)


def split(uri: str) -> URIParts:
    """Split an XRPC-URI into its authority, id, query and fragment, unnormalized."""
    return _split.split(uri, SCHEME)


def normalize(uri: str) -> str:
    """Return the normalized form of an XRPC-URI.

    The URI is not validated; anything that cannot be split is returned as is.
    """
    try:
        validate_scheme(uri)
        parts = split(uri)
    except XRPCURIError:
        return uri
    return join(
        normalize_authority(parts.authority),
        normalize_id(parts.identifier),
        parts.query,
        parts.fragment,
    )


def validate_scheme(uri: str) -> str:
    """Check only that *uri* begins with "xrpc:" in any case; return *uri*."""
    if not uri:
        raise EmptyURIError()
    if len(uri) < LEN_PREFIX_SCHEME or uri[:LEN_PREFIX_SCHEME].lower() != PREFIX_SCHEME:
        raise XRPCURIError(
            f"xrpcuri: URI {_quote(uri)} is not an XRPC-URI because it does not "
            f"begin with {_quote(PREFIX_SCHEME)}"
        )
    return uri


def validate_prefix(uri: str) -> str:
    """Check only that *uri* begins with "xrpc://"; return *uri*."""
    validate_scheme(uri)
    rest = uri[LEN_PREFIX_SCHEME:]
    if len(rest) < 2:
        raise XRPCURIError(
            f'xrpcuri: XRPC-URI {_quote(uri)} is not valid because it does not have "//" '
            f'after "xrpc:" — too short'
        )
    if not rest.startswith("//"):
        raise XRPCURIError(
            f'xrpcuri: XRPC-URI {_quote(uri)} is not valid because it does not have "//" '
            f'after "xrpc:"'
        )
    return uri


def validate(uri: str) -> str:
    """Fully validate an XRPC-URI; return it, or raise an XRPCURIError."""
    validate_prefix(uri)
    parts = split(uri)
    validate_authority_pretty(parts.authority, uri)
    validate_id_pretty(parts.identifier, uri)
    return uri