"""Exception types and scheme constants shared across the package."""

SCHEME = "xrpc"
SCHEME_UNENCRYPTED = "xrpc-unencrypted"

PREFIX_SCHEME = SCHEME + ":"
PREFIX_SCHEME_UNENCRYPTED = SCHEME_UNENCRYPTED + ":"

KIND = "XRPC-URI"
KIND_UNENCRYPTED = "XRPC-unencrypted-URI"

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(text: str) -> str:
    """Return *text* in double quotes with non-printable characters escaped."""
    pieces = []
    for ch in text:
        if ch in _SIMPLE_ESCAPES:
            pieces.append(_SIMPLE_ESCAPES[ch])
        elif ch.isprintable():
            pieces.append(ch)
        elif ord(ch) < 0x80:
            pieces.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            pieces.append(f"\\u{ord(ch):04x}")
        else:
            pieces.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(pieces) + '"'


def _kind_of(uri: str) -> str:
    """Name the kind of URI for use in error messages."""
    return KIND_UNENCRYPTED if uri.startswith(PREFIX_SCHEME_UNENCRYPTED) else KIND


class XRPCURIError(ValueError):
    """Base class for every error raised by this package."""

    default_message = "xrpcuri: invalid uri"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class EmptyURIError(XRPCURIError):
    """The URI was empty."""

    default_message = "xrpcuri: empty uri"


class EmptyAuthorityError(XRPCURIError):
    """The authority of a URI was empty."""

    default_message = "xrpcuri: empty authority"


class AtSignInAuthorityError(XRPCURIError):
    """The authority of a URI contained an at sign."""

    default_message = 'xrpcuri: authority may not have an "@" in it'


class InvalidNSIDError(XRPCURIError):
    """An identifier was not a valid NSID."""

    default_message = "nsid: invalid nsid"