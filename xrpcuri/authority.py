"""Normalization and validation of the 'authority' part of an XRPC-URI."""

import string

from .errors import AtSignInAuthorityError, EmptyAuthorityError, _kind_of, _quote

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_authority(value: str) -> str:
    """Lower-case the host of an authority, leaving any userinfo as is."""
    userinfo, at_sign, host = value.partition("@")
    if not at_sign:
        return value.translate(_ASCII_LOWER)
    return userinfo + at_sign + host.translate(_ASCII_LOWER)


def validate_authority(authority: str) -> str:
    """Return *authority* if it is valid, else raise an XRPCURIError."""
    if not authority:
        raise EmptyAuthorityError()
    if "@" in authority:
        raise AtSignInAuthorityError()
    return authority


def validate_authority_pretty(authority: str, uri: str) -> str:
    """Validate the authority of *uri*, raising an error that names the whole URI."""
    kind = _kind_of(uri)
    try:
        return validate_authority(authority)
    except EmptyAuthorityError as err:
        raise EmptyAuthorityError(
            f"xrpcuri: {kind} {_quote(uri)} has an empty 'authority'"
        ) from err
    except AtSignInAuthorityError as err:
        raise AtSignInAuthorityError(
            f'xrpcuri: {kind} {_quote(uri)} may not have an "@" in its authority {_quote(authority)}'
        ) from err