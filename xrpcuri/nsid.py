"""Normalization and validation of NSIDs, the 'id' part of an XRPC-URI."""

import string

from .errors import InvalidNSIDError, _kind_of, _quote

_MAX_LENGTH = 317
_MAX_SEGMENT_LENGTH = 63

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_AUTHORITY_CHARS = frozenset(string.ascii_lowercase + string.digits + "-")
_NAME_CHARS = frozenset(string.ascii_letters + string.digits)


def normalize(value: str) -> str:
    """Lower-case the domain authority of an NSID, leaving its name as is."""
    authority, dot, name = value.rpartition(".")
    if not dot:
        return value.translate(_ASCII_LOWER)
    return authority.translate(_ASCII_LOWER) + dot + name


def _rune(ch: str) -> str:
    return "'\\''" if ch == "'" else f"'{ch}'"


def validate(value: str) -> str:
    """Return *value* if it is a valid NSID, else raise InvalidNSIDError."""
    if not value:
        raise InvalidNSIDError("nsid: empty nsid")

    quoted = _quote(value)
    if len(value) > _MAX_LENGTH:
        raise InvalidNSIDError(
            f"nsid: nsid ({quoted}) is too long: it may have at most "
            f"{_MAX_LENGTH} characters but actually has {len(value)}"
        )

    segments = value.split(".")
    if len(segments) < 3:
        raise InvalidNSIDError(
            f"nsid: nsid ({quoted}) should have at least 3 segments "
            f"but actually has {len(segments)}"
        )

    *authority_parts, name = segments
    domain_authority = ".".join(authority_parts)
    context = f"of domain-authority ({_quote(domain_authority)}) of nsid ({quoted})"

    for part_index, part in enumerate(authority_parts):
        where = f"domain-authority part №{part_index} ({_quote(part)}) {context}"
        if not part:
            raise InvalidNSIDError(f"nsid: {where} is empty")
        if len(part) > _MAX_SEGMENT_LENGTH:
            raise InvalidNSIDError(
                f"nsid: {where} is longer than {_MAX_SEGMENT_LENGTH} characters"
            )
        for char_index, ch in enumerate(part):
            if ch not in _AUTHORITY_CHARS:
                raise InvalidNSIDError(
                    f"nsid: character №{char_index} ({_rune(ch)}) (U+{ord(ch):04X}) "
                    f"of {where} is not a digit ('0'-'9'), lower-case letter ('a'-'z'), "
                    f"or a hyphen ('-')"
                )
        if part.startswith("-") or part.endswith("-"):
            raise InvalidNSIDError(f"nsid: {where} may not begin or end with a hyphen ('-')")

    if authority_parts[0][0].isdigit():
        raise InvalidNSIDError(
            f"nsid: domain-authority part №0 ({_quote(authority_parts[0])}) {context} "
            f"may not begin with a digit"
        )

    name_where = f"name ({_quote(name)}) of nsid ({quoted})"
    if not name:
        raise InvalidNSIDError(f"nsid: {name_where} is empty")
    if len(name) > _MAX_SEGMENT_LENGTH:
        raise InvalidNSIDError(
            f"nsid: {name_where} is longer than {_MAX_SEGMENT_LENGTH} characters"
        )
    for char_index, ch in enumerate(name):
        if ch not in _NAME_CHARS:
            raise InvalidNSIDError(
                f"nsid: character №{char_index} ({_rune(ch)}) (U+{ord(ch):04X}) "
                f"of {name_where} is not a digit ('0'-'9') or a letter ('a'-'z', 'A'-'Z')"
            )
    if name[0].isdigit():
        raise InvalidNSIDError(f"nsid: {name_where} may not begin with a digit")

    return value


def validate_id_pretty(identifier: str, uri: str) -> str:
    """Validate the 'id' of *uri*, raising an error that names the whole URI."""
    try:
        return validate(identifier)
    except InvalidNSIDError as err:
        raise InvalidNSIDError(
            f"xrpcuri: {_kind_of(uri)} {_quote(uri)} has an id {_quote(identifier)} "
            f"that is not a valid NSID: {err}"
        ) from err