import pytest

from xrpcuri.authority import normalize_authority
from xrpcuri.join import join
from xrpcuri.nsid import normalize
from xrpcuri.split import URIParts, split


@pytest.mark.parametrize(
    "authority, identifier, query, fragment, expected",
    [
        ("example.com", "app.cherry.fooBar", "", "", "xrpc://example.com/app.cherry.fooBar"),
        (
            "example.com",
            "app.cherry.fooBar",
            "actor=joeblow&sort=desc",
            "",
            "xrpc://example.com/app.cherry.fooBar?actor=joeblow&sort=desc",
        ),
        ("example.com", "app.cherry.fooBar", "", "wXyZ123", "xrpc://example.com/app.cherry.fooBar#wXyZ123"),
        (
            "host.example",
            "once.twice.thrice.fource.someThing",
            "",
            "",
            "xrpc://host.example/once.twice.thrice.fource.someThing",
        ),
        ("", "", "", "", "xrpc://"),
    ],
)
def test_join(authority, identifier, query, fragment, expected):
    assert join("xrpc", authority, identifier, query, fragment) == expected


def test_join_uses_given_scheme():
    result = join("xrpc-unencrypted", "example.com", "net.something.fooBar", "", "")
    assert result == "xrpc-unencrypted://example.com/net.something.fooBar"


@pytest.mark.parametrize(
    "authority, identifier, query, fragment",
    [
        ("Example.COM", "COM.Example.fooBar", "actor=JoeBlow", "frag"),
        ("VIDEO.archive.ORG", "app.bsky.actor.getProfile", "", ""),
        ("host.example", "apple.BANANA.Cherry.dAtE", "a=1&b=2", ""),
    ],
)
def test_join_then_split_round_trip(authority, identifier, query, fragment):
    joined = join("xrpc", authority, identifier, query, fragment)
    assert split(joined, "xrpc") == URIParts(
        normalize_authority(authority), normalize(identifier), query, fragment
    )


def test_join_escapes_reserved_characters_in_authority():
    joined = join("xrpc", "a/b?c#d", "com.example.fooBar", "", "")
    assert split(joined, "xrpc").authority == "a/b?c#d"
    assert split(joined, "xrpc").identifier == "com.example.fooBar"


def test_join_escapes_number_sign_in_query():
    joined = join("xrpc", "example.com", "com.example.fooBar", "a#b", "")
    parts = split(joined, "xrpc")
    assert "#" not in joined
    assert parts.fragment == ""


def test_join_punycodes_unicode_authority():
    assert join("xrpc", "bücher.example", "", "", "") == "xrpc://xn--bcher-kva.example"


def test_join_is_stable_under_repeat():
    first = join("xrpc", "Example.COM", "COM.Example.fooBar", "q=1", "f")
    parts = split(first, "xrpc")
    assert join("xrpc", *parts) == first