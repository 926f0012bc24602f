import pytest

from xrpcuri.errors import EmptyURIError, XRPCURIError
from xrpcuri.split import URIParts, split


@pytest.mark.parametrize(
    "uri, expected",
    [
        ("xrpc:", URIParts()),
        ("XrPc:", URIParts()),
        ("xrpc://", URIParts()),
        ("XRPC://", URIParts()),
        ("xrpc://Example.COM", URIParts("Example.COM")),
        ("xRpC://Example.COM/", URIParts("Example.COM")),
        ("xrpc://Example.COM/APP.Cherry.fooBar", URIParts("Example.COM", "APP.Cherry.fooBar")),
        (
            "XRPC://Example.COM/APP.Cherry.fooBar?actor=JoeBlow&sort=desc",
            URIParts("Example.COM", "APP.Cherry.fooBar", "actor=JoeBlow&sort=desc"),
        ),
        (
            "xrpc://example.com/app.cherry.fooBar#wXyZ123",
            URIParts("example.com", "app.cherry.fooBar", "", "wXyZ123"),
        ),
        (
            "xrpc://example.com/app.cherry.fooBar?actor=joeblow&sort=desc#wXyZ123",
            URIParts("example.com", "app.cherry.fooBar", "actor=joeblow&sort=desc", "wXyZ123"),
        ),
        (
            "xrpc://host.example/once.twice.thrice.fource.someThing",
            URIParts("host.example", "once.twice.thrice.fource.someThing"),
        ),
        (
            "xrpc://Host.EXAMPLE/apple.BANANA.Cherry.dAtE/wxyZ",
            URIParts("Host.EXAMPLE", "apple.BANANA.Cherry.dAtE"),
        ),
    ],
)
def test_split(uri, expected):
    assert split(uri, "xrpc") == expected


def test_split_unpacks_into_four_parts():
    authority, identifier, query, fragment = split(
        "xrpc://public.api.bsky.app/app.bsky.actor.getProfile?actor=reiver.bsky.social", "xrpc"
    )
    assert (authority, identifier, query, fragment) == (
        "public.api.bsky.app",
        "app.bsky.actor.getProfile",
        "actor=reiver.bsky.social",
        "",
    )


def test_split_unencrypted_scheme():
    parts = split("xrpc-unencrypted://localhost/app.bsky.actor.getProfile", "xrpc-unencrypted")
    assert parts.authority == "localhost"
    assert parts.identifier == "app.bsky.actor.getProfile"


def test_split_unescapes_authority():
    assert split("xrpc://a%2Fb/com.example.fooBar", "xrpc").authority == "a/b"


def test_split_plus_in_authority_becomes_space():
    assert split("xrpc://a+b", "xrpc").authority == "a b"


def test_split_empty_uri():
    with pytest.raises(EmptyURIError) as info:
        split("", "xrpc")
    assert str(info.value) == "xrpcuri: empty uri"


@pytest.mark.parametrize(
    "uri",
    ["http://example.com", "x", "xrpc", "xrpc-", "xrpc-unencrypted", "xrpc-unencrypted:", ":", "xrp:", "xrpc-:"],
)
def test_split_wrong_scheme(uri):
    with pytest.raises(XRPCURIError) as info:
        split(uri, "xrpc")
    assert str(info.value) == (
        f'xrpcuri: URI "{uri}" is not an XRPC-URI because it does not begin with "xrpc:"'
    )


def test_split_missing_slashes():
    with pytest.raises(XRPCURIError) as info:
        split("xrpc:example.com", "xrpc")
    assert "does not have \"//\"" in str(info.value)
    assert "too short" not in str(info.value)


def test_split_too_short_after_scheme():
    with pytest.raises(XRPCURIError) as info:
        split("xrpc:/", "xrpc")
    assert str(info.value).endswith("too short")


def test_split_bad_escape():
    with pytest.raises(XRPCURIError) as info:
        split("xrpc://a%zz", "xrpc")
    assert "problem hex-decoding" in str(info.value)