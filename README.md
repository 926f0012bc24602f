# xrpcuri

Tools for working with XRPC-URIs, such as:

    xrpc://public.api.bsky.app/app.bsky.actor.getProfile?actor=alice.example.com

An XRPC-URI has an *authority* (a host name), an *id* (an NSID, a
namespaced identifier), an optional *query* and an optional *fragment*.

The package has no dependencies outside the standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `xrpcuri.uri` – top-level helpers: `join`, `normalize_authority`, `normalize_id`.
- `xrpcuri.enc` – the `xrpc:` scheme: `join`, `split`, `normalize`,
  `validate`, `validate_prefix`, `validate_scheme`, and the constants
  `SCHEME`, `PREFIX_SCHEME`, `LEN_PREFIX_SCHEME`.
- `xrpcuri.split` – `split(uri, scheme)` and the `URIParts` named tuple.
- `xrpcuri.join` – `join(scheme, authority, identifier, query, fragment)`.
- `xrpcuri.resolve` – `resolve_id(identifier)` and `resolve(uri, splitter, scheme)`.
- `xrpcuri.authority` – `normalize_authority`, `validate_authority`,
  `validate_authority_pretty`.
- `xrpcuri.nsid` – `normalize`, `validate`, `validate_id_pretty`.
- `xrpcuri.errors` – the exception classes.

## Building a URI

```python
from xrpcuri import uri

uri.join("public.api.bsky.app", "app.bsky.actor.getProfile", "actor=alice.example.com", "")
# 'xrpc://public.api.bsky.app/app.bsky.actor.getProfile?actor=alice.example.com'
```

The authority and id are normalized on the way in. Non-ASCII labels of the
authority are punycode-encoded, and characters that would break the
structure are percent-encoded: `%`, `#`, `?`, `/`, `@` in the authority;
`%`, `#`, `?`, `/` in the id; `%`, `#` in the query. The fragment is added
as is. Empty parts are left out.

## Splitting a URI

```python
from xrpcuri import enc

parts = enc.split("xrpc://example.com/app.cherry.fooBar?actor=joeblow#wXyZ123")
parts.authority   # 'example.com'
parts.identifier  # 'app.cherry.fooBar'
parts.query       # 'actor=joeblow'
parts.fragment    # 'wXyZ123'
```

`split` returns a `URIParts` named tuple and does not normalize what it
returns. The scheme is matched in any case (`XRPC://` works too), the
authority is percent-decoded, and anything after the id's first `/` is
dropped. `xrpcuri.split.split(uri, scheme)` does the same for any scheme.

## Normalizing

```python
enc.normalize("xrpc://VIDEO.archive.ORG/COM.Example.fooBar")
# 'xrpc://video.archive.org/com.example.fooBar'

uri.normalize_authority("Example.COM")               # 'example.com'
uri.normalize_authority("JoeBlow:pass123@Example.COM")  # userinfo kept as is
uri.normalize_id("COM.Example.fooBar")               # 'com.example.fooBar'
```

Normalizing lower-cases the scheme, the host part of the authority and the
domain-authority of the NSID; the NSID's final name keeps its case.
Normalizing does not validate; anything that cannot be split as an
XRPC-URI comes back unchanged.

## Validating

Validation functions return their argument on success and raise a
subclass of `xrpcuri.errors.XRPCURIError` (itself a `ValueError`) on failure.

```python
from xrpcuri.errors import XRPCURIError

enc.validate_scheme("xrpc:")    # only checks for "xrpc:"
enc.validate_prefix("xrpc://")  # also checks for "//"
try:
    enc.validate("xrpc://archive.org/COM.Example.fooBar")
except XRPCURIError as err:
    print(err)
```

`enc.validate` requires a non-empty authority without `@` and an id that
is a valid NSID. The exception classes are `EmptyURIError`,
`EmptyAuthorityError`, `AtSignInAuthorityError` and `InvalidNSIDError`.

## Resolving

```python
from xrpcuri import enc, resolve

resolve.resolve_id("app.bsky.actor.getProfile")
# '/xrpc/app.bsky.actor.getProfile'

resolve.resolve("xrpc://example.com/com.atproto.repo.listRecords", enc.split, "https")
# 'https://example.com/xrpc/com.atproto.repo.listRecords'
```

`resolve` splits the URI with the given splitter and rebuilds it under the
given scheme, with the id turned into an `/xrpc/...` path.

## What this package does not do

- There are no ready-made helpers for the `xrpc-unencrypted:` scheme;
  `enc` handles only `xrpc:`. The generic `split.split`, `join.join` and
  `resolve.resolve` take a scheme and can be used for it directly.
- There is no URL object and no choice of `https`/`wss` by request type;
  the caller passes the target scheme to `resolve.resolve`.
- Nothing is sent over the network.