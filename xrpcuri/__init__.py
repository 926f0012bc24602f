"""Split, join, normalize, validate and resolve XRPC-URIs."""

__version__ = "0.1.0"
__all__ = ["authority", "enc", "errors", "join", "nsid", "resolve", "split", "uri"]