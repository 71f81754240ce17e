"""Exceptions raised while building, signing and verifying events."""


class NostrError(Exception):
    """Base class for all nostr_events errors."""


class ValidationError(NostrError, ValueError):
    """Event attributes have the wrong type or shape."""


class FormatError(NostrError, ValueError):
    """A hex-encoded key, digest or signature is malformed or has the wrong length."""


class SigningError(NostrError):
    """The private key is not a valid secp256k1 scalar."""
