"""Build and sign NIP-01 Nostr events with BIP-340 Schnorr signatures."""

from .crypto import KeyPair, Keygen, decode_hex, sign_schnorr, verify_schnorr
from .errors import FormatError, NostrError, SigningError, ValidationError
from .event import SERIALIZATION_VERSION, Event, EventFragment, compute_id
from .event_kind import EventKind
from .user import EventAttributes, User

__version__ = "0.1.0"

__all__ = [
    "Event",
    "EventAttributes",
    "EventFragment",
    "EventKind",
    "FormatError",
    "KeyPair",
    "Keygen",
    "NostrError",
    "SERIALIZATION_VERSION",
    "SigningError",
    "User",
    "ValidationError",
    "compute_id",
    "decode_hex",
    "sign_schnorr",
    "verify_schnorr",
]
