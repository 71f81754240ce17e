"""NIP-01 event serialization, id derivation and verification."""

import hashlib
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from ._validation import Tags, validate_int, validate_kind, validate_tags, validate_text
from .crypto import decode_hex, verify_schnorr
from .errors import ValidationError

logger = logging.getLogger(__name__)

# Reserved leading element of the id preimage. Changing it changes every id.
SERIALIZATION_VERSION = 0

WIRE_FIELDS = ("id", "pubkey", "created_at", "kind", "tags", "content", "sig")


def compute_id(serialized: bytes) -> str:
    """Event id: lowercase hex SHA-256 of the canonical serialization."""
    return hashlib.sha256(serialized).hexdigest()


@dataclass(frozen=True)
class EventFragment:
    """The unsigned, content-bearing part of an event.

    Fields are validated and frozen on construction; ``tags`` is stored as a
    tuple of tuples so the fragment cannot be mutated after hashing.
    """

    pubkey: str
    created_at: int
    kind: int
    tags: Tags
    content: str

    def __post_init__(self):
        decode_hex(self.pubkey, 32, "pubkey")
        object.__setattr__(self, "created_at", validate_int(self.created_at, "created_at"))
        object.__setattr__(self, "kind", validate_kind(self.kind))
        object.__setattr__(self, "tags", validate_tags(self.tags))
        validate_text(self.content, "content")

    def serialize(self) -> bytes:
        """NIP-01 serialization: [0, pubkey, created_at, kind, tags, content]"""
        data = [SERIALIZATION_VERSION, self.pubkey, self.created_at, self.kind, self.tags, self.content]
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    def compute_id(self) -> str:
        return compute_id(self.serialize())


@dataclass(frozen=True)
class Event:
    """Represents a signed Nostr event (NIP-01).

    Construction checks the shape of every field but not the cryptography;
    use ``verify()`` for events that came from elsewhere. ``id`` and ``sig``
    are stored as lowercase hex.
    """

    id: str
    pubkey: str
    created_at: int
    kind: int
    tags: Tags
    content: str
    sig: str

    def __post_init__(self):
        decode_hex(self.id, 32, "id")
        decode_hex(self.sig, 64, "sig")
        # pubkey is part of the id preimage and is kept as given
        object.__setattr__(self, "id", self.id.lower())
        object.__setattr__(self, "sig", self.sig.lower())
        fragment = self.fragment
        object.__setattr__(self, "created_at", fragment.created_at)
        object.__setattr__(self, "kind", fragment.kind)
        object.__setattr__(self, "tags", fragment.tags)

    @property
    def fragment(self) -> EventFragment:
        return EventFragment(
            pubkey=self.pubkey,
            created_at=self.created_at,
            kind=self.kind,
            tags=self.tags,
            content=self.content,
        )

    def verify(self) -> bool:
        """Check that the id matches the content and the signature matches the id."""
        expected_id = self.fragment.compute_id()
        if expected_id != self.id:
            logger.debug(f"Event {self.id[:16]}... id mismatch, expected {expected_id[:16]}...")
            return False
        valid = verify_schnorr(
            bytes.fromhex(self.id),
            bytes.fromhex(self.pubkey),
            bytes.fromhex(self.sig),
        )
        if not valid:
            logger.debug(f"Event {self.id[:16]}... has an invalid signature")
        return valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(tag) for tag in self.tags],
            "content": self.content,
            "sig": self.sig,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Event":
        if not isinstance(d, dict):
            raise ValidationError(f"event must be a JSON object, got {type(d).__name__}")
        missing: List[str] = [name for name in WIRE_FIELDS if name not in d]
        if missing:
            raise ValidationError(f"event is missing fields: {', '.join(missing)}")
        return cls(**{name: d[name] for name in WIRE_FIELDS})

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str) -> "Event":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValidationError(f"event is not valid JSON: {e}") from e
        return cls.from_dict(data)
