"""User identity: owns a keypair and turns event attributes into signed events."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from ._validation import Tags, validate_int, validate_kind, validate_tags, validate_text
from .crypto import KeyPair, Keygen, sign_schnorr
from .event import Event, EventFragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventAttributes:
    """Caller-supplied fields of a new event.

    ``created_at`` defaults to the current time when the event is built and
    ``tags`` to no tags. There is no ``pubkey``: the signing user is always
    the author.
    """

    kind: int
    content: str
    created_at: Optional[int] = None
    tags: Tags = ()

    def __post_init__(self):
        object.__setattr__(self, "kind", validate_kind(self.kind))
        validate_text(self.content, "content")
        if self.created_at is not None:
            object.__setattr__(self, "created_at", validate_int(self.created_at, "created_at"))
        object.__setattr__(self, "tags", validate_tags(self.tags))


class User:
    """A Nostr identity.

    Each user has one keypair for its whole lifetime. Signatures, public key
    and encodings follow BIP-340 Schnorr signatures over secp256k1.
    """

    def __init__(self, keypair: Optional[KeyPair] = None, keygen: Optional[Keygen] = None):
        if keypair is None:
            keypair = (keygen or Keygen()).generate_key_pair()
        self._keypair = keypair

    @property
    def keypair(self) -> KeyPair:
        return self._keypair

    @property
    def public_key(self) -> str:
        return self._keypair.public_key

    def create_event(self, attributes: Optional[EventAttributes] = None, **kwargs) -> Event:
        """Build and sign an event authored by this user.

        Accepts either an ``EventAttributes`` or its fields as keyword
        arguments::

            event = user.create_event(kind=EventKind.TEXT_NOTE, content="gm")

        A ``pubkey`` keyword is ignored. Raises ValidationError for
        attributes of the wrong type or shape; a missing or misspelled
        keyword is a call error and raises TypeError, as for any Python call.
        Nothing is returned unless both the id and the signature were computed.
        """
        # The author is always this user.
        kwargs.pop("pubkey", None)
        if attributes is None:
            attributes = EventAttributes(**kwargs)
        elif kwargs:
            raise TypeError("pass either an EventAttributes or keyword arguments, not both")

        created_at = attributes.created_at
        if created_at is None:
            created_at = int(time.time())

        fragment = EventFragment(
            pubkey=self._keypair.public_key,
            created_at=created_at,
            kind=attributes.kind,
            tags=attributes.tags,
            content=attributes.content,
        )
        event_id = fragment.compute_id()
        sig = sign_schnorr(bytes.fromhex(event_id), self._keypair.private_key_bytes)

        event = Event(
            id=event_id,
            pubkey=fragment.pubkey,
            created_at=fragment.created_at,
            kind=fragment.kind,
            tags=fragment.tags,
            content=fragment.content,
            sig=sig,
        )
        logger.debug(f"Created kind {event.kind} event {event.id[:16]}...")
        return event

    def verify_event(self, event: Event) -> bool:
        return event.verify()

    def __repr__(self):
        return f"User(public_key={self.public_key!r})"
