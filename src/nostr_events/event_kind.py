"""Well-known NIP-01 event kinds."""

from enum import IntEnum
from typing import Optional


class EventKind(IntEnum):
    """Event kinds that clients can emit.

    Kinds outside this enum are still valid event data; the enum only
    documents the ones with a known content convention.
    """

    # Content is a stringified JSON object {name, about, picture} describing
    # the author. Relays may drop older metadata events for the same pubkey.
    SET_METADATA = 0

    # Content is the plain text of a note.
    TEXT_NOTE = 1

    # Content is the URL (e.g. wss://somerelay.com) of a relay the author
    # recommends to followers.
    RECOMMEND_SERVER = 2

    # Contact list: one "p" tag per followed profile.
    CONTACT_LIST = 3

    @classmethod
    def describe(cls, kind: int) -> Optional[str]:
        """Return the member name for a known kind, or None."""
        try:
            return cls(kind).name
        except ValueError:
            return None
