"""
Pytest configuration and shared fixtures for nostr_events tests.

Provides:
- A fixed keypair derived from private key 0x01 (public key is the
  x-coordinate of the secp256k1 generator point)
- A User owning that keypair
- Sample event attributes
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nostr_events import EventAttributes, EventKind, KeyPair, User

# Test keys only (DO NOT USE IN PRODUCTION)
PRIVATE_KEY_ONE = "00" * 31 + "01"
PUBLIC_KEY_ONE = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"

# sha256('[0,"<PUBLIC_KEY_ONE>",1700000000,1,[],"hello"]')
HELLO_EVENT_ID = "bde202ea7642ff9910600c7edc948a1f4220f0cbf5e4fb2b7efafa681bbb5285"


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
def keypair() -> KeyPair:
    return KeyPair.from_private_key(PRIVATE_KEY_ONE)


@pytest.fixture
def user(keypair: KeyPair) -> User:
    return User(keypair=keypair)


@pytest.fixture
def hello_attributes() -> EventAttributes:
    return EventAttributes(kind=EventKind.TEXT_NOTE, content="hello", created_at=1700000000)
