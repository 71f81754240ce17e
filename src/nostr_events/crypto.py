"""
Nostr key management and BIP-340 Schnorr signatures.

Uses secp256k1 for key derivation, signing and verification.
"""

import logging
import os
import re
from pathlib import Path

import secp256k1

from .errors import FormatError, SigningError

logger = logging.getLogger(__name__)

ENV_PRIVATE_KEY = "NOSTR_PRIVATE_KEY"

# Order of the secp256k1 group.
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


def decode_hex(value: str, length: int, name: str) -> bytes:
    """Decode hex text into exactly `length` bytes, raising FormatError otherwise."""
    if not isinstance(value, str):
        raise FormatError(f"{name} must be a hex string, got {type(value).__name__}")
    if not _HEX_RE.match(value) or len(value) % 2:
        raise FormatError(f"{name} is not valid hex")
    if len(value) != length * 2:
        raise FormatError(f"{name} must be {length} bytes, got {len(value) // 2}")
    return bytes.fromhex(value)


def _check_length(value: bytes, length: int, name: str) -> None:
    if not isinstance(value, (bytes, bytearray)):
        raise FormatError(f"{name} must be bytes, got {type(value).__name__}")
    if len(value) != length:
        raise FormatError(f"{name} must be {length} bytes, got {len(value)}")


def _is_valid_scalar(secret: bytes) -> bool:
    return 0 < int.from_bytes(secret, "big") < CURVE_ORDER


def _load_private_key(secret: bytes) -> secp256k1.PrivateKey:
    if not _is_valid_scalar(secret):
        raise SigningError("private key is not a valid secp256k1 scalar")
    try:
        return secp256k1.PrivateKey(bytes(secret))
    except Exception as e:
        raise SigningError(f"private key rejected by secp256k1: {e}") from e


def _derive_public_key(secret: bytes) -> str:
    # Compressed pubkey is 33 bytes (02/03 prefix + 32 bytes x-coordinate)
    return _load_private_key(secret).pubkey.serialize()[1:].hex()


class KeyPair:
    """Nostr keypair (secp256k1) with x-only public key.

    Both keys are kept as lowercase hex. Instances are read-only. When the
    secret is a valid scalar the public key must be the one it derives.
    """

    def __init__(self, private_key: str, public_key: str):
        secret = decode_hex(private_key, 32, "private_key")
        decode_hex(public_key, 32, "public_key")
        if _is_valid_scalar(secret):
            if _derive_public_key(secret) != public_key.lower():
                raise FormatError("public_key does not belong to private_key")
        self._private_key = private_key.lower()
        self._public_key = public_key.lower()

    @classmethod
    def from_private_key(cls, private_key: str) -> "KeyPair":
        """Build a keypair from a hex secret, deriving the x-only public key."""
        secret = decode_hex(private_key, 32, "private_key")
        return cls(secret.hex(), _derive_public_key(secret))

    @classmethod
    def generate(cls) -> "KeyPair":
        """Create a new random keypair."""
        return Keygen().generate_key_pair()

    @classmethod
    def from_env(cls, env_var: str = ENV_PRIVATE_KEY) -> "KeyPair":
        """Load a keypair from a hex secret stored in an environment variable."""
        value = os.getenv(env_var)
        if not value:
            raise ValueError(f"{env_var} environment variable is required")
        keypair = cls.from_private_key(value.strip())
        logger.info(f"Loaded keypair from ${env_var}: {keypair.public_key[:16]}...")
        return keypair

    def save(self, directory: str) -> None:
        """Save keypair to nostr_secret.hex and nostr_pubkey.hex files."""
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        (path / "nostr_secret.hex").write_text(self._private_key)
        (path / "nostr_pubkey.hex").write_text(self._public_key)
        logger.info(f"Saved keypair {self._public_key[:16]}... to {path}")

    @classmethod
    def load(cls, directory: str) -> "KeyPair":
        """Load keypair from a directory containing nostr_secret.hex."""
        path = Path(directory)
        secret_hex = (path / "nostr_secret.hex").read_text().strip()
        keypair = cls.from_private_key(secret_hex)
        logger.info(f"Loaded keypair {keypair.public_key[:16]}... from {path}")
        return keypair

    @property
    def private_key(self) -> str:
        return self._private_key

    @property
    def public_key(self) -> str:
        """X-only public key (32 bytes, no prefix), hex-encoded."""
        return self._public_key

    @property
    def private_key_bytes(self) -> bytes:
        return bytes.fromhex(self._private_key)

    @property
    def public_key_bytes(self) -> bytes:
        return bytes.fromhex(self._public_key)

    def __eq__(self, other):
        if not isinstance(other, KeyPair):
            return NotImplemented
        return (self._private_key, self._public_key) == (other._private_key, other._public_key)

    def __hash__(self):
        return hash((self._private_key, self._public_key))

    def __repr__(self):
        return f"KeyPair(public_key={self._public_key!r})"


class Keygen:
    """Generates random secp256k1 keypairs from the OS CSPRNG."""

    def generate_key_pair(self) -> KeyPair:
        secret = os.urandom(32)
        while not _is_valid_scalar(secret):
            secret = os.urandom(32)
        keypair = KeyPair.from_private_key(secret.hex())
        logger.info(f"Generated new keypair: {keypair.public_key[:16]}...")
        return keypair


def sign_schnorr(message: bytes, private_key: bytes) -> str:
    """BIP-340 Schnorr signature over a 32-byte message hash.

    The nonce is derived from the key and message only, so signing the same
    message twice yields the same signature. Returns 128 hex characters.
    """
    _check_length(message, 32, "message")
    _check_length(private_key, 32, "private_key")
    privkey = _load_private_key(private_key)
    sig = privkey.schnorr_sign(bytes(message), '', raw=True)
    return sig.hex()


def verify_schnorr(message: bytes, public_key: bytes, signature: bytes) -> bool:
    """Verify a BIP-340 Schnorr signature.

    message: 32-byte message hash
    public_key: 32-byte x-only public key
    signature: 64-byte signature
    """
    _check_length(message, 32, "message")
    _check_length(public_key, 32, "public_key")
    _check_length(signature, 64, "signature")
    # Construct a PublicKey object from x-only bytes (add 02 prefix)
    try:
        pubkey_obj = secp256k1.PublicKey(b"\x02" + bytes(public_key), raw=True)
        return bool(pubkey_obj.schnorr_verify(bytes(message), bytes(signature), '', raw=True))
    except Exception:
        # x-coordinate not on the curve
        return False
