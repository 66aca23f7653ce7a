"""Hierarchical Deterministic key derivation (BIP32) for Partizee."""

import hmac
import hashlib
import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey

from ..constants import (
    HARDENED_OFFSET,
    MASTER_KEY_HMAC_KEY,
    MAX_SEED_LENGTH,
    MIN_SEED_LENGTH,
)
from ..exceptions import (
    DerivationFailed,
    DerivedKeyIsInfinity,
    DerivedKeyIsZero,
    InvalidScalar,
    MissingPrivateKey,
    ValidationError,
)
from ..types.common import ChainCode, ChildIndex, HexStr
from ..utils.encoding import bytes_to_hex, index_to_bytes
from ..utils.validation import is_valid_private_key, validate_index
from .keys import PrivateKey, PublicKey

__all__ = [
    "ExtendedKey",
    "generate_master_key",
    "derive_child_key",
    "parse_path",
    "harden",
    "is_hardened",
]

logger = logging.getLogger(__name__)

MAX_DEPTH = 255


def harden(index: int) -> ChildIndex:
    """Return the hardened form of a level number."""
    return ChildIndex(validate_index(index, unhardened=True) | HARDENED_OFFSET)


def is_hardened(index: int) -> bool:
    """Check if child index selects hardened derivation."""
    return bool(index & HARDENED_OFFSET)


def _hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


@dataclass(frozen=True, repr=False)
class ExtendedKey:
    """
    BIP32 extended key.

    A key together with the chain code needed to derive its children.
    Instances are immutable; derivation always returns a new key.

    Attributes:
        private_key: 32-byte scalar, or None for a public-only key
        public_key: 33-byte compressed SEC1 point
        chain_code: 32-byte chain code
        depth: Derivation steps from the master key
        child_number: Index this key was derived with (0 for master)
    """

    private_key: Optional[bytes]
    public_key: bytes
    chain_code: ChainCode
    depth: int = 0
    child_number: ChildIndex = ChildIndex(0)

    def __post_init__(self) -> None:
        if len(self.chain_code) != 32:
            raise ValidationError(f"Chain code must be 32 bytes, got {len(self.chain_code)}")
        if not 0 <= self.depth <= MAX_DEPTH:
            raise ValidationError(f"Depth {self.depth} out of range [0, {MAX_DEPTH}]")
        validate_index(self.child_number)
        if len(self.public_key) != 33 or self.public_key[0] not in (0x02, 0x03):
            raise ValidationError("Public key must be 33-byte compressed SEC1")

        if self.private_key is not None:
            if not is_valid_private_key(self.private_key):
                raise InvalidScalar("Private key is not a valid secp256k1 scalar")
            expected = SecpPrivateKey(self.private_key).public_key.format(compressed=True)
            if expected != self.public_key:
                raise ValidationError("Public key does not match private key")
        else:
            try:
                SecpPublicKey(self.public_key)
            except ValueError as e:
                raise ValidationError(f"Public key is not a valid curve point: {e}") from e

    @classmethod
    def from_seed(
        cls,
        seed: bytes,
        hmac_key: bytes = MASTER_KEY_HMAC_KEY
    ) -> "ExtendedKey":
        """Create master key from seed."""
        return generate_master_key(seed, hmac_key)

    @property
    def is_private(self) -> bool:
        """True if this key carries a private scalar."""
        return self.private_key is not None

    @property
    def is_hardened(self) -> bool:
        """True if this key was derived with a hardened index."""
        return is_hardened(self.child_number)

    def derive(self, index: int) -> "ExtendedKey":
        """Derive child key."""
        return derive_child_key(self, index)

    def derive_path(self, path: str) -> "ExtendedKey":
        """Derive using BIP32 path like m/44'/3757'/0'/0/0."""
        if path.strip()[:1] in ("m", "M") and self.depth != 0:
            raise ValidationError(
                f"Absolute path {path!r} requires a master key, got depth {self.depth}"
            )

        key = self
        for index in parse_path(path):
            key = key.derive(index)
        return key

    def public_only(self) -> "ExtendedKey":
        """Return this key without its private scalar."""
        return replace(self, private_key=None)

    def private_key_hex(self) -> HexStr:
        """Get private key as hex string."""
        if self.private_key is None:
            raise MissingPrivateKey("This is a public-only key")
        return bytes_to_hex(self.private_key)

    def public_key_hex(self) -> HexStr:
        """Get compressed public key as hex string."""
        return bytes_to_hex(self.public_key)

    def to_private_key(self) -> PrivateKey:
        """Get private key object."""
        if self.private_key is None:
            raise MissingPrivateKey("This is a public-only key")
        return PrivateKey(self.private_key)

    def to_public_key(self) -> PublicKey:
        """Get public key object."""
        return PublicKey(self.public_key)

    def __repr__(self) -> str:
        kind = "private" if self.is_private else "public"
        return (
            f"ExtendedKey({kind}, depth={self.depth}, "
            f"child_number={self.child_number:#010x}, "
            f"public_key={self.public_key.hex()[:8]}...)"
        )


def generate_master_key(
    seed: bytes,
    hmac_key: bytes = MASTER_KEY_HMAC_KEY
) -> ExtendedKey:
    """
    Generate BIP32 master key from seed.

    Args:
        seed: Seed bytes, normally the 64-byte BIP39 seed
        hmac_key: HMAC key; BIP32 defines b"Bitcoin seed"

    Returns:
        Master ExtendedKey at depth 0

    Raises:
        ValidationError: If seed length is outside 16..64 bytes
        InvalidScalar: If the derived scalar is zero or not below curve order
    """
    if not MIN_SEED_LENGTH <= len(seed) <= MAX_SEED_LENGTH:
        raise ValidationError(
            f"Seed must be between {MIN_SEED_LENGTH} and {MAX_SEED_LENGTH} bytes"
        )

    i = _hmac_sha512(hmac_key, seed)
    il, ir = i[:32], i[32:]

    if not is_valid_private_key(il):
        raise InvalidScalar("Invalid master key")

    public_key = SecpPrivateKey(il).public_key.format(compressed=True)

    return ExtendedKey(
        private_key=il,
        public_key=public_key,
        chain_code=ChainCode(ir),
    )


def derive_child_key(parent: ExtendedKey, index: int) -> ExtendedKey:
    """
    Derive child extended key (BIP32 CKDpriv / CKDpub).

    Private parents yield private children. Public-only parents yield
    public-only children and cannot derive hardened indexes.

    Args:
        parent: Parent extended key
        index: Child index; values >= 0x80000000 are hardened

    Returns:
        Child ExtendedKey

    Raises:
        ValidationError: If index is not a u32
        MissingPrivateKey: If hardened derivation is requested on a public-only key
        InvalidScalar: If IL is zero or not below curve order
        DerivedKeyIsZero: If the child scalar is zero
        DerivedKeyIsInfinity: If the child point is the point at infinity
        DerivationFailed: If the parent is already at maximum depth
    """
    validate_index(index)
    if parent.depth >= MAX_DEPTH:
        raise DerivationFailed("Maximum derivation depth reached", index=index)

    if is_hardened(index):
        if parent.private_key is None:
            raise MissingPrivateKey(
                "Cannot do hardened derivation without private key", index=index
            )
        data = b"\x00" + parent.private_key + index_to_bytes(index)
    else:
        data = parent.public_key + index_to_bytes(index)

    i = _hmac_sha512(parent.chain_code, data)
    il, ir = i[:32], i[32:]

    if not is_valid_private_key(il):
        raise InvalidScalar(f"Derived tweak for index {index} is not a valid scalar", index=index)

    if parent.private_key is not None:
        # child = (IL + k_par) mod n
        try:
            child = SecpPrivateKey(parent.private_key).add(il)
        except ValueError as e:
            raise DerivedKeyIsZero(f"Derived private key for index {index} is zero", index=index) from e
        child_private_key: Optional[bytes] = child.secret
        child_public_key = child.public_key.format(compressed=True)
    else:
        # child = IL*G + K_par
        parent_point = SecpPublicKey(parent.public_key)
        try:
            point = parent_point.add(il)
        except ValueError as e:
            raise DerivedKeyIsInfinity(
                f"Derived public key for index {index} is the point at infinity", index=index
            ) from e
        child_private_key = None
        child_public_key = point.format(compressed=True)

    logger.debug(f"Derived child {index:#010x} at depth {parent.depth + 1}")

    return ExtendedKey(
        private_key=child_private_key,
        public_key=child_public_key,
        chain_code=ChainCode(ir),
        depth=parent.depth + 1,
        child_number=ChildIndex(index),
    )


def parse_path(path: str) -> List[int]:
    """
    Parse a BIP32 path into child indexes.

    Accepts an optional leading ``m``/``M`` and hardened markers
    ``'``, ``h`` or ``H``.

    Args:
        path: Path such as "m/44'/3757'/0'/0/0" or "0/1"

    Returns:
        List of u32 child indexes

    Raises:
        ValidationError: If a component is malformed or out of range
    """
    path = path.strip()
    if not path:
        raise ValidationError("Derivation path cannot be empty")

    components = path.split("/")
    if components[0] in ("m", "M"):
        components = components[1:]

    indexes = []
    for component in components:
        hardened = component[-1:] in ("'", "h", "H")
        number = component[:-1] if hardened else component
        if not (number.isascii() and number.isdigit()):
            raise ValidationError(f"Invalid path component: {component!r}")
        level = int(number)
        indexes.append(harden(level) if hardened else validate_index(level, unhardened=True))

    return indexes
