"""Key management for Partizee."""

import secrets
from typing import Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey

from ..constants import ACCOUNT_ADDRESS_PREFIX
from ..exceptions import ValidationError
from ..types.common import Address, HexStr, PrivateKeyBytes, PublicKeyBytes
from ..utils.encoding import bytes_to_hex, sha256
from ..utils.validation import validate_private_key, validate_public_key

__all__ = ["PrivateKey", "PublicKey", "address_from_public_key"]


def address_from_public_key(public_key: Union[bytes, "PublicKey"]) -> Address:
    """
    Compute the account address for a public key.

    The address is the account type byte followed by the last 20 bytes of
    SHA-256 over the 65-byte uncompressed public key.

    Args:
        public_key: Public key bytes (33 or 65) or PublicKey

    Returns:
        42-character hex address
    """
    if not isinstance(public_key, PublicKey):
        public_key = PublicKey(public_key)
    digest = sha256(public_key.uncompressed())
    return Address(ACCOUNT_ADDRESS_PREFIX + digest[-20:].hex())


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Holds a validated 32-byte scalar and exposes its public key and
    account address.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            ValidationError: If key format is invalid
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        # Validate and normalize key
        self._secret = PrivateKeyBytes(validate_private_key(key))

        # Initialize crypto library
        self._key = SecpPrivateKey(self._secret)

    @classmethod
    def create(cls) -> "PrivateKey":
        """
        Create new random private key.

        Returns:
            New PrivateKey instance
        """
        while True:
            key_bytes = secrets.token_bytes(32)
            try:
                return cls(key_bytes)
            except ValidationError:
                # Extremely rare, try again
                continue

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    def hex(self) -> HexStr:
        """Get private key as hex string."""
        return bytes_to_hex(self._secret)

    def public_key(self, compressed: bool = True) -> "PublicKey":
        """
        Get corresponding public key.

        Args:
            compressed: Return compressed format

        Returns:
            PublicKey instance
        """
        serialized = self._key.public_key.format(compressed=compressed)
        return PublicKey(serialized)

    def address(self) -> Address:
        """Get account address for this key."""
        return self.public_key().address()

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)

    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars of hex for security
        hex_str = self.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey:
    """
    secp256k1 public key wrapper.

    Accepts compressed (33-byte) or uncompressed (65-byte) SEC1 encodings
    and remembers which one it was given.
    """

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: Public key as bytes, hex string, or another PublicKey

        Raises:
            ValidationError: If key format is invalid or not on the curve
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            self._key = key._key
            return

        key_bytes = validate_public_key(key)
        try:
            self._key = SecpPublicKey(key_bytes)
        except ValueError as e:
            raise ValidationError(f"Public key is not a valid curve point: {e}") from e
        self._point = PublicKeyBytes(key_bytes)

    @property
    def point(self) -> PublicKeyBytes:
        """Get public key bytes in the encoding it was created with."""
        return self._point

    @property
    def is_compressed(self) -> bool:
        return len(self._point) == 33

    def compressed(self) -> bytes:
        """Get 33-byte compressed encoding."""
        return self._key.format(compressed=True)

    def uncompressed(self) -> bytes:
        """Get 65-byte uncompressed encoding."""
        return self._key.format(compressed=False)

    def hex(self) -> HexStr:
        """Get public key as hex string."""
        return bytes_to_hex(self._point)

    def address(self) -> Address:
        """Get account address."""
        return address_from_public_key(self)

    def __eq__(self, other: object) -> bool:
        """Check equality (encoding independent)."""
        if not isinstance(other, PublicKey):
            return False
        return self.compressed() == other.compressed()

    def __hash__(self) -> int:
        return hash(self.compressed())

    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.address()})"
