"""Common type definitions for Partizee."""

from typing import NewType, Union

__all__ = [
    "HexStr",
    "Address",
    "Entropy",
    "Seed",
    "ChainCode",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "ChildIndex",
    "KeyInput",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Address = NewType("Address", str)
"""Partisia address: type byte plus 20-byte identifier, 42 hex characters."""

# Crypto types
Entropy = NewType("Entropy", bytes)
"""16 to 32 bytes of mnemonic entropy."""

Seed = NewType("Seed", bytes)
"""64-byte BIP39 seed."""

ChainCode = NewType("ChainCode", bytes)
"""32-byte BIP32 chain code."""

PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33 or 65 byte public key."""

ChildIndex = NewType("ChildIndex", int)
"""Unsigned 32-bit child number; top bit marks hardened derivation."""

# Type aliases
KeyInput = Union[bytes, str]
"""Key material as raw bytes or hex string."""
