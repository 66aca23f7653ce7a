"""Type definitions for Partizee."""

from .common import (
    HexStr,
    Address,
    Entropy,
    Seed,
    ChainCode,
    PrivateKeyBytes,
    PublicKeyBytes,
    ChildIndex,
    KeyInput,
)

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
