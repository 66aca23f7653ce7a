"""Utility helpers for Partizee."""

from .encoding import hex_to_bytes, bytes_to_hex, int_to_bytes, bytes_to_int, sha256
from .validation import (
    is_valid_private_key,
    validate_private_key,
    is_valid_public_key,
    validate_public_key,
    is_valid_address,
    validate_address,
    validate_index,
)

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "int_to_bytes",
    "bytes_to_int",
    "sha256",
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "is_valid_address",
    "validate_address",
    "validate_index",
]
