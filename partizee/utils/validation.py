"""Validation utilities for Partizee."""

import re

from ..constants import (
    ADDRESS_LENGTH,
    ADDRESS_TYPES,
    HARDENED_OFFSET,
    MAX_INDEX,
    SECP256K1_ORDER,
)
from ..exceptions import ValidationError
from ..types.common import Address, KeyInput

__all__ = [
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "is_valid_address",
    "validate_address",
    "validate_index",
]

# Regex patterns
HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")
ADDRESS_PATTERN = re.compile(rf"^[0-9a-fA-F]{{{ADDRESS_LENGTH}}}$")


def _strip_hex(value: str) -> str:
    if value.startswith("0x"):
        value = value[2:]
    return value


def is_valid_private_key(key: KeyInput) -> bool:
    """
    Check if private key is a valid secp256k1 scalar.
    
    Args:
        key: Private key as hex string or bytes
        
    Returns:
        True if 32 bytes and in range [1, n-1], False otherwise
    """
    try:
        if isinstance(key, str):
            key = _strip_hex(key)
            if not HEX_PATTERN.match(key):
                return False
            key = bytes.fromhex(key)
            
        if len(key) != 32:
            return False
            
        key_int = int.from_bytes(key, "big")
        return 0 < key_int < SECP256K1_ORDER
        
    except (ValueError, TypeError):
        return False


def validate_private_key(key: KeyInput) -> bytes:
    """
    Validate private key and return as bytes.
    
    Args:
        key: Private key as hex string or bytes
        
    Returns:
        Private key as 32 bytes
        
    Raises:
        ValidationError: If private key is invalid
    """
    if isinstance(key, str):
        key = _strip_hex(key)
        if not HEX_PATTERN.match(key):
            raise ValidationError("Private key must be hexadecimal")
        try:
            key = bytes.fromhex(key)
        except ValueError as e:
            raise ValidationError(f"Invalid hex private key: {e}") from e
            
    if len(key) != 32:
        raise ValidationError(f"Private key must be 32 bytes, got {len(key)}")
        
    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise ValidationError("Private key cannot be zero")
    if key_int >= SECP256K1_ORDER:
        raise ValidationError("Private key exceeds curve order")
        
    return bytes(key)


def is_valid_public_key(key: KeyInput) -> bool:
    """
    Check if public key format is valid.
    
    Args:
        key: Public key as hex string or bytes
        
    Returns:
        True if valid, False otherwise
    """
    try:
        validate_public_key(key)
        return True
    except ValidationError:
        return False


def validate_public_key(key: KeyInput) -> bytes:
    """
    Validate public key encoding and return as bytes.
    
    Only the SEC1 framing is checked here; whether the point lies on the
    curve is left to coincurve when the key is loaded.
    
    Args:
        key: Public key as hex string or bytes
        
    Returns:
        Public key bytes (33 or 65 bytes)
        
    Raises:
        ValidationError: If public key is invalid
    """
    if isinstance(key, str):
        key = _strip_hex(key)
        if not HEX_PATTERN.match(key):
            raise ValidationError("Public key must be hexadecimal")
        try:
            key = bytes.fromhex(key)
        except ValueError as e:
            raise ValidationError(f"Invalid hex public key: {e}") from e
            
    if len(key) == 33:
        if key[0] not in (0x02, 0x03):
            raise ValidationError("Compressed public key must start with 0x02 or 0x03")
    elif len(key) == 65:
        if key[0] != 0x04:
            raise ValidationError("Uncompressed public key must start with 0x04")
    else:
        raise ValidationError(f"Public key must be 33 or 65 bytes, got {len(key)}")
        
    return bytes(key)


def is_valid_address(address: str) -> bool:
    """
    Check if Partisia address format is valid.
    
    Args:
        address: Address to validate
        
    Returns:
        True if valid, False otherwise
    """
    if not isinstance(address, str) or not ADDRESS_PATTERN.match(address):
        return False
    return address[:2] in ADDRESS_TYPES


def validate_address(address: str) -> Address:
    """
    Validate Partisia address and return normalized form.
    
    Args:
        address: Address to validate
        
    Returns:
        Normalized (lowercase) address
        
    Raises:
        ValidationError: If address is invalid
    """
    if not address:
        raise ValidationError("Address cannot be empty")
        
    if len(address) != ADDRESS_LENGTH:
        raise ValidationError(
            f"Address must be {ADDRESS_LENGTH} characters, got {len(address)}"
        )
        
    if not is_valid_address(address):
        raise ValidationError(f"Invalid Partisia address: {address}")
        
    return Address(address.lower())


def validate_index(index: int, unhardened: bool = False) -> int:
    """
    Validate a child index.
    
    Args:
        index: Index to validate
        unhardened: Require a raw level number below 2^31, before any
            hardening offset is applied
            
    Returns:
        The index
        
    Raises:
        ValidationError: If index is out of range
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise ValidationError(f"Index must be an integer, got {type(index).__name__}")
    limit = HARDENED_OFFSET - 1 if unhardened else MAX_INDEX
    if index < 0 or index > limit:
        raise ValidationError(f"Index {index} out of range [0, {limit}]")
    return index
