"""Cryptographic primitives for Partizee."""

from ..crypto.wordlist import Wordlist
from ..crypto.keys import PrivateKey, PublicKey, address_from_public_key
from ..crypto.bip39 import (
    pack_bits,
    unpack_bits,
    generate_entropy,
    generate_mnemonic,
    new_mnemonic,
    mnemonic_to_seed,
    mnemonic_to_entropy,
    validate_mnemonic,
    is_valid_mnemonic,
)
from ..crypto.hd import ExtendedKey, generate_master_key, derive_child_key, parse_path
from ..crypto.bip44 import DerivationPath, derive_bip44_key, derive_bip44_keys

__all__ = [
    # Wordlist
    "Wordlist",
    
    # Keys
    "PrivateKey",
    "PublicKey",
    "address_from_public_key",
    
    # BIP39
    "pack_bits",
    "unpack_bits",
    "generate_entropy",
    "generate_mnemonic",
    "new_mnemonic",
    "mnemonic_to_seed",
    "mnemonic_to_entropy",
    "validate_mnemonic",
    "is_valid_mnemonic",
    
    # BIP32
    "ExtendedKey",
    "generate_master_key",
    "derive_child_key",
    "parse_path",
    
    # BIP44
    "DerivationPath",
    "derive_bip44_key",
    "derive_bip44_keys",
]
