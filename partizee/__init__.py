"""
Partizee key derivation library

Hierarchical deterministic wallet keys for Partisia Blockchain dApp
tooling: BIP39 mnemonics, BIP32 extended keys over secp256k1 and BIP44
account paths.
"""

from .constants import Network, DEFAULT_NETWORK, PARTISIA_COIN_TYPE, ETHEREUM_COIN_TYPE
from .exceptions import (
    PartizeeError,
    ValidationError,
    MnemonicError,
    InvalidEntropySize,
    EmptyMnemonic,
    InvalidWordCount,
    UnknownWord,
    ChecksumMismatch,
    CryptoError,
    DerivationError,
    InvalidScalar,
    MissingPrivateKey,
    DerivedKeyIsZero,
    DerivedKeyIsInfinity,
    DerivationFailed,
    WalletError,
)
from .crypto import (
    Wordlist,
    PrivateKey,
    PublicKey,
    ExtendedKey,
    DerivationPath,
    generate_mnemonic,
    mnemonic_to_seed,
    validate_mnemonic,
    generate_master_key,
    derive_child_key,
    derive_bip44_key,
)
from .modules import Account, Wallet, WalletModule
from .types import Address

__version__ = "0.1.0"

__all__ = [
    # Network
    "Network",
    "DEFAULT_NETWORK",
    "PARTISIA_COIN_TYPE",
    "ETHEREUM_COIN_TYPE",
    
    # Exceptions
    "PartizeeError",
    "ValidationError",
    "MnemonicError",
    "InvalidEntropySize",
    "EmptyMnemonic",
    "InvalidWordCount",
    "UnknownWord",
    "ChecksumMismatch",
    "CryptoError",
    "DerivationError",
    "InvalidScalar",
    "MissingPrivateKey",
    "DerivedKeyIsZero",
    "DerivedKeyIsInfinity",
    "DerivationFailed",
    "WalletError",
    
    # Crypto
    "Wordlist",
    "PrivateKey",
    "PublicKey",
    "ExtendedKey",
    "DerivationPath",
    "generate_mnemonic",
    "mnemonic_to_seed",
    "validate_mnemonic",
    "generate_master_key",
    "derive_child_key",
    "derive_bip44_key",
    
    # Wallets
    "Account",
    "Wallet",
    "WalletModule",
    
    # Types
    "Address",
]
