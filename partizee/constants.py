"""Constants for Partizee key derivation."""

from enum import Enum

__all__ = [
    "Network",
    "DEFAULT_NETWORK",
    "SECP256K1_ORDER",
    "HARDENED_OFFSET",
    "MAX_INDEX",
    "MASTER_KEY_HMAC_KEY",
    "MIN_SEED_LENGTH",
    "MAX_SEED_LENGTH",
    "SEED_LENGTH",
    "PBKDF2_ROUNDS",
    "MNEMONIC_SALT_PREFIX",
    "WORDLIST_SIZE",
    "BITS_PER_WORD",
    "VALID_ENTROPY_BITS",
    "VALID_WORD_COUNTS",
    "BIP44_PURPOSE",
    "PARTISIA_COIN_TYPE",
    "ETHEREUM_COIN_TYPE",
    "ADDRESS_LENGTH",
    "ADDRESS_TYPES",
    "ACCOUNT_ADDRESS_PREFIX",
]


class Network(str, Enum):
    """Partisia Blockchain networks."""

    TESTNET = "testnet"
    MAINNET = "mainnet"


DEFAULT_NETWORK = Network.TESTNET

# secp256k1
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# BIP32
HARDENED_OFFSET = 0x80000000
MAX_INDEX = 0xFFFFFFFF
MASTER_KEY_HMAC_KEY = b"Bitcoin seed"
MIN_SEED_LENGTH = 16
MAX_SEED_LENGTH = 64

# BIP39
SEED_LENGTH = 64
PBKDF2_ROUNDS = 2048
MNEMONIC_SALT_PREFIX = "mnemonic"
WORDLIST_SIZE = 2048
BITS_PER_WORD = 11
VALID_ENTROPY_BITS = (128, 160, 192, 224, 256)
VALID_WORD_COUNTS = (12, 15, 18, 21, 24)

# BIP44 / SLIP-44
BIP44_PURPOSE = 44
PARTISIA_COIN_TYPE = 3757
ETHEREUM_COIN_TYPE = 60

# Addresses: one type byte followed by a 20-byte identifier, hex encoded
ADDRESS_LENGTH = 42
ACCOUNT_ADDRESS_PREFIX = "00"
ADDRESS_TYPES = {
    "00": "account",
    "01": "system_contract",
    "02": "public_contract",
    "03": "zk_contract",
    "04": "governance_contract",
}
