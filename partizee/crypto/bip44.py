"""BIP44 multi-account derivation paths for Partizee."""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..constants import BIP44_PURPOSE, HARDENED_OFFSET, PARTISIA_COIN_TYPE
from ..exceptions import DerivationFailed, ValidationError
from ..utils.validation import validate_index
from .hd import ExtendedKey, derive_child_key, harden, parse_path

__all__ = ["DerivationPath", "derive_bip44_key", "derive_bip44_keys"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivationPath:
    """
    BIP44 path m/44'/coin_type'/account'/change/address_index.

    Fields hold plain level numbers; purpose, coin type and account are
    hardened when converted with ``indexes()``.
    """

    coin_type: int = PARTISIA_COIN_TYPE
    account: int = 0
    change: int = 0
    address_index: int = 0

    def __post_init__(self) -> None:
        for name in ("coin_type", "account", "change", "address_index"):
            validate_index(getattr(self, name), unhardened=True)

    @property
    def purpose(self) -> int:
        return BIP44_PURPOSE

    def indexes(self) -> Tuple[int, int, int, int, int]:
        """Get the five child indexes in derivation order."""
        return (
            harden(BIP44_PURPOSE),
            harden(self.coin_type),
            harden(self.account),
            self.change,
            self.address_index,
        )

    @classmethod
    def parse(cls, path: str) -> "DerivationPath":
        """
        Parse a path string such as "m/44'/3757'/0'/0/0".

        Raises:
            ValidationError: If the path is not a five-level BIP44 path
        """
        indexes = parse_path(path)
        if len(indexes) != 5:
            raise ValidationError(f"BIP44 path must have 5 levels, got {len(indexes)}: {path}")

        purpose, coin_type, account, change, address_index = indexes
        if purpose != harden(BIP44_PURPOSE):
            raise ValidationError(f"BIP44 path must start with 44', got {path}")
        for index in (coin_type, account):
            if not index & HARDENED_OFFSET:
                raise ValidationError(f"Coin type and account must be hardened: {path}")
        for index in (change, address_index):
            if index & HARDENED_OFFSET:
                raise ValidationError(f"Change and address index must not be hardened: {path}")

        return cls(
            coin_type=coin_type & ~HARDENED_OFFSET,
            account=account & ~HARDENED_OFFSET,
            change=change,
            address_index=address_index,
        )

    def __str__(self) -> str:
        return (
            f"m/{BIP44_PURPOSE}'/{self.coin_type}'/{self.account}'"
            f"/{self.change}/{self.address_index}"
        )


def derive_bip44_key(
    master: ExtendedKey,
    coin_type: int,
    account: int,
    change: int,
    address_index: int
) -> ExtendedKey:
    """
    Derive a BIP44 key from a master key.

    Uses the path m/44'/coin_type'/account'/change/address_index.

    Args:
        master: Master extended private key
        coin_type: Coin type (see SLIP-44)
        account: Account index
        change: Change index (0 = external, 1 = internal)
        address_index: Address index

    Returns:
        Derived ExtendedKey carrying a private key

    Raises:
        ValidationError: If a level number is out of range
        DerivationError: If any derivation step fails
        DerivationFailed: If the derived key has no private key
    """
    path = DerivationPath(coin_type, account, change, address_index)

    key = master
    for index in path.indexes():
        key = derive_child_key(key, index)

    if key.private_key is None:
        raise DerivationFailed(f"Derived key for {path} has no private key")

    logger.debug(f"Derived key for {path}")
    return key


def derive_bip44_keys(
    master: ExtendedKey,
    coin_type: int,
    account: int = 0,
    change: int = 0,
    start: int = 0,
    count: int = 1
) -> List[ExtendedKey]:
    """
    Derive consecutive address keys under one account.

    The shared m/44'/coin_type'/account'/change parent is derived once.

    Args:
        master: Master extended private key
        coin_type: Coin type (see SLIP-44)
        account: Account index
        change: Change index
        start: First address index
        count: Number of keys to derive

    Returns:
        Keys for address indexes start .. start + count - 1

    Raises:
        ValidationError: If the range is invalid
        DerivationFailed: If the derived keys have no private key
    """
    if count < 0:
        raise ValidationError(f"Count must be non-negative, got {count}")
    if count:
        # Validates the whole range before any work is done
        DerivationPath(coin_type, account, change, start + count - 1)

    parent = master
    for index in DerivationPath(coin_type, account, change, start).indexes()[:4]:
        parent = derive_child_key(parent, index)

    if parent.private_key is None:
        raise DerivationFailed(
            f"Derived key for m/{BIP44_PURPOSE}'/{coin_type}'/{account}'/{change} has no private key"
        )

    keys = [derive_child_key(parent, start + offset) for offset in range(count)]
    logger.debug(f"Derived {len(keys)} keys from index {start}")
    return keys
