"""Wallet module for Partizee."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..constants import DEFAULT_NETWORK, PARTISIA_COIN_TYPE, Network
from ..crypto.bip39 import mnemonic_to_seed, new_mnemonic, validate_mnemonic
from ..crypto.bip44 import DerivationPath, derive_bip44_key, derive_bip44_keys
from ..crypto.hd import ExtendedKey, generate_master_key
from ..crypto.wordlist import Wordlist
from ..exceptions import DerivationError, WalletError
from ..types.common import Address, HexStr
from ..utils.validation import validate_address

__all__ = ["Account", "Wallet", "WalletModule"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Account:
    """
    Account derived from a wallet.

    Attributes:
        network: Network the account is used on
        address: Account address
        private_key: Private key as hex (hidden from repr)
        path: BIP44 derivation path
    """

    network: Network
    address: Address
    private_key: HexStr = field(repr=False)
    path: str

    @classmethod
    def from_key(cls, key: ExtendedKey, path: DerivationPath, network: Network) -> "Account":
        """Build account from a derived extended key."""
        private_key = key.to_private_key()
        return cls(
            network=network,
            address=private_key.address(),
            private_key=private_key.hex(),
            path=str(path),
        )


class Wallet:
    """
    HD Wallet implementation.

    Derives accounts from a single master key along BIP44 paths.
    """

    def __init__(
        self,
        master: ExtendedKey,
        name: str = "default",
        network: Network = DEFAULT_NETWORK,
        coin_type: int = PARTISIA_COIN_TYPE,
    ) -> None:
        """
        Initialize wallet.

        Args:
            master: Master extended private key
            name: Wallet identifier
            network: Target network
            coin_type: SLIP-44 coin type used for derivation

        Raises:
            WalletError: If master key is public-only
        """
        if not master.is_private:
            raise WalletError("Wallet requires a master key with a private key")

        self.name = name
        self.network = network
        self.coin_type = coin_type
        self._master = master
        self._accounts: Dict[str, Account] = {}
        self._logger = logging.getLogger(f"{__name__}.Wallet.{name}")

    @classmethod
    def from_mnemonic(
        cls,
        mnemonic: str,
        wordlist: Wordlist,
        passphrase: str = "",
        **kwargs: Any
    ) -> "Wallet":
        """
        Restore wallet from BIP39 mnemonic.

        Args:
            mnemonic: Mnemonic phrase
            wordlist: Wordlist the phrase was drawn from
            passphrase: Optional BIP39 passphrase
            **kwargs: Passed to Wallet()

        Raises:
            MnemonicError: If mnemonic is invalid
        """
        validate_mnemonic(mnemonic, wordlist)
        master = generate_master_key(mnemonic_to_seed(mnemonic, passphrase))
        return cls(master, **kwargs)

    @classmethod
    def create(
        cls,
        wordlist: Wordlist,
        strength: int = 256,
        passphrase: str = "",
        **kwargs: Any
    ) -> Tuple["Wallet", str]:
        """
        Create wallet with a fresh random mnemonic.

        Returns:
            Tuple of (wallet, mnemonic); the caller must store the mnemonic
        """
        mnemonic = new_mnemonic(wordlist, strength)
        return cls.from_mnemonic(mnemonic, wordlist, passphrase, **kwargs), mnemonic

    def account(self, index: int = 0, change: int = 0, account: int = 0) -> Account:
        """
        Derive account at m/44'/coin_type'/account'/change/index.

        Args:
            index: Address index
            change: Change level
            account: Account level

        Returns:
            Account instance
        """
        path = DerivationPath(self.coin_type, account, change, index)
        try:
            key = derive_bip44_key(self._master, self.coin_type, account, change, index)
        except DerivationError as e:
            self._logger.warning(f"Derivation failed for {path}: {e}")
            raise

        result = Account.from_key(key, path, self.network)
        self._remember(result)
        return result

    def accounts(
        self,
        count: int,
        start: int = 0,
        change: int = 0,
        account: int = 0
    ) -> List[Account]:
        """Derive count consecutive accounts starting at address index start."""
        try:
            keys = derive_bip44_keys(
                self._master, self.coin_type, account, change, start, count
            )
        except DerivationError as e:
            self._logger.warning(f"Derivation failed for accounts {start}..{start + count - 1}: {e}")
            raise

        results = []
        for offset, key in enumerate(keys):
            path = DerivationPath(self.coin_type, account, change, start + offset)
            result = Account.from_key(key, path, self.network)
            self._remember(result)
            results.append(result)
        return results

    def find_account(
        self,
        address: str,
        limit: int = 20,
        change: int = 0,
        account: int = 0
    ) -> Optional[Account]:
        """
        Search the first limit address indexes for an address.

        Args:
            address: Address to look for
            limit: Number of address indexes to scan
            change: Change level
            account: Account level

        Returns:
            Matching Account or None
        """
        address = validate_address(address)
        known = self._accounts.get(address)
        if known is not None:
            path = DerivationPath.parse(known.path)
            if (path.coin_type, path.account, path.change) == (self.coin_type, account, change):
                return known

        # Scanned keys are not added to the registry unless they match
        keys = derive_bip44_keys(self._master, self.coin_type, account, change, 0, limit)
        for index, key in enumerate(keys):
            if key.to_private_key().address() == address:
                path = DerivationPath(self.coin_type, account, change, index)
                result = Account.from_key(key, path, self.network)
                self._remember(result)
                return result

        self._logger.debug(f"Address {address} not found in first {limit} indexes")
        return None

    def _remember(self, account: Account) -> None:
        if account.address not in self._accounts:
            self._accounts[account.address] = account
            self._logger.info(f"Derived account {account.address} at {account.path}")

    def list_accounts(self) -> List[Account]:
        """Get accounts derived so far."""
        return list(self._accounts.values())

    @property
    def addresses(self) -> List[str]:
        """Get addresses derived so far."""
        return list(self._accounts.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Export public wallet data (no key material)."""
        return {
            "name": self.name,
            "network": self.network.value,
            "coin_type": self.coin_type,
            "accounts": [
                {"address": account.address, "path": account.path}
                for account in self._accounts.values()
            ],
        }

    def __repr__(self) -> str:
        return f"Wallet({self.name}, {self.network.value}, accounts={len(self._accounts)})"


class WalletModule:
    """
    Wallet management module.

    Handles creation and management of multiple named wallets that share
    one wordlist.
    """

    def __init__(
        self,
        wordlist: Optional[Wordlist] = None,
        network: Network = DEFAULT_NETWORK,
        coin_type: int = PARTISIA_COIN_TYPE,
    ) -> None:
        """
        Initialize wallet module.

        Args:
            wordlist: Wordlist to use (default: English)
            network: Default network for new wallets
            coin_type: Default coin type for new wallets
        """
        self.wordlist = wordlist or Wordlist.english()
        self.network = network
        self.coin_type = coin_type
        self._wallets: Dict[str, Wallet] = {}
        self._default_wallet: Optional[str] = None
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _register(self, wallet: Wallet) -> Wallet:
        self._wallets[wallet.name] = wallet
        if self._default_wallet is None:
            self._default_wallet = wallet.name
        return wallet

    def _check_new(self, name: str) -> None:
        if name in self._wallets:
            raise WalletError(f"Wallet already exists: {name}")

    def create_wallet(
        self,
        name: str,
        strength: int = 256,
        passphrase: str = "",
        network: Optional[Network] = None
    ) -> Tuple[Wallet, str]:
        """
        Create new wallet with a random mnemonic.

        Args:
            name: Wallet name
            strength: Entropy bits (128-256)
            passphrase: Optional BIP39 passphrase
            network: Target network

        Returns:
            Tuple of (wallet, mnemonic)
        """
        self._check_new(name)
        wallet, mnemonic = Wallet.create(
            self.wordlist,
            strength=strength,
            passphrase=passphrase,
            name=name,
            network=network or self.network,
            coin_type=self.coin_type,
        )
        self._register(wallet)
        self._logger.info(f"Created wallet: {name}")
        return wallet, mnemonic

    def import_wallet(
        self,
        name: str,
        mnemonic: str,
        passphrase: str = "",
        network: Optional[Network] = None
    ) -> Wallet:
        """
        Import wallet from mnemonic.

        Raises:
            WalletError: If name is taken
            MnemonicError: If mnemonic is invalid
        """
        self._check_new(name)
        wallet = Wallet.from_mnemonic(
            mnemonic,
            self.wordlist,
            passphrase,
            name=name,
            network=network or self.network,
            coin_type=self.coin_type,
        )
        self._register(wallet)
        self._logger.info(f"Imported wallet: {name}")
        return wallet

    def get_wallet(self, name: Optional[str] = None) -> Wallet:
        """
        Get wallet by name or default.

        Args:
            name: Wallet name (optional)

        Returns:
            Wallet instance
        """
        if name is None:
            if self._default_wallet is None:
                raise WalletError("No wallets available")
            name = self._default_wallet

        if name not in self._wallets:
            raise WalletError(f"Wallet not found: {name}")

        return self._wallets[name]

    @property
    def default(self) -> Wallet:
        """Get default wallet."""
        return self.get_wallet()

    def list_wallets(self) -> List[str]:
        """Get all wallet names."""
        return list(self._wallets.keys())

    def remove_wallet(self, name: str) -> None:
        """
        Remove wallet.

        Args:
            name: Wallet name to remove
        """
        if name not in self._wallets:
            raise WalletError(f"Wallet not found: {name}")

        del self._wallets[name]

        # Update default if needed
        if self._default_wallet == name:
            self._default_wallet = list(self._wallets.keys())[0] if self._wallets else None

        self._logger.info(f"Removed wallet: {name}")

    def set_default_wallet(self, name: str) -> None:
        """
        Set default wallet.

        Args:
            name: Wallet name
        """
        if name not in self._wallets:
            raise WalletError(f"Wallet not found: {name}")

        self._default_wallet = name
        self._logger.info(f"Set default wallet: {name}")

    def export_all(self) -> Dict[str, Any]:
        """Export public data for all wallets."""
        return {
            "wallets": {
                name: wallet.to_dict()
                for name, wallet in self._wallets.items()
            },
            "default_wallet": self._default_wallet,
        }
