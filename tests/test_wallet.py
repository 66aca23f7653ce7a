import logging

import pytest

from partizee.constants import ETHEREUM_COIN_TYPE, Network
from partizee.crypto.bip39 import mnemonic_to_seed
from partizee.crypto.bip44 import derive_bip44_key
from partizee.crypto.hd import generate_master_key
from partizee.exceptions import ChecksumMismatch, ValidationError, WalletError
from partizee.modules.wallet import Wallet, WalletModule
from partizee.utils.validation import is_valid_address

ABOUT = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"


@pytest.fixture
def wallet(wordlist):
    return Wallet.from_mnemonic(ABOUT, wordlist, name="test")


def test_account(wallet):
    account = wallet.account()
    master = generate_master_key(mnemonic_to_seed(ABOUT))
    key = derive_bip44_key(master, 3757, 0, 0, 0)
    assert account.path == "m/44'/3757'/0'/0/0"
    assert account.private_key == key.private_key.hex()
    assert account.network == Network.TESTNET
    assert is_valid_address(account.address)
    assert wallet.account() == account


def test_ethereum_coin_type(wordlist):
    wallet = Wallet.from_mnemonic(ABOUT, wordlist, coin_type=ETHEREUM_COIN_TYPE)
    account = wallet.account()
    assert account.private_key == "1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727"
    assert account.path == "m/44'/60'/0'/0/0"


def test_accounts(wallet):
    accounts = wallet.accounts(3, start=1)
    assert [a.path for a in accounts] == [
        "m/44'/3757'/0'/0/1", "m/44'/3757'/0'/0/2", "m/44'/3757'/0'/0/3"
    ]
    assert len({a.address for a in accounts}) == 3
    assert accounts[1] == wallet.account(2)
    assert set(wallet.addresses) == {a.address for a in accounts}


def test_find_account(wordlist):
    wallet = Wallet.from_mnemonic(ABOUT, wordlist)
    target = Wallet.from_mnemonic(ABOUT, wordlist).account(5)
    assert wallet.find_account(target.address) == target
    assert wallet.find_account(target.address, limit=3) == target
    assert wallet.find_account("00" + "11" * 20, limit=2) is None
    with pytest.raises(ValidationError):
        wallet.find_account("nope")


def test_find_account_limit(wordlist):
    target = Wallet.from_mnemonic(ABOUT, wordlist).account(5)
    assert Wallet.from_mnemonic(ABOUT, wordlist).find_account(target.address, limit=5) is None


def test_find_account_only_registers_match(wordlist):
    wallet = Wallet.from_mnemonic(ABOUT, wordlist)
    target = Wallet.from_mnemonic(ABOUT, wordlist).account(5)
    assert wallet.find_account(target.address, limit=10) == target
    assert wallet.addresses == [target.address]

    assert wallet.find_account("00" + "11" * 20, limit=4) is None
    assert wallet.addresses == [target.address]


def test_find_account_respects_branch(wordlist):
    wallet = Wallet.from_mnemonic(ABOUT, wordlist)
    change = wallet.account(0, change=1)
    assert wallet.find_account(change.address, change=1) == change
    assert wallet.find_account(change.address, limit=5) is None
    assert wallet.find_account(change.address, limit=5, account=1, change=1) is None


def test_invalid_mnemonic(wordlist):
    with pytest.raises(ChecksumMismatch):
        Wallet.from_mnemonic(" ".join(["abandon"] * 12), wordlist)


def test_passphrase_changes_accounts(wordlist):
    plain = Wallet.from_mnemonic(ABOUT, wordlist).account()
    protected = Wallet.from_mnemonic(ABOUT, wordlist, passphrase="TREZOR").account()
    assert plain.address != protected.address


def test_create(wordlist):
    wallet, mnemonic = Wallet.create(wordlist)
    assert len(mnemonic.split()) == 24
    restored = Wallet.from_mnemonic(mnemonic, wordlist)
    assert restored.account() == wallet.account()


def test_public_master_rejected(master):
    with pytest.raises(WalletError):
        Wallet(master.public_only())


def test_secrets_not_exposed(wallet):
    account = wallet.account()
    assert account.private_key not in repr(account)
    assert account.private_key not in str(wallet.to_dict())
    assert wallet.to_dict()["accounts"] == [{"address": account.address, "path": account.path}]


def test_logging(wallet, caplog):
    with caplog.at_level(logging.INFO, logger="partizee"):
        account = wallet.account(9)
    assert account.address in caplog.text
    assert account.private_key not in caplog.text


def test_wallet_module(wordlist):
    module = WalletModule(wordlist, network=Network.MAINNET)
    imported = module.import_wallet("main", ABOUT)
    created, mnemonic = module.create_wallet("fresh", strength=128)
    assert len(mnemonic.split()) == 12
    assert module.list_wallets() == ["main", "fresh"]
    assert module.default is imported
    assert module.get_wallet("fresh") is created
    assert created.network == Network.MAINNET

    with pytest.raises(WalletError):
        module.import_wallet("main", ABOUT)
    with pytest.raises(WalletError):
        module.get_wallet("missing")

    module.set_default_wallet("fresh")
    assert module.default is created
    module.remove_wallet("fresh")
    assert module.default is imported
    module.remove_wallet("main")
    with pytest.raises(WalletError):
        module.get_wallet()
    with pytest.raises(WalletError):
        module.remove_wallet("main")


def test_wallet_module_export(wordlist):
    module = WalletModule(wordlist)
    module.import_wallet("main", ABOUT).account()
    exported = module.export_all()
    assert exported["default_wallet"] == "main"
    assert exported["wallets"]["main"]["network"] == "testnet"
    assert exported["wallets"]["main"]["coin_type"] == 3757
