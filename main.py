"""
Partizee Key Derivation Usage Examples

This file demonstrates key features of the Partizee key derivation library.
"""

import logging

from partizee import PARTISIA_COIN_TYPE, Network, Wallet, WalletModule, Wordlist
from partizee.crypto import (
    derive_bip44_key,
    generate_entropy,
    generate_master_key,
    generate_mnemonic,
    mnemonic_to_seed,
    validate_mnemonic,
)
from partizee.exceptions import MnemonicError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def mnemonic_example(wordlist: Wordlist) -> str:
    """Example 1: Mnemonic generation and validation."""
    print("\n=== Mnemonic Example ===")
    
    entropy = generate_entropy(256)
    mnemonic = generate_mnemonic(entropy, wordlist)
    print(f"Words: {len(mnemonic.split())}")
    
    validate_mnemonic(mnemonic, wordlist)
    print("Mnemonic is valid")
    
    try:
        validate_mnemonic(" ".join(["abandon"] * 12), wordlist)
    except MnemonicError as e:
        print(f"Rejected: {e}")
        
    return mnemonic


def derivation_example(mnemonic: str) -> None:
    """Example 2: Raw BIP32/BIP44 derivation."""
    print("\n=== Derivation Example ===")
    
    seed = mnemonic_to_seed(mnemonic, passphrase="")
    master = generate_master_key(seed)
    print(f"Master: {master}")
    
    key = derive_bip44_key(master, PARTISIA_COIN_TYPE, 0, 0, 0)
    print(f"Depth: {key.depth}")
    print(f"Address: {key.to_private_key().address()}")
    
    # Public-only keys can still derive non-hardened children
    public_parent = master.derive_path(f"m/44'/{PARTISIA_COIN_TYPE}'/0'/0").public_only()
    watch_only = public_parent.derive(0)
    print(f"Watch-only address: {watch_only.to_public_key().address()}")


def wallet_example(wordlist: Wordlist, mnemonic: str) -> None:
    """Example 3: Wallet accounts."""
    print("\n=== Wallet Example ===")
    
    wallet = Wallet.from_mnemonic(mnemonic, wordlist, name="demo")
    for account in wallet.accounts(3):
        print(f"{account.path}: {account.address}")
        
    wallets = WalletModule(wordlist, network=Network.TESTNET)
    fresh, phrase = wallets.create_wallet("fresh", strength=128)
    print(f"New wallet '{fresh.name}' with {len(phrase.split())} words")
    print(f"Default account: {fresh.account().address}")


def main() -> None:
    """Run all examples."""
    wordlist = Wordlist.english()
    mnemonic = mnemonic_example(wordlist)
    derivation_example(mnemonic)
    wallet_example(wordlist, mnemonic)


if __name__ == "__main__":
    main()
