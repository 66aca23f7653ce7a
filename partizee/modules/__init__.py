"""Partizee modules."""

from .wallet import Account, Wallet, WalletModule

__all__ = [
    "Account",
    "Wallet",
    "WalletModule",
]
