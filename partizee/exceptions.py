"""Partizee exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
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
]


class PartizeeError(Exception):
    """Base exception for all Partizee errors."""
    
    def __init__(
        self, 
        message: str, 
        code: Optional[int] = None, 
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        
    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(PartizeeError):
    """Raised when validation fails."""
    pass


class MnemonicError(ValidationError):
    """Raised when a mnemonic or its entropy is malformed."""
    pass


class InvalidEntropySize(MnemonicError):
    """Raised when entropy is not 128-256 bits in steps of 32."""
    
    def __init__(self, bits: int, message: Optional[str] = None) -> None:
        if message is None:
            message = (
                f"Invalid entropy size: {bits} bits, "
                "must be a multiple of 32 in range [128, 256]"
            )
        super().__init__(message)
        self.bits = bits


class EmptyMnemonic(MnemonicError):
    """Raised when the mnemonic is empty."""
    
    def __init__(self, message: str = "Empty mnemonic") -> None:
        super().__init__(message)


class InvalidWordCount(MnemonicError):
    """Raised when the word count is not 12, 15, 18, 21 or 24."""
    
    def __init__(self, word_count: int, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Invalid word count: {word_count}"
        super().__init__(message)
        self.word_count = word_count


class UnknownWord(MnemonicError):
    """Raised when a word is not in the wordlist."""
    
    def __init__(self, word: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Invalid word in mnemonic: {word}"
        super().__init__(message)
        self.word = word


class ChecksumMismatch(MnemonicError):
    """Raised when the mnemonic checksum does not match its entropy."""
    
    def __init__(self, message: str = "Invalid checksum") -> None:
        super().__init__(message)


class CryptoError(PartizeeError):
    """Raised when cryptographic operation fails."""
    pass


class DerivationError(CryptoError):
    """Raised when key derivation fails."""
    
    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class InvalidScalar(DerivationError):
    """Raised when derived key material is not a valid secp256k1 scalar."""
    pass


class MissingPrivateKey(DerivationError):
    """Raised when hardened derivation is attempted on a public-only key."""
    pass


class DerivedKeyIsZero(DerivationError):
    """Raised when the derived private scalar is zero."""
    pass


class DerivedKeyIsInfinity(DerivationError):
    """Raised when the derived public point is the point at infinity."""
    pass


class DerivationFailed(DerivationError):
    """Raised when a derivation path does not yield a spendable key."""
    pass


class WalletError(PartizeeError):
    """Raised when wallet operation fails."""
    pass
