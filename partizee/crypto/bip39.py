"""BIP39 mnemonic implementation for Partizee."""

import hashlib
import logging
import secrets
import unicodedata
from typing import List, Optional, Sequence

from ..constants import (
    BITS_PER_WORD,
    MNEMONIC_SALT_PREFIX,
    PBKDF2_ROUNDS,
    SEED_LENGTH,
    VALID_ENTROPY_BITS,
    VALID_WORD_COUNTS,
)
from ..exceptions import (
    ChecksumMismatch,
    EmptyMnemonic,
    InvalidEntropySize,
    InvalidWordCount,
    MnemonicError,
)
from ..types.common import Entropy, Seed
from .wordlist import Wordlist

__all__ = [
    "pack_bits",
    "unpack_bits",
    "generate_entropy",
    "generate_mnemonic",
    "new_mnemonic",
    "mnemonic_to_seed",
    "mnemonic_to_entropy",
    "validate_mnemonic",
    "is_valid_mnemonic",
]

logger = logging.getLogger(__name__)


def pack_bits(values: Sequence[int], width: int = BITS_PER_WORD) -> bytes:
    """
    Pack fixed-width integers into bytes, most significant bit first.
    
    The last byte is zero-padded on the right when the total bit count
    is not a multiple of 8.
    
    Args:
        values: Integers, each in [0, 2**width)
        width: Bits per value
        
    Returns:
        Packed bytes of length ceil(len(values) * width / 8)
        
    Raises:
        ValueError: If a value does not fit in width bits
    """
    if width <= 0:
        raise ValueError("Bit width must be positive")
        
    acc = 0
    for value in values:
        if value < 0 or value >> width:
            raise ValueError(f"Value {value} does not fit in {width} bits")
        acc = (acc << width) | value
        
    total_bits = len(values) * width
    padding = -total_bits % 8
    return (acc << padding).to_bytes((total_bits + padding) // 8, "big")


def unpack_bits(
    data: bytes,
    width: int = BITS_PER_WORD,
    count: Optional[int] = None
) -> List[int]:
    """
    Split bytes into fixed-width integers, most significant bit first.
    
    Inverse of pack_bits: ``unpack_bits(pack_bits(v, w), w, len(v)) == list(v)``.
    
    Args:
        data: Bytes to read
        width: Bits per value
        count: Number of values to read (default: as many whole values as fit)
        
    Returns:
        List of integers
        
    Raises:
        ValueError: If data holds fewer than count * width bits
    """
    if width <= 0:
        raise ValueError("Bit width must be positive")
        
    total_bits = len(data) * 8
    if count is None:
        count = total_bits // width
    if count < 0 or count * width > total_bits:
        raise ValueError(f"Cannot read {count} values of {width} bits from {len(data)} bytes")
        
    acc = int.from_bytes(data, "big")
    mask = (1 << width) - 1
    shift = total_bits
    values = []
    for _ in range(count):
        shift -= width
        values.append((acc >> shift) & mask)
    return values


def _checksum_byte(entropy: bytes) -> int:
    return hashlib.sha256(entropy).digest()[0]


def _check_entropy(entropy: bytes) -> int:
    bits = len(entropy) * 8
    if bits not in VALID_ENTROPY_BITS:
        raise InvalidEntropySize(bits)
    return bits


def _normalize(text: str) -> str:
    return unicodedata.normalize("NFKD", text)


def generate_entropy(strength: int = 128) -> Entropy:
    """Generate random entropy of the given bit strength."""
    if strength not in VALID_ENTROPY_BITS:
        raise InvalidEntropySize(strength)
    return Entropy(secrets.token_bytes(strength // 8))


def generate_mnemonic(entropy: bytes, wordlist: Wordlist) -> str:
    """
    Encode entropy as a BIP39 mnemonic phrase.
    
    Args:
        entropy: 16, 20, 24, 28 or 32 bytes
        wordlist: Wordlist to draw words from
        
    Returns:
        Space-separated mnemonic of 12 to 24 words
        
    Raises:
        InvalidEntropySize: If entropy length is not supported
    """
    entropy_bits = _check_entropy(entropy)
    word_count = (entropy_bits + entropy_bits // 32) // BITS_PER_WORD
    
    # Only the top ENT/32 bits of the checksum byte are read
    data = bytes(entropy) + bytes([_checksum_byte(entropy)])
    indexes = unpack_bits(data, BITS_PER_WORD, word_count)
    
    logger.debug(f"Encoded {entropy_bits}-bit entropy as {word_count} words")
    return " ".join(wordlist.word(i) for i in indexes)


def new_mnemonic(wordlist: Wordlist, strength: int = 128) -> str:
    """Generate a fresh random mnemonic phrase."""
    return generate_mnemonic(generate_entropy(strength), wordlist)


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> Seed:
    """
    Stretch a mnemonic and passphrase into a 64-byte seed with PBKDF2.
    
    The phrase is not validated, so any word sequence can be stretched.
    
    Args:
        mnemonic: Mnemonic phrase
        passphrase: Optional passphrase
        
    Returns:
        64-byte seed
    """
    password = _normalize(mnemonic).encode("utf-8")
    salt = (MNEMONIC_SALT_PREFIX + _normalize(passphrase)).encode("utf-8")
    
    return Seed(hashlib.pbkdf2_hmac(
        "sha512",
        password,
        salt,
        PBKDF2_ROUNDS,
        dklen=SEED_LENGTH
    ))


def _split_words(mnemonic: str) -> List[str]:
    if not mnemonic or not mnemonic.strip():
        raise EmptyMnemonic()
        
    words = _normalize(mnemonic).split()
    if len(words) not in VALID_WORD_COUNTS:
        raise InvalidWordCount(len(words))
    return words


def _decode(mnemonic: str, wordlist: Wordlist) -> bytes:
    """Validate mnemonic and return its entropy."""
    words = _split_words(mnemonic)
    indexes = [wordlist.index(word) for word in words]
    
    data = pack_bits(indexes, BITS_PER_WORD)
    total_bits = len(indexes) * BITS_PER_WORD
    checksum_bits = total_bits // 33
    entropy_bytes = (total_bits - checksum_bits) // 8
    
    entropy = data[:entropy_bytes]
    expected = unpack_bits(data[entropy_bytes:], checksum_bits, 1)[0]
    computed = _checksum_byte(entropy) >> (8 - checksum_bits)
    
    if expected != computed:
        raise ChecksumMismatch()
    return entropy


def validate_mnemonic(mnemonic: str, wordlist: Wordlist) -> None:
    """
    Validate mnemonic phrase.
    
    Args:
        mnemonic: Mnemonic phrase
        wordlist: Wordlist the phrase was drawn from
        
    Raises:
        EmptyMnemonic: If phrase is empty
        InvalidWordCount: If word count is not 12, 15, 18, 21 or 24
        UnknownWord: If a word is not in the wordlist
        ChecksumMismatch: If checksum bits do not match the entropy
    """
    _decode(mnemonic, wordlist)


def is_valid_mnemonic(mnemonic: str, wordlist: Wordlist) -> bool:
    """Check if mnemonic phrase is valid."""
    try:
        _decode(mnemonic, wordlist)
        return True
    except MnemonicError:
        return False


def mnemonic_to_entropy(mnemonic: str, wordlist: Wordlist) -> Entropy:
    """
    Recover the entropy encoded by a valid mnemonic.
    
    Raises:
        MnemonicError: If the mnemonic is invalid
    """
    return Entropy(_decode(mnemonic, wordlist))
