"""BIP39 wordlist table."""

from typing import Iterable, Iterator, Tuple

from mnemonic import Mnemonic

from ..constants import WORDLIST_SIZE
from ..exceptions import UnknownWord, ValidationError

__all__ = ["Wordlist"]


class Wordlist:
    """
    Read-only BIP39 wordlist.

    Build it once at startup (usually with ``Wordlist.english()``) and pass
    the same instance to every mnemonic operation.
    """

    __slots__ = ("_words", "_lookup", "language")

    def __init__(self, words: Iterable[str], language: str = "english") -> None:
        """
        Initialize wordlist.

        Args:
            words: Exactly 2048 unique words, index 0 first
            language: Language label

        Raises:
            ValidationError: If the table has the wrong size or duplicates
        """
        words = tuple(word.strip() for word in words if word.strip())
        if len(words) != WORDLIST_SIZE:
            raise ValidationError(
                f"Wordlist must contain exactly {WORDLIST_SIZE} words, got {len(words)}"
            )
        lookup = {word: i for i, word in enumerate(words)}
        if len(lookup) != WORDLIST_SIZE:
            raise ValidationError("Wordlist must contain unique words")

        object.__setattr__(self, "_words", words)
        object.__setattr__(self, "_lookup", lookup)
        object.__setattr__(self, "language", language)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Wordlist is read-only")

    @classmethod
    def english(cls) -> "Wordlist":
        """Load the English BIP39 table shipped with the mnemonic package."""
        return cls(Mnemonic("english").wordlist, language="english")

    @classmethod
    def from_text(cls, text: str, language: str = "custom") -> "Wordlist":
        """Build from newline-separated text, one word per line."""
        return cls(text.splitlines(), language=language)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def word(self, index: int) -> str:
        """Get word at index."""
        if not 0 <= index < WORDLIST_SIZE:
            raise IndexError(f"Word index {index} out of range")
        return self._words[index]

    def index(self, word: str) -> int:
        """
        Get index of word.

        Raises:
            UnknownWord: If word is not in the list
        """
        try:
            return self._lookup[word]
        except KeyError:
            raise UnknownWord(word) from None

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Wordlist({self.language}, {len(self._words)} words)"
