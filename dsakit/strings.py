"""ASCII string utilities: case conversion, counting, reversal, anagrams, permutations."""

from __future__ import annotations

import itertools
import re
import string
from collections import Counter
from collections.abc import Iterator

__all__ = [
    "length",
    "to_lower",
    "to_upper",
    "toggle_case",
    "count_vowels_consonants",
    "count_words",
    "is_alphanumeric",
    "reverse",
    "compare",
    "is_palindrome",
    "duplicates",
    "is_anagram",
    "permutations",
]

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TOGGLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_lowercase + string.ascii_uppercase,
)
_VOWELS = frozenset("AEIOUaeiou")
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_LOWER = frozenset(string.ascii_lowercase)
_SPACE_RUN = re.compile(r" +")


def length(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def to_lower(s: str) -> str:
    """Convert ASCII uppercase letters to lowercase."""
    return s.translate(_TO_LOWER)


def to_upper(s: str) -> str:
    """Convert ASCII lowercase letters to uppercase."""
    return s.translate(_TO_UPPER)


def toggle_case(s: str) -> str:
    """Swap the case of every ASCII letter."""
    return s.translate(_TOGGLE)


def count_vowels_consonants(s: str) -> tuple[int, int]:
    """Return (vowels, consonants) among the ASCII letters of s."""
    vowels = sum(1 for ch in s if ch in _VOWELS)
    consonants = sum(1 for ch in s if ch in _LETTERS and ch not in _VOWELS)
    return vowels, consonants


def count_words(s: str) -> int:
    """Count words as one more than the number of runs of spaces."""
    return len(_SPACE_RUN.findall(s)) + 1


def is_alphanumeric(s: str) -> bool:
    """True if every character is an ASCII letter or digit."""
    return all(ch in _ALNUM for ch in s)


def reverse(s: str) -> str:
    """Return s reversed."""
    return s[::-1]


def compare(a: str, b: str) -> int:
    """Compare character by character: negative, zero or positive like strcmp."""
    return (a > b) - (a < b)


def is_palindrome(s: str) -> bool:
    """True if s reads the same backwards."""
    return s == s[::-1]


def _check_lowercase(s: str) -> None:
    bad = next((ch for ch in s if ch not in _LOWER), None)
    if bad is not None:
        raise ValueError(f"only lowercase ASCII letters are supported, got {bad!r}")


def duplicates(s: str) -> dict[str, int]:
    """Letters occurring more than once, with their counts, in alphabetical order."""
    _check_lowercase(s)
    counts = Counter(s)
    return {ch: counts[ch] for ch in sorted(counts) if counts[ch] > 1}


def is_anagram(s: str, t: str) -> bool:
    """True if t uses exactly the letters of s."""
    _check_lowercase(s)
    _check_lowercase(t)
    return Counter(s) == Counter(t)


def permutations(s: str) -> Iterator[str]:
    """Yield every arrangement of the characters of s, by position."""
    for arrangement in itertools.permutations(s):
        yield "".join(arrangement)