"""Problems on short lowercase strings."""

from __future__ import annotations

from collections import Counter


def diverse_substring(text):
    """First two-letter substring with distinct letters, or None."""
    for first, second in zip(text, text[1:]):
        if first != second:
            return first + second
    return None


def can_twist_to_palindrome(text):
    """Whether shifting each letter one step up or down can yield a palindrome."""
    return all(abs(ord(a) - ord(b)) in (0, 2) for a, b in zip(text, reversed(text)))


def reversible_substring(text):
    """1-based bounds of a substring whose reversal makes the text smaller, or None."""
    for position, (first, second) in enumerate(zip(text, text[1:]), 1):
        if first > second:
            return position, position + 1
    return None


def matches_shuffle_hash(password, hashed):
    """Whether ``hashed`` contains a contiguous permutation of ``password``."""
    size = len(password)
    if size > len(hashed):
        return False
    wanted = Counter(password)
    window = Counter(hashed[:size])
    if window == wanted:
        return True
    for leaving, entering in zip(hashed, hashed[size:]):
        window[entering] += 1
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        if window == wanted:
            return True
    return False


def fix_caps_lock(word):
    """Swap the case of a word that looks typed with Caps Lock on."""
    if not word:
        return word
    upper = sum(1 for ch in word if ch.isupper())
    if upper == len(word):
        return word.lower()
    if upper == len(word) - 1 and word[0].islower():
        return word[0].upper() + word[1:].lower()
    return word


__all__ = [
    "diverse_substring",
    "can_twist_to_palindrome",
    "reversible_substring",
    "matches_shuffle_hash",
    "fix_caps_lock",
]