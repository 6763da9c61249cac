"""String routines: base conversion, tokenising and sentence handling."""

from __future__ import annotations

from collections import Counter

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def to_base(num: int, base: int) -> str:
    """Write a positive ``num`` in ``base`` with upper-case digits.

    Zero and negative numbers give an empty string.
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}")
    digits = []
    while num > 0:
        num, rem = divmod(num, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def concat_hex36(n: int) -> str:
    """Return n**2 in hexadecimal followed by n**3 in base 36."""
    return to_base(n * n, 16) + to_base(n * n * n, 36)


def tokens(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(sep) if piece]


def defang_ip_addr(address: str) -> str:
    """Replace each separating period of an address with ``[.]``."""
    return "[.]".join(tokens(address, "."))


def truncate_sentence(s: str, k: int) -> str:
    """Return the first ``k`` words of ``s`` joined by single spaces."""
    words = tokens(s, " ")
    if k > len(words):
        raise ValueError(f"sentence has {len(words)} words, fewer than {k}")
    return " ".join(words[:max(k, 0)])


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Return words that occur exactly once across both sentences."""
    counts = Counter(tokens(s1, " ") + tokens(s2, " "))
    return [word for word, count in counts.items() if count == 1]