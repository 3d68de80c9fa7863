"""Classic recursive exercises on sequences and strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "tower_of_hanoi",
    "binary_search",
    "copy_string",
    "find_first_capital",
    "is_palindrome",
    "selection_sort",
    "reverse_string",
]


def tower_of_hanoi(
    n: int,
    source: str = "S",
    auxiliary: str = "A",
    destination: str = "D",
) -> list[tuple[str, str]]:
    """Return the moves that carry ``n`` disks from ``source`` to ``destination``.

    Each move is a ``(from_peg, to_peg)`` pair; there are ``2**n - 1`` of them.
    """
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    moves: list[tuple[str, str]] = []

    def solve(disks: int, src: str, aux: str, dst: str) -> None:
        if disks == 1:
            moves.append((src, dst))
            return
        solve(disks - 1, src, dst, aux)
        moves.append((src, dst))
        solve(disks - 1, aux, src, dst)

    solve(n, source, auxiliary, destination)
    return moves


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the sorted ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == key:
            return mid
        if key < items[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def copy_string(text: str) -> str:
    """Return a character-by-character copy of ``text``."""
    return "".join(ch for ch in text)


def find_first_capital(text: str) -> str | None:
    """Return the first ASCII capital letter in ``text``, or None."""
    return next((ch for ch in text if "A" <= ch <= "Z"), None)


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same in both directions (case-sensitive)."""
    return text == text[::-1]


def selection_sort(items: Sequence[Any]) -> list[Any]:
    """Return a new list of ``items`` ordered by selection sort."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def reverse_string(text: str) -> str:
    """Return ``text`` written backwards."""
    return text[::-1]