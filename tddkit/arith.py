"""Small integer and string helpers."""

from __future__ import annotations

from collections.abc import Iterable


def add(augend: int, addend: int) -> int:
    """Return the sum of two integers."""
    return augend + addend


def repeat(character: str, count: int) -> str:
    """Return ``character`` repeated ``count`` times."""
    return character * max(count, 0)


def sum_numbers(numbers: Iterable[int]) -> int:
    """Return the total of ``numbers``."""
    return sum(numbers)


def sum_all(*args: Iterable[int]) -> list[int]:
    """Return the total of each given collection, in order."""
    return [sum_numbers(numbers) for numbers in args]