"""Small warm-up puzzles."""

from __future__ import annotations


def _fizz_buzz_word(i: int) -> str:
    if i % 15 == 0:
        return "FizzBuzz"
    if i % 3 == 0:
        return "Fizz"
    if i % 5 == 0:
        return "Buzz"
    return str(i)


def fizz_buzz(n: int) -> list[str]:
    """Return the Fizz Buzz words for 1 through ``n``."""
    return [_fizz_buzz_word(i) for i in range(1, n + 1)]