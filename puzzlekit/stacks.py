"""Stack-based puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_OPERATORS = {"+", "-", "*", "/"}
_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = set(_PAIRS.values())


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def push(self, val: int) -> None:
        self._items.append(val)
        if not self._minima or val <= self._minima[-1]:
            self._minima.append(val)

    def pop(self) -> None:
        if not self._items:
            raise IndexError("pop from empty stack")
        if self._items[-1] == self._minima[-1]:
            self._minima.pop()
        self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]

    def __len__(self) -> int:
        return len(self._items)


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for token in tokens:
        if token not in _OPERATORS:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        if token == "+":
            stack.append(left + right)
        elif token == "-":
            stack.append(left - right)
        elif token == "*":
            stack.append(left * right)
        else:
            stack.append(_truncating_div(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if ch not in _CLOSERS:
            stack.append(ch)
        elif not stack or _PAIRS.get(stack.pop()) != ch:
            return False
    return not stack


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one (0 if none)."""
    answer = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temp in enumerate(temperatures):
        while waiting and temp > temperatures[waiting[-1]]:
            earlier = waiting.pop()
            answer[earlier] = day - earlier
        waiting.append(day)
    return answer


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars reach ``target``."""
    cars = sorted(
        ((pos, (target - pos) / spd) for pos, spd in zip(position, speed)),
        reverse=True,
    )
    fleets = 0
    slowest = 0.0
    for _, time in cars:
        if time > slowest:
            fleets += 1
            slowest = time
    return fleets