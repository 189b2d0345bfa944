"""Fibonacci values produced with different loop styles."""

from __future__ import annotations


def _show(values: list[int]) -> list[int]:
    for v in values:
        print(f"next val is {v}")
    return values


def fib_loop(n: int) -> list[int]:
    """Always produces at least one value, like a loop checked at the end."""
    a, b, i = 1, 1, 2
    values = []
    while True:
        a, b = b, a + b
        i += 1
        values.append(b)
        if i >= n:
            break
    return _show(values)


def fib_while(n: int) -> list[int]:
    a, b, i = 1, 1, 2
    values = []
    while i < n:
        a, b = b, a + b
        i += 1
        values.append(b)
    return _show(values)


def fib_for(n: int) -> list[int]:
    a, b = 1, 1
    values = []
    for _ in range(2, n):
        a, b = b, a + b
        values.append(b)
    return _show(values)


def main(argv=None) -> int:
    n = 10
    fib_loop(n)
    fib_while(n)
    fib_for(n)
    return 0