"""Functions passed as values."""

from __future__ import annotations

import argparse
from typing import Callable


def apply(value: int, f: Callable[[int], int]) -> int:
    """Call ``f`` with ``value`` and return its result."""
    return f(value)


def square(value: int) -> int:
    return value * value


def cube(value: int) -> int:
    return value * value * value


def main(argv=None) -> int:
    """Print ``square`` and ``cube`` applied to a value (2 by default)."""
    parser = argparse.ArgumentParser(prog="func_exam")
    parser.add_argument("value", nargs="?", type=int, default=2)
    args = parser.parse_args(argv)
    for name, func in (("square", square), ("cube", cube)):
        print(f"apply {name}:{apply(args.value, func)}")
    return 0