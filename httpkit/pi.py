"""A value-returning function and one that returns nothing."""

from __future__ import annotations


def pi() -> float:
    return 3.1415926


def not_pi() -> None:
    """Compute pi and discard it, so the call yields no value."""
    value = pi()
    del value


def main(argv=None) -> int:
    is_pi = pi()
    is_unit1 = not_pi()
    pi()
    is_unit2 = None
    unit = lambda v: "()" if v is None else repr(v)  # noqa: E731
    print(f"is_pi:{is_pi!r}, is_unit1: {unit(is_unit1)}, is_unit2:{unit(is_unit2)}")
    return 0