"""Complex numbers with arithmetic, comparison and modulus."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass(eq=False)
class Complex:
    """A complex number with real part ``re`` and imaginary part ``im``."""

    re: float = 0.0
    im: float = 0.0

    def __add__(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other: Complex) -> Complex:
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other: Complex) -> Complex:
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __truediv__(self, other: Complex) -> Complex:
        denom = other.re * other.re + other.im * other.im
        if denom == 0:
            raise ZeroDivisionError("complex division by zero")
        return Complex(
            (self.re * other.re + self.im * other.im) / denom,
            (self.im * other.re - self.re * other.im) / denom,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.re == other.re and self.im == other.im

    __hash__ = None  # type: ignore[assignment]

    def __abs__(self) -> float:
        return math.hypot(self.re, self.im)

    def __str__(self) -> str:
        if self.im > 0:
            return f"{_num(self.re)} + {_num(self.im)} * i"
        if self.im < 0:
            return f"{_num(self.re)} - {_num(-self.im)} * i"
        return _num(self.re)

    def _algebraic(self) -> str:
        return f"{_num(self.re)} + i*({_num(self.im)})"

    def _parenthesised(self) -> str:
        return f"({_num(self.re)}) + i*({_num(self.im)})"


def parse_complex(text: str) -> Complex:
    """Parse two whitespace-separated numbers, the real and the imaginary part."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"expected real and imaginary parts, got {text!r}")
    return Complex(float(parts[0]), float(parts[1]))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _read_complex(tokens: Iterator[str]) -> Complex:
    print("input re: ", end="")
    re = float(_take(tokens))
    print("input im: ", end="")
    im = float(_take(tokens))
    number = Complex(re, im)
    print(f"complex: {number._algebraic()}")
    return number


def main(argv: list[str] | None = None) -> int:
    """Read a complex number and an operation from standard input and apply it."""
    parser = argparse.ArgumentParser(
        description="Complex-number calculator reading from standard input."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        x = _read_complex(tokens)
        print("sign select (+ | - | * | / | = | ! | m): ", end="")
        sign = _take(tokens)[0]

        if sign == "m":
            print(f"mod ({x._algebraic()}) = ", end="")
            print(f"|x|: {_num(abs(x))}")
            return 0

        y = _read_complex(tokens)
        if sign == "+":
            print((x + y)._parenthesised())
        elif sign == "-":
            print((x - y)._parenthesised())
        elif sign == "*":
            print((x * y)._parenthesised())
        elif sign == "/":
            print((x / y)._parenthesised())
        elif sign == "=":
            equal = x == y
            relation = "==" if equal else "=!"
            print(f"{x._algebraic()} {relation} {y._algebraic()}")
            print("yes, they are equal" if equal else "no, they aren't equal")
        elif sign == "!":
            differ = x != y
            relation = "=!" if differ else "=="
            print(f"{x._algebraic()} {relation} {y._algebraic()}")
            print("yes, they are notequal" if differ else "no, they aren't notequal")
    except (ValueError, ZeroDivisionError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    return 0