#!/usr/bin/env python3
"""primefield walk-through.

Usage:
    python -m primefield.demo.run_demo

The script:
1. Shows closure of + and * in a small field.
2. Checks the additive and multiplicative identities.
3. Computes additive and multiplicative inverses.
4. Compares positive and negative powers against repeated multiplication.
5. Checks Fermat's little theorem.
6. Does the same arithmetic in the secp256k1 base field.
7. Triggers each error kind.

Set PRIMEFIELD_LOG_LEVEL=DEBUG to see field configuration logs.
"""

from __future__ import annotations

import logging
import sys

from primefield.config import LOG_LEVEL
from primefield.errors import DivisionByZero, InvalidModulus, ModulusMismatch
from primefield.field import FieldElement
from primefield.params import PrimeField


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def check(label: str, got, expected) -> bool:
    ok = got == expected
    mark = "✓" if ok else "✗"
    print(f"   {label}: {got}  (expected {expected}) {mark}")
    return ok


def expect_error(label: str, exc_type: type, fn) -> bool:
    try:
        fn()
    except exc_type as exc:
        print(f"   {label}: {type(exc).__name__}: {exc} ✓")
        return True
    print(f"   {label}: no {exc_type.__name__} raised ✗")
    return False


def main() -> int:
    results: list[bool] = []
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ---- 1. Closure ----
    banner("1) Closure in F_17")
    F17 = PrimeField(17, bits=8, name="F_17")
    a, b = F17(14), F17(9)
    results.append(check("14 + 9", a + b, F17(6)))
    results.append(check("14 * 9", a * b, F17(7)))

    # ---- 2. Identities ----
    banner("2) Identities")
    a = FieldElement(5, 7)
    results.append(check("5 + 0 in F_7", a + a.zero(), a))
    a = FieldElement(18, 19)
    results.append(check("18 * 1 in F_19", a * a.one(), a))

    # ---- 3. Inverses ----
    banner("3) Inverses")
    a = FieldElement(5, 31)
    a_minus = a.zero() - a
    results.append(check("-5 in F_31", a_minus, FieldElement(26, 31)))
    results.append(check("5 + (-5)", a + a_minus, a.zero()))
    a = FieldElement(324, 10007)
    a_inverse = a.one() / a
    results.append(check("1 / 324 in F_10007", a_inverse, FieldElement(8926, 10007)))
    results.append(check("324 * 324^-1", a * a_inverse, a.one()))

    # ---- 4. Exponentials ----
    banner("4) Powers in F_31")
    a = FieldElement(15, 31)
    one = a.one()
    results.append(check("15^5", a.pow(5), a * a * a * a * a))
    results.append(check("1 / 15^-3", one / a.pow(-3), a * a * a))
    results.append(check("15^-5", a.pow(-5), one / (a * a * a * a * a)))
    x = FieldElement(4, 7)
    results.append(check("4^-17 in F_7", x.pow(-17), x.one() / x.pow(17)))

    # ---- 5. Fermat ----
    banner("5) Fermat's little theorem in F_10007")
    F = PrimeField(10007)
    for v in (2, 324, 10006):
        results.append(check(f"{v}^10006", F(v).pow(F.modulus - 1), F.one()))

    # ---- 6. secp256k1 ----
    banner("6) secp256k1 base field")
    K = PrimeField.secp256k1()
    big = K(K.modulus - 1)
    results.append(check("(p-1)^2", big * big, K.one()))
    results.append(check("(p-1) / (p-1)", big / big, K.one()))
    results.append(check("2^256 reduced", K(2).pow(256), K(2**32 + 977)))

    # ---- 7. Errors ----
    banner("7) Error kinds")
    results.append(expect_error("modulus 0", InvalidModulus, lambda: FieldElement(1, 0)))
    mismatched = lambda: FieldElement(1, 7) + FieldElement(1, 11)
    results.append(expect_error("F_7 + F_11", ModulusMismatch, mismatched))
    by_zero = lambda: FieldElement(4, 7) / FieldElement(0, 7)
    results.append(expect_error("4 / 0 in F_7", DivisionByZero, by_zero))

    failures = results.count(False)
    banner("DEMO COMPLETE" if not failures else f"DEMO FAILED ({failures} checks)")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
