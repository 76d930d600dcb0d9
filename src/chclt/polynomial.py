"""Closed-form real roots of quadratic and cubic polynomials.

Coefficients are ordered highest degree first. Degenerate coefficient
sets reduce to a lower-degree problem, so the solvers never raise and
only report real roots.

References:
    Cardano's method for the depressed cubic
    Trigonometric (Viète) solution for three real roots
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def evaluate(coefficients: Sequence[float], x: float | np.ndarray) -> float | np.ndarray:
    """Evaluate ∑ c[n-i] xⁱ with Horner's scheme.

    Parameters
    ----------
    coefficients : sequence of float
        Polynomial coefficients, highest degree first.
    x : float or array-like
        Evaluation point(s).

    Returns
    -------
    y : float or ndarray
        Polynomial value(s), same shape as x.
    """
    result = 0.0 * np.asarray(x, dtype=float)
    for c in coefficients:
        result = result * x + c
    if np.ndim(result) == 0:
        return float(result)
    return result


def quadratic_roots(a: float, b: float, c: float) -> list[float]:
    """Real roots of ax² + bx + c = 0, ascending when two are found."""
    if a == 0:
        return [-c / b] if abs(b) > 0 else []
    if c == 0:
        return [0.0, -b / a] if abs(b) > 0 else [0.0]

    ss = b * b - 4.0 * a * c
    t = a * 2.0

    if ss == 0:
        return [-b / t]
    if ss < 0:
        return []

    s = float(np.sqrt(ss))
    return sorted([(-b - s) / t, (-b + s) / t])


def cubic_roots(a: float, b: float, c: float, d: float) -> list[float]:
    """Real roots of ax³ + bx² + cx + d = 0.

    Uses the depressed cubic: with p = a₂² - 3a₁ and q = (2a₂³ - 9a₂a₁ + 27a₀)/2
    (normalized coefficients), q² < p³ gives three real roots through acos,
    otherwise the single real root comes from Cardano's formula.
    """
    if a == 0:
        return quadratic_roots(b, c, d)
    if d == 0:
        roots = quadratic_roots(a, b, c)
        if 0.0 not in roots:
            roots.append(0.0)
        return sorted(roots)

    a0 = d / a
    a1 = c / a
    a2 = b / a

    p = a2 * a2 - 3.0 * a1
    q = (2.0 * a2 * a2 * a2 - 9.0 * a2 * a1 + 27.0 * a0) / 2.0
    qq = q * q
    ppp = p * p * p

    if qq < ppp:
        r = float(np.sqrt(p))
        phi = float(np.arccos(np.clip(-q / (p * r), -1.0, 1.0))) / 3.0
        third = 2.0 * np.pi / 3.0
        r0 = r * 2.0 * np.cos(phi) - a2
        r1 = r * 2.0 * np.cos(phi - third) - a2
        r2 = r * 2.0 * np.cos(phi + third) - a2
        return sorted(float(root) / 3.0 for root in (r0, r1, r2))

    s = float(np.sqrt(qq - ppp))
    rc = float(np.cbrt(q - s if q * s < 0 else q + s))

    # Triple root: p = q = 0
    if rc == 0:
        return [-a2 / 3.0]

    return [(a2 + rc + p / rc) / -3.0]


__all__ = ["evaluate", "quadratic_roots", "cubic_roots"]
