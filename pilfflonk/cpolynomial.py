"""Combination of several polynomials interleaved into one."""

from __future__ import annotations

from .polynomial import Polynomial


class CPolynomial:
    """Holds ``n`` polynomials ``p_j`` and builds ``sum_j X^j * p_j(X^n)``."""

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("n must be positive")
        self.n = n
        self.polynomials: list[Polynomial | None] = [None] * n

    def add_polynomial(self, position: int, polynomial: Polynomial) -> None:
        """Place ``polynomial`` at ``position``, which must be below ``n``."""
        if position < 0 or position > self.n - 1:
            raise ValueError(
                "CPolynomial:addPolynomial, cannot add a polynomial to a position greater than n-1"
            )
        self.polynomials[position] = polynomial

    def degree(self) -> int:
        """Return the degree bound of the combined polynomial."""
        return max(
            (
                pol.degree * self.n + i + 1
                for i, pol in enumerate(self.polynomials)
                if pol is not None
            ),
            default=0,
        )

    def get_polynomial(self) -> Polynomial:
        """Return a new polynomial with ``coef[i * n + j] = p_j.coef[i]``."""
        if self.n == 1:
            only = self.polynomials[0]
            if only is None:
                raise ValueError("no polynomial at position 0")
            return Polynomial.from_polynomial(only)

        result = Polynomial(self.degree() + 1)
        for j, pol in enumerate(self.polynomials):
            if pol is None:
                continue
            for i, value in enumerate(pol.coef[:pol.degree + 1]):
                result.coef[i * self.n + j] = value
        result.fix_degree()
        return result