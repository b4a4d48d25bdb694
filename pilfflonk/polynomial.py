"""Dense polynomials with coefficients in the BN128 scalar field."""

from __future__ import annotations

from collections.abc import Sequence

from .field import FR_MODULUS, fr_inv, fr_to_string
from .ntt import NTT


class Polynomial:
    """Polynomial stored as a list of coefficients, lowest power first.

    ``length`` is the size of the coefficient buffer and ``degree`` the index
    of the highest non-zero coefficient (zero for the zero polynomial).
    """

    def __init__(self, length: int = 0, blind_length: int = 0) -> None:
        if length < 0 or blind_length < 0:
            raise ValueError("length must not be negative")
        self.coef: list[int] = [0] * (length + blind_length)
        self.degree = 0

    @property
    def length(self) -> int:
        return len(self.coef)

    @classmethod
    def from_polynomial(cls, polynomial: Polynomial, blind_length: int = 0) -> Polynomial:
        """Return a copy of ``polynomial`` with ``blind_length`` extra zero coefficients."""
        new = cls(polynomial.length, blind_length)
        new.coef[:polynomial.length] = polynomial.coef
        new.fix_degree()
        return new

    @classmethod
    def from_coefficients(cls, coefficients: Sequence[int], length: int | None = None) -> Polynomial:
        """Build a polynomial from the first ``length`` of ``coefficients``."""
        if length is None:
            length = len(coefficients)
        if length > len(coefficients):
            raise ValueError("fewer coefficients than the requested length")
        new = cls(length)
        new.coef[:] = [c % FR_MODULUS for c in coefficients[:length]]
        new.fix_degree()
        return new

    @classmethod
    def from_evaluations(
        cls, evaluations: Sequence[int], length: int, blind_length: int = 0
    ) -> Polynomial:
        """Interpolate the polynomial taking ``evaluations`` on the domain of ``length`` roots of unity."""
        if length > len(evaluations):
            raise ValueError("fewer evaluations than the requested length")
        new = cls(length, blind_length)
        if length > 0:
            coefs = NTT(length).intt(list(evaluations[:length]), length)
            new.coef[:length] = coefs
        new.fix_degree()
        return new

    def fix_degree(self) -> None:
        """Recompute the degree scanning down from the end of the buffer."""
        self._scan_degree_from(self.length - 1)

    def fix_degree_from(self, initial: int) -> None:
        """Recompute the degree scanning down from ``max(initial, degree)``."""
        self._scan_degree_from(max(initial, self.degree))

    def _scan_degree_from(self, start: int) -> None:
        degree = min(start, self.length - 1)
        while degree > 0 and self.coef[degree] % FR_MODULUS == 0:
            degree -= 1
        self.degree = max(degree, 0)

    def is_equal(self, other: Polynomial) -> bool:
        """Return True when both polynomials have the same degree and coefficients."""
        if self.degree != other.degree:
            return False
        return all(
            (a - b) % FR_MODULUS == 0
            for a, b in zip(self.coef[:self.degree + 1], other.coef[:other.degree + 1])
        )

    def blind_coefficients(self, blinding_factors: Sequence[int]) -> None:
        """Add each factor at the top of the buffer and subtract it at the bottom."""
        count = len(blinding_factors)
        if count > self.length:
            raise ValueError("more blinding factors than coefficients")
        top = self.length - count
        for i, factor in enumerate(blinding_factors):
            self.coef[top + i] = (self.coef[top + i] + factor) % FR_MODULUS
            self.coef[i] = (self.coef[i] - factor) % FR_MODULUS
        self.fix_degree()

    def get_coef(self, index: int) -> int:
        """Return the coefficient at ``index``, zero beyond the buffer."""
        if index >= self.length:
            return 0
        return self.coef[index]

    def set_coef(self, index: int, value: int) -> None:
        """Set the coefficient at ``index`` and keep the degree up to date."""
        if index < 0 or index >= self.length:
            raise IndexError(f"coefficient index {index} out of range")
        value %= FR_MODULUS
        self.coef[index] = value
        if index > self.degree:
            self.degree = index
        elif index == self.degree and value == 0:
            self.fix_degree_from(index - 1)

    def evaluate(self, point: int) -> int:
        """Evaluate at ``point`` by Horner's rule."""
        result = 0
        for c in reversed(self.coef[:self.degree + 1]):
            result = (c + result * point) % FR_MODULUS
        return result

    def fast_evaluate(self, point: int) -> int:
        """Evaluate at ``point``; the value equals :meth:`evaluate`."""
        return self.evaluate(point)

    def _combine(self, polynomial: Polynomial, sign: int) -> None:
        self_degree = self.degree
        other_degree = polynomial.degree
        max_degree = max(self_degree, other_degree)
        if polynomial.length > self.length:
            self.coef.extend([0] * (polynomial.length - self.length))
        for i in range(max_degree + 1):
            a = self.coef[i] if i <= self_degree else 0
            b = polynomial.coef[i] if i <= other_degree else 0
            self.coef[i] = (a + sign * b) % FR_MODULUS
        self.fix_degree_from(max_degree)

    def add(self, polynomial: Polynomial) -> None:
        """Add ``polynomial`` in place, growing the buffer if it is longer."""
        self._combine(polynomial, 1)

    def sub(self, polynomial: Polynomial) -> None:
        """Subtract ``polynomial`` in place, growing the buffer if it is longer."""
        self._combine(polynomial, -1)

    def mul_scalar(self, value: int) -> None:
        """Multiply every coefficient up to the degree by ``value``."""
        for i in range(self.degree + 1):
            self.coef[i] = self.coef[i] * value % FR_MODULUS

    def _shift_constant(self, value: int) -> None:
        if not self.coef:
            self.coef.append(0)
        self.coef[0] = (self.coef[0] + value) % FR_MODULUS

    def add_scalar(self, value: int) -> None:
        """Add ``value`` to the constant term."""
        self._shift_constant(value)

    def sub_scalar(self, value: int) -> None:
        """Subtract ``value`` from the constant term."""
        self._shift_constant(-value)

    def by_x_sub_value(self, value: int) -> None:
        """Multiply in place by ``(X - value)``."""
        if not self.coef:
            self.coef.append(0)
        old = self.coef
        degree = self.degree
        neg = -value % FR_MODULUS
        new = [0] + old if old[-1] % FR_MODULUS != 0 else [0] + old[:-1]
        for i in range(degree + 1):
            new[i] = (new[i] + neg * old[i]) % FR_MODULUS
        self.coef = new
        self.fix_degree_from(degree + 1)

    def by_xn_sub_value(self, n: int, value: int) -> None:
        """Multiply in place by ``(X^n - value)``."""
        old = self.coef
        degree = self.degree
        resize = self.length - n - 1 < degree
        new = [0] * (self.length + n if resize else self.length)
        new[n:n + degree + 1] = old[:degree + 1]
        neg = -value % FR_MODULUS
        for i in range(degree + 1):
            new[i] = (new[i] + neg * old[i]) % FR_MODULUS
        self.coef = new
        self.fix_degree_from(degree + n)

    def div_by_x_sub_value(self, value: int) -> None:
        """Divide in place by ``(X - value)``; raise ValueError if it does not divide."""
        degree = self.degree
        if degree == 0:
            if self.coef and self.coef[0] % FR_MODULUS != 0:
                raise ValueError("Polynomial does not divide")
            return
        quotient = [0] * (degree + 1)
        quotient[degree - 1] = self.coef[degree]
        for i in range(degree - 2, -1, -1):
            quotient[i] = (self.coef[i + 1] + value * quotient[i + 1]) % FR_MODULUS
        if (self.coef[0] + value * quotient[0]) % FR_MODULUS != 0:
            raise ValueError("Polynomial does not divide")
        quotient.extend([0] * (self.length - len(quotient)))
        self.coef = quotient
        self.fix_degree_from(degree)

    def div_zh(self, domain_size: int, extension: int = 4) -> None:
        """Divide in place by the vanishing polynomial ``X^domain_size - 1``."""
        if domain_size <= 0:
            raise ValueError("domain size must be positive")
        c = self.coef
        for i in range(min(domain_size, self.length)):
            c[i] = -c[i] % FR_MODULUS
        n_chunks = self.length // domain_size
        threshold = domain_size * (extension - 1) - extension
        for j in range(domain_size, n_chunks * domain_size):
            c[j] = (c[j - domain_size] - c[j]) % FR_MODULUS
            chunk = j // domain_size - 1
            if threshold >= 0 and chunk > threshold and c[j] != 0:
                raise ValueError("Polynomial is not divisible")
        self.fix_degree_from(self.degree)

    def div_by_zerofier(self, n: int, beta: int) -> None:
        """Divide in place by ``X^n - beta``; raise ValueError if it does not divide."""
        if n <= 0:
            raise ValueError("n must be positive")
        inv_beta = fr_inv(beta)
        factor = -inv_beta % FR_MODULUS
        c = self.coef
        for i in range(min(n, self.length)):
            c[i] = factor * c[i] % FR_MODULUS
        degree = self.degree
        for j in range(n, degree + 1):
            element = (c[j - n] - c[j]) * inv_beta % FR_MODULUS
            c[j] = element
            if j > degree - n and element != 0:
                raise ValueError("Polynomial is not divisible")
        self.fix_degree_from(degree)

    def by_x(self) -> None:
        """Multiply in place by ``X``."""
        if self.coef and self.coef[-1] % FR_MODULUS != 0:
            self.coef = [0] + self.coef
        elif self.coef:
            self.coef = [0] + self.coef[:-1]
        else:
            self.coef = [0]
        self.degree += 1

    @classmethod
    def lagrange_polynomial_interpolation(
        cls, x_arr: Sequence[int], y_arr: Sequence[int]
    ) -> Polynomial:
        """Return the polynomial of least degree through the points ``(x_arr[i], y_arr[i])``."""
        if len(x_arr) != len(y_arr):
            raise ValueError("x and y arrays differ in length")
        if not x_arr:
            raise ValueError("no points to interpolate")
        polynomial = cls._lagrange_polynomial(0, x_arr, y_arr)
        for i in range(1, len(x_arr)):
            polynomial.add(cls._lagrange_polynomial(i, x_arr, y_arr))
        return polynomial

    @classmethod
    def _lagrange_polynomial(cls, i: int, x_arr: Sequence[int], y_arr: Sequence[int]) -> Polynomial:
        length = len(x_arr)
        polynomial = cls(length)
        if length == 1:
            polynomial.coef[0] = 1
            polynomial.fix_degree()
        first = True
        for j, x in enumerate(x_arr):
            if j == i:
                continue
            if first:
                polynomial = cls(length)
                polynomial.coef[0] = -x % FR_MODULUS
                polynomial.coef[1] = 1
                polynomial.fix_degree()
                first = False
            else:
                polynomial.by_x_sub_value(x)
        denominator = fr_inv(polynomial.evaluate(x_arr[i]))
        polynomial.mul_scalar(y_arr[i] * denominator % FR_MODULUS)
        return polynomial

    @classmethod
    def zerofier_polynomial(cls, x_arr: Sequence[int]) -> Polynomial:
        """Return ``(X - x_arr[0]) * ... * (X - x_arr[-1])``, or one for no points."""
        polynomial = cls(len(x_arr) + 1)
        if not x_arr:
            polynomial.coef[0] = 1
            polynomial.fix_degree()
            return polynomial
        polynomial.coef[0] = -x_arr[0] % FR_MODULUS
        polynomial.coef[1] = 1
        polynomial.fix_degree()
        for x in x_arr[1:]:
            polynomial.by_x_sub_value(x)
        return polynomial

    def __str__(self) -> str:
        return "".join(f" {fr_to_string(c)}, " for c in self.coef)