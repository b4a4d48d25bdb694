"""Evaluations of a polynomial over a power-of-two domain of roots of unity."""

from __future__ import annotations

from .ntt import NTT
from .polynomial import Polynomial


class Evaluations:
    """Fixed-length buffer of field elements holding polynomial evaluations."""

    def __init__(self, length: int = 0) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self.values: list[int] = [0] * length

    @classmethod
    def from_polynomial(cls, polynomial: Polynomial, extension_length: int) -> Evaluations:
        """Evaluate ``polynomial`` on the ``extension_length`` roots of unity."""
        n_coefs = polynomial.degree + 1
        if extension_length < n_coefs:
            raise ValueError("extension length smaller than the number of coefficients")
        evaluations = cls(extension_length)
        buffer = list(polynomial.coef[:n_coefs]) + [0] * (extension_length - n_coefs)
        evaluations.values = NTT(extension_length).ntt(buffer, extension_length)
        return evaluations

    def get_evaluation(self, index: int) -> int:
        """Return the evaluation at ``index``."""
        if index < 0 or index > len(self.values) - 1:
            raise IndexError("Evaluations::getEvaluation: invalid index")
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)