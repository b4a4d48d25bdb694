"""Field helpers, number-theoretic transforms, polynomials and a Keccak-256 transcript over the BN128 scalar field."""

__version__ = "0.0.1"

__all__ = ["cpolynomial", "evaluations", "field", "ntt", "polynomial", "transcript"]