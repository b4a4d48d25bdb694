"""Scalar field of the BN128 (alt_bn128) curve and helpers for its elements.

Field elements are plain Python integers; every helper reduces its
arguments modulo :data:`FR_MODULUS` first.
"""

FR_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617


def fr_to_string(a: int) -> str:
    """Return the canonical decimal representation of ``a`` in the field."""
    return str(a % FR_MODULUS)


def fr_sort_key(a: int) -> tuple[int, str]:
    """Key that orders field elements by the length and then the text of their decimal form."""
    text = fr_to_string(a)
    return len(text), text


def fr_less(a: int, b: int) -> bool:
    """Return True when ``a`` sorts before ``b`` under :func:`fr_sort_key`."""
    return fr_sort_key(a) < fr_sort_key(b)


def fr_inv(a: int) -> int:
    """Return the multiplicative inverse of ``a``; zero has none."""
    value = a % FR_MODULUS
    if value == 0:
        raise ZeroDivisionError("zero has no inverse in the scalar field")
    return pow(value, -1, FR_MODULUS)