# pilfflonk

Building blocks for a PIL-FFLONK prover. All of them work over the scalar
field of the BN128 (alt_bn128) curve. Field elements are plain Python
integers, reduced modulo `pilfflonk.field.FR_MODULUS`.

## Modules

- `pilfflonk.field` has helpers for field elements:
  - `fr_to_string` returns the canonical decimal form.
  - `fr_inv` returns the inverse and raises `ZeroDivisionError` for zero.
  - `fr_sort_key` and `fr_less` order elements first by the length of their
    decimal form, then by its text.
- `pilfflonk.ntt` has the `NTT` class, which runs radix-2 number-theoretic
  transforms over power-of-two domains.
  - Data is a flat row-major list, and each of the `ncols` columns is
    transformed on its own.
  - `ntt` and `intt` return new lists.
  - `reverse_permutation` returns rows in bit-reversed order.
  - `root` gives roots of unity.
  - `extend_pol` takes evaluations on `n` points and evaluates the same
    polynomial on `n_extended` points.
  - A domain larger than the field supports raises `ValueError`.
- `pilfflonk.polynomial` has the `Polynomial` class for dense polynomials
  with the lowest power first. It has:
  - `add` and `sub`
  - `mul_scalar`, `add_scalar` and `sub_scalar`
  - `by_x`, `by_x_sub_value` and `by_xn_sub_value`
  - `div_by_x_sub_value`, `div_zh` and `div_by_zerofier`; these raise
    `ValueError` when the division is not exact
  - `evaluate`
  - `lagrange_polynomial_interpolation` and `zerofier_polynomial`
  - the constructors `from_coefficients`, `from_polynomial` and
    `from_evaluations`
- `pilfflonk.cpolynomial` has the `CPolynomial` class. It takes up to `n`
  polynomials `p_j` and builds `sum_j X^j * p_j(X^n)`.
- `pilfflonk.evaluations` has the `Evaluations` class, which holds a
  polynomial evaluated over the roots of unity of a given length.
- `pilfflonk.transcript` has `keccak256` and the `Transcript` class.
  - It takes scalars, and G1 points as affine `(x, y)` pairs; `None` stands
    for the point at infinity.
  - It writes all of them as 32-byte big-endian values.
  - `get_challenge` hashes them into a scalar.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from pilfflonk.ntt import NTT
from pilfflonk.polynomial import Polynomial
from pilfflonk.transcript import Transcript

ntt = NTT(16)
values = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610, 987]
coefs = ntt.intt(values, 16)
assert ntt.ntt(coefs, 16) == values

pol = Polynomial.from_coefficients([1, 2, 3, 4, 5, 0, 0, 0])
pol.by_x_sub_value(7)
pol.div_by_x_sub_value(7)
assert pol.get_coef(4) == 5

transcript = Transcript()
transcript.add_scalar(42)
transcript.add_pol_commitment((1, 2))
challenge = transcript.get_challenge()
```

## What it does not do

This package is a library of arithmetic pieces only. It does not include:

- a command-line program
- a prover or a setup step
- anything that reads or writes key, powers-of-tau or polynomial files
- elliptic-curve arithmetic: there are no commitments or multi-scalar
  multiplications

The transcript takes curve points that have already been computed, as
coordinate pairs.