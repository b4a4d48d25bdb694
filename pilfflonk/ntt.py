"""Number theoretic transforms over the BN128 scalar field.

Data is laid out as a flat row-major list: element ``(row, col)`` of a
table with ``ncols`` columns is stored at ``row * ncols + col``. Each
column is transformed independently.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .field import FR_MODULUS

NUM_PHASES = 3
NUM_BLOCKS = 1


def _floor_log2(n: int) -> int:
    if n <= 0:
        raise ValueError("size must be positive")
    return n.bit_length() - 1


def _exact_log2(n: int) -> int:
    bits = _floor_log2(n)
    if 1 << bits != n:
        raise ValueError(f"size {n} is not a power of two")
    return bits


def _bit_reverse(x: int, bits: int) -> int:
    if bits == 0:
        return 0
    return int(format(x, f"0{bits}b")[::-1], 2)


def _phase_plan(domain_pow: int, nphase: int) -> Iterator[tuple[int, int]]:
    """Yield ``(first_stage, stage_count)`` for each phase of the transform."""
    if nphase < 1 or domain_pow == 0:
        nphase = 1
    elif nphase > domain_pow:
        nphase = domain_pow
    base, rest = divmod(domain_pow, nphase)
    stage = 1
    for phase in range(nphase):
        count = base + (1 if phase < rest else 0)
        yield stage, count
        stage += count


class NTT:
    """Radix-2 transform over power-of-two domains up to a maximum size.

    ``extension`` greater than one makes the forward transform read only the
    first ``size // extension`` rows of its input and treat the rest as zero.
    """

    def __init__(self, max_domain_size: int, extension: int = 1) -> None:
        self.extension = extension
        self._s = 0
        self._roots = [1]
        self._pow_two_inv = [1]
        self.nqr = 0
        if max_domain_size == 0:
            return

        domain_pow = _floor_log2(max_domain_size)
        q = FR_MODULUS
        half = (q - 1) // 2

        nqr = 2
        while pow(nqr, half, q) == 1:
            nqr += 1

        s = 1
        aux = half
        while aux % 2 == 0 and s < domain_pow:
            aux //= 2
            s += 1

        self.nqr = nqr
        if s < domain_pow:
            raise ValueError("Domain size too big for the curve")

        generator = pow(nqr, aux, q)
        roots = [1] * (1 << s)
        for i in range(1, len(roots)):
            roots[i] = roots[i - 1] * generator % q
        assert roots[-1] * generator % q == 1

        inv_two = pow(2, -1, q)
        self._s = s
        self._roots = roots
        self._pow_two_inv = [pow(inv_two, i, q) for i in range(s + 1)]

    def root(self, domain_pow: int, idx: int) -> int:
        """Return the ``idx``-th power of the primitive ``2**domain_pow``-th root of unity."""
        if domain_pow > self._s:
            raise ValueError(f"domain 2^{domain_pow} exceeds the maximum 2^{self._s}")
        return self._roots[idx << (self._s - domain_pow)]

    def reverse_permutation(
        self,
        src: Sequence[int],
        size: int,
        offset_cols: int = 0,
        ncols: int = 1,
        ncols_all: int | None = None,
    ) -> list[int]:
        """Return ``ncols`` columns of ``src`` starting at ``offset_cols``, rows in bit-reversed order."""
        if ncols_all is None:
            ncols_all = ncols
        if offset_cols + ncols > ncols_all:
            raise ValueError("column block exceeds the width of the source")
        bits = _floor_log2(size)
        limit = size // self.extension if self.extension > 1 else size
        needed = (limit - 1) * ncols_all + offset_cols + ncols if limit > 0 else 0
        if len(src) < needed:
            raise ValueError(f"source holds {len(src)} elements, {needed} required")

        out: list[int] = []
        zeros = [0] * ncols
        for i in range(size):
            r = _bit_reverse(i, bits)
            if r < limit:
                start = r * ncols_all + offset_cols
                out.extend(v % FR_MODULUS for v in src[start:start + ncols])
            else:
                out.extend(zeros)
        return out

    def ntt(
        self,
        src: Sequence[int],
        size: int,
        ncols: int = 1,
        nphase: int = NUM_PHASES,
        nblock: int = NUM_BLOCKS,
        inverse: bool = False,
    ) -> list[int]:
        """Transform each column of ``src``; return the result as a new flat list."""
        if ncols <= 0 or size <= 0:
            return list(src)
        domain_pow = _exact_log2(size)
        if domain_pow > self._s:
            raise ValueError(f"size {size} exceeds the maximum domain 2^{self._s}")

        nblock = max(1, min(nblock, ncols))
        base, rest = divmod(ncols, nblock)
        out = [0] * (size * ncols)
        offset = 0
        for block_index in range(nblock):
            width = base + (1 if block_index < rest else 0)
            block = self.reverse_permutation(src, size, offset, width, ncols)
            for first, count in _phase_plan(domain_pow, nphase):
                for stage in range(first, first + count):
                    self._butterfly_stage(block, size, width, stage)
            if inverse:
                block = self._finish_inverse(block, size, width, domain_pow)
            for row in range(size):
                dst = row * ncols + offset
                out[dst:dst + width] = block[row * width:(row + 1) * width]
            offset += width
        return out

    def intt(
        self,
        src: Sequence[int],
        size: int,
        ncols: int = 1,
        nphase: int = NUM_PHASES,
        nblock: int = NUM_BLOCKS,
    ) -> list[int]:
        """Inverse transform of each column of ``src``."""
        return self.ntt(src, size, ncols, nphase, nblock, inverse=True)

    def extend_pol(
        self,
        values: Sequence[int],
        n_extended: int,
        n: int,
        ncols: int = 1,
        nphase: int = NUM_PHASES,
        nblock: int = NUM_BLOCKS,
    ) -> list[int]:
        """Evaluate on a domain of ``n_extended`` points the columns given by ``n`` evaluations."""
        coefs = self.intt(values, n, ncols, nphase, nblock)
        extension = NTT(n_extended, n_extended // n)
        return extension.ntt(coefs, n_extended, ncols, nphase, nblock)

    def _butterfly_stage(self, a: list[int], size: int, width: int, stage: int) -> None:
        half = 1 << (stage - 1)
        twiddles = [self.root(stage, j) for j in range(half)]
        for start in range(0, size, half << 1):
            for j, w in enumerate(twiddles):
                lo = (start + j) * width
                hi = (start + j + half) * width
                for k in range(width):
                    t = w * a[hi + k] % FR_MODULUS
                    u = a[lo + k]
                    a[lo + k] = (u + t) % FR_MODULUS
                    a[hi + k] = (u - t) % FR_MODULUS

    def _finish_inverse(self, a: list[int], size: int, width: int, domain_pow: int) -> list[int]:
        scale = self._pow_two_inv[domain_pow]
        out = [0] * (size * width)
        for x in range(size):
            y = (size - x) % size
            out[y * width:(y + 1) * width] = [
                v * scale % FR_MODULUS for v in a[x * width:(x + 1) * width]
            ]
        return out