"""Fiat-Shamir transcript hashing scalars and curve points with Keccak-256."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from Crypto.Hash import keccak

from .field import FR_MODULUS

FQ_MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583
ELEMENT_BYTES = 32


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest (original padding, not SHA3) of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


class _Kind(Enum):
    FR = "fr"
    G1 = "g1"


@dataclass(frozen=True)
class _Entry:
    kind: _Kind
    value: object


class Transcript:
    """Accumulates scalars and G1 points and derives challenges from them.

    Points are given in affine form as ``(x, y)``; ``None`` stands for the
    point at infinity and is written as two zero coordinates.
    """

    def __init__(self) -> None:
        self._elements: list[_Entry] = []
        self.reset()

    def add_scalar(self, value: int) -> None:
        """Append a scalar field element."""
        self._elements.append(_Entry(_Kind.FR, value % FR_MODULUS))

    def add_pol_commitment(self, point: tuple[int, int] | None) -> None:
        """Append a G1 point given by its affine coordinates."""
        if point is None:
            coords = (0, 0)
        else:
            x, y = point
            coords = (x % FQ_MODULUS, y % FQ_MODULUS)
        self._elements.append(_Entry(_Kind.G1, coords))

    def reset(self) -> None:
        """Drop every element added so far."""
        self._elements.clear()

    def __len__(self) -> int:
        return len(self._elements)

    @property
    def field_elements(self) -> int:
        return sum(1 for e in self._elements if e.kind is _Kind.FR)

    @property
    def group_elements(self) -> int:
        return sum(1 for e in self._elements if e.kind is _Kind.G1)

    def _serialize(self) -> bytes:
        parts = []
        for entry in self._elements:
            if entry.kind is _Kind.FR:
                parts.append(entry.value.to_bytes(ELEMENT_BYTES, "big"))
            else:
                x, y = entry.value
                parts.append(x.to_bytes(ELEMENT_BYTES, "big"))
                parts.append(y.to_bytes(ELEMENT_BYTES, "big"))
        return b"".join(parts)

    def get_challenge(self) -> int:
        """Hash the big-endian encoding of all elements into a scalar."""
        digest = keccak256(self._serialize())
        return int.from_bytes(digest, "big") % FR_MODULUS