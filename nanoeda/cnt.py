"""Carbon nanotube model described by its chiral indices."""

from __future__ import annotations

import math
from typing import TextIO

from nanoeda.base import BaseMaterial

_CC_BOND_NM = 0.142  # carbon-carbon bond length
_HOPPING_EV = 2.9  # nearest-neighbour hopping energy γ0
_INDEX_MODULUS = 1 << 32  # chiral indices are 32-bit unsigned


class CNTMaterial(BaseMaterial):
    """A (n, m) carbon nanotube of a given length in nanometres."""

    def __init__(self, n: int, m: int, length_nm: float = 100.0) -> None:
        if n < 0 or m < 0:
            raise ValueError(f"chiral indices must be non-negative, got ({n}, {m})")
        self.n = n
        self.m = m
        self.length_nm = length_nm
        self._metallic = (n - m) % _INDEX_MODULUS % 3 == 0

    def name(self) -> str:
        return f"CNT ({self.n}, {self.m})"

    def band_gap(self) -> float:
        """Band gap in eV; zero for metallic tubes."""
        if self._metallic:
            return 0.0
        n, m = self.n, self.m
        diameter = (_CC_BOND_NM / math.pi) * math.sqrt(3.0 * (n * n + m * m + n * m))
        return 2.0 * _HOPPING_EV * _CC_BOND_NM / diameter

    def lattice_constant(self) -> float:
        """Lattice periodicity in nm (that of graphene)."""
        return 0.246

    def simulate_electron_transport(self, file: TextIO | None = None) -> None:
        kind = "Metallic" if self._metallic else "Semiconducting"
        print(f"Simulating transport in: {self.name()}", file=file)
        print(f"Type: {kind}", file=file)
        print(f"Bandgap: {self.band_gap():g} eV", file=file)
        print(f"Length: {self.length_nm:g} nm", file=file)

    def is_metallic(self) -> bool:
        return self._metallic

    def chirality(self) -> tuple[int, int]:
        return (self.n, self.m)