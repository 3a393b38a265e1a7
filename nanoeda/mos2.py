"""Molybdenum disulfide layered material model."""

from __future__ import annotations

from typing import TextIO

from nanoeda.base import BaseMaterial

_GAP_REDUCTION_PER_PERCENT_STRAIN = 0.05  # eV


class MoS2Material(BaseMaterial):
    """MoS₂ with a number of atomic layers and an applied strain in percent."""

    def __init__(self, layers: int = 1) -> None:
        if layers < 0:
            raise ValueError(f"layer count must be non-negative, got {layers}")
        self.layers = layers
        self.strain_percent = 0.0

    def name(self) -> str:
        return f"MoS₂ ({self.layers}L)"

    def band_gap(self) -> float:
        # Monolayer has a direct gap of ~1.8 eV; multilayers ~1.2 eV indirect.
        base_gap = 1.8 if self.layers == 1 else 1.2
        adjusted = base_gap - self.strain_percent * _GAP_REDUCTION_PER_PERCENT_STRAIN
        return adjusted if adjusted > 0 else 0.0

    def lattice_constant(self) -> float:
        """Lattice constant in Angstrom."""
        return 3.15

    def simulate_electron_transport(self, file: TextIO | None = None) -> None:
        print("Simulating MoS₂ electron transport...", file=file)
        print(f"Name: {self.name()}", file=file)
        print(f"Bandgap: {self.band_gap():g} eV", file=file)
        print(f"Strain: {self.strain_percent:g}%", file=file)