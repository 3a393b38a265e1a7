"""Graphene sheet model."""

from __future__ import annotations

from typing import TextIO

from nanoeda.base import BaseMaterial


class GrapheneMaterial(BaseMaterial):
    """Graphene, optionally doped, with a surface defect density in atoms/cm²."""

    def __init__(self, doped: bool = False) -> None:
        self.doped = doped
        self.defect_density = 0.0

    def name(self) -> str:
        return "Doped Graphene" if self.doped else "Graphene"

    def band_gap(self) -> float:
        # Intrinsic graphene is gapless; doping opens a small gap.
        return 0.1 if self.doped else 0.0

    def lattice_constant(self) -> float:
        """Lattice constant in Angstrom."""
        return 2.46

    def simulate_electron_transport(self, file: TextIO | None = None) -> None:
        print(f"Simulating electron transport in {self.name()}...", file=file)
        print(f"Bandgap: {self.band_gap():g} eV", file=file)
        print(f"Defect Density: {self.defect_density:g} atoms/cm²", file=file)