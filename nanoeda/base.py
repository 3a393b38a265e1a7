"""Abstract interface shared by every nanomaterial model."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO


class BaseMaterial(ABC):
    """A material with a band gap, a lattice constant and a transport report."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable material name."""

    @abstractmethod
    def band_gap(self) -> float:
        """Band gap in eV."""

    @abstractmethod
    def lattice_constant(self) -> float:
        """Lattice constant of the material."""

    @abstractmethod
    def simulate_electron_transport(self, file: TextIO | None = None) -> None:
        """Write a transport report to ``file`` (standard output by default)."""

    def __str__(self) -> str:
        return self.name()