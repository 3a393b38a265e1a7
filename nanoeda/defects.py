"""Point and line defects in a crystal, with counting and export."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class DefectType(Enum):
    """Kind of crystal defect; declaration order is the reporting order."""

    VACANCY = "Vacancy"
    INTERSTITIAL = "Interstitial"
    SUBSTITUTION = "Substitution"
    TRAP = "Trap"
    DISLOCATION = "Dislocation"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Defect:
    """A single defect: position in nm, energy level in eV relative to the band edge."""

    type: DefectType
    atom_symbol: str
    x: float
    y: float
    z: float
    energy_level: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.label,
            "atom": self.atom_symbol,
            "position": {"x": self.x, "y": self.y, "z": self.z},
            "energyLevel_eV": self.energy_level,
        }


class QuantumDefects:
    """An ordered collection of defects."""

    def __init__(self) -> None:
        self._defects: list[Defect] = []

    def add(self, defect: Defect) -> None:
        self._defects.append(defect)

    def clear(self) -> None:
        self._defects.clear()

    def defects(self) -> list[Defect]:
        """A copy of all defects, in insertion order."""
        return list(self._defects)

    def count(self, defect_type: DefectType) -> int:
        return sum(1 for d in self._defects if d.type is defect_type)

    def summary(self) -> str:
        counts = Counter(d.type for d in self._defects)
        lines = ["Quantum Defects Summary:"]
        lines.extend(
            f"  {kind.label}: {counts[kind]}" for kind in DefectType if counts[kind]
        )
        return "\n".join(lines) + "\n"

    def to_json(self) -> dict[str, Any]:
        """A JSON-ready mapping; empty when there are no defects."""
        if not self._defects:
            return {}
        return {"defects": [d.to_dict() for d in self._defects]}

    def __len__(self) -> int:
        return len(self._defects)

    def __iter__(self) -> Iterator[Defect]:
        return iter(self._defects)