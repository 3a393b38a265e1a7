"""Doping description for semiconductor materials."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DopingType(Enum):
    """Kind of carrier introduced by the dopant."""

    NONE = "None"
    N_TYPE = "N-Type"
    P_TYPE = "P-Type"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class DopingModel:
    """Doping type, dopant element and concentration in atoms/cm³."""

    doping_type: DopingType = DopingType.NONE
    concentration: float = 0.0
    dopant_element: str = "None"

    def description(self) -> str:
        return (
            f"Doping Type: {self.doping_type.label}, "
            f"Dopant: {self.dopant_element}, "
            f"Concentration: {self.concentration:g} atoms/cm³"
        )