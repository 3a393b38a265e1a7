"""Random generation of defects inside a rectangular volume."""

from __future__ import annotations

import bisect
import itertools
import math

from nanoeda.defects import Defect, DefectType, QuantumDefects

_NM3_TO_CM3 = 1e-21
_MAX_SEED = (1 << 32) - 1


class _MinStdRand0:
    """Park-Miller linear congruential generator (multiplier 16807)."""

    MODULUS = 2147483647
    MULTIPLIER = 16807
    MIN = 1
    MAX = MODULUS - 1

    def __init__(self, seed: int = 1) -> None:
        self._state = 1
        self.seed(seed)

    def seed(self, seed: int) -> None:
        state = seed % self.MODULUS
        self._state = state if state else 1

    def __call__(self) -> int:
        self._state = (self._state * self.MULTIPLIER) % self.MODULUS
        return self._state

    def canonical(self) -> float:
        """A double in [0, 1) built from two draws."""
        span = float(self.MAX - self.MIN + 1)
        total = 0.0
        scale = 1.0
        for _ in range(2):
            total += float(self() - self.MIN) * scale
            scale *= span
        result = total / scale
        if result >= 1.0:
            result = math.nextafter(1.0, 0.0)
        return result


class DefectSimulator:
    """Scatters defects of enabled types through an X×Y×Z nm volume."""

    def __init__(self, volume_x_nm: float, volume_y_nm: float, volume_z_nm: float) -> None:
        self.volume_x_nm = volume_x_nm
        self.volume_y_nm = volume_y_nm
        self.volume_z_nm = volume_z_nm
        self.density_cm3 = 1e15
        self._probabilities: dict[DefectType, float] = {}
        self._cumulative: list[float] = []
        self._engine = _MinStdRand0(42)

    def enable_defect_type(self, defect_type: DefectType, probability: float) -> None:
        """Give ``defect_type`` a relative weight in the type selection."""
        if probability < 0:
            raise ValueError(f"probability must be non-negative, got {probability}")
        self._probabilities[defect_type] = probability
        weights = [self._probabilities.get(kind, 0.0) for kind in DefectType]
        total = sum(weights)
        if total <= 0:
            raise ValueError("at least one defect type needs a positive probability")
        cumulative = list(itertools.accumulate(w / total for w in weights))
        cumulative[-1] = 1.0
        self._cumulative = cumulative

    def _random_type(self) -> DefectType:
        kinds = list(DefectType)
        if not self._cumulative:
            return kinds[0]
        index = bisect.bisect_left(self._cumulative, self._engine.canonical())
        return kinds[index]

    def _random_position(self, limit: float) -> float:
        return self._engine.canonical() * limit

    def _random_energy(self, defect_type: DefectType) -> float:
        if defect_type is DefectType.TRAP:
            return -0.3 + self._engine.canonical() * 0.6
        if defect_type is DefectType.VACANCY:
            return 0.0 + self._engine.canonical() * 0.1
        return 0.0

    def generate(self, seed: int = 42) -> QuantumDefects:
        """Generate a reproducible set of defects for ``seed``."""
        if not 0 <= seed <= _MAX_SEED:
            raise ValueError(f"seed must be in 0..{_MAX_SEED}, got {seed}")
        self._engine.seed(seed)
        volume_cm3 = self.volume_x_nm * self.volume_y_nm * self.volume_z_nm * _NM3_TO_CM3
        expected = self.density_cm3 * volume_cm3
        if expected < 0:
            raise ValueError("defect density and volume must give a non-negative count")
        result = QuantumDefects()
        for _ in range(int(expected)):
            kind = self._random_type()
            x = self._random_position(self.volume_x_nm)
            y = self._random_position(self.volume_y_nm)
            z = self._random_position(self.volume_z_nm)
            result.add(Defect(kind, "X", x, y, z, self._random_energy(kind)))
        return result