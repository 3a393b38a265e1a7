"""Construction of material models from a type name and numeric parameters."""

from __future__ import annotations

from collections.abc import Mapping

from nanoeda.base import BaseMaterial
from nanoeda.cnt import CNTMaterial
from nanoeda.graphene import GrapheneMaterial
from nanoeda.mos2 import MoS2Material


def _graphene(params: Mapping[str, float]) -> BaseMaterial:
    material = GrapheneMaterial(bool(params.get("doped", False)))
    if "defect_density" in params:
        material.defect_density = params["defect_density"]
    return material


def _mos2(params: Mapping[str, float]) -> BaseMaterial:
    material = MoS2Material(int(params.get("layers", 1)))
    if "strain" in params:
        material.strain_percent = params["strain"]
    return material


def _cnt(params: Mapping[str, float]) -> BaseMaterial:
    n = int(params["n"])
    m = int(params["m"])
    return CNTMaterial(n, m, params.get("length", 100.0))


_BUILDERS = {
    "graphene": _graphene,
    "mos2": _mos2,
    "cnt": _cnt,
}


def create_material(kind: str, params: Mapping[str, float] | None = None) -> BaseMaterial:
    """Build a material of the given kind.

    Raises ``ValueError`` for an unknown kind and ``KeyError`` when a required
    parameter (``n`` or ``m`` for nanotubes) is missing.
    """
    try:
        builder = _BUILDERS[kind]
    except KeyError:
        raise ValueError(f"Unknown material type: {kind}") from None
    return builder(params or {})