import io

import pytest

from nanoeda.mos2 import MoS2Material


def _with_strain(strain, layers=1):
    material = MoS2Material(layers)
    material.strain_percent = strain
    return material


def test_default_is_monolayer():
    m = MoS2Material()
    assert m.layers == 1
    assert m.name() == "MoS₂ (1L)"
    assert m.band_gap() == 1.8


def test_multilayer_gap_and_name():
    m = MoS2Material(3)
    assert m.name() == "MoS₂ (3L)"
    assert m.band_gap() == 1.2
    assert MoS2Material(2).band_gap() == 1.2


def test_lattice_constant():
    assert MoS2Material().lattice_constant() == 3.15


def test_strain_reduces_gap_linearly():
    g0 = _with_strain(0.0).band_gap()
    g1 = _with_strain(1.0).band_gap()
    g2 = _with_strain(2.0).band_gap()
    assert g0 > g1 > g2
    assert g0 - g1 == pytest.approx(g1 - g2)


def test_gap_never_negative():
    assert _with_strain(100.0).band_gap() == 0.0
    assert _with_strain(100.0, layers=4).band_gap() == 0.0


def test_negative_layers_rejected():
    with pytest.raises(ValueError):
        MoS2Material(-1)


def test_report_lines():
    m = _with_strain(2.5)
    out = io.StringIO()
    m.simulate_electron_transport(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Simulating MoS₂ electron transport..."
    assert lines[1] == "Name: MoS₂ (1L)"
    assert lines[2].startswith("Bandgap: ") and lines[2].endswith(" eV")
    assert lines[3] == "Strain: 2.5%"