import io

from nanoeda.base import BaseMaterial
from nanoeda.graphene import GrapheneMaterial


def _report(material):
    out = io.StringIO()
    material.simulate_electron_transport(out)
    return out.getvalue().splitlines()


def test_undoped_is_gapless():
    g = GrapheneMaterial()
    assert g.name() == "Graphene"
    assert g.band_gap() == 0.0
    assert isinstance(g, BaseMaterial)


def test_doped_opens_gap():
    g = GrapheneMaterial(True)
    assert g.name() == "Doped Graphene"
    assert g.band_gap() == 0.1


def test_lattice_constant():
    assert GrapheneMaterial().lattice_constant() == 2.46
    assert GrapheneMaterial(True).lattice_constant() == 2.46


def test_defect_density_defaults_to_zero_and_is_settable():
    g = GrapheneMaterial()
    assert g.defect_density == 0.0
    g.defect_density = 3.5e11
    assert g.defect_density == 3.5e11


def test_report_for_doped_sheet():
    g = GrapheneMaterial(True)
    g.defect_density = 1e10
    assert _report(g) == [
        "Simulating electron transport in Doped Graphene...",
        "Bandgap: 0.1 eV",
        "Defect Density: 1e+10 atoms/cm²",
    ]


def test_report_for_intrinsic_sheet():
    lines = _report(GrapheneMaterial())
    assert lines[0] == "Simulating electron transport in Graphene..."
    assert lines[1] == "Bandgap: 0 eV"


def test_report_defaults_to_stdout(capsys):
    GrapheneMaterial().simulate_electron_transport()
    captured = capsys.readouterr().out
    assert captured.startswith("Simulating electron transport in Graphene...")