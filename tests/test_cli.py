from nanoeda.cli import main


def test_default_run_reports_doped_graphene(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Simulating electron transport in Doped Graphene...",
        "Bandgap: 0.1 eV",
        "Defect Density: 1e+10 atoms/cm²",
    ]


def test_undoped_run(capsys):
    assert main(["--undoped"]) == 0
    out = capsys.readouterr().out
    assert "Simulating electron transport in Graphene..." in out
    assert "Bandgap: 0 eV" in out


def test_custom_defect_density(capsys):
    assert main(["--defect-density", "250"]) == 0
    assert "Defect Density: 250 atoms/cm²" in capsys.readouterr().out