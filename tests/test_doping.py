import pytest

from nanoeda.doping import DopingModel, DopingType


def test_defaults():
    model = DopingModel()
    assert model.doping_type is DopingType.NONE
    assert model.concentration == 0.0
    assert model.dopant_element == "None"


def test_default_description():
    assert DopingModel().description() == (
        "Doping Type: None, Dopant: None, Concentration: 0 atoms/cm³"
    )


def test_n_type_description():
    model = DopingModel(DopingType.N_TYPE, 1e18, "P")
    assert model.description() == (
        "Doping Type: N-Type, Dopant: P, Concentration: 1e+18 atoms/cm³"
    )


def test_p_type_description_after_update():
    model = DopingModel()
    model.doping_type = DopingType.P_TYPE
    model.dopant_element = "B"
    text = model.description()
    assert text.startswith("Doping Type: P-Type, Dopant: B, ")


@pytest.mark.parametrize(
    "doping_type, label",
    [
        (DopingType.NONE, "None"),
        (DopingType.N_TYPE, "N-Type"),
        (DopingType.P_TYPE, "P-Type"),
    ],
)
def test_type_labels(doping_type, label):
    model = DopingModel(doping_type)
    assert model.description().startswith(f"Doping Type: {label}, ")