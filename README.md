# nanoeda

This package provides simple models of nanomaterials used in device design. It also generates random quantum defects inside a volume of material.

## Materials

All materials share the `BaseMaterial` interface in `nanoeda.base`:

- `name()`
- `band_gap()`, in eV
- `lattice_constant()`
- `simulate_electron_transport(file=None)`, which prints a short report to `file`. It prints to standard output when no file is given.

The materials are:

- `GrapheneMaterial(doped=False)` (`nanoeda.graphene`). Its band gap is 0 eV when intrinsic and 0.1 eV when doped. Its lattice constant is 2.46 Å. The attribute `defect_density` is in atoms/cm² and defaults to 0.
- `MoS2Material(layers=1)` (`nanoeda.mos2`). Its band gap is 1.8 eV for a monolayer and 1.2 eV otherwise. The gap is lowered by 0.05 eV per percent of `strain_percent` and never goes below 0. Its lattice constant is 3.15 Å. A negative layer count raises `ValueError`.
- `CNTMaterial(n, m, length_nm=100.0)` (`nanoeda.cnt`).
  - The tube is metallic when `n - m`, taken modulo 2³², is divisible by 3. For `n >= m` this is simply when `n - m` is a multiple of 3.
  - Metallic tubes have a zero band gap. For other tubes the gap follows the tube diameter.
  - `is_metallic()` and `chirality()` report these properties.
  - Negative indices raise `ValueError`.

Materials can also be built by name:

```python
from nanoeda.factory import create_material

tube = create_material("cnt", {"n": 10, "m": 0, "length": 250.0})
print(tube.name(), tube.is_metallic(), tube.band_gap())
```

`create_material(kind, params)` recognises these kinds and parameters:

| Kind | Parameters |
| --- | --- |
| `graphene` | `doped`, `defect_density` |
| `mos2` | `layers`, `strain` |
| `cnt` | `n`, `m`, `length` |

An unknown kind raises `ValueError`. A missing `n` or `m` for `cnt` raises `KeyError`.

### Doping

`nanoeda.doping` provides `DopingModel`, a dataclass with three fields:

- `doping_type`, a `DopingType`: `NONE`, `N_TYPE` or `P_TYPE`
- `dopant_element`
- `concentration`, in atoms/cm³

`description()` renders the model as one line of text.

## Defects

`nanoeda.defects` provides:

- `Defect`, a frozen record with these fields: `type`, `atom_symbol`, the position `x`, `y`, `z` in nm, and `energy_level` in eV.
- `QuantumDefects`, an ordered collection of defects. It has these methods:
  - `add()` and `clear()`
  - `defects()`, which returns a copy of the list
  - `count(defect_type)`
  - `summary()`, which gives per-type counts in `DefectType` order
  - `to_json()`, which returns a JSON-ready dict. The dict is empty when there are no defects.

  It also supports `len()` and iteration.

`nanoeda.simulator.DefectSimulator` fills a volume with defects. The volume's sides are given in nanometres. The density is set by the attribute `density_cm3` and defaults to 10¹⁵ per cm³. The type of each defect is chosen by the weights given to `enable_defect_type`:

```python
from nanoeda.defects import DefectType
from nanoeda.simulator import DefectSimulator

sim = DefectSimulator(1000.0, 1000.0, 1000.0)
sim.enable_defect_type(DefectType.TRAP, 0.7)
sim.enable_defect_type(DefectType.VACANCY, 0.3)
defects = sim.generate(7)
print(defects.summary())
```

Energy levels depend on the defect type:

- Trap: drawn from [-0.3, 0.3) eV.
- Vacancy: drawn from [0, 0.1) eV.
- All other types: 0 eV.

Defect types and generation follow these rules:

- When no type has been enabled, every defect is a vacancy.
- A negative weight raises `ValueError`.
- Weights that are all zero raise `ValueError`.
- `generate(seed=42)` accepts seeds from 0 to 2³² − 1.
- The same seed always gives the same defects.

## Command line

```
nanoeda
```

This prints the transport report for doped graphene with a defect density of 10¹⁰ atoms/cm². It takes two options:

- `--undoped` uses intrinsic graphene.
- `--defect-density VALUE` sets the density.

## Limitations

The transport "simulation" only reports a material's name, band gap and parameters. No carrier transport is computed. The package has no netlist handling, synthesis, timing analysis, floorplanning or graphical editor.

## Tests

```
pip install -e .[test]
pytest
```