import pytest

from model_configuration.core import (
    ApplicationBuilder,
    BuildingBlock,
    ConstantFormula,
    Container,
    EventGroupBuilder,
    EventGroupBuildingBlock,
    ExplicitFormula,
    ModelConfiguration,
    MoleculeBuilder,
    MoleculeBuildingBlock,
    Parameter,
    StartValue,
)


def _make_molecules(*names: str, block_name: str = "Molecules") -> MoleculeBuildingBlock:
    return MoleculeBuildingBlock.of(block_name, [MoleculeBuilder(name=name) for name in names])


def _make_event_groups(*molecule_names: str, block_name: str = "Events") -> EventGroupBuildingBlock:
    """One event group with one application per molecule name, nested in a protocol container."""
    event_group = EventGroupBuilder(name="Dosing")
    protocol = Container(name="Protocol")
    event_group.add(protocol)
    for index, molecule_name in enumerate(molecule_names):
        protocol.add(ApplicationBuilder(name=f"Application_{index + 1}", molecule_name=molecule_name))
    return EventGroupBuildingBlock.of(block_name, [event_group])


@pytest.fixture()
def make_molecules():
    return _make_molecules


@pytest.fixture()
def make_event_groups():
    return _make_event_groups


@pytest.fixture()
def valid_configuration() -> ModelConfiguration:
    glucose = MoleculeBuilder(name="Glucose")
    glucose.add(
        Parameter(
            name="Clearance",
            formula=ExplicitFormula(
                name="clearance_formula",
                formula_string="CL_int * fu / (1 + fu)",
                object_paths={"CL_int": "Glucose|CL_int", "fu": "Glucose|fu"},
            ),
        )
    )
    molecules = MoleculeBuildingBlock.of("Molecules", [glucose, MoleculeBuilder(name="Insulin")])

    reactions = BuildingBlock.of(
        "Reactions",
        [
            Parameter(
                name="Uptake",
                formula=ExplicitFormula(
                    name="uptake_kinetics",
                    formula_string="Vmax * C / (Km + C)",
                    object_paths={"Vmax": "Uptake|Vmax", "C": "Glucose", "Km": "Uptake|Km"},
                ),
            )
        ],
    )
    observers = BuildingBlock.of(
        "Observers",
        [Parameter(name="Total", formula=ConstantFormula(name="total_constant", value=1.0))],
    )
    start_values = BuildingBlock.of(
        "Start Values",
        [
            StartValue(
                name="Glucose",
                path="Organism|Plasma|Glucose",
                formula=ExplicitFormula(
                    name="start_amount",
                    formula_string="Dose * exp(-k * Time)",
                    object_paths={"Dose": "Events|Dose", "k": "Glucose|k"},
                ),
            )
        ],
    )
    return ModelConfiguration(
        molecules=molecules,
        reactions=reactions,
        observers=observers,
        event_groups=_make_event_groups("Glucose", "Insulin"),
        molecule_start_values=start_values,
        calculation_methods=[BuildingBlock(name="Cellular partition coefficient method")],
    )
