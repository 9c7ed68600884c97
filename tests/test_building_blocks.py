import pytest
from pydantic import ValidationError

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
)


def test_get_all_containers_and_self_walks_depth_first():
    root = ApplicationBuilder(name="root", molecule_name="A")
    branch = Container(name="branch")
    nested = ApplicationBuilder(name="nested", molecule_name="B")
    sibling = ApplicationBuilder(name="sibling", molecule_name="C")
    branch.add(nested)
    root.add(branch)
    root.add(Parameter(name="p"))
    root.add(sibling)

    found = root.get_all_containers_and_self(ApplicationBuilder)

    assert [container.name for container in found] == ["root", "nested", "sibling"]
    assert [c.name for c in root.get_all_containers_and_self(Container)] == [
        "root",
        "branch",
        "nested",
        "sibling",
    ]


def test_event_group_without_applications():
    assert EventGroupBuilder(name="empty").get_all_containers_and_self(ApplicationBuilder) == []


def test_container_rejects_duplicate_child_names():
    container = Container(name="c")
    container.add(Parameter(name="p"))
    with pytest.raises(ValueError):
        container.add(Parameter(name="p"))


def test_building_block_registers_formulas_of_nested_entities():
    rate = ExplicitFormula(name="rate", formula_string="k", object_paths={"k": "k"})
    volume = ConstantFormula(name="volume", value=1.0)
    molecule = MoleculeBuilder(name="Drug")
    molecule.add(Parameter(name="Rate", formula=rate))
    compartment = Container(name="Plasma")
    compartment.add(Parameter(name="Volume", formula=volume))
    compartment.add(Parameter(name="Shared", formula=rate))
    molecule.add(compartment)

    block = MoleculeBuildingBlock.of("Molecules", [molecule, MoleculeBuilder(name="Metabolite")])

    assert list(block.formula_cache) == [rate, volume]
    assert block.molecule_names() == ["Drug", "Metabolite"]
    assert len(block) == 2


def test_event_group_building_block_only_accepts_event_groups():
    block = EventGroupBuildingBlock(name="Events")
    with pytest.raises(TypeError):
        block.add(Container(name="not an event group"))


def test_configuration_defaults_and_calculation_methods():
    method = BuildingBlock(name="Method")
    configuration = ModelConfiguration(
        molecules=MoleculeBuildingBlock(name="Molecules"),
        calculation_methods=[method],
    )
    assert configuration.reactions.name == "Reactions"
    assert configuration.event_groups.name == "Events"
    assert configuration.all_calculation_methods() == [method]
    assert [block.name for block in configuration.all_building_blocks()] == [
        "Molecules",
        "Reactions",
        "Spatial Structure",
        "Passive Transports",
        "Observers",
        "Events",
        "Molecule Start Values",
        "Parameter Start Values",
        "Method",
    ]


def test_configuration_rejects_wrong_building_block_type():
    with pytest.raises(ValidationError):
        ModelConfiguration(molecules=BuildingBlock(name="Molecules"))
    with pytest.raises(ValidationError):
        ModelConfiguration(molecules=MoleculeBuildingBlock(name="Molecules"), simulation_settings=None)
