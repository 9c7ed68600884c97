"""The configuration a simulation model is built from."""
from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from model_configuration.core.building_blocks import (
    BuildingBlock,
    EventGroupBuildingBlock,
    MoleculeBuildingBlock,
)


class ModelConfiguration(BaseModel):
    """
    One building block per role of the model:
        - molecules: MoleculeBuildingBlock
        - reactions, spatial_structure, passive_transports, observers: BuildingBlock
        - event_groups: EventGroupBuildingBlock
        - molecule_start_values, parameter_start_values: BuildingBlock
        - calculation_methods: list[BuildingBlock]
    Roles that are not provided default to an empty building block.
    """

    molecules: MoleculeBuildingBlock
    event_groups: EventGroupBuildingBlock = Field(
        default_factory=lambda: EventGroupBuildingBlock(name="Events")
    )
    reactions: BuildingBlock = Field(default_factory=lambda: BuildingBlock(name="Reactions"))
    spatial_structure: BuildingBlock = Field(
        default_factory=lambda: BuildingBlock(name="Spatial Structure")
    )
    passive_transports: BuildingBlock = Field(
        default_factory=lambda: BuildingBlock(name="Passive Transports")
    )
    observers: BuildingBlock = Field(default_factory=lambda: BuildingBlock(name="Observers"))
    molecule_start_values: BuildingBlock = Field(
        default_factory=lambda: BuildingBlock(name="Molecule Start Values")
    )
    parameter_start_values: BuildingBlock = Field(
        default_factory=lambda: BuildingBlock(name="Parameter Start Values")
    )
    calculation_methods: list[BuildingBlock] = Field(default_factory=list)

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    def all_calculation_methods(self) -> list[BuildingBlock]:
        return list(self.calculation_methods)

    def all_building_blocks(self) -> Iterator[BuildingBlock]:
        """Every building block of the configuration, calculation methods last."""
        yield self.molecules
        yield self.reactions
        yield self.spatial_structure
        yield self.passive_transports
        yield self.observers
        yield self.event_groups
        yield self.molecule_start_values
        yield self.parameter_start_values
        yield from self.calculation_methods
