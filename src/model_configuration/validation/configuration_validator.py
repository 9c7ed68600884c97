"""Validation of a model configuration before the model is built."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from model_configuration.validation.exceptions import (
    FormulaParseError,
    UnresolvedMoleculeReference,
)
from model_configuration.validation.protocols import ContainerSearchable, FormulaCacheOwner
from model_configuration.validation.validation_result import NotificationType, ValidationResult

if TYPE_CHECKING:
    from model_configuration.core.building_blocks import EventGroupBuildingBlock, MoleculeBuildingBlock
    from model_configuration.core.configuration import ModelConfiguration
    from model_configuration.core.entities import ApplicationBuilder

logger = logging.getLogger(__name__)


def formula_is_not_valid(formula_name: str, building_block_name: str, error: str) -> str:
    return f"Formula '{formula_name}' in building block '{building_block_name}' is not valid: {error}"


def applied_molecule_not_present(
    molecule_name: str, application_name: str, molecule_building_block_name: str
) -> str:
    return (
        f"Molecule '{molecule_name}' applied in '{application_name}' is not defined "
        f"in molecule building block '{molecule_building_block_name}'"
    )


class ConfigurationValidator:
    """
    Checks a model configuration before it is used to create a simulation:
        * every explicit formula of every building block can be parsed.
        * every molecule applied in an event group is defined in the molecule building block.
    Failures are collected as error messages; validation never stops at the first one.
    """

    def validate(self, configuration: ModelConfiguration) -> ValidationResult:
        result = ValidationResult()
        self._validate_formula_cache(configuration.molecules, result)
        self._validate_formula_cache(configuration.reactions, result)
        self._validate_formula_cache(configuration.spatial_structure, result)
        self._validate_formula_cache(configuration.passive_transports, result)
        self._validate_formula_cache(configuration.observers, result)
        self._validate_event_groups(configuration.event_groups, configuration.molecules, result)
        self._validate_formula_cache(configuration.molecule_start_values, result)
        self._validate_formula_cache(configuration.parameter_start_values, result)
        for calculation_method in configuration.all_calculation_methods():
            self._validate_formula_cache(calculation_method, result)

        logger.info(
            "Validation of configuration finished with state %s (%d message(s)).",
            result.state.name,
            len(result),
        )
        return result

    def _validate_event_groups(
        self,
        event_groups: EventGroupBuildingBlock,
        molecules: MoleculeBuildingBlock,
        result: ValidationResult,
    ) -> None:
        all_molecules = {molecule.name for molecule in molecules}
        for event_group in event_groups:
            for application in self._application_builders(event_group):
                if application.molecule_name in all_molecules:
                    continue
                logger.debug(
                    "Application '%s' references unknown molecule '%s'.",
                    application.name,
                    application.molecule_name,
                )
                result.add_message(
                    NotificationType.ERROR,
                    application,
                    applied_molecule_not_present(
                        application.molecule_name, application.name, molecules.name
                    ),
                    event_groups,
                    error_kind=UnresolvedMoleculeReference.__name__,
                )

        self._validate_formula_cache(event_groups, result)

    @staticmethod
    def _application_builders(event_group: ContainerSearchable) -> list[ApplicationBuilder]:
        from model_configuration.core.entities import ApplicationBuilder

        return event_group.get_all_containers_and_self(ApplicationBuilder)

    def _validate_formula_cache(self, building_block: FormulaCacheOwner, result: ValidationResult) -> None:
        logger.debug("Validating formulas of building block '%s'.", building_block.name)
        for formula in building_block.formula_cache:
            if not formula.is_explicit():
                continue
            try:
                formula.validate_expression()
            except FormulaParseError as e:
                logger.debug("Formula '%s' is not valid: %s", formula.name, e.message)
                result.add_message(
                    NotificationType.ERROR,
                    formula,
                    formula_is_not_valid(formula.name, building_block.name, e.message),
                    building_block,  # pyright: ignore[reportArgumentType]
                    error_kind=FormulaParseError.__name__,
                    details=formula.details(),
                )


def validate_configuration(configuration: ModelConfiguration) -> ValidationResult:
    """Validate the configuration with a default ConfigurationValidator."""
    return ConfigurationValidator().validate(configuration)
