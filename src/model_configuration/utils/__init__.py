from model_configuration.utils.typing import FormulaUnit, FormulaValue, unit_text

__all__ = [
    "FormulaUnit",
    "FormulaValue",
    "unit_text",
]
