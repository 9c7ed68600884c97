"""Formula kinds attached to the entities of a building block."""
from __future__ import annotations

import ast
import logging
import uuid

import numpy as np
import sympy as sp
from astropy.units import dimensionless_unscaled
from pydantic import BaseModel, ConfigDict, Field, model_validator

from model_configuration.utils.typing import FormulaUnit, FormulaValue, unit_text
from model_configuration.validation.exceptions import ConfigurationError, FormulaParseError

logger = logging.getLogger(__name__)

TIME_ALIAS = "Time"
"""Variable available to every explicit formula without an object path."""

FUNCTIONS = {
    "exp": sp.exp,
    "log": sp.log,
    "ln": sp.log,
    "sqrt": sp.sqrt,
    "abs": sp.Abs,
    "min": sp.Min,
    "max": sp.Max,
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "sinh": sp.sinh,
    "cosh": sp.cosh,
    "tanh": sp.tanh,
}
"""Functions an explicit formula may call."""

CONSTANTS = {"pi": sp.pi, "E": sp.E}


class Formula(BaseModel):
    """
    Base class of all formulas. A formula is identified by its ``id``; the ``name``
    is what gets reported to the user.

    :var name: Display name of the formula.
    :vartype name: str
    :var id: Unique identifier, used as key in the formula cache.
    :vartype id: str
    :var unit: Unit of the value the formula produces.
    :vartype unit: UnitBase
    """

    name: str
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    unit: FormulaUnit = Field(default=dimensionless_unscaled)

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    def is_explicit(self) -> bool:
        return False

    def details(self) -> tuple[str, ...]:
        """Lines describing the formula, attached to validation messages."""
        return (f"Unit: {unit_text(self.unit)}",)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, id={self.id}, unit={unit_text(self.unit)})"


class ConstantFormula(Formula):
    """A formula returning a fixed value. Can never fail to parse."""

    value: FormulaValue = 0.0


class TableFormula(Formula):
    """A lookup table of (x, y) points; x values have to be strictly increasing."""

    x_values: list[float] = Field(default_factory=list)
    y_values: list[float] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_points(self):
        if len(self.x_values) != len(self.y_values):
            raise ConfigurationError(
                f"Table formula '{self.name}' has {len(self.x_values)} x values "
                f"but {len(self.y_values)} y values."
            )
        if np.any(np.diff(self.x_values) <= 0):
            raise ConfigurationError(
                f"Table formula '{self.name}' x values must be strictly increasing."
            )
        return self


class _ExpressionBuilder(ast.NodeVisitor):
    """
    Translates the python syntax tree of a formula into a sympy expression.
    Only arithmetic, comparisons, boolean operators, numbers, names and calls of
    FUNCTIONS are accepted; the formula text is never evaluated.
    """

    _BINARY = {
        ast.Add: lambda a, b: sp.Add(a, b, evaluate=False),
        ast.Sub: lambda a, b: sp.Add(a, sp.Mul(sp.S.NegativeOne, b, evaluate=False), evaluate=False),
        ast.Mult: lambda a, b: sp.Mul(a, b, evaluate=False),
        ast.Div: lambda a, b: sp.Mul(a, sp.Pow(b, sp.S.NegativeOne, evaluate=False), evaluate=False),
        ast.Pow: lambda a, b: sp.Pow(a, b, evaluate=False),
    }
    _COMPARISONS = {
        ast.Lt: sp.StrictLessThan,
        ast.LtE: sp.LessThan,
        ast.Gt: sp.StrictGreaterThan,
        ast.GtE: sp.GreaterThan,
        ast.Eq: sp.Eq,
        ast.NotEq: sp.Ne,
    }

    def __init__(self, aliases: set[str]) -> None:
        self.aliases = aliases
        self.unknown_variables: set[str] = set()
        self.unknown_functions: set[str] = set()

    def generic_visit(self, node: ast.AST):
        raise FormulaParseError(f"'{ast.unparse(node)}' is not allowed in a formula.")

    def visit_Expression(self, node: ast.Expression):
        return self.visit(node.body)

    def visit_Constant(self, node: ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            return self.generic_visit(node)
        if isinstance(node.value, int):
            return sp.Integer(node.value)
        return sp.Float(node.value)

    def visit_Name(self, node: ast.Name):
        name = node.id
        if name.startswith("__"):
            return self.generic_visit(node)
        if name in self.aliases:
            return sp.Symbol(name)
        if name in CONSTANTS:
            return CONSTANTS[name]
        self.unknown_variables.add(name)
        return sp.Symbol(name)

    def visit_BinOp(self, node: ast.BinOp):
        operation = self._BINARY.get(type(node.op))
        if operation is None:
            return self.generic_visit(node)
        return operation(self.visit(node.left), self.visit(node.right))

    def visit_UnaryOp(self, node: ast.UnaryOp):
        operand = self.visit(node.operand)
        if isinstance(node.op, ast.USub):
            return sp.Mul(sp.S.NegativeOne, operand, evaluate=False)
        if isinstance(node.op, ast.UAdd):
            return operand
        if isinstance(node.op, ast.Not):
            return sp.Not(operand)
        return self.generic_visit(node)

    def visit_Compare(self, node: ast.Compare):
        relations = []
        left = self.visit(node.left)
        for op, comparator in zip(node.ops, node.comparators):
            relation = self._COMPARISONS.get(type(op))
            if relation is None:
                return self.generic_visit(node)
            right = self.visit(comparator)
            relations.append(relation(left, right, evaluate=False))
            left = right
        return relations[0] if len(relations) == 1 else sp.And(*relations)

    def visit_BoolOp(self, node: ast.BoolOp):
        values = [self.visit(value) for value in node.values]
        return sp.And(*values) if isinstance(node.op, ast.And) else sp.Or(*values)

    def visit_Call(self, node: ast.Call):
        if not isinstance(node.func, ast.Name) or node.keywords:
            return self.generic_visit(node)
        name = node.func.id
        arguments = [self.visit(argument) for argument in node.args]
        if name not in FUNCTIONS:
            if name.startswith("__"):
                return self.generic_visit(node)
            self.unknown_functions.add(name)
            return sp.Function(name)(*arguments)
        return FUNCTIONS[name](*arguments, evaluate=False)


class ExplicitFormula(Formula):
    """
    A formula defined by a textual expression, e.g. ``"k1 * C1 / (Km + C1)"``.
    Every variable used in the expression has to be declared as an alias in
    ``object_paths`` (alias -> path of the referenced quantity), except for
    ``Time``. ``^`` is accepted as power operator.
    """

    formula_string: str = ""
    object_paths: dict[str, str] = Field(default_factory=dict)

    def is_explicit(self) -> bool:
        return True

    def add_object_path(self, alias: str, path: str) -> None:
        if alias in self.object_paths and self.object_paths[alias] != path:
            raise ConfigurationError(
                f"Alias '{alias}' of formula '{self.name}' already refers to '{self.object_paths[alias]}'."
            )
        self.object_paths[alias] = path

    def details(self) -> tuple[str, ...]:
        return (f"Formula: {self.formula_string}", *super().details())

    def validate_expression(self) -> sp.Basic:
        """
        Parse the formula string into a sympy expression. Raises FormulaParseError
        if the expression is empty, not parseable, uses a construct other than
        arithmetic, comparisons and FUNCTIONS, or uses undeclared variables.
        """
        text = self.formula_string.strip()
        if not text:
            raise FormulaParseError("Formula string is empty.")

        builder = _ExpressionBuilder({*self.object_paths, TIME_ALIAS})
        try:
            tree = ast.parse(text.replace("^", "**"), mode="eval")
            expression = builder.visit(tree)
        except FormulaParseError:
            raise
        except (SyntaxError, ValueError, TypeError, ArithmeticError, RecursionError, sp.SympifyError) as e:
            raise FormulaParseError(f"Cannot parse '{text}': {e}") from e

        if builder.unknown_functions:
            raise FormulaParseError(
                f"Unknown function(s) {', '.join(sorted(builder.unknown_functions))} in '{text}'."
            )
        if builder.unknown_variables:
            raise FormulaParseError(
                f"Variable(s) {', '.join(sorted(builder.unknown_variables))} used in '{text}' "
                "are not defined as object path alias."
            )
        logger.debug("Formula '%s' parsed successfully: %s", self.name, expression)
        return expression
