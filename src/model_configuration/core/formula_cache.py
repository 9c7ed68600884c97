from __future__ import annotations

from collections.abc import Iterable, Iterator

from model_configuration.core.formulas import Formula
from model_configuration.validation.exceptions import ConfigurationError


class FormulaCache:
    """
    Ordered collection of the formulas referenced anywhere in a building block,
    keyed by formula id. Iteration follows insertion order.
    """

    __slots__ = ("_formulas",)

    def __init__(self, formulas: Iterable[Formula] = ()) -> None:
        self._formulas: dict[str, Formula] = {}
        for formula in formulas:
            self.add(formula)

    def add(self, formula: Formula) -> None:
        existing = self._formulas.get(formula.id)
        if existing is formula:
            return
        if existing is not None:
            raise ConfigurationError(
                f"Formula cache already contains a different formula with id '{formula.id}' "
                f"('{existing.name}' vs '{formula.name}')."
            )
        self._formulas[formula.id] = formula

    def __getitem__(self, formula_id: str) -> Formula:
        return self._formulas[formula_id]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Formula):
            return self._formulas.get(item.id) is item
        return item in self._formulas

    def __iter__(self) -> Iterator[Formula]:
        return iter(self._formulas.values())

    def __len__(self) -> int:
        return len(self._formulas)

    def __repr__(self) -> str:
        return f"FormulaCache({[formula.name for formula in self]})"
