"""Per-row and recipe-wide macro totals."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from pe_calculator.domain.recipe import Ingredient, MacroTotals
from pe_calculator.services.ledger import IngredientLedger
from pe_calculator.services.memo import Memo, VersionedMemo
from pe_calculator.services.quantities import format_ratio, parse_quantity


def compute_row_totals(ingredient: Ingredient) -> MacroTotals:
    """Multiply each per-serving macro by the servings used."""
    servings = parse_quantity(ingredient.servings)
    return MacroTotals(
        protein=parse_quantity(ingredient.protein) * servings,
        fat=parse_quantity(ingredient.fat) * servings,
        net_carbs=parse_quantity(ingredient.net_carbs) * servings,
    )


def compute_grand_totals(ingredients: Iterable[Ingredient]) -> MacroTotals:
    """Sum row totals in ledger order."""
    total = MacroTotals()
    for ingredient in ingredients:
        total = total + compute_row_totals(ingredient)
    return total


@dataclass
class TotalsEngine:
    """Pull-based totals over a ledger, memoized per ledger version."""

    ledger: IngredientLedger
    memo: Memo = field(default_factory=VersionedMemo)

    def totals(self) -> MacroTotals:
        """Return recipe-wide totals."""
        version = self.ledger.version
        cached = self.memo.get("totals", version)
        if isinstance(cached, MacroTotals):
            return cached
        totals = compute_grand_totals(self.ledger.snapshot())
        self.memo.set("totals", version, totals)
        return totals

    def ratio(self) -> str:
        """Return the recipe-wide P:E ratio."""
        return format_ratio(self.totals().as_tuple())

    def row_totals(self) -> dict[int, MacroTotals]:
        """Return totals for every row keyed by ingredient id."""
        version = self.ledger.version
        cached = self.memo.get("rows", version)
        if isinstance(cached, dict):
            return cached
        rows = {
            ingredient.id: compute_row_totals(ingredient)
            for ingredient in self.ledger.snapshot()
        }
        self.memo.set("rows", version, rows)
        return rows

    def row_ratio(self, ingredient_id: int) -> str:
        """Return the P:E ratio of a single row, or a dash when unknown."""
        totals = self.row_totals().get(ingredient_id, MacroTotals())
        return format_ratio(totals.as_tuple())
