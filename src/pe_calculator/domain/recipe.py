"""Domain models for recipes and their macro totals."""

from dataclasses import dataclass

DEFAULT_SERVINGS = "1"
UNNAMED_INGREDIENT = "Unnamed ingredient"


@dataclass(frozen=True)
class Ingredient:
    """One ledger row; quantities are kept as the raw text the user typed."""

    id: int
    name: str = ""
    protein: str = ""
    fat: str = ""
    net_carbs: str = ""
    servings: str = DEFAULT_SERVINGS

    @classmethod
    def empty(cls, ingredient_id: int) -> "Ingredient":
        """Return a blank row with a single serving."""
        return cls(id=ingredient_id)


@dataclass(frozen=True)
class MacroTotals:
    """Protein, fat and net carbs in grams."""

    protein: float = 0.0
    fat: float = 0.0
    net_carbs: float = 0.0

    def __add__(self, other: "MacroTotals") -> "MacroTotals":
        return MacroTotals(
            protein=self.protein + other.protein,
            fat=self.fat + other.fat,
            net_carbs=self.net_carbs + other.net_carbs,
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.protein, self.fat, self.net_carbs)


@dataclass(frozen=True)
class Recipe:
    """Recipe name plus its ordered ingredients."""

    name: str
    ingredients: tuple[Ingredient, ...]


@dataclass(frozen=True)
class RowSnapshot:
    """Sanitized view of a single row used by the printed breakdown."""

    id: int
    name: str
    per_protein: float
    per_fat: float
    per_net_carbs: float
    servings: float

    @property
    def totals(self) -> MacroTotals:
        return MacroTotals(
            protein=self.per_protein * self.servings,
            fat=self.per_fat * self.servings,
            net_carbs=self.per_net_carbs * self.servings,
        )
