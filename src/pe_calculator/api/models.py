"""Pydantic models for the calculator HTTP API."""

from pydantic import AliasChoices, BaseModel, Field, NonNegativeInt


class IngredientInput(BaseModel):
    """Ingredient row as entered by the user.

    Rows without an id keep their position and get ids after the highest
    explicit id in the request.
    """

    id: NonNegativeInt | None = None
    name: str = ""
    protein: str | float = ""
    fat: str | float = ""
    net_carbs: str | float = Field(
        default="", validation_alias=AliasChoices("net_carbs", "netCarbs")
    )
    servings: str | float = "1"


class RecipeInput(BaseModel):
    """Recipe submitted for calculation or sharing."""

    name: str = ""
    ingredients: list[IngredientInput] = Field(default_factory=list)


class TotalsView(BaseModel):
    """Formatted macro totals and P:E ratio."""

    protein: str
    fat: str
    net_carbs: str
    ratio: str


class IngredientView(BaseModel):
    """Ingredient row with its in-recipe totals."""

    id: int
    name: str
    protein: str
    fat: str
    net_carbs: str
    servings: str
    totals: TotalsView


class RecipeView(BaseModel):
    """Calculated recipe with share token."""

    name: str
    ingredients: list[IngredientView]
    totals: TotalsView
    token: str | None
    fragment: str
    restored: bool = True


class ShareView(BaseModel):
    """Shareable link for a recipe."""

    token: str | None
    fragment: str
    url: str | None
