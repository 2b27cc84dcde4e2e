"""Shareable recipe tokens: compact JSON in unpadded URL-safe base64."""

import base64
import binascii
import logging
import re
from collections.abc import Iterable

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    ValidationError,
)

from pe_calculator.domain.recipe import Ingredient, Recipe
from pe_calculator.services.quantities import format_input_value, parse_quantity

_logger = logging.getLogger(__name__)

_TOKEN_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


class IngredientPayload(BaseModel):
    """Wire form of one ingredient with sanitized numeric quantities."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    id: NonNegativeInt
    name: str
    protein: float
    fat: float
    net_carbs: float = Field(validation_alias=AliasChoices("net_carbs", "netCarbs"))
    servings: float


class RecipePayload(BaseModel):
    """Wire form of a whole recipe."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    name: str | None = None
    ingredients: list[IngredientPayload]


def encode(ingredients: Iterable[Ingredient], name: str) -> str | None:
    """Serialize a recipe into a token usable directly as a URL fragment."""
    trimmed = name.strip()
    payload = RecipePayload(
        name=trimmed or None,
        ingredients=[
            IngredientPayload(
                id=ingredient.id,
                name=ingredient.name,
                protein=parse_quantity(ingredient.protein),
                fat=parse_quantity(ingredient.fat),
                net_carbs=parse_quantity(ingredient.net_carbs),
                servings=parse_quantity(ingredient.servings),
            )
            for ingredient in ingredients
        ],
    )
    try:
        raw = payload.model_dump_json(exclude_none=True).encode("utf-8")
    except ValueError:
        _logger.exception("Failed to serialize recipe payload")
        return None
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decode(token: str) -> Recipe | None:
    """Restore a recipe from a token, or return None if it is unusable."""
    raw = _b64decode(token)
    if raw is None:
        return None
    try:
        payload = RecipePayload.model_validate_json(raw)
    except ValidationError as exc:
        _logger.debug("Rejected recipe payload: %s", exc.error_count())
        return None

    ids = [item.id for item in payload.ingredients]
    if len(set(ids)) != len(ids):
        _logger.debug("Rejected recipe payload with duplicate ingredient ids")
        return None

    ingredients = tuple(
        Ingredient(
            id=item.id,
            name=item.name,
            protein=format_input_value(item.protein),
            fat=format_input_value(item.fat),
            net_carbs=format_input_value(item.net_carbs),
            servings=format_input_value(item.servings),
        )
        for item in payload.ingredients
    )
    if not ingredients:
        ingredients = (Ingredient.empty(0),)
    return Recipe(name=payload.name or "", ingredients=ingredients)


def _b64decode(token: str) -> bytes | None:
    """Decode unpadded URL-safe base64, rejecting anything outside the alphabet."""
    if not _TOKEN_ALPHABET.fullmatch(token):
        _logger.debug("Rejected recipe token with invalid characters")
        return None
    padded = token + "=" * (-len(token) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError):
        _logger.debug("Rejected recipe token with invalid length")
        return None
