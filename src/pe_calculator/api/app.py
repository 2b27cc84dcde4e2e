"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from pe_calculator.api.models import (
    IngredientInput,
    IngredientView,
    RecipeInput,
    RecipeView,
    ShareView,
    TotalsView,
)
from pe_calculator.app_logging import configure_logging
from pe_calculator.containers import AppContainer
from pe_calculator.domain.recipe import Ingredient, MacroTotals
from pe_calculator.services.quantities import format_number, format_ratio
from pe_calculator.services.report import render_report_html
from pe_calculator.services.session import RecipeSession
from pe_calculator.services.sync import fragment_for


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recipes/totals")
    async def recipe_totals(recipe: RecipeInput, request: Request) -> RecipeView:
        """Compute totals for a submitted recipe."""
        session = _session_from_input(request.app.state.container, recipe)
        return _recipe_view(session)

    @app.post("/recipes/share")
    async def share_recipe(recipe: RecipeInput, request: Request) -> ShareView:
        """Return a link that restores the submitted recipe."""
        state_container: AppContainer = request.app.state.container
        session = _session_from_input(state_container, recipe)
        token = session.bridge.current_token()
        return ShareView(
            token=token,
            fragment=fragment_for(token) if token else "",
            url=session.bridge.share_link(state_container.settings.base_url),
        )

    @app.get("/recipes/{token}")
    async def open_recipe(token: str, request: Request) -> RecipeView:
        """Decode a shared recipe, falling back to an empty one."""
        state_container: AppContainer = request.app.state.container
        session = state_container.open_session(fragment_for(token))
        restored = session.bridge.restored
        if not restored:
            logger.info("Shared recipe token could not be restored")
        return _recipe_view(session, restored=restored)

    @app.get("/recipes/{token}/print", response_class=HTMLResponse)
    async def print_recipe(token: str, request: Request) -> HTMLResponse:
        """Render the printable breakdown of a shared recipe."""
        state_container: AppContainer = request.app.state.container
        session = state_container.open_session(fragment_for(token))
        return HTMLResponse(render_report_html(session.report()))

    return app


def _session_from_input(container: AppContainer, recipe: RecipeInput) -> RecipeSession:
    """Open a blank session and load the submitted rows into it."""
    session = container.open_session("")
    ingredients = _ingredients_from_input(recipe.ingredients)
    session.rename(recipe.name)
    session.ledger.replace(ingredients)
    return session


def _ingredients_from_input(rows: list[IngredientInput]) -> list[Ingredient]:
    """Convert request rows, minting ids after the highest explicit one."""
    explicit = [row.id for row in rows if row.id is not None]
    if len(set(explicit)) != len(explicit):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Ingredient ids must be unique",
        )
    next_id = max(explicit) + 1 if explicit else 0
    ids = []
    for row in rows:
        if row.id is None:
            ids.append(next_id)
            next_id += 1
        else:
            ids.append(row.id)
    return [
        Ingredient(
            id=ingredient_id,
            name=row.name,
            protein=_text(row.protein),
            fat=_text(row.fat),
            net_carbs=_text(row.net_carbs),
            servings=_text(row.servings),
        )
        for ingredient_id, row in zip(ids, rows, strict=True)
    ]


def _text(value: str | float) -> str:
    return value if isinstance(value, str) else repr(value)


def _totals_view(totals: MacroTotals) -> TotalsView:
    return TotalsView(
        protein=format_number(totals.protein),
        fat=format_number(totals.fat),
        net_carbs=format_number(totals.net_carbs),
        ratio=format_ratio(totals.as_tuple()),
    )


def _recipe_view(session: RecipeSession, restored: bool = True) -> RecipeView:
    row_totals = session.totals.row_totals()
    return RecipeView(
        name=session.name,
        ingredients=[
            IngredientView(
                id=ingredient.id,
                name=ingredient.name,
                protein=ingredient.protein,
                fat=ingredient.fat,
                net_carbs=ingredient.net_carbs,
                servings=ingredient.servings,
                totals=_totals_view(row_totals[ingredient.id]),
            )
            for ingredient in session.ledger.snapshot()
        ],
        totals=_totals_view(session.totals.totals()),
        token=session.bridge.current_token(),
        fragment=session.bridge.address_bar.get_fragment(),
        restored=restored,
    )
