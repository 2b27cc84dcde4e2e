"""Observable, id-keyed ledger of recipe ingredients."""

import dataclasses
import logging
from collections.abc import Callable, Iterable

from pe_calculator.domain.recipe import Ingredient

_logger = logging.getLogger(__name__)

Listener = Callable[[], None]
Mutator = Callable[[Ingredient], Ingredient]


class IngredientLedger:
    """Ordered ingredient rows with stable ids and a never-empty invariant.

    The ledger is the single writer of its rows. Every applied mutation bumps
    ``version`` and then notifies subscribers, so derived values can be
    memoized per version.
    """

    def __init__(self, ingredients: Iterable[Ingredient] = ()) -> None:
        self._items: list[Ingredient] = []
        self._index: dict[int, int] = {}
        self._next_id = 0
        self._version = 0
        self._listeners: list[Listener] = []
        self._load(ingredients)

    @property
    def version(self) -> int:
        return self._version

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._items)

    def snapshot(self) -> tuple[Ingredient, ...]:
        """Return the current rows in ledger order."""
        return tuple(self._items)

    def get(self, ingredient_id: int) -> Ingredient | None:
        """Return a row by id, if present."""
        position = self._index.get(ingredient_id)
        if position is None:
            return None
        return self._items[position]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_ingredient(self) -> Ingredient:
        """Append a fresh empty row and return it."""
        ingredient = self._mint()
        self._changed()
        return ingredient

    def update_ingredient(self, ingredient_id: int, mutator: Mutator) -> None:
        """Replace a row with ``mutator(row)``; unknown ids are ignored."""
        position = self._index.get(ingredient_id)
        if position is None:
            _logger.debug("Ignoring update for unknown ingredient id=%s", ingredient_id)
            return
        current = self._items[position]
        updated = mutator(current)
        if updated.id != ingredient_id:
            raise ValueError("Ingredient id cannot be changed by an update")
        if updated == current:
            return
        self._items[position] = updated
        self._changed()

    def set_field(self, ingredient_id: int, field_name: str, value: str) -> None:
        """Assign one text field of a row."""
        if field_name not in {"name", "protein", "fat", "net_carbs", "servings"}:
            raise ValueError(f"Unknown ingredient field: {field_name}")

        def assign(item: Ingredient) -> Ingredient:
            return dataclasses.replace(item, **{field_name: value})

        self.update_ingredient(ingredient_id, assign)

    def remove_ingredient(self, ingredient_id: int) -> None:
        """Delete a row, re-inserting a fresh one if the ledger empties."""
        position = self._index.get(ingredient_id)
        if position is None:
            _logger.debug("Ignoring removal of unknown ingredient id=%s", ingredient_id)
            return
        del self._items[position]
        self._reindex()
        if not self._items:
            self._mint()
        self._changed()

    def replace(self, ingredients: Iterable[Ingredient]) -> None:
        """Reset the ledger to the given rows, e.g. when seeding from a link."""
        self._load(ingredients)
        self._changed()

    def _load(self, ingredients: Iterable[Ingredient]) -> None:
        items = list(ingredients)
        ids = [item.id for item in items]
        if len(set(ids)) != len(ids):
            raise ValueError("Ingredient ids must be unique")
        if any(item_id < 0 for item_id in ids):
            raise ValueError("Ingredient ids must be non-negative")
        self._items = items
        self._next_id = max(ids) + 1 if ids else 0
        self._reindex()
        if not self._items:
            self._mint()

    def _mint(self) -> Ingredient:
        ingredient = Ingredient.empty(self._next_id)
        self._next_id += 1
        self._index[ingredient.id] = len(self._items)
        self._items.append(ingredient)
        return ingredient

    def _reindex(self) -> None:
        self._index = {item.id: position for position, item in enumerate(self._items)}

    def _changed(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            listener()
