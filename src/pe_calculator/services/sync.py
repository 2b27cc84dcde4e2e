"""One-directional sync between the ingredient ledger and the URL fragment."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from pe_calculator.domain.recipe import Recipe
from pe_calculator.services.codec import decode, encode
from pe_calculator.services.ledger import IngredientLedger

FRAGMENT_KEY = "recipe"
FRAGMENT_PREFIX = f"#{FRAGMENT_KEY}="

_logger = logging.getLogger(__name__)


class AddressBar(Protocol):
    """The slice of the host address bar the calculator relies on."""

    def get_fragment(self) -> str:
        """Return the current fragment including the leading '#', or ''."""

    def set_fragment(self, fragment: str, replace_no_history: bool) -> None:
        """Write a fragment, optionally without adding a history entry."""


def token_from_fragment(fragment: str) -> str | None:
    """Extract the recipe token from '#recipe=<token>', if present."""
    trimmed = fragment.removeprefix("#")
    if not trimmed.startswith(f"{FRAGMENT_KEY}="):
        return None
    return trimmed.removeprefix(f"{FRAGMENT_KEY}=")


def fragment_for(token: str) -> str:
    """Build the fragment that carries a recipe token."""
    return f"{FRAGMENT_PREFIX}{token}"


@dataclass
class SyncBridge:
    """Push ledger and name changes to the address bar; seed once on load."""

    ledger: IngredientLedger
    address_bar: AddressBar
    debug: bool = False
    _name: str = field(default="", init=False)
    restored: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self._unsubscribe = self.ledger.subscribe(self.push)

    @property
    def name(self) -> str:
        return self._name

    def rename(self, name: str) -> None:
        """Set the recipe name and sync it."""
        if name == self._name:
            return
        self._name = name
        self.push()

    def load(self) -> Recipe:
        """Seed the ledger and name from the current fragment.

        Any missing or undecodable token falls back to a single empty row and
        an empty name.
        """
        recipe = None
        token = token_from_fragment(self.address_bar.get_fragment())
        if token is not None:
            recipe = decode(token)
            if recipe is None:
                _logger.info("Ignoring undecodable recipe link")
        self.restored = recipe is not None
        if recipe is None:
            recipe = Recipe(name="", ingredients=())
        self._name = recipe.name
        self.ledger.replace(recipe.ingredients)
        return Recipe(name=self._name, ingredients=self.ledger.snapshot())

    def current_token(self) -> str | None:
        """Encode the current ledger and name."""
        return encode(self.ledger.snapshot(), self._name)

    def push(self) -> bool:
        """Write the current token to the address bar if it changed."""
        token = self.current_token()
        if token is None:
            return False
        target = fragment_for(token)
        if self.address_bar.get_fragment() == target:
            return False
        self.address_bar.set_fragment(target, replace_no_history=True)
        if self.debug:
            _logger.info("Recipe fragment updated: length=%s", len(target))
        return True

    def share_link(self, base_url: str) -> str | None:
        """Return an absolute link that restores the current recipe."""
        token = self.current_token()
        if token is None:
            return None
        return f"{base_url.split('#', maxsplit=1)[0]}{fragment_for(token)}"

    def close(self) -> None:
        """Stop observing the ledger."""
        self._unsubscribe()
