"""Calculator session wiring: ledger, totals and URL sync."""

from dataclasses import dataclass

from pe_calculator.domain.recipe import Ingredient
from pe_calculator.services.ledger import IngredientLedger
from pe_calculator.services.report import RecipeReport, build_report
from pe_calculator.services.sync import AddressBar, SyncBridge
from pe_calculator.services.totals import TotalsEngine


@dataclass
class RecipeSession:
    """One user's working recipe."""

    ledger: IngredientLedger
    totals: TotalsEngine
    bridge: SyncBridge

    @property
    def name(self) -> str:
        return self.bridge.name

    def rename(self, name: str) -> None:
        self.bridge.rename(name)

    def add_ingredient(self) -> Ingredient:
        return self.ledger.add_ingredient()

    def set_field(self, ingredient_id: int, field_name: str, value: str) -> None:
        self.ledger.set_field(ingredient_id, field_name, value)

    def remove_ingredient(self, ingredient_id: int) -> None:
        self.ledger.remove_ingredient(ingredient_id)

    def report(self) -> RecipeReport:
        """Return the printable breakdown of the current state."""
        return build_report(self.name, self.ledger.snapshot(), self.totals.totals())


def start_session(address_bar: AddressBar, debug: bool = False) -> RecipeSession:
    """Create a session and seed it from the address bar."""
    ledger = IngredientLedger()
    bridge = SyncBridge(ledger=ledger, address_bar=address_bar, debug=debug)
    bridge.load()
    return RecipeSession(ledger=ledger, totals=TotalsEngine(ledger), bridge=bridge)
